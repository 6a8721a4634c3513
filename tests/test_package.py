"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import agripredict

    assert agripredict.__version__


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from agripredict.config import (
        AppConfig,
        LoggingConfig,
        NetworkConfig,
        ScoringConfig,
        default_config,
        load_config,
    )

    assert AppConfig is not None
    assert LoggingConfig is not None
    assert NetworkConfig is not None
    assert ScoringConfig is not None
    assert default_config is not None
    assert load_config is not None


def test_modeling_module_imports() -> None:
    """Verify modeling module structure is correct."""
    from agripredict.modeling import (
        CropPredictor,
        InitializationFailure,
        ModelNotReady,
        ModelTrainer,
        Task,
        TrainedNetwork,
        YieldPredictor,
    )

    assert issubclass(ModelNotReady, RuntimeError)
    assert issubclass(InitializationFailure, Exception)
    assert CropPredictor is not None
    assert ModelTrainer is not None
    assert Task is not None
    assert TrainedNetwork is not None
    assert YieldPredictor is not None
