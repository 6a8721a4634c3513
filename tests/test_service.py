"""Tests for background-trained prediction services."""

import math
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from agripredict import service as service_module
from agripredict.config.settings import AppConfig, NetworkConfig
from agripredict.modeling import InitializationFailure, ModelNotReady
from agripredict.modeling.training import ModelTrainer
from agripredict.schemas.crop import CROP_LABELS, CropInput
from agripredict.schemas.yields import YieldInput
from agripredict.service import CropRecommendationService, YieldPredictionService


class FailingTrainer:
    """Trainer stand-in whose training always fails."""

    def __init__(self, *args: object, **kwargs: object) -> None:
        pass

    def train(self) -> None:
        raise InitializationFailure("weights could not be allocated")


class TestLifecycle:
    """Tests for the readiness gate and start semantics."""

    def test_predict_before_start(self, scenario_a_input: CropInput) -> None:
        """predict() before training raises ModelNotReady."""
        service = CropRecommendationService()
        assert not service.is_ready()
        with pytest.raises(ModelNotReady):
            service.predict(scenario_a_input)

    def test_wait_before_start(self) -> None:
        """Waiting on a service that never started raises ModelNotReady."""
        with pytest.raises(ModelNotReady, match="not been started"):
            YieldPredictionService().wait_until_ready(timeout=0.1)

    def test_start_twice(self) -> None:
        """Training can only be started once."""
        service = CropRecommendationService(AppConfig(random_state=1))
        service.start()
        with pytest.raises(RuntimeError, match="already started"):
            service.start()
        assert service.wait_until_ready()

    def test_wait_timeout(
        self, monkeypatch: pytest.MonkeyPatch, scenario_b_input: YieldInput
    ) -> None:
        """Waiting returns False while training is still running."""
        release = threading.Event()

        class BlockingTrainer(ModelTrainer):
            def train(self):  # type: ignore[override]
                release.wait(timeout=30)
                return super().train()

        monkeypatch.setattr(service_module, "ModelTrainer", BlockingTrainer)
        service = YieldPredictionService(AppConfig(random_state=2))
        service.start()

        assert service.wait_until_ready(timeout=0.05) is False
        assert not service.is_ready()
        with pytest.raises(ModelNotReady):
            service.predict(scenario_b_input)

        release.set()
        assert service.wait_until_ready(timeout=60) is True
        assert service.is_ready()
        assert service.predict(scenario_b_input).predicted_yield >= 0

    def test_training_failure(
        self, monkeypatch: pytest.MonkeyPatch, scenario_a_input: CropInput
    ) -> None:
        """A failed training run surfaces InitializationFailure everywhere."""
        monkeypatch.setattr(service_module, "ModelTrainer", FailingTrainer)
        service = CropRecommendationService()
        service.start()

        with pytest.raises(InitializationFailure, match="could not be allocated"):
            service.wait_until_ready(timeout=10)
        assert not service.is_ready()
        with pytest.raises(InitializationFailure):
            service.predict(scenario_a_input)


class TestCropRecommendationService:
    """Tests for crop recommendations on a trained network."""

    def test_scenario_a(
        self,
        crop_service: CropRecommendationService,
        scenario_a_input: CropInput,
    ) -> None:
        """Three distinct crops, ordered by confidence, with bounded scores."""
        predictions = crop_service.predict(scenario_a_input)

        assert len(predictions) == 3
        assert len({p.crop for p in predictions}) == 3
        assert all(p.crop in CROP_LABELS for p in predictions)

        confidences = [p.confidence for p in predictions]
        assert confidences == sorted(confidences, reverse=True)
        assert all(0.0 <= c <= 100.0 for c in confidences)
        assert all(0.0 <= p.suitability_score <= 100.0 for p in predictions)

    def test_concurrent_predictions(
        self,
        crop_service: CropRecommendationService,
        scenario_a_input: CropInput,
    ) -> None:
        """Concurrent calls rank the same crops with the same confidences."""
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(
                executor.map(
                    lambda _: crop_service.predict(scenario_a_input), range(32)
                )
            )

        expected = [(p.crop, p.confidence) for p in results[0]]
        for result in results[1:]:
            assert [(p.crop, p.confidence) for p in result] == expected


class TestYieldPredictionService:
    """Tests for yield predictions on a trained network."""

    def test_scenario_b(
        self,
        yield_service: YieldPredictionService,
        scenario_b_input: YieldInput,
    ) -> None:
        """Well-managed Punjab field yields a positive integer estimate."""
        prediction = yield_service.predict(scenario_b_input)

        assert isinstance(prediction.predicted_yield, int)
        assert prediction.predicted_yield > 0
        assert 70.0 <= prediction.confidence <= 95.0

    def test_state_factor_applied(
        self,
        yield_service: YieldPredictionService,
        scenario_b_input: YieldInput,
    ) -> None:
        """Punjab is about 1.2 times an unlisted state, up to rounding."""
        punjab = yield_service.predict(scenario_b_input).predicted_yield
        other = yield_service.predict(
            YieldInput(**(scenario_b_input.__dict__ | {"state": "Atlantis"}))
        ).predicted_yield
        assert abs(punjab - 1.2 * other) <= 1.2

    def test_empty_season_matches_unknown(
        self,
        yield_service: YieldPredictionService,
        scenario_b_input: YieldInput,
    ) -> None:
        """Empty and unrecognized seasons give identical results."""
        empty = yield_service.predict(
            YieldInput(**(scenario_b_input.__dict__ | {"season": ""}))
        )
        unknown = yield_service.predict(
            YieldInput(**(scenario_b_input.__dict__ | {"season": "zzz"}))
        )
        assert empty == unknown

    def test_concurrent_predictions(
        self,
        yield_service: YieldPredictionService,
        scenario_b_input: YieldInput,
    ) -> None:
        """Concurrent calls on the same input agree."""
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(
                executor.map(
                    lambda _: yield_service.predict(scenario_b_input), range(32)
                )
            )
        assert all(result == results[0] for result in results)

    def test_seeded_runs_reproducible(self, scenario_b_input: YieldInput) -> None:
        """Services with the same seed train the same network."""
        first = YieldPredictionService(AppConfig(random_state=11))
        second = YieldPredictionService(AppConfig(random_state=11))
        first.train()
        second.train()
        assert first.predict(scenario_b_input) == second.predict(scenario_b_input)

    def test_untransformed_targets(self, scenario_b_input: YieldInput) -> None:
        """Without the log transform the final yield is still a non-negative int."""
        config = AppConfig(
            random_state=7,
            yield_model=NetworkConfig(
                hidden_layer_sizes=(64, 32, 16),
                epochs=10,
                batch_size=200,
                target_transformation="none",
            ),
        )
        service = YieldPredictionService(config)
        service.train()

        for area in (0.1, 10.0, 1000.0):
            data = YieldInput(**(scenario_b_input.__dict__ | {"area": area}))
            prediction = service.predict(data)
            assert isinstance(prediction.predicted_yield, int)
            assert prediction.predicted_yield >= 0


class TestNonFiniteInputs:
    """Non-finite inputs pass through without validation."""

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_crop_service(
        self,
        crop_service: CropRecommendationService,
        scenario_a_input: CropInput,
        value: float,
    ) -> None:
        """Crop recommendations are still returned."""
        data = CropInput(**(scenario_a_input.__dict__ | {"nitrogen": value}))
        predictions = crop_service.predict(data)
        assert len(predictions) == 3
        assert all(0.0 <= p.suitability_score <= 100.0 for p in predictions)

    @pytest.mark.parametrize("field", ["area", "annual_rainfall", "fertilizer"])
    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_yield_service(
        self,
        yield_service: YieldPredictionService,
        scenario_b_input: YieldInput,
        field: str,
        value: float,
    ) -> None:
        """Yield predictions floor non-finite results at 0."""
        data = YieldInput(**(scenario_b_input.__dict__ | {field: value}))
        prediction = yield_service.predict(data)
        assert isinstance(prediction.predicted_yield, int)
        assert prediction.predicted_yield >= 0
