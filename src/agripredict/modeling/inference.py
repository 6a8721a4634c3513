"""
Inference against trained networks.

Predictors normalize raw inputs and run the forward pass. Inputs are not
validated: NaN and infinite values propagate into the outputs. Weights are
read-only after training, so concurrent predict calls need no locking;
every call works on its own freshly allocated input and output arrays.
"""

import numpy as np
from sklearn import config_context

from agripredict.modeling.models import Task
from agripredict.modeling.training import TrainedNetwork
from agripredict.normalization.features import (
    FeatureNormalizer,
    crop_normalizer,
    yield_normalizer,
)
from agripredict.schemas.crop import CropInput
from agripredict.schemas.yields import YieldInput
from agripredict.utils.logging import get_logger

log = get_logger(__name__)


class ModelNotReady(RuntimeError):
    """predict() was called before training completed."""


class Predictor:
    """
    Base predictor owning one trained network.

    The network is attached exactly once via load().
    """

    task: Task

    def __init__(self, normalizer: FeatureNormalizer) -> None:
        self.normalizer = normalizer
        self._network: TrainedNetwork | None = None

    @property
    def is_ready(self) -> bool:
        """Whether a trained network is attached."""
        return self._network is not None

    def load(self, network: TrainedNetwork) -> None:
        """
        Attach the trained network.

        Raises:
            ValueError: If the network was trained for another task.
            RuntimeError: If a network is already attached.
        """
        if network.task is not self.task:
            msg = f"Expected a {self.task.value} network, got {network.task.value}"
            raise ValueError(msg)
        if self._network is not None:
            msg = f"{self.__class__.__name__} already has a trained network"
            raise RuntimeError(msg)
        self._network = network

    def _require_network(self) -> TrainedNetwork:
        """Return the network or raise ModelNotReady."""
        if self._network is None:
            msg = (
                f"{self.task.value} model is not ready yet. "
                "Wait for training to complete before calling predict()."
            )
            raise ModelNotReady(msg)
        return self._network


class CropPredictor(Predictor):
    """Per-class probabilities for raw soil and climate inputs."""

    task = Task.CROP

    def __init__(self, normalizer: FeatureNormalizer | None = None) -> None:
        super().__init__(normalizer if normalizer is not None else crop_normalizer())

    def predict(self, data: CropInput) -> np.ndarray:
        """
        Run the forward pass.

        Args:
            data: Raw crop input.

        Returns:
            Probability vector over CROP_LABELS (non-negative, sums to 1).

        Raises:
            ModelNotReady: If training has not completed.
        """
        trained = self._require_network()
        X = self.normalizer.transform_record(data.as_features())
        with config_context(assume_finite=True):
            probabilities = trained.network.predict_proba(X)[0]
        log.debug("Crop forward pass", top_class=int(np.argmax(probabilities)))
        return probabilities


class YieldPredictor(Predictor):
    """Raw network yield for field inputs (before state adjustment)."""

    task = Task.YIELD

    def __init__(self, normalizer: FeatureNormalizer | None = None) -> None:
        super().__init__(normalizer if normalizer is not None else yield_normalizer())

    def predict(self, data: YieldInput) -> float:
        """
        Run the forward pass.

        Args:
            data: Raw yield input.

        Returns:
            Raw yield in target units. Negative values are possible when
            the target transformation is 'none'.

        Raises:
            ModelNotReady: If training has not completed.
        """
        trained = self._require_network()
        X = self.normalizer.transform_record(data.as_features())
        with config_context(assume_finite=True):
            output = trained.network.predict(X)
        if trained.target_transformer is not None:
            output = trained.target_transformer.inverse_transform(output)
        raw_yield = float(output[0])
        log.debug("Yield forward pass", raw_yield=raw_yield)
        return raw_yield
