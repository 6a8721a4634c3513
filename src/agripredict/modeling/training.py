"""
Model training functionality.

Each network is fitted for a fixed number of epochs; every epoch draws
a fresh synthetic batch and performs one Adam update on it. There is no
convergence check, so the result is a fixed but arbitrarily biased
function per run.
"""

import time
from dataclasses import dataclass, field

import numpy as np
from sklearn.base import BaseEstimator

from agripredict.config.settings import NetworkConfig
from agripredict.modeling.models import Task, build_network
from agripredict.modeling.preprocessing import TargetTransformer
from agripredict.normalization.features import (
    FeatureNormalizer,
    crop_normalizer,
    yield_normalizer,
)
from agripredict.schemas.crop import CROP_LABELS
from agripredict.synthetic.base import SyntheticBatch, SyntheticDatasetGenerator
from agripredict.synthetic.classification import CropDatasetGenerator
from agripredict.synthetic.regression import YieldDatasetGenerator
from agripredict.utils.logging import get_logger, log_context

log = get_logger(__name__)

CROP_CLASSES = np.arange(len(CROP_LABELS))


class InitializationFailure(Exception):
    """Network construction or fitting failed; the model is unusable."""


@dataclass(frozen=True)
class TrainedNetwork:
    """
    Container for a trained network with metadata.

    Weight arrays are read-only once training finishes.

    Attributes:
        task: Task the network serves.
        network: Fitted sklearn estimator.
        feature_names: Network input columns.
        epochs: Number of epochs run.
        final_loss: Training loss after the last update.
        training_time_s: Wall-clock training time in seconds.
        target_transformer: Regression target mapping (None for crop).
    """

    task: Task
    network: BaseEstimator
    feature_names: list[str] = field(default_factory=list)
    epochs: int = 0
    final_loss: float = float("nan")
    training_time_s: float = 0.0
    target_transformer: TargetTransformer | None = None


def _default_components(
    task: Task, rng: np.random.Generator
) -> tuple[SyntheticDatasetGenerator, FeatureNormalizer]:
    if task is Task.CROP:
        return CropDatasetGenerator(rng), crop_normalizer()
    return YieldDatasetGenerator(rng), yield_normalizer()


def _freeze(network: BaseEstimator) -> None:
    """Mark all weight and bias arrays read-only."""
    for array in (*network.coefs_, *network.intercepts_):
        array.setflags(write=False)


class ModelTrainer:
    """
    Trainer for one prediction network.

    Builds the task's fixed topology and fits it epoch by epoch against
    freshly generated batches.
    """

    def __init__(
        self,
        task: Task,
        config: NetworkConfig,
        *,
        rng: np.random.Generator | None = None,
        generator: SyntheticDatasetGenerator | None = None,
        normalizer: FeatureNormalizer | None = None,
    ) -> None:
        """
        Initialize trainer.

        Args:
            task: Prediction task.
            config: Network topology and schedule.
            rng: Random source for weight init and (default) data synthesis.
            generator: Override the task's synthetic data generator.
            normalizer: Override the task's feature normalizer.
        """
        self.task = task
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()

        default_generator, default_normalizer = _default_components(task, self.rng)
        self.generator = generator if generator is not None else default_generator
        self.normalizer = normalizer if normalizer is not None else default_normalizer

    def train(self) -> TrainedNetwork:
        """
        Build and fit the network.

        Returns:
            Trained network with read-only weights.

        Raises:
            InitializationFailure: If building or fitting fails.
        """
        training_start = time.perf_counter()

        with log_context(task=self.task.value):
            log.info(
                "Starting training",
                epochs=self.config.epochs,
                batch_size=self.config.batch_size,
                hidden_layers=list(self.config.hidden_layer_sizes),
            )
            try:
                network = build_network(
                    self.task,
                    self.config,
                    random_state=int(self.rng.integers(2**31 - 1)),
                )
                target_transformer: TargetTransformer | None = None

                for epoch in range(1, self.config.epochs + 1):
                    batch = self.generator.generate(self.config.batch_size)
                    target_transformer = self._fit_batch(
                        network, batch, target_transformer
                    )
                    log.debug("Epoch complete", epoch=epoch, loss=float(network.loss_))

                _freeze(network)
            except Exception as e:
                log.error("Training failed", error=str(e))
                msg = f"Failed to initialize {self.task.value} network: {e}"
                raise InitializationFailure(msg) from e

            training_time = time.perf_counter() - training_start
            log.info(
                "Training complete",
                loss=float(network.loss_),
                training_time_s=round(training_time, 3),
            )

        return TrainedNetwork(
            task=self.task,
            network=network,
            feature_names=self.normalizer.feature_names,
            epochs=self.config.epochs,
            final_loss=float(network.loss_),
            training_time_s=training_time,
            target_transformer=target_transformer,
        )

    def _fit_batch(
        self,
        network: BaseEstimator,
        batch: SyntheticBatch,
        target_transformer: TargetTransformer | None,
    ) -> TargetTransformer | None:
        """Run one update on a batch; returns the (possibly new) target transformer."""
        X = self.normalizer.transform(batch.features)

        if self.task is Task.CROP:
            labels = batch.labels.to_numpy(dtype=int)
            network.partial_fit(X, labels, classes=CROP_CLASSES)
            return None

        # Fitted on the first batch, fixed afterwards
        y = batch.labels.to_numpy(dtype=float)
        if target_transformer is None:
            target_transformer = TargetTransformer(self.config.target_transformation)
            target_transformer.fit(y)
        network.partial_fit(X, target_transformer.transform(y))
        return target_transformer
