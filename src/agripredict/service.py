"""
Prediction services.

A service owns one predictor and trains its network once, on a single
background worker. The training future is the completion signal:
callers either block on wait_until_ready() or poll is_ready(). Once
trained, predict() may be called from any number of threads.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

import numpy as np

from agripredict.config.settings import AppConfig, NetworkConfig
from agripredict.modeling.inference import (
    CropPredictor,
    ModelNotReady,
    Predictor,
    YieldPredictor,
)
from agripredict.modeling.models import Task
from agripredict.modeling.training import (
    InitializationFailure,
    ModelTrainer,
    TrainedNetwork,
)
from agripredict.schemas.crop import CropInput, CropPrediction
from agripredict.schemas.yields import YieldInput, YieldPrediction
from agripredict.scoring.crop import score_crop_predictions
from agripredict.scoring.yields import score_yield_prediction
from agripredict.utils.logging import get_logger

log = get_logger(__name__)


class PredictionService:
    """Background-trained network behind a readiness gate."""

    task: Task

    def __init__(self, predictor: Predictor, config: AppConfig | None = None) -> None:
        self.config = config if config is not None else AppConfig()
        self.predictor = predictor

        # Independent streams for training (data + weight init) and scoring
        training_seed, scoring_seed = np.random.SeedSequence(
            self.config.random_state
        ).spawn(2)
        self.training_rng = np.random.default_rng(training_seed)
        self.scoring_rng = np.random.default_rng(scoring_seed)

        self._future: Future[TrainedNetwork] | None = None
        self._lock = threading.Lock()

    @property
    def network_config(self) -> NetworkConfig:
        """Network settings for this service's task."""
        if self.task is Task.CROP:
            return self.config.crop
        return self.config.yield_model

    def start(self) -> Future[TrainedNetwork]:
        """
        Start training on a background worker.

        Returns:
            Future resolving to the trained network.

        Raises:
            RuntimeError: If training was already started.
        """
        with self._lock:
            if self._future is not None:
                msg = f"{self.task.value} training was already started"
                raise RuntimeError(msg)

            executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix=f"{self.task.value}-training"
            )
            self._future = executor.submit(self._train)
            # Lets the submitted job finish, then releases the worker
            executor.shutdown(wait=False)

        log.info("Training started in background", task=self.task.value)
        return self._future

    def train(self) -> TrainedNetwork:
        """Start training and block until it completes."""
        self.start()
        self.wait_until_ready()
        return self._future.result()  # type: ignore[union-attr]

    def _train(self) -> TrainedNetwork:
        trainer = ModelTrainer(
            self.task,
            self.network_config,
            rng=self.training_rng,
            normalizer=self.predictor.normalizer,
        )
        network = trainer.train()
        self.predictor.load(network)
        return network

    def is_ready(self) -> bool:
        """Whether training completed and predict() may be called."""
        return self.predictor.is_ready

    def wait_until_ready(self, timeout: float | None = None) -> bool:
        """
        Block until training completes.

        Args:
            timeout: Seconds to wait; None waits indefinitely.

        Returns:
            True once ready, False if the timeout elapsed first.

        Raises:
            ModelNotReady: If training was never started.
            InitializationFailure: If training failed.
        """
        if self._future is None:
            msg = f"{self.task.value} training has not been started"
            raise ModelNotReady(msg)

        try:
            self._future.result(timeout=timeout)
        except FutureTimeoutError:
            return False
        except InitializationFailure:
            raise
        except Exception as e:
            msg = f"{self.task.value} model failed to initialize: {e}"
            raise InitializationFailure(msg) from e
        return True

    def _raise_if_failed(self) -> None:
        """Surface a finished-but-failed training run."""
        if self._future is not None and self._future.done():
            error = self._future.exception()
            if error is not None:
                msg = f"{self.task.value} model is unusable: {error}"
                raise InitializationFailure(msg) from error


class CropRecommendationService(PredictionService):
    """Ranks crops for raw soil and climate measurements."""

    task = Task.CROP

    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__(CropPredictor(), config)

    def predict(self, data: CropInput) -> list[CropPrediction]:
        """
        Recommend crops.

        Raises:
            ModelNotReady: If training has not completed.
            InitializationFailure: If training failed.
        """
        self._raise_if_failed()
        probabilities = self.predictor.predict(data)
        return score_crop_predictions(
            probabilities,
            data,
            self.scoring_rng,
            top_k=self.config.scoring.top_k,
            random_bonus_max=self.config.scoring.random_bonus_max,
        )


class YieldPredictionService(PredictionService):
    """Estimates yield for raw field descriptions."""

    task = Task.YIELD

    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__(YieldPredictor(), config)

    def predict(self, data: YieldInput) -> YieldPrediction:
        """
        Predict yield.

        Raises:
            ModelNotReady: If training has not completed.
            InitializationFailure: If training failed.
        """
        self._raise_if_failed()
        raw_yield = self.predictor.predict(data)
        return score_yield_prediction(raw_yield, data)
