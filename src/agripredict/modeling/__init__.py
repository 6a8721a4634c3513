"""
Modeling layer for training and inference.

Builds the fixed-topology networks, fits them on synthetic batches and
serves forward passes behind a readiness gate.
"""

from agripredict.modeling.inference import (
    CropPredictor,
    ModelNotReady,
    Predictor,
    YieldPredictor,
)
from agripredict.modeling.models import Task, build_network
from agripredict.modeling.training import (
    InitializationFailure,
    ModelTrainer,
    TrainedNetwork,
)

__all__ = [
    "CropPredictor",
    "InitializationFailure",
    "ModelNotReady",
    "ModelTrainer",
    "Predictor",
    "Task",
    "TrainedNetwork",
    "YieldPredictor",
    "build_network",
]
