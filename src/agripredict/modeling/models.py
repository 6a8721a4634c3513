"""
Network registry and factory.

Both tasks use sklearn's multi-layer perceptrons: ReLU hidden layers,
Adam, no early stopping and no L2 penalty. The classifier ends in a
softmax over all crop labels, the regressor in an identity unit.
"""

from enum import Enum
from typing import Any

from sklearn.base import BaseEstimator
from sklearn.neural_network import MLPClassifier, MLPRegressor

from agripredict.config.settings import NetworkConfig
from agripredict.utils.logging import get_logger

log = get_logger(__name__)


class Task(str, Enum):
    """Prediction task served by a network."""

    CROP = "crop"
    YIELD = "yield"


# Task -> (estimator class, fixed kwargs)
NETWORK_REGISTRY: dict[Task, tuple[type[BaseEstimator], dict[str, Any]]] = {
    Task.CROP: (
        MLPClassifier,
        {"activation": "relu", "solver": "adam", "alpha": 0.0},
    ),
    Task.YIELD: (
        MLPRegressor,
        {"activation": "relu", "solver": "adam", "alpha": 0.0},
    ),
}


def build_network(
    task: Task,
    config: NetworkConfig,
    *,
    random_state: int | None = None,
) -> BaseEstimator:
    """
    Build an untrained network for a task.

    The minibatch equals the generated batch, so each partial_fit call
    performs exactly one Adam update.

    Args:
        task: Prediction task.
        config: Topology and optimizer settings.
        random_state: Seed for weight initialization and shuffling.

    Returns:
        Unfitted sklearn estimator.
    """
    network_class, fixed_kwargs = NETWORK_REGISTRY[task]
    params = {
        **fixed_kwargs,
        "hidden_layer_sizes": config.hidden_layer_sizes,
        "learning_rate_init": config.learning_rate_init,
        "batch_size": config.batch_size,
        "random_state": random_state,
    }

    log.debug("Creating network", task=task.value, params=params)
    return network_class(**params)
