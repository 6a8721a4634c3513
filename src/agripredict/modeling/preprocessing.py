"""
Regression target preprocessing.

Synthetic yields span several orders of magnitude, far outside what a
freshly initialized network emits. By default targets are
log1p-transformed and then standardized. The inverse expm1 is clipped to
[0, CLIP_FACTOR * largest fitted target] so extreme network outputs
cannot overflow. With method 'none' targets are only standardized and
the inverse is unbounded.
"""

from typing import Literal

import numpy as np
from sklearn.preprocessing import StandardScaler

from agripredict.utils.logging import get_logger

log = get_logger(__name__)

TargetMethod = Literal["log1p", "none"]


class TargetTransformer:
    """
    Maps yields to network space and back.

    Fitted once on the first training batch and fixed afterwards.
    """

    CLIP_FACTOR = 2.0

    def __init__(self, method: TargetMethod = "log1p") -> None:
        self.method = method
        self.scaler = StandardScaler()
        self.clip_max: float | None = None
        self._is_fitted = False

    @property
    def is_fitted(self) -> bool:
        """Whether fit() has been called."""
        return self._is_fitted

    @property
    def uses_log(self) -> bool:
        return self.method == "log1p"

    def fit(self, y: np.ndarray) -> "TargetTransformer":
        """
        Fit on raw targets.

        Args:
            y: Non-negative raw yields.

        Returns:
            self (for method chaining)
        """
        y = np.asarray(y, dtype=float).reshape(-1, 1)
        if self.uses_log:
            self.clip_max = float(y.max()) * self.CLIP_FACTOR
        self.scaler.fit(self._forward(y))
        self._is_fitted = True

        log.debug(
            "Fitted target transformer", method=self.method, clip_max=self.clip_max
        )
        return self

    def transform(self, y: np.ndarray) -> np.ndarray:
        """Raw yields -> 1-d network targets."""
        self._check_is_fitted()
        y = np.asarray(y, dtype=float).reshape(-1, 1)
        return self.scaler.transform(self._forward(y)).ravel()

    def inverse_transform(self, z: np.ndarray) -> np.ndarray:
        """1-d network outputs -> raw yields."""
        self._check_is_fitted()
        z = np.asarray(z, dtype=float).reshape(-1, 1)
        y = self.scaler.inverse_transform(z)
        if self.uses_log:
            y = self._clipped_expm1(y)
        return y.ravel()

    def _forward(self, y: np.ndarray) -> np.ndarray:
        return np.log1p(y) if self.uses_log else y

    def _clipped_expm1(self, y: np.ndarray) -> np.ndarray:
        # Clip in log space first so expm1 cannot overflow
        ceiling = np.log1p(self.clip_max)
        return np.clip(np.expm1(np.minimum(y, ceiling)), 0.0, self.clip_max)

    def _check_is_fitted(self) -> None:
        """Raise RuntimeError if not fitted."""
        if not self._is_fitted:
            raise RuntimeError(
                f"{self.__class__.__name__} has not been fitted. "
                "Call fit() before transform() or inverse_transform()."
            )
