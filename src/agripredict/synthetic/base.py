"""
Base classes for synthetic training data generators.

Generators draw one fresh batch per training epoch. All randomness goes
through the numpy Generator handed in at construction.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
import pandas as pd


@dataclass
class SyntheticBatch:
    """
    One generated training batch.

    Attributes:
        features: Raw (unnormalized) feature columns.
        labels: Class indices (classification) or yields (regression).
    """

    features: pd.DataFrame
    labels: pd.Series

    def __len__(self) -> int:
        return len(self.features)


class SyntheticDatasetGenerator(ABC):
    """Abstract base class for rule- or formula-labelled batch generators."""

    label_column: str

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    @abstractmethod
    def sample_frame(self, batch_size: int) -> pd.DataFrame:
        """Draw a labelled frame of batch_size rows (label column included)."""
        ...

    @abstractmethod
    def validate(self, frame: pd.DataFrame) -> pd.DataFrame:
        """Validate a labelled frame against the batch schema."""
        ...

    def generate(self, batch_size: int) -> SyntheticBatch:
        """
        Generate a validated batch.

        Args:
            batch_size: Number of samples.

        Returns:
            SyntheticBatch split into features and labels.
        """
        if batch_size < 1:
            msg = f"batch_size must be positive, got {batch_size}"
            raise ValueError(msg)

        frame = self.validate(self.sample_frame(batch_size))
        return SyntheticBatch(
            features=frame.drop(columns=[self.label_column]),
            labels=frame[self.label_column],
        )
