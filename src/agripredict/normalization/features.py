"""
Feature normalization into network input space.

Linear min/max scaling without clamping: raw values outside a domain
normalize outside [0, 1]. Seasons are one-hot encoded.
"""

from typing import Any, Mapping

import numpy as np
import pandas as pd

from agripredict.normalization.domains import (
    CROP_DOMAINS,
    SEASONS,
    YIELD_DOMAINS,
    NormalizationDomain,
)


def normalize(value: Any, domain: NormalizationDomain) -> Any:
    """
    Scale a raw value (scalar or array) linearly into domain space.

    Args:
        value: Raw value(s).
        domain: Normalization domain.

    Returns:
        (value - min) / (max - min), same shape as value.
    """
    return (value - domain.min) / domain.width


def encode_season(season: str) -> np.ndarray:
    """
    One-hot encode a season name, case-insensitively.

    Unrecognized names (including "") encode to all zeros.
    """
    encoded = np.zeros(len(SEASONS))
    key = season.lower()
    if key in SEASONS:
        encoded[SEASONS.index(key)] = 1.0
    return encoded


class FeatureNormalizer:
    """
    Turns raw feature records or frames into network input matrices.

    Numeric columns are scaled in domain order. If a season column is
    configured its one-hot slots are appended after the numeric columns.
    """

    def __init__(
        self,
        domains: Mapping[str, NormalizationDomain],
        *,
        season_column: str | None = None,
    ) -> None:
        self.domains = domains
        self.season_column = season_column

    @property
    def feature_names(self) -> list[str]:
        """Names of the network input columns."""
        names = list(self.domains)
        if self.season_column is not None:
            names.extend(f"{self.season_column}_{s}" for s in SEASONS)
        return names

    @property
    def n_features(self) -> int:
        """Width of the network input."""
        return len(self.feature_names)

    def transform(self, frame: pd.DataFrame) -> np.ndarray:
        """
        Normalize a batch of raw features.

        Args:
            frame: DataFrame with one column per domain (and the season
                column if configured).

        Returns:
            Array of shape (len(frame), n_features).
        """
        columns = [
            normalize(frame[name].to_numpy(dtype=float), domain)
            for name, domain in self.domains.items()
        ]

        if self.season_column is not None:
            seasons = frame[self.season_column].astype(str).str.lower()
            for season in SEASONS:
                columns.append((seasons == season).to_numpy(dtype=float))

        return np.column_stack(columns)

    def transform_record(self, record: Mapping[str, Any]) -> np.ndarray:
        """
        Normalize a single raw feature record.

        Returns:
            Array of shape (1, n_features).
        """
        values = [
            normalize(float(record[name]), domain)
            for name, domain in self.domains.items()
        ]
        row = np.asarray(values, dtype=float)
        if self.season_column is not None:
            row = np.concatenate([row, encode_season(record[self.season_column])])
        return row.reshape(1, -1)


def crop_normalizer() -> FeatureNormalizer:
    """Normalizer for the 7 soil and climate features."""
    return FeatureNormalizer(CROP_DOMAINS)


def yield_normalizer() -> FeatureNormalizer:
    """Normalizer for the 4 numeric yield features plus 3 season slots."""
    return FeatureNormalizer(YIELD_DOMAINS, season_column="season")
