"""
Data contracts for yield prediction.

Input record, result record and the Pandera schema of synthetic
regression batches.
"""

from dataclasses import dataclass, field
from typing import Any

import pandera.pandas as pa
from pandera.typing import Series

from agripredict.normalization.domains import SEASONS


@dataclass(frozen=True)
class YieldInput:
    """
    Raw field description for a yield estimate.

    crop_year is carried for the caller's benefit only; it does not feed
    the network. season and state are matched case-insensitively.
    """

    crop_year: str
    season: str
    state: str
    area: float
    annual_rainfall: float
    fertilizer: float
    pesticides: float

    def as_features(self) -> dict[str, Any]:
        """Feature record keyed like the yield normalization domains."""
        return {
            "area": self.area,
            "rainfall": self.annual_rainfall,
            "fertilizer": self.fertilizer,
            "pesticides": self.pesticides,
            "season": self.season,
        }


@dataclass(frozen=True)
class YieldFactors:
    """Banded 0-100 scores of the main yield contributors."""

    rainfall: float
    fertilizer: float
    pesticides: float
    area: float


@dataclass(frozen=True)
class YieldPrediction:
    """
    Post-processed yield estimate.

    Attributes:
        predicted_yield: Non-negative integer yield after state adjustment.
        confidence: Heuristic confidence in percent (70-95).
        factors: Factor breakdown.
        recommendations: Advisory strings in evaluation order.
    """

    predicted_yield: int
    confidence: float
    factors: YieldFactors
    recommendations: list[str] = field(default_factory=list)


class YieldBatchSchema(pa.DataFrameModel):
    """Synthetic regression batch: raw features, season and target yield."""

    area: Series[float] = pa.Field(ge=1.0, le=101.0)
    rainfall: Series[float] = pa.Field(ge=500.0, le=2000.0)
    fertilizer: Series[float] = pa.Field(ge=20.0, le=220.0)
    pesticides: Series[float] = pa.Field(ge=2.0, le=22.0)
    season: Series[str] = pa.Field(isin=list(SEASONS))
    target: Series[float] = pa.Field(ge=0.0, description="Synthetic yield")

    class Config:
        """Schema configuration."""

        name = "YieldBatchSchema"
        strict = True
        coerce = True
