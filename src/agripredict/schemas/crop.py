"""
Data contracts for crop recommendation.

Input record, result record and the Pandera schema of synthetic
classification batches.
"""

from dataclasses import asdict, dataclass
from typing import Any

import pandera.pandas as pa
from pandera.typing import Series

# Network output order; index i is class i
CROP_LABELS: tuple[str, ...] = (
    "Rice",
    "Maize",
    "Chickpea",
    "Kidneybeans",
    "Pigeonpeas",
    "Mothbeans",
    "Mungbean",
    "Blackgram",
    "Lentil",
    "Pomegranate",
    "Banana",
    "Mango",
    "Grapes",
    "Watermelon",
    "Muskmelon",
    "Apple",
    "Orange",
    "Papaya",
    "Coconut",
    "Cotton",
    "Jute",
    "Coffee",
)


@dataclass(frozen=True)
class CropInput:
    """
    Raw soil and climate measurements of one parcel.

    Values are used as given; ranges are not validated.
    """

    nitrogen: float
    phosphorus: float
    potassium: float
    temperature: float
    humidity: float
    ph: float
    rainfall: float

    def as_features(self) -> dict[str, Any]:
        """Feature record keyed like the crop normalization domains."""
        return asdict(self)


@dataclass(frozen=True)
class CropPrediction:
    """
    One ranked crop recommendation.

    Attributes:
        crop: Crop label.
        confidence: Network probability in percent.
        suitability_score: Rule-based fit of the raw inputs, 0-100.
    """

    crop: str
    confidence: float
    suitability_score: float


class CropBatchSchema(pa.DataFrameModel):
    """Synthetic classification batch: 7 raw features plus class index."""

    nitrogen: Series[float] = pa.Field(ge=0.0, le=140.0)
    phosphorus: Series[float] = pa.Field(ge=5.0, le=145.0)
    potassium: Series[float] = pa.Field(ge=5.0, le=205.0)
    temperature: Series[float] = pa.Field(ge=8.0, le=44.0)
    humidity: Series[float] = pa.Field(ge=14.0, le=100.0)
    ph: Series[float] = pa.Field(ge=3.5, le=10.0)
    rainfall: Series[float] = pa.Field(ge=20.0, le=300.0)
    label: Series[int] = pa.Field(
        ge=0,
        lt=len(CROP_LABELS),
        description="Index into CROP_LABELS",
    )

    class Config:
        """Schema configuration."""

        name = "CropBatchSchema"
        strict = True
        coerce = True
