"""
Data contracts for inputs, results and synthetic training batches.

Batch frames are validated with Pandera; records are frozen dataclasses.
"""

from agripredict.schemas.crop import (
    CROP_LABELS,
    CropBatchSchema,
    CropInput,
    CropPrediction,
)
from agripredict.schemas.yields import (
    YieldBatchSchema,
    YieldFactors,
    YieldInput,
    YieldPrediction,
)

__all__ = [
    "CROP_LABELS",
    "CropBatchSchema",
    "CropInput",
    "CropPrediction",
    "YieldBatchSchema",
    "YieldFactors",
    "YieldInput",
    "YieldPrediction",
]
