"""
Synthetic dataset generation for in-process training.

No real data is loaded; every training epoch draws a fresh batch.
"""

from agripredict.synthetic.base import SyntheticBatch, SyntheticDatasetGenerator
from agripredict.synthetic.classification import (
    CropDatasetGenerator,
    determine_crop,
    match_crop_rule,
)
from agripredict.synthetic.regression import (
    BASE_YIELD,
    YieldDatasetGenerator,
    yield_multiplier,
)

__all__ = [
    "BASE_YIELD",
    "CropDatasetGenerator",
    "SyntheticBatch",
    "SyntheticDatasetGenerator",
    "YieldDatasetGenerator",
    "determine_crop",
    "match_crop_rule",
    "yield_multiplier",
]
