"""
Normalization layer.

Fixed feature domains and linear scaling into network input space.
"""

from agripredict.normalization.domains import (
    CROP_DOMAINS,
    SEASONS,
    YIELD_DOMAINS,
    YIELD_SAMPLING_RANGES,
    NormalizationDomain,
)
from agripredict.normalization.features import (
    FeatureNormalizer,
    crop_normalizer,
    encode_season,
    normalize,
    yield_normalizer,
)

__all__ = [
    "CROP_DOMAINS",
    "SEASONS",
    "YIELD_DOMAINS",
    "YIELD_SAMPLING_RANGES",
    "FeatureNormalizer",
    "NormalizationDomain",
    "crop_normalizer",
    "encode_season",
    "normalize",
    "yield_normalizer",
]
