"""
Prediction post-processing.

Crop ranking with suitability scores, and yield adjustment with
confidence, factor breakdown and recommendations.
"""

from agripredict.scoring.crop import (
    SUITABILITY_RULES,
    rank_top_k,
    score_crop_predictions,
    suitability_score,
)
from agripredict.scoring.yields import (
    STATE_FACTORS,
    adjust_yield,
    factor_breakdown,
    finalize_yield,
    score_yield_prediction,
    state_factor,
    yield_confidence,
    yield_recommendations,
)

__all__ = [
    "STATE_FACTORS",
    "SUITABILITY_RULES",
    "adjust_yield",
    "factor_breakdown",
    "finalize_yield",
    "rank_top_k",
    "score_crop_predictions",
    "score_yield_prediction",
    "state_factor",
    "suitability_score",
    "yield_confidence",
    "yield_recommendations",
]
