"""
Yield prediction post-processing.

Applies the state productivity factor to the raw network yield and adds
a heuristic confidence, a banded factor breakdown and advisory text.

Confidence (70-95)
------------------
    70 base
    +10  0.5 < area < 100
    +10  600 <= rainfall <= 1500
    +5   30 <= fertilizer <= 200
    +5   2 <= pesticides <= 20
    capped at 95

Factor bands (first matching band wins)
---------------------------------------
    rainfall:   [600,1200] 90, [400,1500] 75, [300,1800] 60, else 40
    fertilizer: [50,120] 85,   [30,150] 70,   [20,200] 55,   else 35
    pesticides: [5,12] 80,     [3,18] 65,     [1,25] 50,     else 30
    area:       area / 10 * 20, clamped to [0, 100]
"""

import math

from agripredict.schemas.yields import YieldFactors, YieldInput, YieldPrediction

# Relative productivity by lowercase state name; unlisted states use 1.0
STATE_FACTORS: dict[str, float] = {
    "punjab": 1.2,
    "haryana": 1.15,
    "uttar pradesh": 1.0,
    "bihar": 0.9,
    "west bengal": 1.1,
    "maharashtra": 1.05,
    "karnataka": 1.0,
    "tamil nadu": 1.1,
    "andhra pradesh": 1.05,
    "telangana": 1.0,
    "gujarat": 1.1,
    "rajasthan": 0.85,
    "madhya pradesh": 0.95,
    "odisha": 0.9,
}

BASE_CONFIDENCE = 70.0
MAX_CONFIDENCE = 95.0

# (low, high, score), checked in order
RAINFALL_BANDS = ((600, 1200, 90.0), (400, 1500, 75.0), (300, 1800, 60.0))
FERTILIZER_BANDS = ((50, 120, 85.0), (30, 150, 70.0), (20, 200, 55.0))
PESTICIDE_BANDS = ((5, 12, 80.0), (3, 18, 65.0), (1, 25, 50.0))


def state_factor(state: str) -> float:
    """Productivity factor for a state name (case-insensitive)."""
    return STATE_FACTORS.get(state.lower(), 1.0)


def adjust_yield(raw_yield: float, state: str) -> float:
    """Raw network yield scaled by the state factor (may be negative)."""
    return raw_yield * state_factor(state)


def finalize_yield(adjusted_yield: float) -> int:
    """Floor at 0 and round half up to an integer; non-finite yields give 0."""
    if not math.isfinite(adjusted_yield):
        return 0
    return int(math.floor(max(0.0, adjusted_yield) + 0.5))


def yield_confidence(data: YieldInput) -> float:
    """Heuristic confidence of a yield estimate in percent."""
    confidence = BASE_CONFIDENCE

    if 0.5 < data.area < 100:
        confidence += 10
    if 600 <= data.annual_rainfall <= 1500:
        confidence += 10
    if 30 <= data.fertilizer <= 200:
        confidence += 5
    if 2 <= data.pesticides <= 20:
        confidence += 5

    return min(MAX_CONFIDENCE, confidence)


def _band_score(
    value: float, bands: tuple[tuple[float, float, float], ...], default: float
) -> float:
    for low, high, score in bands:
        if low <= value <= high:
            return score
    return default


def factor_breakdown(data: YieldInput) -> YieldFactors:
    """Banded 0-100 scores for rainfall, fertilizer, pesticides and area."""
    return YieldFactors(
        rainfall=_band_score(data.annual_rainfall, RAINFALL_BANDS, 40.0),
        fertilizer=_band_score(data.fertilizer, FERTILIZER_BANDS, 35.0),
        pesticides=_band_score(data.pesticides, PESTICIDE_BANDS, 30.0),
        area=min(100.0, max(0.0, data.area / 10 * 20)),
    )


def yield_recommendations(data: YieldInput, adjusted_yield: float) -> list[str]:
    """
    Advisory strings, evaluated in a fixed order.

    Rainfall, fertilizer, pesticides and yield rules are independent, so
    several recommendations may be returned together.
    """
    recommendations: list[str] = []

    if data.annual_rainfall < 500:
        recommendations.append("Consider irrigation systems due to low rainfall")
    elif data.annual_rainfall > 2000:
        recommendations.append("Ensure proper drainage to prevent waterlogging")

    if data.fertilizer < 40:
        recommendations.append("Increase fertilizer application for better yield")
    elif data.fertilizer > 200:
        recommendations.append("Reduce fertilizer to prevent soil degradation")

    if data.pesticides < 3:
        recommendations.append("Monitor for pests and apply pesticides as needed")
    elif data.pesticides > 20:
        recommendations.append(
            "Consider integrated pest management to reduce chemical usage"
        )

    if adjusted_yield < 50:
        recommendations.append(
            "Consider soil testing and crop rotation for better yield"
        )
    elif adjusted_yield > 200:
        recommendations.append("Excellent conditions! Maintain current practices")

    return recommendations


def score_yield_prediction(raw_yield: float, data: YieldInput) -> YieldPrediction:
    """
    Build the full yield result from the raw network output.

    Args:
        raw_yield: Unbounded network yield.
        data: Raw yield input.

    Returns:
        YieldPrediction with non-negative integer yield.
    """
    adjusted = adjust_yield(raw_yield, data.state)
    return YieldPrediction(
        predicted_yield=finalize_yield(adjusted),
        confidence=yield_confidence(data),
        factors=factor_breakdown(data),
        recommendations=yield_recommendations(data, adjusted),
    )
