"""
Crop recommendation scoring.

Ranks the network's class probabilities and attaches a rule-based
suitability score computed from the raw (unnormalized) inputs.

Suitability (0-100)
-------------------
    score = 50 + sum(bonus for each satisfied rule of the crop)

Crops with a rule table (rice, wheat, cotton) are deterministic. Every
other crop gets a random bonus drawn from [0, random_bonus_max) instead;
pass a seeded Generator to make it reproducible.
"""

from collections.abc import Callable, Sequence

import numpy as np

from agripredict.schemas.crop import CROP_LABELS, CropInput, CropPrediction

BASE_SUITABILITY = 50.0

Rule = tuple[Callable[[CropInput], bool], float]

# Lowercase crop -> (condition, bonus). Wheat is not a network label but
# keeps its table for callers scoring it directly.
SUITABILITY_RULES: dict[str, tuple[Rule, ...]] = {
    "rice": (
        (lambda d: d.rainfall > 150, 20.0),
        (lambda d: 20 < d.temperature < 35, 15.0),
        (lambda d: d.humidity > 70, 15.0),
    ),
    "wheat": (
        (lambda d: 15 < d.temperature < 25, 20.0),
        (lambda d: 6 < d.ph < 7.5, 15.0),
        (lambda d: 50 < d.rainfall < 150, 15.0),
    ),
    "cotton": (
        (lambda d: d.temperature > 25, 20.0),
        (lambda d: d.humidity > 60, 15.0),
        (lambda d: d.potassium > 100, 15.0),
    ),
}


def rank_top_k(probabilities: np.ndarray, k: int = 3) -> list[int]:
    """
    Indices of the k highest probabilities, descending.

    Ties keep the lower (first-encountered) index first.
    """
    order = np.argsort(-np.asarray(probabilities), kind="stable")
    return [int(i) for i in order[:k]]


def suitability_score(
    data: CropInput,
    crop: str,
    rng: np.random.Generator,
    *,
    random_bonus_max: float = 30.0,
) -> float:
    """
    Heuristic crop/environment fit, clamped to [0, 100].

    Args:
        data: Raw crop input.
        crop: Crop label (case-insensitive).
        rng: Random source for crops without a rule table.
        random_bonus_max: Upper bound of the random bonus.

    Returns:
        Suitability score.
    """
    score = BASE_SUITABILITY
    rules = SUITABILITY_RULES.get(crop.lower())

    if rules is None:
        score += float(rng.uniform(0.0, random_bonus_max))
    else:
        score += sum(bonus for condition, bonus in rules if condition(data))

    return min(100.0, max(0.0, score))


def score_crop_predictions(
    probabilities: np.ndarray,
    data: CropInput,
    rng: np.random.Generator,
    *,
    labels: Sequence[str] = CROP_LABELS,
    top_k: int = 3,
    random_bonus_max: float = 30.0,
) -> list[CropPrediction]:
    """
    Turn a probability vector into ranked recommendations.

    Args:
        probabilities: Per-class probabilities, aligned with labels.
        data: Raw crop input the probabilities were computed for.
        rng: Random source for the suitability fallback.
        labels: Class labels.
        top_k: Number of entries returned.
        random_bonus_max: Upper bound of the random suitability bonus.

    Returns:
        Recommendations ordered by non-increasing confidence.
    """
    return [
        CropPrediction(
            crop=labels[index],
            confidence=float(probabilities[index]) * 100.0,
            suitability_score=suitability_score(
                data, labels[index], rng, random_bonus_max=random_bonus_max
            ),
        )
        for index in rank_top_k(probabilities, top_k)
    ]
