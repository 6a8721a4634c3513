"""
Synthetic yield regression data.

Target yield = BASE_YIELD * multiplier * area + noise, floored at 0.
The multiplier starts at 1 and collects independent bonuses/penalties
from disjoint threshold bands per factor.
"""

import numpy as np
import pandas as pd

from agripredict.normalization.domains import SEASONS, YIELD_SAMPLING_RANGES
from agripredict.schemas.yields import YieldBatchSchema
from agripredict.synthetic.base import SyntheticDatasetGenerator

BASE_YIELD = 25.0  # quintals per hectare
NOISE_AMPLITUDE = 5.0

SEASON_BONUS: dict[str, float] = {
    "kharif": 0.1,
    "rabi": 0.15,
}


def yield_multiplier(
    rainfall: float,
    fertilizer: float,
    pesticides: float,
    season: str,
) -> float:
    """
    Compute the yield multiplier for one synthetic sample.

    Args:
        rainfall: Annual rainfall (mm).
        fertilizer: Fertilizer applied.
        pesticides: Pesticides applied.
        season: Lowercase season name.

    Returns:
        Multiplier applied to BASE_YIELD * area.
    """
    multiplier = 1.0

    if 600 <= rainfall <= 1200:
        multiplier += 0.3
    elif rainfall < 400 or rainfall > 2000:
        multiplier -= 0.2

    if 50 <= fertilizer <= 150:
        multiplier += 0.25
    elif fertilizer < 20:
        multiplier -= 0.15

    if 5 <= pesticides <= 15:
        multiplier += 0.15
    elif pesticides > 25:
        multiplier -= 0.1

    multiplier += SEASON_BONUS.get(season, 0.0)
    return multiplier


class YieldDatasetGenerator(SyntheticDatasetGenerator):
    """Generates formula-labelled field samples."""

    label_column = "target"

    def sample_frame(self, batch_size: int) -> pd.DataFrame:
        frame = pd.DataFrame(
            {
                name: self.rng.uniform(domain.min, domain.max, size=batch_size)
                for name, domain in YIELD_SAMPLING_RANGES.items()
            }
        )
        frame["season"] = self.rng.choice(SEASONS, size=batch_size)

        multipliers = np.array(
            [
                yield_multiplier(r, f, p, s)
                for r, f, p, s in zip(
                    frame["rainfall"],
                    frame["fertilizer"],
                    frame["pesticides"],
                    frame["season"],
                    strict=True,
                )
            ]
        )
        noise = self.rng.uniform(-NOISE_AMPLITUDE, NOISE_AMPLITUDE, size=batch_size)
        target = BASE_YIELD * multipliers * frame["area"].to_numpy() + noise
        frame[self.label_column] = np.maximum(target, 0.0)
        return frame

    def validate(self, frame: pd.DataFrame) -> pd.DataFrame:
        return YieldBatchSchema.validate(frame)
