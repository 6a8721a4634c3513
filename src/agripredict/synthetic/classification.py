"""
Synthetic crop classification data.

Features are uniform over the crop normalization domains. Labels come
from a fixed-priority rule cascade; samples matching no rule get a
uniformly random label, so most of a batch is effectively noise.
"""

from typing import Any, Mapping

import numpy as np
import pandas as pd

from agripredict.normalization.domains import CROP_DOMAINS
from agripredict.schemas.crop import CROP_LABELS, CropBatchSchema
from agripredict.synthetic.base import SyntheticDatasetGenerator

RICE = CROP_LABELS.index("Rice")
MAIZE = CROP_LABELS.index("Maize")
CHICKPEA = CROP_LABELS.index("Chickpea")
COTTON = CROP_LABELS.index("Cotton")
COFFEE = CROP_LABELS.index("Coffee")


def match_crop_rule(features: Mapping[str, Any]) -> int | None:
    """
    Apply the labelling cascade, first match wins.

    Args:
        features: Raw crop feature record.

    Returns:
        Class index, or None if no rule matches.
    """
    temperature = features["temperature"]
    humidity = features["humidity"]
    rainfall = features["rainfall"]
    ph = features["ph"]

    if rainfall > 200 and temperature > 25 and humidity > 70:
        return RICE
    if 20 < temperature < 30 and 6 < ph < 7.5:
        return MAIZE
    if ph > 6 and rainfall < 100:
        return CHICKPEA
    if temperature > 25 and humidity > 60:
        return COTTON
    if temperature > 15 and rainfall > 150:
        return COFFEE
    return None


def determine_crop(features: Mapping[str, Any], rng: np.random.Generator) -> int:
    """Label a sample by rule, falling back to a uniformly random class."""
    label = match_crop_rule(features)
    if label is None:
        label = int(rng.integers(len(CROP_LABELS)))
    return label


class CropDatasetGenerator(SyntheticDatasetGenerator):
    """Generates rule-labelled soil and climate samples."""

    label_column = "label"

    def sample_frame(self, batch_size: int) -> pd.DataFrame:
        frame = pd.DataFrame(
            {
                name: self.rng.uniform(domain.min, domain.max, size=batch_size)
                for name, domain in CROP_DOMAINS.items()
            }
        )
        frame[self.label_column] = [
            determine_crop(row, self.rng) for row in frame.to_dict("records")
        ]
        return frame

    def validate(self, frame: pd.DataFrame) -> pd.DataFrame:
        return CropBatchSchema.validate(frame)
