"""
Fixed normalization domains and sampling ranges.

Domains are shared between the synthetic generators and the feature
normalizer. They are process-wide constants and never mutated.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class NormalizationDomain:
    """Closed (min, max) range of one raw feature.

    Attributes:
        min: Raw value mapped to 0.
        max: Raw value mapped to 1.
    """

    min: float
    max: float

    def __post_init__(self) -> None:
        if not self.max > self.min:
            msg = f"Domain max must exceed min, got ({self.min}, {self.max})"
            raise ValueError(msg)

    @property
    def width(self) -> float:
        """Distance between max and min (always positive)."""
        return self.max - self.min


# Crop features, in network input order. Also the sampling ranges of the
# classification generator.
CROP_DOMAINS: Mapping[str, NormalizationDomain] = MappingProxyType(
    {
        "nitrogen": NormalizationDomain(0.0, 140.0),
        "phosphorus": NormalizationDomain(5.0, 145.0),
        "potassium": NormalizationDomain(5.0, 205.0),
        "temperature": NormalizationDomain(8.0, 44.0),
        "humidity": NormalizationDomain(14.0, 100.0),
        "ph": NormalizationDomain(3.5, 10.0),
        "rainfall": NormalizationDomain(20.0, 300.0),
    }
)

# Numeric yield features, in network input order (season slots follow)
YIELD_DOMAINS: Mapping[str, NormalizationDomain] = MappingProxyType(
    {
        "area": NormalizationDomain(0.1, 1000.0),
        "rainfall": NormalizationDomain(200.0, 3000.0),
        "fertilizer": NormalizationDomain(0.0, 500.0),
        "pesticides": NormalizationDomain(0.0, 50.0),
    }
)

# Yield generator draws from narrower ranges than the normalization domains
YIELD_SAMPLING_RANGES: Mapping[str, NormalizationDomain] = MappingProxyType(
    {
        "area": NormalizationDomain(1.0, 101.0),
        "rainfall": NormalizationDomain(500.0, 2000.0),
        "fertilizer": NormalizationDomain(20.0, 220.0),
        "pesticides": NormalizationDomain(2.0, 22.0),
    }
)

SEASONS: tuple[str, ...] = ("kharif", "rabi", "summer")
