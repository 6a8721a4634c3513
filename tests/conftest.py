"""Pytest configuration and shared fixtures."""

from pathlib import Path

import numpy as np
import pytest

from agripredict.config.settings import AppConfig
from agripredict.schemas.crop import CropInput
from agripredict.schemas.yields import YieldInput
from agripredict.service import CropRecommendationService, YieldPredictionService


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source."""
    return np.random.default_rng(42)


@pytest.fixture
def seeded_config() -> AppConfig:
    """Default configuration with a fixed seed."""
    return AppConfig(random_state=42)


@pytest.fixture
def scenario_a_input() -> CropInput:
    """Humid, rainy parcel used as the reference classification scenario."""
    return CropInput(
        nitrogen=90,
        phosphorus=42,
        potassium=43,
        temperature=20.9,
        humidity=82,
        ph=6.5,
        rainfall=202.9,
    )


@pytest.fixture
def scenario_b_input() -> YieldInput:
    """Well-managed Kharif field in Punjab."""
    return YieldInput(
        crop_year="2023",
        season="Kharif",
        state="Punjab",
        area=10,
        annual_rainfall=1000,
        fertilizer=80,
        pesticides=8,
    )


@pytest.fixture(scope="module")
def crop_service() -> CropRecommendationService:
    """Trained crop recommendation service (seeded)."""
    service = CropRecommendationService(AppConfig(random_state=7))
    service.train()
    return service


@pytest.fixture(scope="module")
def yield_service() -> YieldPredictionService:
    """Trained yield prediction service (seeded)."""
    service = YieldPredictionService(AppConfig(random_state=7))
    service.train()
    return service
