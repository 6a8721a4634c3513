"""Tests for Pandera batch schemas and record types."""

import pandas as pd
import pandera as pa
import pytest

from agripredict.schemas import (
    CROP_LABELS,
    CropBatchSchema,
    CropInput,
    YieldBatchSchema,
    YieldInput,
)


@pytest.fixture
def crop_frame() -> pd.DataFrame:
    """Valid two-row classification batch."""
    return pd.DataFrame(
        {
            "nitrogen": [10.0, 120.0],
            "phosphorus": [20.0, 140.0],
            "potassium": [30.0, 200.0],
            "temperature": [15.0, 40.0],
            "humidity": [50.0, 90.0],
            "ph": [5.5, 7.0],
            "rainfall": [80.0, 250.0],
            "label": [0, 21],
        }
    )


@pytest.fixture
def yield_frame() -> pd.DataFrame:
    """Valid two-row regression batch."""
    return pd.DataFrame(
        {
            "area": [5.0, 80.0],
            "rainfall": [900.0, 1800.0],
            "fertilizer": [60.0, 200.0],
            "pesticides": [6.0, 20.0],
            "season": ["kharif", "summer"],
            "target": [210.5, 0.0],
        }
    )


class TestCropBatchSchema:
    """Tests for CropBatchSchema."""

    def test_valid_data(self, crop_frame: pd.DataFrame) -> None:
        """Valid batch passes validation."""
        assert len(CropBatchSchema.validate(crop_frame)) == 2

    def test_label_out_of_range(self, crop_frame: pd.DataFrame) -> None:
        """Labels beyond the crop list fail validation."""
        crop_frame.loc[1, "label"] = len(CROP_LABELS)
        with pytest.raises(pa.errors.SchemaError):
            CropBatchSchema.validate(crop_frame)

    def test_feature_out_of_domain(self, crop_frame: pd.DataFrame) -> None:
        """Generated features must stay inside their domains."""
        crop_frame.loc[0, "ph"] = 12.0
        with pytest.raises(pa.errors.SchemaError):
            CropBatchSchema.validate(crop_frame)


class TestYieldBatchSchema:
    """Tests for YieldBatchSchema."""

    def test_valid_data(self, yield_frame: pd.DataFrame) -> None:
        """Valid batch passes validation."""
        assert len(YieldBatchSchema.validate(yield_frame)) == 2

    def test_unknown_season(self, yield_frame: pd.DataFrame) -> None:
        """Only the three training seasons are generated."""
        yield_frame.loc[0, "season"] = "winter"
        with pytest.raises(pa.errors.SchemaError):
            YieldBatchSchema.validate(yield_frame)

    def test_negative_target(self, yield_frame: pd.DataFrame) -> None:
        """Targets are floored at 0 before validation."""
        yield_frame.loc[1, "target"] = -1.0
        with pytest.raises(pa.errors.SchemaError):
            YieldBatchSchema.validate(yield_frame)


class TestRecords:
    """Tests for input records."""

    def test_crop_features(self, scenario_a_input: CropInput) -> None:
        """Crop input exposes all 7 features by name."""
        features = scenario_a_input.as_features()
        assert features["ph"] == 6.5
        assert len(features) == 7

    def test_yield_features(self, scenario_b_input: YieldInput) -> None:
        """Annual rainfall maps to the rainfall feature; crop year is dropped."""
        features = scenario_b_input.as_features()
        assert features["rainfall"] == 1000
        assert features["season"] == "Kharif"
        assert "crop_year" not in features
