"""
Typed configuration models using Pydantic.

All tunables for network training and scoring live here. Domain tables
and rule thresholds are fixed constants and are not configurable.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NetworkConfig(BaseModel):
    """Topology and training schedule for one prediction network."""

    model_config = ConfigDict(frozen=True)

    hidden_layer_sizes: tuple[int, ...] = Field(
        description="Units per hidden layer (ReLU)",
    )
    learning_rate_init: float = Field(
        default=0.001, gt=0.0, description="Adam step size"
    )
    epochs: int = Field(ge=1, description="Number of fresh synthetic batches to fit")
    batch_size: int = Field(ge=1, description="Samples generated per epoch")
    target_transformation: Literal["log1p", "none"] = Field(
        default="log1p",
        description="Regression target transform applied before standardization",
    )

    @field_validator("hidden_layer_sizes")
    @classmethod
    def validate_layers(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Ensure at least one hidden layer with positive width."""
        if not v or any(units < 1 for units in v):
            msg = f"hidden_layer_sizes must be non-empty and positive, got: {v!r}"
            raise ValueError(msg)
        return v


def _crop_network() -> NetworkConfig:
    return NetworkConfig(hidden_layer_sizes=(128, 64, 32), epochs=5, batch_size=100)


def _yield_network() -> NetworkConfig:
    return NetworkConfig(hidden_layer_sizes=(64, 32, 16), epochs=10, batch_size=200)


class ScoringConfig(BaseModel):
    """Post-processing configuration for prediction results."""

    model_config = ConfigDict(frozen=True)

    top_k: int = Field(default=3, ge=1, description="Number of ranked crops returned")
    random_bonus_max: float = Field(
        default=30.0,
        ge=0.0,
        description="Upper bound of the suitability bonus for crops without rules",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO")
    json_output: bool = Field(default=False)


class AppConfig(BaseModel):
    """Complete application configuration."""

    model_config = ConfigDict(frozen=True)

    crop: NetworkConfig = Field(default_factory=_crop_network)
    yield_model: NetworkConfig = Field(default_factory=_yield_network)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    random_state: int | None = Field(
        default=None,
        description="Seed for data, weight init and scoring; None = fresh entropy",
    )
