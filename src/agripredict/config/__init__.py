"""
Configuration management with typed Pydantic models.

Provides network, scoring and logging settings plus YAML loading
with environment variable interpolation.
"""

from agripredict.config.loader import default_config, load_config
from agripredict.config.settings import (
    AppConfig,
    LoggingConfig,
    NetworkConfig,
    ScoringConfig,
)

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "NetworkConfig",
    "ScoringConfig",
    "default_config",
    "load_config",
]
