"""
Configuration loading utilities.

A config file is a partial AppConfig in YAML: every section is optional
and missing keys keep their built-in defaults. String values may
reference environment variables as ${VAR} or ${VAR:default}.
"""

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from agripredict.config.settings import AppConfig
from agripredict.utils.logging import get_logger

log = get_logger(__name__)

ENV_VAR_PATTERN = re.compile(r"\$\{(?P<name>[^}:]+)(?::(?P<default>[^}]*))?\}")


def _expand_env(text: str) -> str:
    """Replace ${VAR} / ${VAR:default}; unset variables without default become ""."""
    return ENV_VAR_PATTERN.sub(
        lambda m: os.environ.get(m["name"], m["default"] or ""), text
    )


def _expand_tree(node: Any) -> Any:
    """Apply env expansion to every string in a parsed YAML tree."""
    if isinstance(node, str):
        return _expand_env(node)
    if isinstance(node, Mapping):
        return {key: _expand_tree(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_expand_tree(item) for item in node]
    return node


def _merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base; sections merge, scalars replace."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _merge(current, value)
        else:
            merged[key] = value
    return merged


def load_yaml(path: Path) -> dict[str, Any]:
    """
    Read a YAML config file with env expansion.

    Raises:
        ValueError: If the document root is not a mapping.
    """
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config root must be a mapping, got {type(data).__name__}: {path}"
        raise ValueError(msg)
    return _expand_tree(data)


def default_config() -> AppConfig:
    """Return the built-in configuration."""
    return AppConfig()


def load_config(config_path: Path | None = None, **overrides: Any) -> AppConfig:
    """
    Build the application configuration.

    Precedence, lowest first: built-in defaults, the YAML file, keyword
    overrides. Overrides that are None are ignored, so optional CLI
    flags can be passed straight through.

    Args:
        config_path: YAML file, or None for defaults only.
        **overrides: Top-level keys, e.g. random_state=42.

    Returns:
        Validated AppConfig.
    """
    layers: list[Mapping[str, Any]] = [default_config().model_dump()]

    if config_path is not None:
        layers.append(load_yaml(config_path))
        log.debug("Loaded config file", path=str(config_path))

    layers.append({key: value for key, value in overrides.items() if value is not None})

    merged: dict[str, Any] = {}
    for layer in layers:
        merged = _merge(merged, layer)
    return AppConfig.model_validate(merged)
