"""YAML config loader with environment overrides."""

import os
from pathlib import Path
from typing import Any

import yaml

from forecaster.config.defaults import CONFIG_PATH_ENV, ENV_OVERRIDES
from forecaster.config.schema import ForecasterConfig


def default_config_path() -> Path | None:
    value = os.environ.get(CONFIG_PATH_ENV)
    return Path(value) if value else None


def load_config(path: str | Path | None = None) -> ForecasterConfig:
    """Load and validate config from an optional YAML file.

    With no path, only defaults and environment overrides apply. An explicit
    path that does not exist raises FileNotFoundError.
    """
    raw: Any = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    # A non-mapping document is left for validation to reject.
    if isinstance(raw, dict):
        for env_name, field in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                raw[field] = value

    return ForecasterConfig.model_validate(raw)


def redacted_config(config: ForecasterConfig) -> dict[str, Any]:
    """Config as a dict safe for logging."""
    data = config.model_dump()
    if data["api_key"]:
        data["api_key"] = "***"
    return data
