"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from forecaster.config.defaults import API_KEY_ENV, BASE_URL_ENV, CONFIG_PATH_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's OpenWeatherMap settings out of the tests."""
    for name in (API_KEY_ENV, BASE_URL_ENV, CONFIG_PATH_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sf_forecast(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "openweather_forecast_sf.json") as f:
        return json.load(f)


@pytest.fixture
def london_forecast(fixtures_dir: Path) -> dict:
    """Two entries (one with rain), cnt=40."""
    with open(fixtures_dir / "openweather_forecast_london.json") as f:
        return json.load(f)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api_key": "yaml-key",
        "base_url": "https://test-owm.example.com",
    }
    path = tmp_path / "forecaster.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
