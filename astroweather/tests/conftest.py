"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from astroweather.config.defaults import DEFAULT_LOCATIONS
from astroweather.config.schema import AppConfig
from astroweather.models.forecast import ForecastResponse

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def astro_payload() -> dict:
    with open(FIXTURE_DIR / "seventimer_astro_vienna.json") as f:
        return json.load(f)


@pytest.fixture
def astro_forecast(astro_payload: dict) -> ForecastResponse:
    return ForecastResponse.model_validate(astro_payload)


@pytest.fixture
def suntimes_payload() -> dict:
    with open(FIXTURE_DIR / "sunrise_sunset_ok.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> AppConfig:
    """Return default AppConfig with default locations."""
    return AppConfig(locations=DEFAULT_LOCATIONS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a config YAML pointing both providers at test hosts."""
    data = {
        "providers": {
            "astro": {"base_url": "https://test-7timer.example.com/astro.php"},
            "suntimes": {"base_url": "https://test-sun.example.com/json"},
        },
        "export": {"csv_path": str(tmp_path / "forecasts.csv")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
