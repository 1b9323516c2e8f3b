"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest

# 2024-04-22 00:00:00 UTC
DAY_START = 1713744000
HOUR = 3600


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def _main(temp: float, temp_min: float | None = None, temp_max: float | None = None) -> dict:
    return {
        "temp": temp,
        "feels_like": temp - 1.2,
        "pressure": 1015,
        "humidity": 72,
        "temp_min": temp if temp_min is None else temp_min,
        "temp_max": temp if temp_max is None else temp_max,
    }


@pytest.fixture
def forecast_entry():
    """Factory for one 3-hour slot of a forecast response."""

    def make(dt: int, temp: float, icon: str = "01d", sunrise: int | None = None) -> dict:
        entry = {
            "dt": dt,
            "main": _main(temp),
            "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": icon}],
            "visibility": 10000,
            "wind": {"speed": 3.5, "deg": 80, "gust": 4.1},
            "clouds": {"all": 5},
            "pop": 0.1,
            "sys": {"pod": icon[-1]},
            "dt_txt": "2024-04-22 00:00:00",
        }
        if sunrise is not None:
            entry["sys"]["sunrise"] = sunrise
        return entry

    return make


@pytest.fixture
def forecast_payload(forecast_entry):
    """Forecast response: three slots late on day one, five early on day two."""
    entries = [
        forecast_entry(DAY_START + 15 * HOUR, 10),
        forecast_entry(DAY_START + 18 * HOUR, 12, icon="02n"),
        forecast_entry(DAY_START + 21 * HOUR, 8, icon="10n"),
    ] + [
        forecast_entry(DAY_START + (24 + 3 * i) * HOUR, temp, icon="04d")
        for i, temp in enumerate([14, 16, 19, 17, 13])
    ]
    return {
        "cod": "200",
        "message": 0,
        "cnt": len(entries),
        "list": entries,
        "city": {
            "id": 5856195,
            "name": "Honolulu",
            "coord": {"lat": 21.3069, "lon": -157.8583},
            "country": "US",
            "population": 371657,
            "timezone": -36000,
            "sunrise": DAY_START + 16 * HOUR,
            "sunset": DAY_START + 29 * HOUR,
        },
    }


@pytest.fixture
def weather_payload():
    """Current weather response for Honolulu."""
    return {
        "coord": {"lon": -157.8583, "lat": 21.3069},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "base": "stations",
        "main": _main(26.4, temp_min=25.1, temp_max=27.8),
        "visibility": 10000,
        "wind": {"speed": 5.0, "deg": 70},
        "clouds": {"all": 40},
        "rain": {"1h": 0.5},
        "dt": DAY_START + 20 * HOUR,
        "sys": {
            "type": 2,
            "id": 2011900,
            "country": "US",
            "sunrise": DAY_START + 16 * HOUR,
            "sunset": DAY_START + 29 * HOUR,
        },
        "timezone": -36000,
        "id": 5856195,
        "name": "Honolulu",
        "cod": 200,
    }


@pytest.fixture
def pollution_payload():
    """Current air pollution response."""
    return {
        "coord": {"lon": -157.8583, "lat": 21.3069},
        "list": [
            {
                "main": {"aqi": 2},
                "components": {
                    "co": 201.94,
                    "no": 0.02,
                    "no2": 0.77,
                    "o3": 68.66,
                    "so2": 0.64,
                    "pm2_5": 0.5,
                    "pm10": 0.54,
                    "nh3": 0.12,
                },
                "dt": DAY_START + 20 * HOUR,
            }
        ],
    }


@pytest.fixture
def pollution_forecast_payload():
    """Air pollution forecast response, hourly over two days."""
    aqis = [1, 2, 3, 2, 1, 1, 4, 2]
    return {
        "coord": {"lon": -157.8583, "lat": 21.3069},
        "list": [
            {
                "main": {"aqi": aqi},
                "components": {"co": 200.0, "pm2_5": 1.0},
                "dt": DAY_START + 6 * i * HOUR,
            }
            for i, aqi in enumerate(aqis)
        ],
    }


@pytest.fixture
def geocode_payload():
    """Direct geocoding response with a single match."""
    return [
        {
            "name": "Honolulu",
            "local_names": {"en": "Honolulu", "haw": "Honolulu"},
            "lat": 21.3045,
            "lon": -157.8557,
            "country": "US",
            "state": "Hawaii",
        }
    ]


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "api": {
            "base_url": "https://api.example.com",
            "api_key": "config-key",
            "timeout_seconds": 10,
            "geocode_limit": 1,
        },
        "settings": {
            "default_location": "London, GB",
            "timezone": "Europe/London",
            "log_level": "INFO",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path
