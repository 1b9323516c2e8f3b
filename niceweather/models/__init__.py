"""Data models for NiceWeather."""

from .config import ApiConfig, Config, MissingApiKeyError, Settings
from .fetch import FetchError, FetchErrorKind, FetchResult
from .forecast import ClipFractions, DayBucket, ForecastSample, IconSlot
from .weather import (
    AirQuality,
    CurrentWeather,
    ForecastEntry,
    ForecastResponse,
    Gas,
    GeoLocation,
    PollutionForecastResponse,
    PollutionResponse,
)

__all__ = [
    "AirQuality",
    "ApiConfig",
    "ClipFractions",
    "Config",
    "CurrentWeather",
    "DayBucket",
    "FetchError",
    "FetchErrorKind",
    "FetchResult",
    "ForecastEntry",
    "ForecastResponse",
    "ForecastSample",
    "Gas",
    "GeoLocation",
    "IconSlot",
    "MissingApiKeyError",
    "PollutionForecastResponse",
    "PollutionResponse",
    "Settings",
]
