"""Services for fetching and shaping weather data."""

from .bucketizer import bucket_by_day
from .session import SearchController, WeatherSession
from .weather_service import OpenWeatherMapClient

__all__ = ["OpenWeatherMapClient", "SearchController", "WeatherSession", "bucket_by_day"]
