"""UI components for NiceWeather."""

from .air_quality_panel import AirQualityPanel
from .forecast_panel import ForecastPanel
from .status_bar import StatusBar
from .weather_panel import WeatherPanel

__all__ = ["AirQualityPanel", "ForecastPanel", "StatusBar", "WeatherPanel"]
