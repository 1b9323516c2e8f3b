"""NiceWeather - current weather, forecast and air quality in the terminal."""

__version__ = "0.1.0"
