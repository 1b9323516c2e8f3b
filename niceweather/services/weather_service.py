"""Weather service using the OpenWeatherMap 2.5 API."""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..models.config import ApiConfig
from ..models.fetch import FetchErrorKind, FetchResult
from ..models.weather import (
    CurrentWeather,
    ForecastResponse,
    GeoLocation,
    PollutionForecastResponse,
    PollutionResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

API_BASE_URL = "https://api.openweathermap.org/"

WEATHER_PATH = "data/2.5/weather"
FORECAST_PATH = "data/2.5/forecast"
POLLUTION_PATH = "data/2.5/air_pollution"
POLLUTION_FORECAST_PATH = "data/2.5/air_pollution/forecast"
GEOCODING_PATH = "geo/1.0/direct"

# Display code assumes Celsius and m/s
UNITS = "metric"

_GEOCODING = TypeAdapter(list[GeoLocation])
_WEATHER = TypeAdapter(CurrentWeather)
_FORECAST = TypeAdapter(ForecastResponse)
_POLLUTION = TypeAdapter(PollutionResponse)
_POLLUTION_FORECAST = TypeAdapter(PollutionForecastResponse)


class OpenWeatherMapClient:
    """Client for the free OpenWeatherMap endpoints.

    Every request resolves to a FetchResult; no exception escapes a fetch
    method and nothing is retried. Use as an async context manager to share
    one connection pool across a search, otherwise each request opens its own.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE_URL,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(cls, config: ApiConfig, api_key: str) -> "OpenWeatherMapClient":
        return cls(
            api_key=api_key,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
        )

    async def __aenter__(self) -> "OpenWeatherMapClient":
        self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(self, path: str, params: dict[str, Any]) -> httpx.Response:
        url = self.base_url + path
        params = {**params, "appid": self.api_key}
        if self._client is not None:
            return await self._client.get(url, params=params)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url, params=params)

    async def _fetch(
        self, path: str, params: dict[str, Any], adapter: TypeAdapter[T]
    ) -> FetchResult[T]:
        """GET a resource and decode it, classifying any failure."""
        try:
            response = await self._request(path, params)
            response.raise_for_status()
            return FetchResult(value=adapter.validate_python(response.json()))

        except httpx.TimeoutException:
            logger.warning(f"Timeout fetching {path}")
            return FetchResult.failure(FetchErrorKind.TIMEOUT, "Request timeout")

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP error fetching {path}: {status}")
            return FetchResult.failure(FetchErrorKind.HTTP_STATUS, f"HTTP {status}", status)

        except httpx.RequestError as e:
            logger.error(f"Connection error fetching {path}: {e}")
            return FetchResult.failure(FetchErrorKind.NETWORK, "Connection error")

        except ValidationError as e:
            logger.error(f"Unexpected {path} response: {e.error_count()} validation errors")
            return FetchResult.failure(FetchErrorKind.DECODE, f"Parse error: {e}")

        except ValueError as e:
            logger.error(f"Invalid JSON from {path}: {e}")
            return FetchResult.failure(FetchErrorKind.DECODE, f"Parse error: {e}")

    def _coords(self, lat: float, lon: float, units: bool = True) -> dict[str, Any]:
        params: dict[str, Any] = {"lat": lat, "lon": lon}
        if units:
            params["units"] = UNITS
        return params

    async def geocode(self, query: str, limit: int = 1) -> FetchResult[list[GeoLocation]]:
        """Look up locations matching a name, e.g. "London, GB"."""
        return await self._fetch(GEOCODING_PATH, {"q": query, "limit": limit}, _GEOCODING)

    async def current_weather(self, lat: float, lon: float) -> FetchResult[CurrentWeather]:
        return await self._fetch(WEATHER_PATH, self._coords(lat, lon), _WEATHER)

    async def current_weather_by_name(self, query: str) -> FetchResult[CurrentWeather]:
        """Current weather using the API's built-in (deprecated) city lookup."""
        return await self._fetch(WEATHER_PATH, {"q": query, "units": UNITS}, _WEATHER)

    async def forecast(self, lat: float, lon: float) -> FetchResult[ForecastResponse]:
        """Five day forecast in 3-hour steps."""
        return await self._fetch(FORECAST_PATH, self._coords(lat, lon), _FORECAST)

    async def forecast_by_name(self, query: str) -> FetchResult[ForecastResponse]:
        return await self._fetch(FORECAST_PATH, {"q": query, "units": UNITS}, _FORECAST)

    async def pollution(self, lat: float, lon: float) -> FetchResult[PollutionResponse]:
        return await self._fetch(POLLUTION_PATH, self._coords(lat, lon, units=False), _POLLUTION)

    async def pollution_forecast(
        self, lat: float, lon: float
    ) -> FetchResult[PollutionForecastResponse]:
        return await self._fetch(
            POLLUTION_FORECAST_PATH, self._coords(lat, lon, units=False), _POLLUTION_FORECAST
        )
