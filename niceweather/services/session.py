"""Per-search request state and the controller that owns the running search."""

import asyncio
import logging
from collections.abc import Callable

from ..models.fetch import FetchError, FetchResult
from ..models.weather import (
    CurrentWeather,
    ForecastResponse,
    GeoLocation,
    PollutionForecastResponse,
    PollutionResponse,
)
from .weather_service import OpenWeatherMapClient

logger = logging.getLogger(__name__)


class WeatherSession:
    """Everything fetched for one location search.

    A session is filled by a single ``fetch`` call. Resources that could not
    be fetched stay ``None`` and their error is kept in ``errors``.
    """

    def __init__(self, client: OpenWeatherMapClient, geocode_limit: int = 1):
        self.client = client
        self.geocode_limit = geocode_limit
        self.location: str = ""
        self.geolocation: list[GeoLocation] | None = None
        self.weather: CurrentWeather | None = None
        self.pollution: PollutionResponse | None = None
        self.forecast: ForecastResponse | None = None
        self.pollution_forecast: PollutionForecastResponse | None = None
        self.errors: dict[str, FetchError] = {}

    def clear(self) -> None:
        self.geolocation = None
        self.weather = None
        self.pollution = None
        self.forecast = None
        self.pollution_forecast = None
        self.errors = {}

    @property
    def place(self) -> GeoLocation | None:
        """Best geocoding match, if any."""
        return self.geolocation[0] if self.geolocation else None

    @property
    def is_empty(self) -> bool:
        return self.place is None

    def _keep(self, resource: str, result: FetchResult):
        if result.error is not None:
            self.errors[resource] = result.error
            logger.warning(f"{resource} unavailable for {self.location!r}: {result.error.message}")
        return result.unwrap_or_none()

    async def fetch(self, location: str) -> None:
        """Geocode ``location`` then fetch its weather resources one by one."""
        self.clear()
        self.location = location

        self.geolocation = self._keep(
            "geolocation", await self.client.geocode(location, limit=self.geocode_limit)
        )
        place = self.place
        if place is None:
            logger.info(f"No location found for {location!r}")
            return

        logger.debug(f"Fetching weather for {place.display_name} ({place.lat}, {place.lon})")
        self.weather = self._keep("weather", await self.client.current_weather(place.lat, place.lon))
        self.pollution = self._keep("pollution", await self.client.pollution(place.lat, place.lon))
        self.forecast = self._keep("forecast", await self.client.forecast(place.lat, place.lon))
        self.pollution_forecast = self._keep(
            "pollution_forecast", await self.client.pollution_forecast(place.lat, place.lon)
        )


class SearchController:
    """Runs one search at a time.

    Starting a search cancels the one still in flight, including its
    pending HTTP request, so a slow earlier search can never overwrite a
    newer one.
    """

    def __init__(self, client_factory: Callable[[], OpenWeatherMapClient], geocode_limit: int = 1):
        self.client_factory = client_factory
        self.geocode_limit = geocode_limit
        self.session: WeatherSession | None = None
        self._task: asyncio.Task | None = None

    @property
    def busy(self) -> bool:
        return self._task is not None and not self._task.done()

    def cancel(self) -> None:
        """Cancel the in-flight search, if any."""
        if self.busy:
            logger.debug("Cancelling in-flight search")
            self._task.cancel()
        self._task = None

    async def _run(self, session: WeatherSession, location: str) -> WeatherSession:
        async with session.client:
            await session.fetch(location)
        return session

    async def search(self, location: str) -> WeatherSession | None:
        """Search for ``location`` and return the filled session.

        An empty location clears the current session and returns None.
        Raises asyncio.CancelledError when a newer search supersedes this one.
        """
        self.cancel()
        location = location.strip()
        if not location:
            self.session = None
            return None

        session = WeatherSession(self.client_factory(), geocode_limit=self.geocode_limit)
        self.session = session
        task = asyncio.create_task(self._run(session, location))
        self._task = task
        try:
            return await task
        finally:
            if self._task is task:
                self._task = None
