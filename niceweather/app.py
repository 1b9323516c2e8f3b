"""Textual application wiring the search box to the weather panels."""

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Input

from .components import AirQualityPanel, ForecastPanel, StatusBar, WeatherPanel
from .models.config import Config
from .services.session import SearchController, WeatherSession
from .services.weather_service import OpenWeatherMapClient

logger = logging.getLogger(__name__)


class WeatherApp(App):
    """Current weather, forecast and air quality for a searched location."""

    TITLE = "NiceWeather"

    CSS = """
    #search {
        margin: 0 1;
    }

    #top-row {
        height: auto;
    }

    #top-row WeatherPanel {
        width: 2fr;
    }

    #top-row AirQualityPanel {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("r", "refresh", "Refresh"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: Config | None = None,
        config_path: Path | None = None,
        api_key: str | None = None,
        location: str | None = None,
    ) -> None:
        super().__init__()
        if config is None:
            config = Config.load_or_default(config_path or Path("config.json"))
        self.config = config
        api_key = api_key or config.resolve_api_key()
        self.controller = SearchController(
            lambda: OpenWeatherMapClient.from_config(config.api, api_key),
            geocode_limit=config.api.geocode_limit,
        )
        self.initial_location = location or config.settings.default_location

    def compose(self) -> ComposeResult:
        yield Input(
            value=self.initial_location,
            placeholder="City, state, country (e.g. London, GB)",
            id="search",
        )
        with VerticalScroll():
            with Horizontal(id="top-row"):
                yield WeatherPanel()
                yield AirQualityPanel()
            yield ForecastPanel()
        yield StatusBar()

    def on_mount(self) -> None:
        if self.initial_location:
            self.start_search(self.initial_location)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.start_search(event.value)

    def on_input_changed(self, event: Input.Changed) -> None:
        if not event.value.strip():
            self.stop_search()

    def action_refresh(self) -> None:
        self.start_search(self.query_one("#search", Input).value)

    def start_search(self, location: str) -> None:
        """Run a search in the background, superseding any search in progress."""
        if not location.strip():
            self.stop_search()
            return
        self.query_one(WeatherPanel).set_loading()
        self.query_one(StatusBar).set_activity("Searching...")
        self.run_worker(self._search(location), exclusive=True, group="search")

    def stop_search(self) -> None:
        """Abandon the search in progress and blank the panels."""
        self.controller.cancel()
        self.query_one(StatusBar).clear_activity()
        self._clear_panels()

    async def _search(self, location: str) -> None:
        session = await self.controller.search(location)
        self.query_one(StatusBar).clear_activity()
        if session is None:
            self._clear_panels()
            return
        self._show(session)
        self.query_one(StatusBar).set_last_refresh()

    def _show(self, session: WeatherSession) -> None:
        place = session.place
        if place is None:
            self._clear_panels()
            error = session.errors.get("geolocation")
            message = error.message if error else f"No location found for '{session.location}'"
            self.query_one(WeatherPanel).set_error(message)
            return

        tz = self.config.settings.tzinfo
        self.query_one(WeatherPanel).update_weather(place, session.weather, session.forecast)
        self.query_one(AirQualityPanel).update_pollution(
            session.pollution, session.pollution_forecast, tz
        )
        forecast = session.forecast
        buckets = forecast.five_day_forecast(tz) if forecast else []
        self.query_one(ForecastPanel).update_forecast(buckets)

    def _clear_panels(self) -> None:
        self.query_one(WeatherPanel).clear()
        self.query_one(AirQualityPanel).clear()
        self.query_one(ForecastPanel).clear()
