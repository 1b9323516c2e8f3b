"""Forecast panel showing one row per day with a temperature range bar."""

from textual.app import ComposeResult
from textual.widgets import Static

from ..models.forecast import DayBucket, IconSlot
from ..services.presenter import day_label, temp_string
from .weather_panel import temp_color

BAR_WIDTH = 20

# OpenWeatherMap icon codes, without the day/night suffix
ICON_GLYPHS = {
    "01": "☀",
    "02": "🌤",
    "03": "⛅",
    "04": "☁",
    "09": "🌧",
    "10": "🌦",
    "11": "⛈",
    "13": "❄",
    "50": "🌫",
}


def icon_glyph(slot: IconSlot) -> str:
    """Glyph for a timeline slot; blank for padding, '?' for unknown codes."""
    if slot.icon is None:
        return "·" if slot.time is not None else " "
    return ICON_GLYPHS.get(slot.icon[:2], "?")


def range_bar(bucket: DayBucket, width: int = BAR_WIDTH) -> str:
    """Fixed-width bar placing the day's range inside the whole forecast's range."""
    leading = round(bucket.clip.leading * width)
    trailing = round(bucket.clip.trailing * width)
    filled = max(width - leading - trailing, 1)
    leading = min(leading, width - filled)
    trailing = width - filled - leading
    return " " * leading + "━" * filled + " " * trailing


def forecast_row(bucket: DayBucket) -> str:
    label = "Today" if bucket.is_today else day_label(bucket.first_time)
    low, high = temp_color(bucket.min_temp), temp_color(bucket.max_temp)
    icons = "".join(icon_glyph(slot) for slot in bucket.icons)
    return (
        f"{label:<5} [{low}]{temp_string(bucket.min_temp):>4}[/{low}] "
        f"{range_bar(bucket)} [{high}]{temp_string(bucket.max_temp):<4}[/{high}] {icons}"
    )


class ForecastPanel(Static):
    """Panel displaying the day-bucketed five day forecast."""

    DEFAULT_CSS = """
    ForecastPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("[bold]5-Day Forecast[/bold]", id="forecast-header")
        yield Static("", id="forecast-rows")

    def update_forecast(self, buckets: list[DayBucket]) -> None:
        rows = self.query_one("#forecast-rows", Static)
        if not buckets:
            rows.update("[dim]No forecast[/dim]")
            return
        rows.update("\n".join(forecast_row(bucket) for bucket in buckets))

    def clear(self) -> None:
        self.query_one("#forecast-rows", Static).update("")
