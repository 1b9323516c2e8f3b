"""Air quality panel component."""

from datetime import tzinfo

from textual.app import ComposeResult
from textual.widgets import Static

from ..models.weather import PollutionForecastResponse, PollutionResponse
from ..services.presenter import daily_worst_aqi, day_label, pollution_summary

AQI_COLORS = {1: "green", 2: "cyan", 3: "yellow", 4: "red", 5: "magenta"}


def aqi_outlook(pollution_forecast: PollutionForecastResponse, tz: tzinfo | None = None) -> str:
    """Worst AQI per day, with days split on the calendar of ``tz``."""
    parts = []
    for when, quality in daily_worst_aqi(pollution_forecast, tz):
        color = AQI_COLORS.get(quality.aqi, "white")
        parts.append(f"{day_label(when)} [{color}]{quality.label}[/{color}]")
    return "  ".join(parts)


class AirQualityPanel(Static):
    """Panel displaying current pollution and the daily AQI outlook."""

    DEFAULT_CSS = """
    AirQualityPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("[bold]Air Quality[/bold]", id="aqi-header")
        yield Static("", id="aqi-components")
        yield Static("", id="aqi-outlook")

    def update_pollution(
        self,
        pollution: PollutionResponse | None,
        pollution_forecast: PollutionForecastResponse | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        header = self.query_one("#aqi-header", Static)
        components = self.query_one("#aqi-components", Static)
        summary = pollution_summary(pollution) if pollution is not None else None

        if summary is None:
            header.update("[bold]Air Quality[/bold] [dim]unavailable[/dim]")
            components.update("")
        else:
            aqi = pollution.current.main.aqi
            color = AQI_COLORS.get(aqi, "white")
            header.update(f"[bold][{color}]{summary['description']}[/{color}][/bold]")
            components.update(
                "  ".join(f"{label} [dim]{value}[/dim]" for label, value in summary["components"])
            )

        outlook = self.query_one("#aqi-outlook", Static)
        if pollution_forecast is None:
            outlook.update("")
            return
        outlook.update(aqi_outlook(pollution_forecast, tz))

    def clear(self) -> None:
        self.query_one("#aqi-header", Static).update("[bold]Air Quality[/bold]")
        self.query_one("#aqi-components", Static).update("")
        self.query_one("#aqi-outlook", Static).update("")
