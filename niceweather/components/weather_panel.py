"""Weather panel component for displaying current conditions."""

from textual.app import ComposeResult
from textual.widgets import Label, Static

from ..models.weather import CurrentWeather, ForecastResponse, GeoLocation
from ..services.presenter import geo_summary, weather_summary


def temp_color(temp: float) -> str:
    """Get color for temperature value."""
    if temp <= 0:
        return "blue"
    elif temp <= 10:
        return "cyan"
    elif temp <= 20:
        return "green"
    elif temp <= 30:
        return "yellow"
    return "red"


def geo_text(geo: dict[str, str]) -> str:
    """Position, zone offset and local sun times for the panel footer."""
    text = f"[dim]{geo['location']}  {geo['utc_offset']} ({geo['time_offset']} from here)[/dim]"
    if "sunrise" in geo:
        text += f"\n[dim]Sunrise {geo['sunrise_local']}  Sunset {geo['sunset_local']} (local)[/dim]"
    return text


class WeatherPanel(Static):
    """Panel displaying current weather for the searched location."""

    DEFAULT_CSS = """
    WeatherPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    WeatherPanel #weather-error {
        color: $error;
        display: none;
    }

    WeatherPanel #weather-error.visible {
        display: block;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("[bold]Weather[/bold]", id="weather-header")
        yield Label("", id="weather-error")
        yield Static("", id="weather-details")
        yield Static("", id="weather-geo")

    def set_loading(self) -> None:
        self.query_one("#weather-header", Static).update("[dim]Loading...[/dim]")
        self.query_one("#weather-error", Label).remove_class("visible")
        self.query_one("#weather-details", Static).update("")
        self.query_one("#weather-geo", Static).update("")

    def set_error(self, error: str) -> None:
        """Display an error message."""
        self.query_one("#weather-header", Static).update("[bold]Weather[/bold]")
        error_label = self.query_one("#weather-error", Label)
        error_label.update(f"[red]{error}[/red]")
        error_label.add_class("visible")
        self.query_one("#weather-details", Static).update("")
        self.query_one("#weather-geo", Static).update("")

    def update_weather(
        self,
        place: GeoLocation,
        weather: CurrentWeather | None,
        forecast: ForecastResponse | None = None,
    ) -> None:
        """Update panel with current conditions."""
        header = self.query_one("#weather-header", Static)
        if weather is None:
            self.set_error("Current weather unavailable")
            header.update(f"[bold]{place.display_name}[/bold]")
            return

        self.query_one("#weather-error", Label).remove_class("visible")
        data = weather_summary(weather, forecast)
        tc = temp_color(weather.main.temp)
        header.update(
            f"[bold]{place.display_name}[/bold]  [{tc}]{data['temp']}[/{tc}]  "
            f"{data.get('description', '')}"
        )

        lines = [f"Feels like {data['feels_like']}"]
        if "min_temp" in data:
            lines[0] += f"   L {data['min_temp']}  H {data['max_temp']}"
        lines.append(f"Humidity {data['humidity']}   Pressure {data['pressure']}")
        for key, label in (("wind", "Wind"), ("clouds", "Clouds"), ("rain", "Rain"), ("snow", "Snow")):
            if data.get(key):
                lines.append(f"{label}: {data[key]}")
        self.query_one("#weather-details", Static).update("\n".join(lines))

        self.query_one("#weather-geo", Static).update(geo_text(geo_summary(weather)))

    def clear(self) -> None:
        """Clear all data."""
        self.query_one("#weather-header", Static).update("[bold]Weather[/bold]")
        self.query_one("#weather-error", Label).remove_class("visible")
        self.query_one("#weather-details", Static).update("")
        self.query_one("#weather-geo", Static).update("")
