"""OpenWeatherMap 2.5 response models."""

from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .forecast import DayBucket, ForecastSample


class Coord(BaseModel):
    """Geographic position."""

    lat: float
    lon: float


class Condition(BaseModel):
    """Weather condition (Rain, Snow, Clouds, ...)."""

    id: int
    main: str
    description: str
    icon: str


class MainReadings(BaseModel):
    """Temperature, pressure and humidity block."""

    temp: float
    feels_like: float
    pressure: int
    humidity: int
    temp_min: float
    temp_max: float
    sea_level: int | None = None
    grnd_level: int | None = None
    temp_kf: float | None = None


class Wind(BaseModel):
    speed: float  # m/s
    deg: int
    gust: float | None = None


class Clouds(BaseModel):
    all: int  # cloudiness, %


class Precipitation(BaseModel):
    """Rain or snow volume in mm over the last 1 or 3 hours."""

    model_config = ConfigDict(populate_by_name=True)

    one_hour: float | None = Field(default=None, alias="1h")
    three_hours: float | None = Field(default=None, alias="3h")


class Sys(BaseModel):
    type: int | None = None
    id: int | None = None
    country: str | None = None
    sunrise: int | None = None
    sunset: int | None = None
    pod: str | None = None  # part of day, "d" or "n"


class CurrentWeather(BaseModel):
    """Response of data/2.5/weather."""

    coord: Coord
    weather: list[Condition]
    base: str
    main: MainReadings
    visibility: int  # metres, capped at 10km
    wind: Wind | None = None
    clouds: Clouds | None = None
    rain: Precipitation | None = None
    snow: Precipitation | None = None
    dt: int
    sys: Sys
    timezone: int  # shift in seconds from UTC
    id: int
    name: str
    cod: int

    @property
    def description(self) -> str | None:
        return self.weather[0].description if self.weather else None


class ForecastEntry(BaseModel):
    """One 3-hour slot of data/2.5/forecast."""

    dt: int
    weather: list[Condition]
    main: MainReadings
    visibility: int
    wind: Wind | None = None
    clouds: Clouds | None = None
    rain: Precipitation | None = None
    pop: float  # probability of precipitation, 0..1
    snow: Precipitation | None = None
    sys: Sys
    dt_txt: str

    @property
    def sample(self) -> ForecastSample:
        """Reduce the slot to the reading the day timeline needs."""
        return ForecastSample(
            time=self.dt,
            min_temp=self.main.temp,
            max_temp=self.main.temp,
            icon=self.weather[0].icon if self.weather else None,
            sunrise=self.sys.sunrise,
        )


class City(BaseModel):
    id: int
    name: str
    coord: Coord
    country: str
    population: int
    timezone: int
    sunrise: int
    sunset: int


class ForecastResponse(BaseModel):
    """Response of data/2.5/forecast (5 days, 3-hour steps)."""

    model_config = ConfigDict(populate_by_name=True)

    cod: str
    message: int
    cnt: int
    entries: list[ForecastEntry] = Field(alias="list")
    city: City

    def _next_day(self, now: datetime | None) -> list[ForecastEntry]:
        limit = (now or datetime.now().astimezone()).timestamp() + timedelta(days=1).total_seconds()
        return [entry for entry in self.entries if entry.dt <= limit]

    def max_temp(self, now: datetime | None = None) -> float | None:
        """Highest forecast maximum within the next 24 hours."""
        temps = [entry.main.temp_max for entry in self._next_day(now)]
        return max(temps) if temps else None

    def min_temp(self, now: datetime | None = None) -> float | None:
        """Lowest forecast minimum within the next 24 hours."""
        temps = [entry.main.temp_min for entry in self._next_day(now)]
        return min(temps) if temps else None

    def five_day_forecast(self, tz: tzinfo | None = None) -> list[DayBucket]:
        """Forecast slots grouped into padded, normalized day buckets."""
        from ..services.bucketizer import bucket_by_day

        samples = sorted((entry.sample for entry in self.entries), key=lambda s: s.time)
        return bucket_by_day(samples, tz)


class Gas(str, Enum):
    """Pollution components reported by the air pollution API (μg/m3)."""

    CO = "co"
    NO = "no"
    NO2 = "no2"
    O3 = "o3"
    SO2 = "so2"
    PM2_5 = "pm2_5"
    PM10 = "pm10"
    NH3 = "nh3"

    @property
    def label(self) -> str:
        return self.value.upper().replace("_", ".")


AQI_LABELS = {
    1: "Good",
    2: "Fair",
    3: "Moderate",
    4: "Poor",
    5: "Very Poor",
}


class AirQuality(BaseModel):
    """Air Quality Index, 1 (good) to 5 (very poor)."""

    aqi: int

    @property
    def label(self) -> str:
        return AQI_LABELS.get(self.aqi, f"Quality: {self.aqi} (the lower, the better)")


class PollutionEntry(BaseModel):
    dt: int
    main: AirQuality
    components: dict[Gas, float]

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.dt, timezone.utc)


class PollutionResponse(BaseModel):
    """Response of data/2.5/air_pollution."""

    model_config = ConfigDict(populate_by_name=True)

    coord: Coord
    entries: list[PollutionEntry] = Field(alias="list")

    @property
    def current(self) -> PollutionEntry | None:
        return self.entries[0] if self.entries else None


class PollutionForecastResponse(PollutionResponse):
    """Response of data/2.5/air_pollution/forecast."""

    @property
    def series(self) -> list[tuple[datetime, AirQuality]]:
        return [(entry.time, entry.main) for entry in self.entries]


class GeoLocation(BaseModel):
    """One match of the direct geocoding API."""

    name: str
    local_names: dict[str, str] | None = None
    lat: float
    lon: float
    country: str
    state: str | None = None

    @property
    def coord(self) -> Coord:
        return Coord(lat=self.lat, lon=self.lon)

    @property
    def display_name(self) -> str:
        parts = [self.name]
        if self.state and self.state != self.name:
            parts.append(self.state)
        parts.append(self.country)
        return ", ".join(parts)
