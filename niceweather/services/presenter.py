"""Formatting of fetched records into display strings."""

from datetime import date, datetime, timedelta, timezone, tzinfo

from ..models.weather import (
    AirQuality,
    CurrentWeather,
    ForecastResponse,
    PollutionForecastResponse,
    PollutionResponse,
)

# m/s to km/h
KMH_PER_MS = 3.6


def temp_string(value: float) -> str:
    """Temperature rounded to whole degrees, e.g. '21°'."""
    return f"{round(value)}°"


def hour_label(when: datetime) -> str:
    return f"{when.hour}H"


def day_label(when: datetime) -> str:
    return when.strftime("%a")


def dms_string(value: float) -> str:
    """Degrees, minutes and seconds of an absolute coordinate value."""
    absolute = abs(value)
    degrees = int(absolute)
    remaining_minutes = (absolute - degrees) * 60
    minutes = int(remaining_minutes)
    seconds = int((remaining_minutes - minutes) * 60)
    return f"{degrees}°{minutes}'{seconds}\""


def coord_string(lat: float, lon: float) -> str:
    """Position as '21°18'25" N, 157°51'30" W'."""
    lat_string = f"{dms_string(lat)} {'N' if lat >= 0 else 'S'}"
    lon_string = f"{dms_string(lon)} {'E' if lon >= 0 else 'W'}"
    return f"{lat_string}, {lon_string}"


def local_utc_offset() -> float:
    """Seconds east of UTC for this machine's zone right now."""
    offset = datetime.now().astimezone().utcoffset()
    return offset.total_seconds() if offset else 0.0


def utc_offset_string(seconds: float) -> str:
    """Zone offset as 'UTC-10' or 'UTC+5:30'."""
    sign = "-" if seconds < 0 else "+"
    hours, minutes = divmod(int(abs(seconds)) // 60, 60)
    return f"UTC{sign}{hours}:{minutes:02d}" if minutes else f"UTC{sign}{hours}"


def geo_summary(weather: CurrentWeather, local_offset: float | None = None) -> dict[str, str]:
    """Position, sunrise/sunset and the location's offsets from UTC and this machine.

    Sunrise and sunset are given twice: as seen from this machine and in the
    location's own local time.
    """
    if local_offset is None:
        local_offset = local_utc_offset()
    here = timezone(timedelta(seconds=local_offset))
    time_offset = weather.timezone - local_offset

    data = {"location": coord_string(weather.coord.lat, weather.coord.lon)}
    if weather.sys.sunrise is not None and weather.sys.sunset is not None:
        for key, stamp in (("sunrise", weather.sys.sunrise), ("sunset", weather.sys.sunset)):
            moment = datetime.fromtimestamp(stamp, here)
            data[key] = moment.strftime("%H:%M")
            data[f"{key}_local"] = (moment + timedelta(seconds=time_offset)).strftime("%H:%M")
    data["time_offset"] = f"{'-' if time_offset < 0 else '+'}{int(abs(time_offset) // 3600)}H"
    data["utc_offset"] = utc_offset_string(weather.timezone)
    return data


def _precipitation(one_hour: float | None, three_hours: float | None, scale: float, unit: str) -> str:
    if one_hour is not None:
        return f"{one_hour * scale:.1f} {unit} in next hour"
    if three_hours is not None:
        return f"{three_hours * scale:.2f} {unit} in next 3 hours"
    return ""


def weather_summary(
    weather: CurrentWeather,
    forecast: ForecastResponse | None = None,
    now: datetime | None = None,
) -> dict[str, str]:
    """Current conditions as labelled display strings.

    The day's min/max widen the current readings with the forecast extremes
    of the next 24 hours when a forecast is available.
    """
    main = weather.main
    data = {
        "temp": temp_string(main.temp),
        "feels_like": temp_string(main.feels_like),
        "humidity": f"{main.humidity}%",
        "pressure": f"{main.pressure} hPa",
    }
    if weather.description is not None:
        data["description"] = weather.description

    if forecast is not None:
        max_temp = forecast.max_temp(now)
        min_temp = forecast.min_temp(now)
        if max_temp is not None and min_temp is not None:
            data["min_temp"] = temp_string(min(min_temp, main.temp_min))
            data["max_temp"] = temp_string(max(max_temp, main.temp_max))

    if weather.snow is not None:
        # mm of water to cm of snow
        data["snow"] = _precipitation(weather.snow.one_hour, weather.snow.three_hours, 10, "cm")
    if weather.rain is not None:
        data["rain"] = _precipitation(weather.rain.one_hour, weather.rain.three_hours, 1, "mm")
    if weather.clouds is not None:
        data["clouds"] = f"{weather.clouds.all}% coverage"
    if weather.wind is not None:
        data["wind"] = f"{weather.wind.speed * KMH_PER_MS:.1f} km/h, dir: {weather.wind.deg}°"
    return data


def pollution_summary(pollution: PollutionResponse) -> dict[str, object] | None:
    """Air quality label and per-gas concentrations, or None without data."""
    entry = pollution.current
    if entry is None:
        return None
    return {
        "description": f"Air Quality: {entry.main.label}",
        "components": [(gas.label, f"{value:.1f}") for gas, value in entry.components.items()],
    }


def daily_worst_aqi(
    pollution_forecast: PollutionForecastResponse, tz: tzinfo | None = None
) -> list[tuple[datetime, AirQuality]]:
    """Highest hourly AQI per calendar day of ``tz`` (local zone when None)."""
    worst: dict[date, tuple[datetime, AirQuality]] = {}
    for when, quality in pollution_forecast.series:
        when = when.astimezone(tz)
        day = when.date()
        if day not in worst or quality.aqi > worst[day][1].aqi:
            worst[day] = (when, quality)
    return [worst[day] for day in sorted(worst)]
