"""Forecast timeline models: raw 3-hour samples and per-day buckets."""

from datetime import date, datetime, tzinfo

from pydantic import BaseModel, ConfigDict, Field


class ForecastSample(BaseModel):
    """A single 3-hour forecast reading."""

    model_config = ConfigDict(frozen=True)

    time: int  # seconds since epoch, UTC
    min_temp: float
    max_temp: float
    icon: str | None = None
    sunrise: int | None = None

    def local_time(self, tz: tzinfo | None = None) -> datetime:
        """Sample time in the given zone (local zone when None)."""
        return datetime.fromtimestamp(self.time, tz)


class IconSlot(BaseModel):
    """One position on a day's icon timeline; both fields absent for padding."""

    time: datetime | None = None
    icon: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.time is None and self.icon is None


class ClipFractions(BaseModel):
    """Normalized gaps between a day's range and the dataset-wide range."""

    leading: float = 0.0
    trailing: float = 0.0


class DayBucket(BaseModel):
    """All forecast samples that fall on one calendar day."""

    day: date
    first_time: datetime
    min_temp: float
    max_temp: float
    icons: list[IconSlot] = Field(default_factory=list)
    sunrise: datetime | None = None
    clip: ClipFractions = Field(default_factory=ClipFractions)

    @property
    def is_today(self) -> bool:
        return self.day == datetime.now(self.first_time.tzinfo).date()

    @property
    def real_icons(self) -> list[IconSlot]:
        """Timeline entries that came from samples, without padding."""
        return [slot for slot in self.icons if not slot.is_placeholder]
