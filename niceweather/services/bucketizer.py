"""Group 3-hour forecast samples into calendar-day buckets.

The forecast panel draws one row per day with a fixed-width icon timeline
and a temperature range bar. This module turns the flat, time-ordered sample
list into those rows:

* samples are folded into one bucket per calendar day, widening the day's
  min/max and appending to its icon timeline;
* the first and last day are padded with placeholder slots so a partial day
  still lines up with full days;
* each day gets clip fractions locating its range inside the overall range.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, tzinfo

from ..models.forecast import ClipFractions, DayBucket, ForecastSample, IconSlot

logger = logging.getLogger(__name__)

# 24h / 3h forecast steps
TIMELINE_SLOTS = 8


def _new_bucket(sample: ForecastSample, when: datetime) -> DayBucket:
    return DayBucket(
        day=when.date(),
        first_time=when,
        min_temp=sample.min_temp,
        max_temp=sample.max_temp,
        icons=[IconSlot(time=when, icon=sample.icon)],
    )


def _padding(count: int) -> list[IconSlot]:
    return [IconSlot() for _ in range(count)]


def pad_timelines(buckets: list[DayBucket], slots: int = TIMELINE_SLOTS) -> None:
    """Pad the first day at the front and the last day at the back.

    Interior days are left alone. A day that already has ``slots`` or more
    entries is never padded or truncated.
    """
    if not buckets:
        return

    first = buckets[0]
    pad_count = slots - len(first.icons)
    if pad_count > 0:
        first.icons = _padding(pad_count) + first.icons

    last = buckets[-1]
    pad_count = slots - len(last.icons)
    if pad_count > 0:
        last.icons = last.icons + _padding(pad_count)


def apply_clip_fractions(buckets: list[DayBucket]) -> None:
    """Set each bucket's clip fractions against the overall temperature range.

    A flat dataset (overall min equal to max) gets (0, 0) everywhere.
    """
    if not buckets:
        return

    global_min = min(bucket.min_temp for bucket in buckets)
    global_max = max(bucket.max_temp for bucket in buckets)
    span = global_max - global_min

    if span <= 0:
        logger.debug(f"Flat forecast range {global_min:.1f}..{global_max:.1f}, clips left neutral")
        for bucket in buckets:
            bucket.clip = ClipFractions()
        return

    for bucket in buckets:
        bucket.clip = ClipFractions(
            leading=(bucket.min_temp - global_min) / span,
            trailing=(global_max - bucket.max_temp) / span,
        )


def bucket_by_day(samples: Iterable[ForecastSample], tz: tzinfo | None = None) -> list[DayBucket]:
    """Fold time-ordered samples into padded, normalized day buckets.

    Args:
        samples: Forecast samples sorted ascending by time. They are not
            re-sorted here.
        tz: Zone whose calendar defines a day. None uses the local zone.

    Returns:
        One bucket per distinct calendar day, in chronological order.
    """
    buckets: list[DayBucket] = []
    current_day: date | None = None

    for sample in samples:
        when = sample.local_time(tz)
        day = when.date()

        if day != current_day:
            buckets.append(_new_bucket(sample, when))
            current_day = day
        else:
            bucket = buckets[-1]
            bucket.min_temp = min(bucket.min_temp, sample.min_temp)
            bucket.max_temp = max(bucket.max_temp, sample.max_temp)
            bucket.icons.append(IconSlot(time=when, icon=sample.icon))

        # Later sunrises within the same day overwrite earlier ones.
        if sample.sunrise is not None:
            buckets[-1].sunrise = datetime.fromtimestamp(sample.sunrise, tz)

    if not buckets:
        return buckets

    pad_timelines(buckets)
    apply_clip_fractions(buckets)
    return buckets
