"""Tests for grouping forecast samples into day buckets."""

from datetime import date, datetime, timedelta, timezone

import pytest

from niceweather.models.forecast import DayBucket, ForecastSample, IconSlot
from niceweather.services.bucketizer import (
    TIMELINE_SLOTS,
    apply_clip_fractions,
    bucket_by_day,
    pad_timelines,
)

UTC = timezone.utc
DAY_START = int(datetime(2024, 4, 22, tzinfo=UTC).timestamp())
HOUR = 3600


def samples_at(hours: list[int], temps: list[float], icon: str = "01d") -> list[ForecastSample]:
    """Samples at the given hours after DAY_START with equal min and max."""
    return [
        ForecastSample(time=DAY_START + h * HOUR, min_temp=t, max_temp=t, icon=icon)
        for h, t in zip(hours, temps)
    ]


class TestBucketing:
    """Tests for folding samples into calendar days."""

    def test_empty_input(self):
        """Test that no samples give no buckets."""
        assert bucket_by_day([], UTC) == []

    def test_single_full_day(self):
        """Test eight samples on one day form one unpadded bucket."""
        temps = [10, 12, 15, 18, 20, 18, 14, 11]
        buckets = bucket_by_day(samples_at(list(range(0, 24, 3)), temps), UTC)

        assert len(buckets) == 1
        bucket = buckets[0]
        assert bucket.day == date(2024, 4, 22)
        assert bucket.min_temp == 10
        assert bucket.max_temp == 20
        assert len(bucket.icons) == 8
        assert all(not slot.is_placeholder for slot in bucket.icons)

    def test_two_partial_days(self):
        """Test a late first day and an early last day are padded on opposite sides."""
        samples = samples_at([15, 18, 21], [10, 12, 8]) + samples_at(
            [24, 27, 30, 33, 36], [14, 16, 19, 17, 13]
        )
        first, second = bucket_by_day(samples, UTC)

        assert (first.min_temp, first.max_temp) == (8, 12)
        assert (second.min_temp, second.max_temp) == (13, 19)
        assert len(first.icons) == 8
        assert len(second.icons) == 8
        assert all(slot.is_placeholder for slot in first.icons[:5])
        assert all(not slot.is_placeholder for slot in first.icons[5:])
        assert all(not slot.is_placeholder for slot in second.icons[:5])
        assert all(slot.is_placeholder for slot in second.icons[5:])

    def test_single_sample(self):
        """Test one sample is padded at the front by the first-day pass only."""
        buckets = bucket_by_day(samples_at([12], [20]), UTC)

        assert len(buckets) == 1
        icons = buckets[0].icons
        assert len(icons) == 8
        assert all(slot.is_placeholder for slot in icons[:7])
        assert icons[7].time == datetime(2024, 4, 22, 12, tzinfo=UTC)
        assert icons[7].icon == "01d"

    def test_bucket_count_matches_distinct_days(self):
        """Test one bucket is produced per calendar day present."""
        hours = [21, 24, 27, 48, 51, 75, 96]
        buckets = bucket_by_day(samples_at(hours, [1, 2, 3, 4, 5, 6, 7]), UTC)

        assert [b.day for b in buckets] == [
            date(2024, 4, 22),
            date(2024, 4, 23),
            date(2024, 4, 24),
            date(2024, 4, 25),
            date(2024, 4, 26),
        ]

    def test_range_is_union_of_samples(self):
        """Test bucket min/max use each sample's own min and max."""
        samples = [
            ForecastSample(time=DAY_START + 3 * HOUR, min_temp=5, max_temp=9),
            ForecastSample(time=DAY_START + 6 * HOUR, min_temp=7, max_temp=15),
            ForecastSample(time=DAY_START + 9 * HOUR, min_temp=3, max_temp=8),
        ]
        bucket = bucket_by_day(samples, UTC)[0]
        assert bucket.min_temp == 3
        assert bucket.max_temp == 15

    def test_icon_order_preserved(self):
        """Test real timeline entries keep input order."""
        samples = [
            ForecastSample(time=DAY_START + h * HOUR, min_temp=1, max_temp=1, icon=icon)
            for h, icon in [(0, "01n"), (3, "02n"), (6, "10d"), (9, "11d")]
        ]
        bucket = bucket_by_day(samples, UTC)[0]
        real = bucket.real_icons
        assert [slot.icon for slot in real] == ["01n", "02n", "10d", "11d"]
        assert [slot.time for slot in real] == sorted(slot.time for slot in real)

    def test_missing_icon_kept_as_real_slot(self):
        """Test a sample without an icon still occupies its timeline slot."""
        samples = [ForecastSample(time=DAY_START + h * HOUR, min_temp=1, max_temp=2) for h in range(0, 24, 3)]
        bucket = bucket_by_day(samples, UTC)[0]
        assert len(bucket.icons) == 8
        assert all(slot.icon is None and slot.time is not None for slot in bucket.icons)

    def test_no_truncation_of_long_days(self):
        """Test a day with more than eight samples keeps them all."""
        hours = list(range(0, 24, 2))
        buckets = bucket_by_day(samples_at(hours, [float(h) for h in hours]), UTC)
        assert len(buckets[0].icons) == len(hours)

    def test_interior_days_not_padded(self):
        """Test only the first and last day are padded."""
        hours = [21, 30, 33, 48]
        first, middle, last = bucket_by_day(samples_at(hours, [1, 2, 3, 4]), UTC)
        assert len(first.icons) == 8
        assert len(middle.icons) == 2
        assert len(last.icons) == 8

    def test_sunrise_last_one_wins(self):
        """Test a later sunrise in the same day overwrites an earlier one."""
        samples = [
            ForecastSample(time=DAY_START, min_temp=1, max_temp=1, sunrise=DAY_START + 100),
            ForecastSample(time=DAY_START + 3 * HOUR, min_temp=1, max_temp=1),
            ForecastSample(time=DAY_START + 6 * HOUR, min_temp=1, max_temp=1, sunrise=DAY_START + 200),
        ]
        bucket = bucket_by_day(samples, UTC)[0]
        assert bucket.sunrise == datetime.fromtimestamp(DAY_START + 200, UTC)

    def test_sunrise_absent(self):
        """Test buckets without sunrise data leave it unset."""
        bucket = bucket_by_day(samples_at([3], [1]), UTC)[0]
        assert bucket.sunrise is None

    def test_timezone_defines_day_boundaries(self):
        """Test the same instants split differently in another zone."""
        samples = samples_at([21, 24], [1, 2])
        assert len(bucket_by_day(samples, UTC)) == 2

        tokyo = timezone(timedelta(hours=9))
        buckets = bucket_by_day(samples, tokyo)
        assert len(buckets) == 1
        assert buckets[0].day == date(2024, 4, 23)

    def test_local_zone_default(self):
        """Test that omitting the zone still buckets by a calendar day."""
        buckets = bucket_by_day(samples_at([0, 3], [1, 2]))
        assert sum(len(b.real_icons) for b in buckets) == 2


class TestClipFractions:
    """Tests for the normalized range clips."""

    def test_two_partial_days(self):
        """Test clips locate each day inside the overall range."""
        samples = samples_at([15, 18, 21], [10, 12, 8]) + samples_at(
            [24, 27, 30, 33, 36], [14, 16, 19, 17, 13]
        )
        first, second = bucket_by_day(samples, UTC)

        assert first.clip.leading == pytest.approx(0.0)
        assert first.clip.trailing == pytest.approx(7 / 11)
        assert second.clip.leading == pytest.approx(5 / 11)
        assert second.clip.trailing == pytest.approx(0.0)

    def test_clips_within_unit_interval(self):
        """Test clip fractions stay in [0, 1]."""
        hours = list(range(0, 120, 3))
        temps = [10 + (h % 24) / 2 - h / 20 for h in hours]
        for bucket in bucket_by_day(samples_at(hours, temps), UTC):
            assert 0.0 <= bucket.clip.leading <= 1.0
            assert 0.0 <= bucket.clip.trailing <= 1.0

    def test_flat_range_fails_closed(self):
        """Test an all-equal dataset gets neutral clips instead of NaN."""
        buckets = bucket_by_day(samples_at([0, 3, 27], [10, 10, 10]), UTC)
        for bucket in buckets:
            assert (bucket.clip.leading, bucket.clip.trailing) == (0.0, 0.0)

    def test_apply_clip_fractions_empty(self):
        """Test no buckets is a no-op."""
        apply_clip_fractions([])


class TestPadTimelines:
    """Tests for timeline padding on its own."""

    def _bucket(self, count: int) -> DayBucket:
        when = datetime(2024, 4, 22, tzinfo=UTC)
        bucket = DayBucket(day=when.date(), first_time=when, min_temp=0, max_temp=1)
        bucket.icons = [IconSlot(time=when + timedelta(hours=3 * i), icon="01d") for i in range(count)]
        return bucket

    def test_empty_list(self):
        pad_timelines([])

    def test_full_bucket_untouched(self):
        bucket = self._bucket(TIMELINE_SLOTS)
        pad_timelines([bucket])
        assert len(bucket.icons) == TIMELINE_SLOTS
        assert not any(slot.is_placeholder for slot in bucket.icons)

    def test_custom_slot_count(self):
        first, last = self._bucket(1), self._bucket(2)
        pad_timelines([first, last], slots=4)
        assert [slot.is_placeholder for slot in first.icons] == [True, True, True, False]
        assert [slot.is_placeholder for slot in last.icons] == [False, False, True, True]
