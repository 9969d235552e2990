"""Tests for the shared date/time helpers."""

from datetime import date, datetime, timedelta, timezone

from spacedatahub.core.timeutils import default_date_window, hours_until, parse_timestamp


class TestDefaultDateWindow:

    def test_ten_day_window(self):
        now = datetime(2024, 5, 10, 15, 30, tzinfo=timezone.utc)
        assert default_date_window(now) == (date(2024, 4, 30), date(2024, 5, 10))

    def test_custom_lookback(self):
        now = datetime(2024, 3, 2, 1, 0, tzinfo=timezone.utc)
        assert default_date_window(now, lookback_days=3) == (date(2024, 2, 28), date(2024, 3, 2))

    def test_truncates_in_utc(self):
        # 23:30 at UTC-5 is already the next day in UTC
        local = datetime(2024, 5, 10, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert default_date_window(local)[1] == date(2024, 5, 11)

    def test_defaults_to_current_time(self):
        start, end = default_date_window()
        assert end - start == timedelta(days=10)


class TestParseTimestamp:

    def test_donki_minute_format(self):
        assert parse_timestamp("2024-05-10T12:00Z") == datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)

    def test_with_seconds_and_offset(self):
        parsed = parse_timestamp("2024-05-10T14:00:30+02:00")
        assert parsed == datetime(2024, 5, 10, 12, 0, 30, tzinfo=timezone.utc)

    def test_naive_is_utc(self):
        assert parse_timestamp("2024-05-10T12:00").tzinfo == timezone.utc

    def test_invalid_values(self):
        assert parse_timestamp(None) is None
        assert parse_timestamp("") is None
        assert parse_timestamp("not a date") is None
        assert parse_timestamp(12345) is None

    def test_out_of_range_after_utc_shift(self):
        assert parse_timestamp("9999-12-31T23:00-05:00") is None
        assert parse_timestamp("0001-01-01T01:00+05:00") is None


class TestHoursUntil:

    def test_whole_hours(self):
        now = datetime(2024, 5, 10, tzinfo=timezone.utc)
        assert hours_until(now + timedelta(hours=36), now) == 36

    def test_rounds_half_up(self):
        now = datetime(2024, 5, 10, tzinfo=timezone.utc)
        assert hours_until(now + timedelta(hours=62, minutes=30), now) == 63
        assert hours_until(now + timedelta(hours=2, minutes=30), now) == 3

    def test_rounds_to_nearest(self):
        now = datetime(2024, 5, 10, tzinfo=timezone.utc)
        assert hours_until(now + timedelta(seconds=150_000), now) == 42
        assert hours_until(now + timedelta(hours=5, minutes=29), now) == 5
