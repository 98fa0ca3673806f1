"""Tests for date/time resolution used when sorting."""

from datetime import datetime, timezone

from task_tracker.utils.datetime import ensure_aware, max_utc, resolve_datetime, to_iso_string


class TestResolveDatetime:
    """Test best-effort date/time parsing."""

    def test_iso_date(self):
        result = resolve_datetime("2020-08-26")
        assert result == datetime(2020, 8, 26, tzinfo=timezone.utc)

    def test_iso_date_and_time(self):
        result = resolve_datetime("2020-08-26 18:30")
        assert (result.hour, result.minute) == (18, 30)

    def test_day_first_date(self):
        result = resolve_datetime("2/12/2019 1800")
        assert (result.year, result.month, result.day, result.hour) == (2019, 12, 2, 18)

    def test_natural_language(self):
        source = datetime(2024, 5, 1, 9, 0)
        result = resolve_datetime("tomorrow", source_time=source)
        assert result is not None
        assert result.date() == datetime(2024, 5, 2).date()

    def test_unparseable(self):
        assert resolve_datetime("banana") is None

    def test_empty(self):
        assert resolve_datetime(None) is None
        assert resolve_datetime("   ") is None


class TestHelpers:
    """Test the timezone helpers."""

    def test_ensure_aware(self):
        assert ensure_aware(None) is None
        assert ensure_aware(datetime(2020, 1, 1)).tzinfo == timezone.utc

    def test_max_utc_sorts_last(self):
        assert resolve_datetime("2099-12-31") < max_utc()

    def test_iso_string(self):
        assert to_iso_string(datetime(2020, 1, 1)) == "2020-01-01T00:00:00+00:00"


class TestOutOfRangeDates:
    """Dates parsedatetime pushes past year 9999 resolve to nothing."""

    def test_eod_far_future(self):
        assert resolve_datetime("eod Jan 9999") is None

    def test_next_month_far_future(self):
        assert resolve_datetime("next Feb 9999") is None

    def test_unsortable_date_does_not_raise(self):
        result = resolve_datetime("31 Dec 9999 Feb")
        assert result is None or result.year <= 9999
