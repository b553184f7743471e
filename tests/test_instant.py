"""Tests for instant conversion and zone parsing."""

import pytest
from datetime import date, datetime, timedelta, timezone

from crontime.instant import EPOCH, format_zone, parse_zone, to_instant
from crontime.exceptions import DateConversionError, ZoneError


class TestToInstant:
    """Test conversion of start/end values."""

    def test_aware_datetime_kept(self):
        """Test aware datetimes pass through."""
        value = datetime(2000, 1, 1, tzinfo=timezone(timedelta(hours=3)))
        assert to_instant(value) is value

    def test_naive_datetime_is_utc(self):
        """Test naive datetimes are read as UTC."""
        assert to_instant(datetime(2000, 1, 1)) == datetime(2000, 1, 1, tzinfo=timezone.utc)

    def test_date(self):
        """Test dates become midnight UTC."""
        assert to_instant(date(2000, 1, 1)) == datetime(2000, 1, 1, tzinfo=timezone.utc)

    def test_timestamp(self):
        """Test POSIX seconds."""
        assert to_instant(0) == EPOCH
        assert to_instant(86400.5) == datetime(1970, 1, 2, 0, 0, 0, 500000, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value",
        ["1970-01-01 23:59:59.000Z", "1970-01-01T23:59:59Z", "1970-01-02T01:59:59+02:00"],
    )
    def test_iso_strings(self, value):
        """Test ISO 8601 strings."""
        assert to_instant(value) == datetime(1970, 1, 1, 23, 59, 59, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["", "yesterday", float("nan"), float("inf"), True, None, [], 1e20])
    def test_unconvertible(self, value):
        """Test values that cannot be converted."""
        with pytest.raises(DateConversionError):
            to_instant(value)


class TestParseZone:
    """Test zone offset parsing."""

    @pytest.mark.parametrize("zone", [None, "", "Z", "UTC", "+00", "-0000"])
    def test_utc(self, zone):
        """Test spellings of UTC."""
        assert parse_zone(zone).utcoffset(None) == timedelta(0)

    @pytest.mark.parametrize(
        "zone,expected",
        [
            ("+04", timedelta(hours=4)),
            ("+0400", timedelta(hours=4)),
            ("-0410", -timedelta(hours=4, minutes=10)),
            ("+05:30", timedelta(hours=5, minutes=30)),
        ],
    )
    def test_offsets(self, zone, expected):
        """Test signed offsets."""
        assert parse_zone(zone).utcoffset(None) == expected

    @pytest.mark.parametrize("zone", ["0400", "+4", "+2500", "+0460", "Europe/Paris", 4])
    def test_invalid(self, zone):
        """Test strings that are not fixed offsets."""
        with pytest.raises(ZoneError):
            parse_zone(zone)


class TestFormatZone:
    """Test offset rendering."""

    @pytest.mark.parametrize("zone,expected", [("+04", "+0400"), ("-0410", "-0410"), (None, "+0000"), ("+05:30", "+0530")])
    def test_format(self, zone, expected):
        """Test ±HHMM rendering."""
        assert format_zone(parse_zone(zone)) == expected
