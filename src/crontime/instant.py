"""Conversion helpers between user input and zone-aware instants.

Instants are timezone-aware ``datetime`` objects carrying a fixed
``timezone`` offset. Named zones and DST rules are not supported.
"""

import math
import re
from datetime import date, datetime, timedelta, timezone, tzinfo

from crontime.exceptions import DateConversionError, ZoneError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ZONE = re.compile(r"^([+-])(\d{2})(?::?(\d{2}))?$")


def to_instant(value) -> datetime:
    """Convert a date-like value into an aware datetime.

    Args:
        value: Aware or naive datetime (naive is read as UTC), date
            (midnight UTC), POSIX timestamp in seconds, or ISO 8601 string

    Returns:
        Timezone-aware datetime

    Raises:
        DateConversionError: If the value cannot be converted
    """
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and not math.isfinite(value):
            raise DateConversionError(value)
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise DateConversionError(value) from e

    if isinstance(value, str):
        try:
            return to_instant(datetime.fromisoformat(value.strip()))
        except ValueError as e:
            raise DateConversionError(value) from e

    raise DateConversionError(value)


def parse_zone(zone: str | None) -> tzinfo:
    """Parse a fixed offset such as "+04", "-0410" or "+05:30".

    None, "", "Z" and "UTC" all mean UTC.
    """
    if zone is None:
        return timezone.utc

    if not isinstance(zone, str):
        raise ZoneError(zone)

    text = zone.strip()
    if text in ("", "Z", "UTC"):
        return timezone.utc

    match = _ZONE.match(text)
    if not match:
        raise ZoneError(zone)

    sign, hours, minutes = match.groups()
    hours, minutes = int(hours), int(minutes or 0)
    if hours > 23 or minutes > 59:
        raise ZoneError(zone)

    offset = timedelta(hours=hours, minutes=minutes)
    return timezone(-offset if sign == "-" else offset)


def format_zone(tz: tzinfo) -> str:
    """Render a fixed offset as ±HHMM."""
    offset = tz.utcoffset(None) or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}{minutes % 60:02d}"
