"""Cron time evaluator producing successive matching instants.

Patterns have six fields:

    *  *  *  *  *  *
    ┬  ┬  ┬  ┬  ┬  ┬
    │  │  │  │  │  └── day of week (0-7, where 0 and 7 are Sunday)
    │  │  │  │  └───── month (1-12)
    │  │  │  └──────── day of month (1-31)
    │  │  └─────────── hour (0-23)
    │  └────────────── minute (0-59)
    └───────────────── second (0-59)

Examples:
    "* * * * * *"      - Every second
    "0 */5 * * * *"    - Every 5 minutes
    "0 0 9 * * 1-5"    - 9 AM on weekdays
    "@daily"           - Every day at midnight

Day of month, month and day of week must all match for a day to be
considered; day of month and day of week are not OR-ed together.
"""

import logging
from datetime import date, datetime, timedelta

from crontime.exceptions import (
    ERROR_INPUT_MUST_BE_A_NUMBER,
    ERROR_INPUT_MUST_BE_A_STRING,
    ERROR_INPUT_MUST_HAVE_6_SECTIONS,
    DateConversionError,
    InputTypeError,
    StructureError,
)
from crontime.instant import EPOCH, format_zone, parse_zone, to_instant
from crontime.section import Field, Section
from crontime.synonyms import expand_synonyms

logger = logging.getLogger("crontime")

_ONE_DAY = timedelta(days=1)


class _Search:
    """Resumable state of one forward scan over calendar days.

    The day cursor and the hour/minute/second section cursors persist
    between calls to ``step()``, so each match costs only the distance
    from the previous one.
    """

    def __init__(self, cron: "CronTime"):
        self._cron = cron
        self._day = cron._position.replace(hour=0, minute=0, second=0, microsecond=0)
        self._in_day = False
        self._calendar_done = False

    def step(self) -> datetime | None:
        """Return the next match, or None at the end bound or the calendar end.

        Hitting the end bound leaves the cursors where they are, so a
        later call re-checks against the current end and may resume.
        """
        cron = self._cron
        seconds, minutes, hours = cron._sections[:3]

        while True:
            if self._calendar_done:
                return None

            end = cron._end
            if not self._in_day:
                if end is not None and self._day > end:
                    return None
                if not cron._day_matches(self._day):
                    if not self._next_day():
                        return None
                    continue
                self._in_day = True
                hours.rewind()
                minutes.rewind()
                seconds.rewind()

            while not hours.exhausted:
                while not minutes.exhausted:
                    while not seconds.exhausted:
                        candidate = self._day.replace(
                            hour=hours.current,
                            minute=minutes.current,
                            second=seconds.current,
                        )
                        if end is not None and candidate > end:
                            return None
                        seconds.advance()
                        if candidate >= cron._position:
                            return candidate
                    seconds.rewind()
                    minutes.advance()
                minutes.rewind()
                hours.advance()
            hours.rewind()

            self._in_day = False
            if not self._next_day():
                return None

    def _next_day(self) -> bool:
        """Move to the next local day; False once the calendar runs out."""
        if self._day.date() == date.max:
            self._calendar_done = True
            return False
        self._day += _ONE_DAY
        return True


class CronTime:
    """Evaluate a cron pattern into a sequence of matching instants.

    The sequence starts at ``start`` (the epoch if unset), never exceeds
    ``end`` (unbounded if unset) and is evaluated in the fixed ``zone``
    offset (UTC if unset). Matches are computed lazily and the scan state
    is kept between calls, so successive ``next()`` calls do not rescan.

    Not safe for concurrent use; give each consumer its own instance.

    Args:
        pattern: Six-field cron pattern or an alias such as "@hourly"
        start: Instant to start searching from (datetime, date, POSIX
            seconds or ISO 8601 string)
        end: Last instant a match may fall on
        zone: Fixed offset such as "+0400" or "-04:10"

    Raises:
        InputTypeError: If pattern is not a string
        StructureError: If the pattern does not have six valid fields
        RangeError: If a field value exceeds its maximum
        InversedRangeError: If a field range starts after it ends
        DateConversionError: If start or end cannot be converted, or start
            falls outside the datetime range once shifted into the zone
        ZoneError: If zone is not a fixed signed offset

    Example:
        cron = CronTime("0-1,4 0 0 * * *", start="1970-01-01T00:00:00Z",
                        end="1970-01-01T23:59:59Z")
        cron.next()            # 1970-01-01 00:00:00+00:00
        cron.next_portion(2)   # [00:00:01, 00:00:04]
    """

    def __init__(
        self,
        pattern: str,
        start=None,
        end=None,
        zone: str | None = None,
    ):
        if not isinstance(pattern, str):
            raise InputTypeError(ERROR_INPUT_MUST_BE_A_STRING, pattern)

        self._pattern = expand_synonyms(pattern).strip()

        fields = self._pattern.split()
        if len(fields) != 6:
            raise StructureError(pattern, ERROR_INPUT_MUST_HAVE_6_SECTIONS)

        self._sections = tuple(
            Section(string, field) for field, string in zip(Field, fields)
        )

        self._start: datetime | None = None
        self._end: datetime | None = None
        if start is not None:
            self.start = start
        if end is not None:
            self.end = end
        self.zone = zone

        logger.debug("Created CronTime(%r) in zone %s", self._pattern, self._zone or "UTC")
        self.rewind()

    @classmethod
    def from_config(cls, pattern: str, config: "CronTimeConfig") -> "CronTime":
        """Create an evaluator using bounds and zone from a config object."""
        return cls(pattern, start=config.start, end=config.end, zone=config.zone)

    @property
    def pattern(self) -> str:
        """Pattern after alias expansion."""
        return self._pattern

    @property
    def start(self) -> datetime | None:
        return self._start

    @start.setter
    def start(self, value) -> None:
        """Set the search start; takes effect on the next ``rewind()``."""
        self._start = to_instant(value)

    @property
    def end(self) -> datetime | None:
        return self._end

    @end.setter
    def end(self, value) -> None:
        self._end = to_instant(value)

    @property
    def zone(self) -> str | None:
        return self._zone

    @zone.setter
    def zone(self, value: str | None) -> None:
        """Set the zone offset; it is parsed on the next ``rewind()``."""
        self._zone = value

    @property
    def position(self) -> datetime:
        """Last returned match, or the start instant before the first match."""
        return self._position

    def rewind(self) -> None:
        """Reset the position to ``start`` and drop any in-progress scan."""
        tz = parse_zone(self._zone)
        start = self._start or EPOCH
        try:
            position = start.astimezone(tz)
        except OverflowError as e:
            raise DateConversionError(start) from e

        self._tz = tz
        self._applied_zone = self._zone
        self._position = position
        self._search: _Search | None = None
        for section in self._sections:
            section.rewind()
        logger.debug("Rewound %r to %s", self._pattern, self._position.isoformat())

    def next(self) -> datetime | None:
        """Return the next matching instant, or None when the end is reached."""
        if self._end is not None and self._position > self._end:
            return None

        if self._search is None:
            self._search = _Search(self)

        match = self._search.step()
        if match is None:
            logger.debug("No more matches for %r up to %s", self._pattern, self._end)
            return None

        self._position = match
        return match

    def next_portion(self, size: int = 1) -> list[datetime]:
        """Return up to ``size`` further matches; fewer if the end is reached."""
        _check_size(size)
        result = []
        while len(result) < size:
            match = self.next()
            if match is None:
                break
            result.append(match)
        return result

    def count_portion(self, size: int = 1) -> int:
        """Count up to ``size`` further matches without keeping them."""
        _check_size(size)
        count = 0
        while count < size and self.next() is not None:
            count += 1
        return count

    def matches(self, instant) -> bool:
        """Check whether an instant satisfies every field of the pattern.

        Args:
            instant: Any value accepted for ``start``/``end``

        Returns:
            True if the instant, read in the configured zone, matches
        """
        try:
            local = to_instant(instant).astimezone(self._tz)
        except OverflowError as e:
            raise DateConversionError(instant) from e
        seconds, minutes, hours = self._sections[:3]
        return (
            self._day_matches(local)
            and hours.has(local.hour)
            and minutes.has(local.minute)
            and seconds.has(local.second)
        )

    def _day_matches(self, day: datetime) -> bool:
        days, months, weekdays = self._sections[3:]
        # Python weekday: Mon=0..Sun=6; cron weekday: Sun=0..Sat=6
        return (
            months.has(day.month - 1)
            and days.has(day.day)
            and weekdays.has((day.weekday() + 1) % 7)
        )

    def __iter__(self):
        """Yield the remaining matches from the current position."""
        while True:
            match = self.next()
            if match is None:
                return
            yield match

    def __str__(self) -> str:
        if self._applied_zone:
            return f"{self._pattern} | {format_zone(self._tz)}"
        return self._pattern

    def __repr__(self) -> str:
        if self._zone:
            return f"CronTime('{self._pattern}', zone='{self._zone}')"
        return f"CronTime('{self._pattern}')"


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InputTypeError(ERROR_INPUT_MUST_BE_A_NUMBER, size)
