"""Allowed-value sets for the six cron fields."""

from enum import IntEnum

from crontime.exceptions import ERROR_INPUT_MUST_BE_A_STRING, InputTypeError
from crontime.point import parse_point


class Field(IntEnum):
    """Cron fields in pattern order."""
    SECOND = 0
    MINUTE = 1
    HOUR = 2
    DAY_OF_MONTH = 3
    MONTH = 4
    DAY_OF_WEEK = 5

    @property
    def max_value(self) -> int:
        return _MAX_VALUES[self]


_MAX_VALUES = {
    Field.SECOND: 59,
    Field.MINUTE: 59,
    Field.HOUR: 23,
    Field.DAY_OF_MONTH: 31,
    Field.MONTH: 12,
    Field.DAY_OF_WEEK: 7,  # 0 and 7 are both Sunday
}


class Section:
    """Sorted set of values allowed by one cron field, with a rewindable cursor.

    Month values are shifted to 0-11 and a day-of-week 7 is folded into 0,
    so membership tests line up with zero-based months and Sunday=0 weekdays.

    Args:
        string: Field string, possibly several comma-separated tokens
        field: Which cron field the string belongs to

    Example:
        hours = Section("9-17/4,22", Field.HOUR)
        hours.values  # (9, 13, 17, 22)
        hours.has(13)  # True
    """

    def __init__(self, string: str, field: Field):
        if not isinstance(string, str):
            raise InputTypeError(ERROR_INPUT_MUST_BE_A_STRING, string)

        self.field = Field(field)

        uniq = set()
        for token in string.split(","):
            uniq.update(parse_point(token, self.field.max_value))

        if self.field is Field.MONTH:
            uniq = {value - 1 if 1 <= value <= 12 else value for value in uniq}
        elif self.field is Field.DAY_OF_WEEK and 7 in uniq:
            uniq.discard(7)
            uniq.add(0)

        self._values = tuple(sorted(uniq))
        self._members = frozenset(self._values)
        self.rewind()

    @property
    def values(self) -> tuple[int, ...]:
        return self._values

    @property
    def current(self) -> int | None:
        """Value under the cursor, or None once the cursor is exhausted."""
        if self._position < len(self._values):
            return self._values[self._position]
        return None

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._values)

    def has(self, value: int) -> bool:
        return value in self._members

    def advance(self) -> None:
        self._position += 1

    def rewind(self) -> None:
        self._position = 0

    def __iter__(self):
        """Yield values from the cursor onward, moving the cursor as it goes."""
        while not self.exhausted:
            yield self._values[self._position]
            self._position += 1

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, value: int) -> bool:
        return self.has(value)

    def __repr__(self) -> str:
        return f"Section({self.field.name}, {list(self._values)})"
