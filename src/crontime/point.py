"""Parser for a single comma-separated token of a cron field.

Grammar:
    - * (every value from 0 to the field maximum)
    - N (single value)
    - N-M (inclusive range)
    - any of the above followed by /STEP

Examples:
    parse_point("*/15", 59)   -> [0, 15, 30, 45]
    parse_point("2-8/2", 59)  -> [2, 4, 6, 8]
    parse_point("1/2", 59)    -> [1]
"""

import re

from crontime.exceptions import (
    ERROR_INPUT_MUST_BE_A_NUMBER,
    ERROR_INPUT_MUST_BE_A_STRING,
    InputTypeError,
    InversedRangeError,
    RangeError,
    StructureError,
)

_ONE = re.compile(r"^[0-9]+\Z")
_INTERVAL = re.compile(r"^([0-9]+)-([0-9]+)\Z")


def parse_point(token: str, max_value: int) -> list[int]:
    """Parse one token into the ascending list of values it denotes.

    Args:
        token: Token string (e.g., "*", "5", "1-10", "*/2", "10-20/5")
        max_value: Largest value allowed in the field; an integral float
            such as 59.0 is accepted

    Returns:
        Ascending list of integers within [0, max_value]

    Raises:
        InputTypeError: If token is not a string or max_value is not a whole number
        StructureError: If the token does not match the grammar
        InversedRangeError: If a range starts after it ends
        RangeError: If a value exceeds max_value
    """
    if not isinstance(token, str):
        raise InputTypeError(ERROR_INPUT_MUST_BE_A_STRING, token)

    if isinstance(max_value, float) and max_value.is_integer():
        max_value = int(max_value)

    if isinstance(max_value, bool) or not isinstance(max_value, int):
        raise InputTypeError(ERROR_INPUT_MUST_BE_A_NUMBER, max_value)

    conf = token.split("/")
    if len(conf) == 1:
        start, end = _parse_interval(conf[0], max_value)
        return list(range(start, end + 1))

    if len(conf) == 2:
        start, end = _parse_interval(conf[0], max_value)
        step = _parse_step(conf[1])
        return list(range(start, end + 1, step))

    raise StructureError(token)


def _parse_interval(base: str, max_value: int) -> tuple[int, int]:
    if base == "*":
        return 0, max_value

    if _ONE.match(base):
        value = int(base)
        if value > max_value:
            raise RangeError(base, max_value)
        return value, value

    match = _INTERVAL.match(base)
    if match:
        start, end = int(match.group(1)), int(match.group(2))
        if start > end:
            raise InversedRangeError(base)
        if end > max_value:
            raise RangeError(base, max_value)
        return start, end

    raise StructureError(base)


def _parse_step(value: str) -> int:
    if not _ONE.match(value) or int(value) < 1:
        raise StructureError(value)
    return int(value)
