"""Custom exceptions for crontime."""

ERROR_INPUT_MUST_BE_A_STRING = "Input must be a string"
ERROR_INPUT_MUST_BE_A_NUMBER = "Input must be a number"
ERROR_INPUT_MUST_HAVE_6_SECTIONS = "Input must have 6 sections separated by spaces"
ERROR_STRUCTURE = "Invalid structure"
ERROR_OUT_OF_RANGE = "Out of range"
ERROR_INVERSED_VALUES = "Inversed values"
ERROR_INVALID_ZONE = "Zone must be a signed offset like +0400"
MUST_BE_CONVERTIBLE = "Value must be convertible into a date"


class CronTimeError(Exception):
    pass


class InputTypeError(CronTimeError, TypeError):
    """Raised when an argument has the wrong basic type."""

    def __init__(self, message: str, value=None):
        self.value = value
        super().__init__(f"{message}. Got: {value!r}")


class StructureError(CronTimeError, ValueError):
    """Raised when a pattern or token does not match the cron grammar."""

    def __init__(self, token: str, message: str = ERROR_STRUCTURE):
        self.token = token
        super().__init__(f"{message}: {token!r}")


class RangeError(CronTimeError, ValueError):
    """Raised when a value or range end exceeds the field maximum."""

    def __init__(self, token: str, max_value: int):
        self.token = token
        self.max_value = max_value
        super().__init__(f"{ERROR_OUT_OF_RANGE}: {token!r} (max {max_value})")


class InversedRangeError(CronTimeError, ValueError):
    """Raised when a range starts after it ends."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"{ERROR_INVERSED_VALUES}: {token!r}")


class DateConversionError(CronTimeError, ValueError):
    """Raised when a start/end value cannot be converted to an instant."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"{MUST_BE_CONVERTIBLE}. Got: {value!r}")


class ZoneError(CronTimeError, ValueError):
    """Raised when a zone string is not a fixed signed offset."""

    def __init__(self, zone):
        self.zone = zone
        super().__init__(f"{ERROR_INVALID_ZONE}. Got: {zone!r}")
