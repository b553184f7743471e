"""crontime - lazy evaluation of six-field cron patterns.

Produces the chronological sequence of instants matching a cron pattern,
optionally bounded by start/end instants and shifted by a fixed zone offset.

Basic usage:
    from crontime import CronTime

    cron = CronTime("0 0 * * * *", start="2000-01-01T00:00:00Z",
                    end="2000-01-01T23:59:59Z")

    cron.next()              # 2000-01-01 00:00:00+00:00
    cron.next_portion(3)     # the next three hours
    cron.count_portion(100)  # 20, the rest of the day
    cron.rewind()            # back to the start

With a zone offset:
    cron = CronTime("0 0 5-6 * * *", zone="+0100")
    str(cron)  # '0 0 5-6 * * * | +0100'
"""

__version__ = "0.1.0"

from crontime.cron_time import CronTime
from crontime.config import CronTimeConfig
from crontime.section import Field, Section
from crontime.point import parse_point
from crontime.synonyms import SYNONYMS, expand_synonyms
from crontime.exceptions import (
    CronTimeError,
    InputTypeError,
    StructureError,
    RangeError,
    InversedRangeError,
    DateConversionError,
    ZoneError,
)

__all__ = [
    # Evaluator
    "CronTime",
    # Configuration
    "CronTimeConfig",
    # Field parsing
    "Field",
    "Section",
    "parse_point",
    "SYNONYMS",
    "expand_synonyms",
    # Exceptions
    "CronTimeError",
    "InputTypeError",
    "StructureError",
    "RangeError",
    "InversedRangeError",
    "DateConversionError",
    "ZoneError",
]
