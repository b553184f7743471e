import os
from dataclasses import dataclass
from typing import Any

from crontime.instant import parse_zone, to_instant


@dataclass
class CronTimeConfig:
    """Search bounds and zone shared by CronTime instances.

    Args:
        start: Instant to start searching from (None means the epoch)
        end: Last instant a match may fall on (None means unbounded)
        zone: Fixed offset such as "+0400" (None means UTC)
    """
    start: Any = None
    end: Any = None
    zone: str | None = None

    def __post_init__(self):
        """Normalize bounds and validate the zone."""
        if self.start is not None:
            self.start = to_instant(self.start)

        if self.end is not None:
            self.end = to_instant(self.end)

        parse_zone(self.zone)

    @property
    def is_bounded(self) -> bool:
        return self.end is not None

    @classmethod
    def from_env(cls, prefix: str = "CRONTIME_") -> "CronTimeConfig":
        """Load configuration from environment variables.

        Reads {prefix}START, {prefix}END and {prefix}ZONE; unset or blank
        variables fall back to the defaults.
        """

        def get_env(key: str) -> str | None:
            value = os.getenv(f"{prefix}{key.upper()}")
            if value is None or not value.strip():
                return None
            return value.strip()

        return cls(start=get_env("start"), end=get_env("end"), zone=get_env("zone"))
