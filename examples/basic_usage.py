"""Basic usage example for crontime.

This example shows:
1. Pulling matches one at a time with next()
2. Pulling batches with next_portion() and count_portion()
3. Evaluating a pattern in a fixed zone offset
4. Rewinding to replay from the start
"""

import logging
from datetime import timezone

from crontime import CronTime, CronTimeConfig


def main():
    """Main example demonstrating crontime usage."""
    logging.basicConfig(level=logging.DEBUG)

    print("crontime Basic Usage Example")
    print("=" * 60)

    # Weekdays at 09:00:00 during January 2024
    cron = CronTime(
        "0 0 9 * * 1-5",
        start="2024-01-01T00:00:00Z",
        end="2024-01-31T23:59:59Z",
    )

    print(f"\nPattern: {cron}")
    print(f"  First match: {cron.next()}")
    print(f"  Next three:  {[str(m) for m in cron.next_portion(3)]}")
    print(f"  Remaining:   {cron.count_portion(100)}")

    # Same pattern, evaluated at UTC+04:00
    config = CronTimeConfig(start="2024-01-01T00:00:00Z", end="2024-01-07T23:59:59Z", zone="+0400")
    zoned = CronTime.from_config("0 0 9 * * 1-5", config)

    print(f"\nPattern: {zoned}")
    for match in zoned:
        print(f"  {match.isoformat()}  (UTC {match.astimezone(timezone.utc).isoformat()})")

    # Replay from the start
    zoned.rewind()
    print(f"\nAfter rewind: {zoned.next()}")

    # Aliases
    print(f"\n@hourly expands to: {CronTime('@hourly').pattern}")


if __name__ == "__main__":
    main()
