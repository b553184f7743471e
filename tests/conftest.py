"""Pytest configuration and fixtures for crontime tests."""

import pytest

from crontime import CronTime


@pytest.fixture
def first_day_1970():
    """Seconds 0, 1 and 3 past midnight on every day of 1970."""
    return CronTime("0-1,3 0 0 * * *", end="1970-12-31 23:59:59.000Z")


@pytest.fixture
def five_seconds_2000():
    """Five consecutive seconds at midnight, bounded to 2000-01-01."""
    return CronTime(
        "0-4 0 0 * * *",
        start="2000-01-01 00:00:00.000Z",
        end="2000-01-01 23:59:59.000Z",
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove CRONTIME_* variables from the environment."""
    for key in ("CRONTIME_START", "CRONTIME_END", "CRONTIME_ZONE"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
