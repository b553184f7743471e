"""Tests for configuration."""

import pytest
from datetime import datetime, timezone

from crontime import CronTimeConfig
from crontime.exceptions import DateConversionError, ZoneError


class TestCronTimeConfig:
    """Test config validation."""

    def test_defaults(self):
        """Test default configuration."""
        config = CronTimeConfig()
        assert config.start is None
        assert config.end is None
        assert config.zone is None
        assert config.is_bounded is False

    def test_bounds_converted(self):
        """Test start and end are converted to instants."""
        config = CronTimeConfig(start="2000-01-01T00:00:00Z", end=0)
        assert config.start == datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert config.end == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert config.is_bounded is True

    def test_invalid_start(self):
        """Test unconvertible start."""
        with pytest.raises(DateConversionError):
            CronTimeConfig(start="soon")

    def test_invalid_zone(self):
        """Test invalid zone."""
        with pytest.raises(ZoneError):
            CronTimeConfig(zone="+99")


class TestCronTimeConfigFromEnv:
    """Test loading config from the environment."""

    def test_empty_environment(self, clean_env):
        """Test defaults when nothing is set."""
        assert CronTimeConfig.from_env() == CronTimeConfig()

    def test_reads_variables(self, clean_env):
        """Test CRONTIME_* variables."""
        clean_env.setenv("CRONTIME_START", "2000-01-01T00:00:00Z")
        clean_env.setenv("CRONTIME_END", "2000-12-31T23:59:59Z")
        clean_env.setenv("CRONTIME_ZONE", "+0400")

        config = CronTimeConfig.from_env()
        assert config.start == datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert config.end == datetime(2000, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
        assert config.zone == "+0400"

    def test_blank_is_unset(self, clean_env):
        """Test blank variables are ignored."""
        clean_env.setenv("CRONTIME_ZONE", "  ")
        assert CronTimeConfig.from_env().zone is None

    def test_custom_prefix(self, clean_env):
        """Test a custom prefix."""
        clean_env.setenv("JOBS_END", "1970-01-02T00:00:00Z")
        assert CronTimeConfig.from_env(prefix="JOBS_").end == datetime(1970, 1, 2, tzinfo=timezone.utc)
