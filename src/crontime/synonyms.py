"""Literal aliases for common cron patterns."""

from types import MappingProxyType

SYNONYMS = MappingProxyType({
    "@yearly": "0 0 0 1 1 *",
    "@annually": "0 0 0 1 1 *",
    "@monthly": "0 0 0 1 * *",
    "@weekly": "0 0 0 * * 0",
    "@daily": "0 0 0 * * *",
    "@hourly": "0 0 * * * *",
})


def expand_synonyms(pattern: str) -> str:
    """Return the canonical 6-field pattern for a known alias, else the input."""
    return SYNONYMS.get(pattern.strip(), pattern)
