"""Utility constants and helpers for chronogrid.

Time unit constants represent durations in milliseconds, the unit of every
time point produced by the package.
"""

from datetime import datetime, timedelta, timezone

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60_000
HOUR = 3_600_000
DAY = 86_400_000
WEEK = 604_800_000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def to_millis(dt: datetime) -> int:
    """Return epoch milliseconds for a timezone-aware datetime."""
    return (dt - EPOCH) // _ONE_MS


def from_millis(value: int) -> datetime:
    """Return the UTC datetime for epoch milliseconds."""
    return EPOCH + timedelta(milliseconds=value)
