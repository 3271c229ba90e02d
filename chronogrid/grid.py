"""Discrete time grids between two bounds at a fixed duration step."""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Literal

from chronogrid.arithmetic import add_duration
from chronogrid.duration import Duration, DurationParser, coerce_duration
from chronogrid.errors import InvalidDurationError
from chronogrid.util import from_millis, to_millis

logger = logging.getLogger(__name__)

_CLOCK = re.compile(r"(\d{1,2}):(\d{1,2})")


@dataclass(frozen=True, kw_only=True)
class ClockWindow:
    """Daily time-of-day range, inclusive at both boundary minutes (UTC)."""

    min_hour: int
    min_minute: int
    max_hour: int
    max_minute: int

    def __post_init__(self) -> None:
        for name in ("min_hour", "max_hour"):
            if not 0 <= getattr(self, name) <= 23:
                raise ValueError(f"{name} must be 0-23, got {getattr(self, name)}")
        for name in ("min_minute", "max_minute"):
            if not 0 <= getattr(self, name) <= 59:
                raise ValueError(f"{name} must be 0-59, got {getattr(self, name)}")

    @classmethod
    def parse(cls, text: str) -> "ClockWindow":
        """Read a ``"HH:MM/HH:MM"`` window, e.g. ``"09:00/17:30"``."""
        parts = text.split("/")
        matches = [_CLOCK.fullmatch(part.strip()) for part in parts]
        if len(parts) != 2 or not all(matches):
            raise ValueError(
                f"Invalid clock window {text!r}.\n"
                f"Expected 'HH:MM/HH:MM', e.g. '09:00/17:00'"
            )
        (min_hour, min_minute), (max_hour, max_minute) = [
            (int(m.group(1)), int(m.group(2))) for m in matches if m
        ]
        return cls(
            min_hour=min_hour,
            min_minute=min_minute,
            max_hour=max_hour,
            max_minute=max_minute,
        )

    def contains(self, moment: datetime) -> bool:
        """True if ``moment``'s UTC hour and minute fall inside the window."""
        utc = moment.astimezone(timezone.utc)
        hour, minute = utc.hour, utc.minute
        return (
            self.min_hour <= hour <= self.max_hour
            and (hour != self.min_hour or minute >= self.min_minute)
            and (hour != self.max_hour or minute <= self.max_minute)
        )

    def __str__(self) -> str:
        return (
            f"{self.min_hour:02d}:{self.min_minute:02d}/"
            f"{self.max_hour:02d}:{self.max_minute:02d}"
        )


def coerce_bound(bound: Any, edge: Literal["start", "end"]) -> datetime:
    """Convert a grid bound to an aware datetime.

    Accepts:
    - int: epoch milliseconds
    - datetime: must be timezone-aware
    - date: start/end of day in UTC

    Raises:
        TypeError: If bound is an unsupported type or naive datetime
    """
    if isinstance(bound, bool):
        raise TypeError(f"Grid {edge} bound must not be a bool, got {bound!r}")
    if isinstance(bound, int):
        return from_millis(bound)
    if isinstance(bound, datetime):
        if bound.tzinfo is None:
            raise TypeError(
                f"Grid {edge} bound must be a timezone-aware datetime.\n"
                f"Got naive datetime: {bound!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return bound
    if isinstance(bound, date):
        if edge == "start":
            return datetime.combine(bound, time.min, tzinfo=timezone.utc)
        return datetime.combine(bound, time.max, tzinfo=timezone.utc)
    raise TypeError(
        f"Grid {edge} bound must be int, datetime, or date.\n"
        f"Got {type(bound).__name__!r}: {bound!r}\n"
        f"Examples:\n"
        f"  1577836800000                                  # epoch milliseconds\n"
        f"  datetime(2020, 1, 1, tzinfo=timezone.utc)      # aware datetime\n"
        f"  date(2020, 1, 1)                               # whole day, UTC"
    )


def explode_time_range(
    start: datetime | date | int,
    end: datetime | date | int,
    period: "Duration | str | Sequence[int]",
    window: ClockWindow | str | None = None,
    *,
    parser: DurationParser | None = None,
) -> list[int]:
    """Return epoch-ms points from ``start`` stepping by ``period`` up to ``end``.

    Every point before ``end`` is kept when it falls inside ``window`` (or
    when no window is given). ``end`` itself is always the last point, even
    if the step does not land on it, and even if it falls outside the window.

    Example:
        >>> explode_time_range(
        ...     datetime(2020, 1, 1, tzinfo=timezone.utc),
        ...     datetime(2020, 1, 4, tzinfo=timezone.utc),
        ...     "P1D",
        ... )  # four midnights, Jan 1 to Jan 4

    Raises:
        InvalidDurationError: If ``period`` is zero or does not move time
            forward, which would otherwise never reach ``end``.
    """
    duration = coerce_duration(period, parser)
    if duration.is_zero():
        raise InvalidDurationError(
            f"Grid step must be a non-zero duration, got {duration}.\n"
            f"Example: explode_time_range(start, end, 'PT1H')"
        )
    if isinstance(window, str):
        window = ClockWindow.parse(window)

    current = coerce_bound(start, "start")
    end_dt = coerce_bound(end, "end")

    result: list[int] = []
    while current < end_dt:
        if window is None or window.contains(current):
            result.append(to_millis(current))
        following = add_duration(current, duration)
        if following <= current:
            raise InvalidDurationError(
                f"Grid step {duration} does not advance from {current.isoformat()}; "
                f"use a positive duration"
            )
        current = following
    if current >= end_dt:
        result.append(to_millis(end_dt))

    logger.debug(
        "exploded %s..%s by %s (window=%s): %d points",
        start,
        end,
        duration,
        window,
        len(result),
    )
    return result
