"""ISO-8601 time intervals: ``start/end``, ``duration/end`` and ``start/duration``."""

from datetime import datetime, timezone

from dateutil.parser import isoparse

from chronogrid.arithmetic import add_duration, subtract_duration
from chronogrid.duration import DurationParser, parse_duration
from chronogrid.errors import MalformedIntervalError
from chronogrid.grid import explode_time_range

DEFAULT_PERIOD = "P1D"


def parse_date(text: str) -> datetime:
    """Parse an ISO-8601 date or datetime string.

    Strings without an offset are read as UTC.

    Raises:
        ValueError: If ``text`` is not an ISO-8601 date.
    """
    # isoparse reads any character after the date as the time separator
    if "/" in text:
        raise ValueError(f"Not a single date: {text!r}")
    try:
        parsed = isoparse(text.strip())
    except OverflowError as exc:
        raise ValueError(f"Date out of range: {text!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def try_parse_date(text: str) -> datetime | None:
    """Like :func:`parse_date` but returns None instead of raising."""
    try:
        return parse_date(text)
    except ValueError:
        return None


def parse_time_interval(
    text: str, parser: DurationParser | None = None
) -> tuple[datetime, datetime]:
    """Resolve an interval expression into a ``(start, end)`` pair.

    The duration forms are shifted in UTC: ``P2D/2020-01-03`` starts two days
    before its end, ``2020-01-01/P2D`` ends two days after its start.

    Raises:
        MalformedIntervalError: If there are not exactly two parts, or
            neither part is a date.
        DurationParseError: If the non-date part is not a duration.
    """
    parts = text.split("/")
    if len(parts) != 2:
        raise MalformedIntervalError(
            text, f"expected 2 '/'-separated parts, got {len(parts)}"
        )
    start = try_parse_date(parts[0])
    end = try_parse_date(parts[1])

    if start is not None and end is not None:
        return start, end
    if end is not None:
        # duration/end: anchored on the parsed end
        return subtract_duration(end, parse_duration(parts[0].strip(), parser)), end
    if start is not None:
        return start, add_duration(start, parse_duration(parts[1].strip(), parser))
    raise MalformedIntervalError(text, "neither part is a date")


def parse_and_explode_time_range(
    text: str,
    overwrite_period: str | None = None,
    *,
    parser: DurationParser | None = None,
) -> list[int]:
    """Expand ``start/end[/period]`` into a grid of epoch-ms points.

    ``period`` defaults to ``P1D`` when missing or empty; ``overwrite_period``
    replaces it when given. Either bound may be a duration, as accepted by
    :func:`parse_time_interval`.
    """
    parts = text.split("/")
    if len(parts) not in (2, 3):
        raise MalformedIntervalError(
            text, f"expected 'start/end/period', got {len(parts)} parts"
        )
    start, end = parse_time_interval("/".join(parts[:2]), parser)
    period = parts[2].strip() if len(parts) == 3 and parts[2].strip() else DEFAULT_PERIOD
    if overwrite_period is not None:
        period = overwrite_period
    return explode_time_range(start, end, period, parser=parser)
