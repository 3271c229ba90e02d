"""Calendar-aware shifting of datetimes by a :class:`Duration`.

Shifts never mutate their argument: a new datetime is returned, and callers
stepping repeatedly keep the returned value. Fields are applied one at a time
in the order years, months, weeks, days, hours, minutes, seconds, skipping
zero fields. Years and months follow ``relativedelta`` rules, so the day of
month is clamped to the end of a shorter month (Jan 31 + P1M = Feb 28).
"""

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone, tzinfo

from dateutil import tz
from dateutil.relativedelta import relativedelta

from chronogrid.duration import Duration, DurationParser, coerce_duration


def local_zone() -> tzinfo:
    """Return the host's local time zone used by ``utc=False`` shifts."""
    return tz.tzlocal()


def _require_aware(date: datetime) -> None:
    if not isinstance(date, datetime):
        raise TypeError(
            f"Expected a datetime, got {type(date).__name__!r}: {date!r}"
        )
    if date.tzinfo is None:
        raise TypeError(
            f"Duration arithmetic requires a timezone-aware datetime.\n"
            f"Got naive datetime: {date!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)"
        )


def _steps(duration: Duration) -> list[relativedelta | timedelta]:
    """Expand a duration into its non-zero single-unit steps, in field order."""
    steps: list[relativedelta | timedelta] = []
    if duration.years:
        steps.append(relativedelta(years=duration.years))
    if duration.months:
        steps.append(relativedelta(months=duration.months))
    if duration.weeks:
        steps.append(timedelta(days=duration.weeks * 7))
    if duration.days:
        steps.append(timedelta(days=duration.days))
    if duration.hours:
        steps.append(timedelta(hours=duration.hours))
    if duration.minutes:
        steps.append(timedelta(minutes=duration.minutes))
    if duration.seconds:
        steps.append(timedelta(seconds=duration.seconds))
    return steps


def add_duration(
    date: datetime,
    duration: "Duration | str | Sequence[int]",
    utc: bool = True,
    *,
    parser: DurationParser | None = None,
) -> datetime:
    """Return ``date`` moved forward by ``duration``.

    Args:
        date: Timezone-aware datetime; it is left untouched.
        duration: A Duration, ISO-8601 text, or positional field sequence.
        utc: Step in UTC (default). When False, step in local wall-clock
            time; a result falling in a DST gap is moved forward past it.
        parser: Grammar used when ``duration`` is text.

    Returns:
        The shifted instant, expressed in ``date``'s own tzinfo.
    """
    _require_aware(date)
    steps = _steps(coerce_duration(duration, parser))
    if not steps:
        return date

    zone = timezone.utc if utc else local_zone()
    current = date.astimezone(zone)
    for step in steps:
        # aware + delta is wall-clock arithmetic in ``zone``
        current = tz.resolve_imaginary(current + step)
    return current.astimezone(date.tzinfo)


def subtract_duration(
    date: datetime,
    duration: "Duration | str | Sequence[int]",
    utc: bool = True,
    *,
    parser: DurationParser | None = None,
) -> datetime:
    """Return ``date`` moved backward by ``duration`` (every field negated)."""
    return add_duration(date, -coerce_duration(duration, parser), utc)
