"""Times expressions: comma-separated literal dates and ``start/end/period`` ranges."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from chronogrid.duration import DurationParser
from chronogrid.interval import parse_and_explode_time_range, try_parse_date
from chronogrid.util import to_millis

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimesReport:
    """Resolved points of a times expression plus the entries that were dropped."""

    points: list[int] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def read_times_expression(
    times: str | Iterable[int] | None,
    overwrite_period: str | None = None,
    *,
    parser: DurationParser | None = None,
) -> TimesReport:
    """Resolve a times expression, keeping track of unparseable literal entries.

    Entries with three ``/`` parts are expanded as ranges; anything else is a
    literal date. Literal entries that are not dates are skipped rather than
    failing the whole expression. Errors inside range entries propagate.

    Points are sorted ascending; duplicates across entries are kept (use
    :func:`chronogrid.sort_and_deduplicate` to drop them).
    """
    if not times:
        return TimesReport()
    if not isinstance(times, str):
        return TimesReport(points=sorted(times))

    points: list[int] = []
    skipped: list[str] = []
    for entry in times.split(","):
        if len(entry.split("/")) == 3:
            points.extend(
                parse_and_explode_time_range(entry, overwrite_period, parser=parser)
            )
            continue
        moment = try_parse_date(entry)
        if moment is None:
            logger.debug("skipping unparseable time entry %r", entry)
            skipped.append(entry)
        else:
            points.append(to_millis(moment))

    points.sort()
    return TimesReport(points=points, skipped=skipped)


def parse_times_expression(
    times: str | Iterable[int] | None,
    overwrite_period: str | None = None,
    *,
    parser: DurationParser | None = None,
) -> list[int]:
    """Return the sorted epoch-ms points of a times expression.

    Example:
        >>> parse_times_expression("2020-01-01,2020-01-02/2020-01-04/P1D")
        # Jan 1, then Jan 2, 3 and 4 from the range
    """
    return read_times_expression(times, overwrite_period, parser=parser).points
