from .arithmetic import add_duration, subtract_duration
from .duration import (
    Duration,
    DurationParser,
    IsoDurationParser,
    coerce_duration,
    parse_duration,
)
from .errors import (
    ChronogridError,
    DurationParseError,
    InvalidDurationError,
    MalformedIntervalError,
)
from .grid import ClockWindow, explode_time_range
from .interval import (
    parse_and_explode_time_range,
    parse_date,
    parse_time_interval,
    try_parse_date,
)
from .sequences import (
    dedupe,
    intersect,
    intersect_arrays,
    intersection,
    sort_and_deduplicate,
    union,
    union_all,
    union_arrays,
)
from .times import TimesReport, parse_times_expression, read_times_expression
from .util import from_millis, to_millis

__all__ = [
    "Duration",
    "DurationParser",
    "IsoDurationParser",
    "parse_duration",
    "coerce_duration",
    "add_duration",
    "subtract_duration",
    "ClockWindow",
    "explode_time_range",
    "parse_date",
    "try_parse_date",
    "parse_time_interval",
    "parse_and_explode_time_range",
    "TimesReport",
    "parse_times_expression",
    "read_times_expression",
    "intersect_arrays",
    "union_arrays",
    "sort_and_deduplicate",
    "intersect",
    "union",
    "dedupe",
    "intersection",
    "union_all",
    "to_millis",
    "from_millis",
    "ChronogridError",
    "DurationParseError",
    "MalformedIntervalError",
    "InvalidDurationError",
]
