"""ISO-8601 durations as calendar field tuples.

A duration is kept as seven positional calendar fields rather than a fixed
number of seconds, since months and years have no fixed length. The grammar
that reads duration text is pluggable: anything implementing
:class:`DurationParser` can be passed where a ``parser`` is accepted.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import astuple, dataclass

from typing_extensions import override

from chronogrid.errors import DurationParseError

FIELD_NAMES = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")


@dataclass(frozen=True)
class Duration:
    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_fields(cls, values: Sequence[int]) -> "Duration":
        """Build a duration from up to seven positional fields.

        Missing trailing fields are zero, so ``[0, 1]`` is one month.
        """
        if len(values) > len(FIELD_NAMES):
            raise ValueError(
                f"A duration has at most {len(FIELD_NAMES)} fields "
                f"({', '.join(FIELD_NAMES)}), got {len(values)}: {list(values)!r}"
            )
        return cls(*(int(v) for v in values))

    @property
    def fields(self) -> tuple[int, int, int, int, int, int, int]:
        return astuple(self)

    def is_zero(self) -> bool:
        return not any(self.fields)

    def negate(self) -> "Duration":
        return Duration(*(-v for v in self.fields))

    def __neg__(self) -> "Duration":
        return self.negate()

    def __str__(self) -> str:
        values = self.fields
        date_part = "".join(f"{v}{u}" for v, u in zip(values[:4], "YMWD") if v)
        time_part = "".join(f"{v}{u}" for v, u in zip(values[4:], "HMS") if v)
        if not date_part and not time_part:
            return "PT0S"
        return f"P{date_part}" + (f"T{time_part}" if time_part else "")


class DurationParser(ABC):
    """Grammar capability turning duration text into a :class:`Duration`."""

    @abstractmethod
    def parse(self, text: str) -> Duration:
        """Return the duration for ``text``.

        Raises:
            DurationParseError: If ``text`` does not follow the grammar.
        """
        pass


_ISO_DURATION = re.compile(
    r"P(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<weeks>\d+)W)?(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?"
)


class IsoDurationParser(DurationParser):
    """Reference grammar for ``PnYnMnWnDTnHnMnS`` period text."""

    @override
    def parse(self, text: str) -> Duration:
        if not isinstance(text, str):
            raise DurationParseError(repr(text), "expected a string")
        match = _ISO_DURATION.fullmatch(text.strip())
        if match is None:
            raise DurationParseError(text)
        groups = match.groupdict()
        if all(value is None for value in groups.values()):
            raise DurationParseError(text, "no duration components")
        if "T" in text and all(groups[name] is None for name in FIELD_NAMES[4:]):
            raise DurationParseError(text, "'T' must be followed by a time component")
        return Duration(**{name: int(value or 0) for name, value in groups.items()})


_default_parser = IsoDurationParser()


def parse_duration(text: str, parser: DurationParser | None = None) -> Duration:
    """Parse ISO-8601 duration text, e.g. ``"P1DT12H"``.

    Errors from the grammar propagate to the caller untouched.
    """
    return (parser or _default_parser).parse(text)


def coerce_duration(
    value: "Duration | str | Sequence[int]", parser: DurationParser | None = None
) -> Duration:
    """Accept a Duration, ISO-8601 text, or a positional field sequence."""
    if isinstance(value, Duration):
        return value
    if isinstance(value, str):
        return parse_duration(value, parser)
    if isinstance(value, Sequence):
        return Duration.from_fields(value)
    raise TypeError(
        f"Duration must be a Duration, ISO-8601 text, or a field sequence.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  'P1D'              # ISO-8601 text\n"
        f"  [0, 0, 0, 1]       # years, months, weeks, days, ...\n"
        f"  Duration(hours=6)"
    )
