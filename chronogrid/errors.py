class ChronogridError(ValueError):
    """Base class for errors raised while reading time expressions."""


class DurationParseError(ChronogridError):
    def __init__(self, text: str, reason: str = "not an ISO-8601 duration"):
        self.text: str = text
        super().__init__(
            f"Invalid ISO-8601 duration {text!r}: {reason}.\n"
            f"Expected the form PnYnMnWnDTnHnMnS, e.g. 'P1D', 'PT30M', 'P1Y2M'"
        )


class MalformedIntervalError(ChronogridError):
    def __init__(self, text: str, reason: str):
        self.text: str = text
        super().__init__(
            f"Incorrect ISO-8601 time interval {text!r}: {reason}.\n"
            f"Accepted forms: 'start/end', 'duration/end', 'start/duration'\n"
            f"Example: '2020-01-01T00:00Z/P2D'"
        )


class InvalidDurationError(ChronogridError):
    """Raised when a grid step would not move time forward."""
