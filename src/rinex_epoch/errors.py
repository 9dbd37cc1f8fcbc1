"""Error taxonomy for epoch parsing.

Every failure carries the offending text so that malformed files can be
diagnosed line by line. Formatting never raises: its inputs are already
valid epochs.
"""

__all__ = [
    "EpochParsingError",
    "EpochFormatError",
    "FieldParsingError",
    "YearFieldError",
    "MonthFieldError",
    "DayFieldError",
    "HoursFieldError",
    "MinutesFieldError",
    "SecondsFieldError",
    "NanosecondsFieldError",
    "EpochFlagError",
    "EpochConstructionError",
]


class EpochParsingError(Exception):
    """Base class for all epoch parsing failures."""

    def __init__(self, message: str, text: str | None = None) -> None:
        """Initialize parsing error.

        Parameters
        ----------
        message : str
            Error message.
        text : str | None, optional
            Offending input text or token.
        """
        super().__init__(message)
        self.text = text


class EpochFormatError(EpochParsingError):
    """Input does not resemble a timestamp at all."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f'expecting "yyyy mm dd hh mm ss.ssss xx" format, got "{text.strip()}"',
            text=text,
        )


class FieldParsingError(EpochParsingError):
    """A single column of the timestamp failed integer parsing.

    Attributes
    ----------
    field : str
        Name of the failing field.
    """

    field = "field"

    def __init__(self, token: str) -> None:
        super().__init__(f'failed to parse {self.field} from "{token}"', text=token)


class YearFieldError(FieldParsingError):
    field = "years"


class MonthFieldError(FieldParsingError):
    field = "months"


class DayFieldError(FieldParsingError):
    field = "days"


class HoursFieldError(FieldParsingError):
    field = "hours"


class MinutesFieldError(FieldParsingError):
    field = "minutes"


class SecondsFieldError(FieldParsingError):
    field = "seconds"


class NanosecondsFieldError(FieldParsingError):
    field = "nanoseconds"


class EpochFlagError(EpochParsingError):
    """Trailing status token is not a known epoch flag."""

    def __init__(self, token: str) -> None:
        super().__init__(f'unknown epoch flag "{token}"', text=token)


class EpochConstructionError(EpochParsingError):
    """The target time scale refused the reconstructed calendar date."""
