"""Epoch field parser.

Fields are whitespace separated and position significant::

    yy|yyyy mm dd hh mm ss[.fffffff] [flag]

Fixed-width columns collapse to single tokens once split on whitespace, so
the same parser serves every revision and record kind.
"""

import re

from rinex_epoch.errors import (
    DayFieldError,
    EpochConstructionError,
    EpochFormatError,
    FieldParsingError,
    HoursFieldError,
    MinutesFieldError,
    MonthFieldError,
    NanosecondsFieldError,
    SecondsFieldError,
    YearFieldError,
)
from rinex_epoch.models import Epoch, EpochFlag, TimeScale

__all__ = ["parse_epoch", "parse_utc"]

MANDATORY_FIELDS = 6

# Seconds tokens shorter than this carry a single 100 ms digit (NAV records)
NAV_SECONDS_WIDTH = 7

NAV_TICK_NANOS = 100_000_000
OBS_TICK_NANOS = 100

SIGNED_RE = re.compile(r"^[+-]?\d+$")
UNSIGNED_RE = re.compile(r"^\+?\d+$")


def _parse_signed(token: str, error: type[FieldParsingError]) -> int:
    if not SIGNED_RE.match(token):
        raise error(token)
    value = int(token)
    if not -(2**31) <= value < 2**31:
        raise error(token)
    return value


def _parse_unsigned(
    token: str,
    error: type[FieldParsingError],
    bits: int = 8,
    source: str | None = None,
) -> int:
    if not UNSIGNED_RE.match(token):
        raise error(token if source is None else source)
    value = int(token)
    if value >= 2**bits:
        raise error(token if source is None else source)
    return value


def _expand_year(year: int) -> int:
    """Map legacy two-digit years onto 1980-2079."""
    if year < 100:
        return year + 2000 if year < 80 else year + 1900
    return year


def _parse_seconds(token: str) -> tuple[int, int]:
    """Parse the seconds column into (whole seconds, nanoseconds).

    The fraction unit depends on the token width: short tokens are NAV
    records (100 ms ticks), long ones OBS records (100 ns ticks).
    """
    dot = token.find(".")
    if dot < 0:
        return _parse_unsigned(token.strip(), SecondsFieldError, source=token), 0

    is_nav = len(token.strip()) < NAV_SECONDS_WIDTH

    seconds = _parse_unsigned(token[:dot].strip(), SecondsFieldError, source=token)
    ticks = _parse_unsigned(token[dot + 1 :].strip(), NanosecondsFieldError, 32, source=token)

    nanos = ticks * (NAV_TICK_NANOS if is_nav else OBS_TICK_NANOS)
    if nanos >= 1_000_000_000:
        raise NanosecondsFieldError(token)

    return seconds, nanos


def parse_epoch(text: str, time_scale: TimeScale) -> tuple[Epoch, EpochFlag]:
    """Parse an epoch field, interpreted in the given time scale.

    Parameters
    ----------
    text : str
        Raw epoch field, e.g. ``" 21 12 21  0  0 30.0000000  1"``.
    time_scale : TimeScale
        Scale the written date is read in.

    Returns
    -------
    tuple[Epoch, EpochFlag]
        Parsed epoch and its flag (``EpochFlag.OK`` when absent).

    Raises
    ------
    EpochFormatError
        If the text does not hold the six mandatory fields.
    FieldParsingError
        If one column fails integer parsing (subclass names the column).
    EpochFlagError
        If the flag column holds an unknown code.
    EpochConstructionError
        If the civil calendar or the time scale refuses the date.
    """
    tokens = text.split()
    if len(tokens) < MANDATORY_FIELDS:
        raise EpochFormatError(text)

    year = _expand_year(_parse_signed(tokens[0], YearFieldError))
    month = _parse_unsigned(tokens[1], MonthFieldError)
    day = _parse_unsigned(tokens[2], DayFieldError)
    hour = _parse_unsigned(tokens[3], HoursFieldError)
    minute = _parse_unsigned(tokens[4], MinutesFieldError)
    second, nanos = _parse_seconds(tokens[5])

    flag = EpochFlag.from_str(tokens[6]) if len(tokens) > 6 else EpochFlag.default()

    if year == 0:
        raise EpochFormatError(text)

    try:
        if time_scale is TimeScale.UTC:
            epoch = Epoch.from_gregorian_utc(year, month, day, hour, minute, second, nanos)
        else:
            epoch = Epoch.from_gregorian_str(
                f"{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"
                f".{nanos:09d} {time_scale}"
            )
    except ValueError as e:
        raise EpochConstructionError(f"failed to build {time_scale} epoch: {e}", text=text) from e

    return epoch, flag


def parse_utc(text: str) -> tuple[Epoch, EpochFlag]:
    """Parse an epoch field as a UTC date."""
    return parse_epoch(text, TimeScale.UTC)
