"""Canonical instant: nanosecond count tagged with a time scale.

The count is taken on the UTC reading, from 1900-01-01T00:00:00. An epoch
tagged with a GNSS scale therefore reads ``utc_offset_seconds`` later on its
own clock than the stored count suggests.
"""

import re
import time
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from rinex_epoch.models.timescale import TimeScale

__all__ = ["Epoch", "GregorianComponents"]

NANOS_PER_SECOND = 1_000_000_000

J1900 = datetime(1900, 1, 1)

# Unix epoch (1970-01-01) on the J1900 nanosecond count
UNIX_EPOCH_NANOS = 2_208_988_800 * NANOS_PER_SECOND

GregorianComponents = tuple[int, int, int, int, int, int, int]

GREGORIAN_STR_PATTERN = re.compile(
    r"^\s*(-?\d+)-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?\s+([A-Za-z]+)\s*$"
)


def _civil_to_nanos(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    nanos: int,
) -> int:
    if not 0 <= nanos < NANOS_PER_SECOND:
        raise ValueError(f"nanoseconds must be in [0, {NANOS_PER_SECOND}), got {nanos}")
    civil = datetime(year, month, day, hour, minute, second)
    whole_seconds = (civil - J1900) // timedelta(seconds=1)
    return whole_seconds * NANOS_PER_SECOND + nanos


def _nanos_to_civil(count: int) -> GregorianComponents:
    whole_seconds, nanos = divmod(count, NANOS_PER_SECOND)
    civil = J1900 + timedelta(seconds=whole_seconds)
    return (
        civil.year,
        civil.month,
        civil.day,
        civil.hour,
        civil.minute,
        civil.second,
        nanos,
    )


@dataclass(frozen=True)
class Epoch:
    """Point in time with nanosecond resolution and a time scale tag.

    Attributes
    ----------
    nanos : int
        Nanoseconds since 1900-01-01T00:00:00 on the UTC reading.
    time_scale : TimeScale
        Scale the epoch is expressed in.
    """

    nanos: int
    time_scale: TimeScale = TimeScale.UTC

    @classmethod
    def from_gregorian_utc(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanos: int = 0,
    ) -> "Epoch":
        """Build a UTC epoch from civil components.

        Raises
        ------
        ValueError
            If the components do not form a valid civil date.
        """
        return cls(_civil_to_nanos(year, month, day, hour, minute, second, nanos))

    @classmethod
    def from_gregorian_utc_at_midnight(cls, year: int, month: int, day: int) -> "Epoch":
        return cls.from_gregorian_utc(year, month, day)

    @classmethod
    def from_gregorian(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nanos: int,
        time_scale: TimeScale,
    ) -> "Epoch":
        """Build an epoch from civil components read on ``time_scale``'s clock.

        Parameters
        ----------
        year, month, day, hour, minute, second : int
            Civil components in the target scale.
        nanos : int
            Sub-second part in nanoseconds.
        time_scale : TimeScale
            Scale the components are read in.

        Returns
        -------
        Epoch
            Epoch tagged with ``time_scale``.

        Raises
        ------
        ValueError
            If the components are not a valid civil date, or the date
            precedes the scale's epoch.
        """
        scale_epoch = time_scale.scale_epoch
        if scale_epoch is not None and datetime(year, month, day) < scale_epoch:
            raise ValueError(
                f"{year:04d}-{month:02d}-{day:02d} precedes {time_scale} epoch "
                f"{scale_epoch.date().isoformat()}"
            )
        count = _civil_to_nanos(year, month, day, hour, minute, second, nanos)
        return cls(count - time_scale.utc_offset_seconds * NANOS_PER_SECOND, time_scale)

    @classmethod
    def from_gregorian_str(cls, text: str) -> "Epoch":
        """Parse a calendar string such as ``2020-06-25T00:00:00.000000000 GPST``.

        The fraction is optional and right-padded to nine digits.

        Raises
        ------
        ValueError
            If the string is malformed, names an unknown scale, or the date
            is refused by the scale.
        """
        match = GREGORIAN_STR_PATTERN.match(text)
        if match is None:
            raise ValueError(f'invalid calendar string "{text}"')

        year, month, day, hour, minute, second = (int(g) for g in match.group(1, 2, 3, 4, 5, 6))
        fraction = match.group(7) or ""
        nanos = int(fraction.ljust(9, "0")) if fraction else 0
        time_scale = TimeScale.from_str(match.group(8))

        return cls.from_gregorian(year, month, day, hour, minute, second, nanos, time_scale)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Epoch":
        """Build a UTC epoch from a datetime (naive values are taken as UTC)."""
        if value.tzinfo is not None:
            value = value.astimezone(UTC).replace(tzinfo=None)
        return cls.from_gregorian_utc(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond * 1_000,
        )

    @classmethod
    def now(cls) -> "Epoch":
        """Read the system clock.

        Raises
        ------
        OSError
            If the clock cannot be read.
        """
        return cls(UNIX_EPOCH_NANOS + time.time_ns())

    def to_gregorian_utc(self) -> GregorianComponents:
        """Decompose on the UTC reading into (y, m, d, hh, mm, ss, ns)."""
        return _nanos_to_civil(self.nanos)

    def to_gregorian(self) -> GregorianComponents:
        """Decompose on the epoch's own scale into (y, m, d, hh, mm, ss, ns)."""
        return _nanos_to_civil(self.nanos + self.time_scale.utc_offset_seconds * NANOS_PER_SECOND)

    def to_iso_string(self) -> str:
        """Render as ``YYYY-MM-DDThh:mm:ss.nnnnnnnnn SCALE``."""
        y, m, d, hh, mm, ss, ns = self.to_gregorian()
        return f"{y:04d}-{m:02d}-{d:02d}T{hh:02d}:{mm:02d}:{ss:02d}.{ns:09d} {self.time_scale}"

    def __add__(self, other: timedelta) -> "Epoch":
        if not isinstance(other, timedelta):
            return NotImplemented
        whole_seconds = other.days * 86_400 + other.seconds
        delta = whole_seconds * NANOS_PER_SECOND + other.microseconds * 1_000
        return Epoch(self.nanos + delta, self.time_scale)

    def __str__(self) -> str:
        return self.to_iso_string()
