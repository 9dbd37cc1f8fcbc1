"""Time scales and their fixed relation to UTC.

Each scale is described by data only: an offset from UTC, the identifier
used in calendar strings and an optional epoch before which the scale is
undefined. Adding a scale means adding table entries.
"""

from datetime import datetime
from enum import StrEnum

__all__ = ["TimeScale"]


class TimeScale(StrEnum):
    """Supported time scales, valued by their calendar-string identifier."""

    UTC = "UTC"
    TAI = "TAI"
    GPST = "GPST"
    GST = "GST"
    BDT = "BDT"

    @classmethod
    def from_str(cls, value: str) -> "TimeScale":
        """Resolve a time scale from its identifier or RINEX header alias.

        Parameters
        ----------
        value : str
            Identifier such as ``"GPST"`` or header alias such as ``"GPS"``.

        Returns
        -------
        TimeScale
            Matching time scale.

        Raises
        ------
        ValueError
            If the value names no known time scale.
        """
        key = value.strip().upper()
        return cls(_ALIASES.get(key, key))

    @property
    def utc_offset_seconds(self) -> int:
        """Seconds to add to a UTC reading to obtain this scale's reading."""
        return _UTC_OFFSET_SECONDS[self]

    @property
    def scale_epoch(self) -> datetime | None:
        """Civil start of the scale, read on its own clock."""
        return _SCALE_EPOCHS.get(self)


# Leap seconds accumulated since each scale's epoch (TAI counts all of them).
_UTC_OFFSET_SECONDS: dict[TimeScale, int] = {
    TimeScale.UTC: 0,
    TimeScale.TAI: 37,
    TimeScale.GPST: 18,
    TimeScale.GST: 18,
    TimeScale.BDT: 4,
}

_SCALE_EPOCHS: dict[TimeScale, datetime] = {
    TimeScale.GPST: datetime(1980, 1, 6),
    TimeScale.GST: datetime(1999, 8, 22),
    TimeScale.BDT: datetime(2006, 1, 1),
}

_ALIASES: dict[str, str] = {
    "GPS": "GPST",
    "GAL": "GST",
    "BDS": "BDT",
}
