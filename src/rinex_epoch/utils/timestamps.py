"""Clock utilities for rinex-epoch.

This module provides the wall-clock reads used across the codebase.
"""

from datetime import UTC, datetime

from rinex_epoch.models import Epoch

__all__ = ["DEFAULT_EPOCH", "get_iso_timestamp", "now"]

DEFAULT_EPOCH = Epoch.from_gregorian_utc_at_midnight(2000, 1, 1)


def get_iso_timestamp() -> str:
    """Get current UTC timestamp in ISO8601 format with microseconds.

    Returns
    -------
    str
        ISO8601 timestamp with microseconds (e.g., "2026-02-03T12:34:56.123456Z").
    """
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def now() -> Epoch:
    """Get the current UTC epoch, never failing.

    Returns
    -------
    Epoch
        Current epoch, or ``DEFAULT_EPOCH`` (2000-01-01T00:00:00 UTC) when
        the system clock cannot be read.

    Notes
    -----
    Callers needing a default epoch rely on this never raising; the sentinel
    is returned instead of propagating the clock error.
    """
    try:
        return Epoch.now()
    except (OSError, OverflowError, ValueError):
        return DEFAULT_EPOCH
