"""Common utility functions for rinex-epoch."""

from rinex_epoch.utils.timestamps import DEFAULT_EPOCH, get_iso_timestamp, now

__all__ = [
    "DEFAULT_EPOCH",
    "get_iso_timestamp",
    "now",
]
