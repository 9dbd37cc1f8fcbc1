"""RINEX epoch field codec.

Main entry points:
- parse_epoch: Parse an epoch field into (Epoch, EpochFlag)
- format_epoch: Format an epoch for a record kind and revision
"""

from rinex_epoch.codec.formatter import format_epoch, two_digit_year
from rinex_epoch.codec.parser import parse_epoch, parse_utc

__all__ = [
    "format_epoch",
    "parse_epoch",
    "parse_utc",
    "two_digit_year",
]
