"""Bidirectional codec for the epoch field of RINEX GNSS data files.

This package provides:
- Data models (rinex_epoch.models) — Epoch, EpochFlag, RecordKind, TimeScale
- Codec (rinex_epoch.codec) — epoch field parser and formatter
- Errors (rinex_epoch.errors) — one error per failing field
- Engine (rinex_epoch.engine) — batch conversion between revisions
- Audit (rinex_epoch.audit) — JSONL event logging
- CLI (rinex_epoch.cli) — command-line interface
- Public API (rinex_epoch.api) — high-level convenience functions
"""

__version__ = "0.14.1"
__license__ = "MIT"

from rinex_epoch.api import (
    ConversionError,
    convert_file,
    format_epoch,
    now,
    parse_epoch,
    parse_utc,
    reformat_epoch,
)
from rinex_epoch.errors import EpochParsingError
from rinex_epoch.models import Epoch, EpochFlag, RecordKind, TimeScale

__all__ = [
    "__version__",
    "__license__",
    "Epoch",
    "EpochFlag",
    "RecordKind",
    "TimeScale",
    "parse_epoch",
    "parse_utc",
    "format_epoch",
    "reformat_epoch",
    "convert_file",
    "now",
    "EpochParsingError",
    "ConversionError",
]
