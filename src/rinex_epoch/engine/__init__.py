"""Batch conversion engine.

This package converts files of epoch fields between revisions, including
configuration and result types.
"""

from rinex_epoch.engine.config import ConversionConfig, ConversionResult
from rinex_epoch.engine.runner import convert_lines, run_conversion

__all__ = [
    "ConversionConfig",
    "ConversionResult",
    "convert_lines",
    "run_conversion",
]
