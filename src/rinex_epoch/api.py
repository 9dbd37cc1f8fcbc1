"""Public API for the RINEX epoch codec.

This module provides the main public API for rinex-epoch, enabling:
- Parsing epoch fields into (Epoch, EpochFlag) pairs
- Formatting epochs for a record kind and revision
- Rewriting epoch fields from one revision to another
- Converting whole files of epoch fields
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rinex_epoch.codec import format_epoch, parse_epoch, parse_utc
from rinex_epoch.models import RecordKind, TimeScale
from rinex_epoch.utils import now

if TYPE_CHECKING:
    from rinex_epoch.engine.config import ConversionResult

__all__ = [
    "parse_epoch",
    "parse_utc",
    "format_epoch",
    "reformat_epoch",
    "convert_file",
    "now",
    "ConversionError",
]


class ConversionError(Exception):
    """Raised when a strict conversion meets a line it cannot parse."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
    ) -> None:
        """Initialize conversion error.

        Parameters
        ----------
        message : str
            Error message.
        line : int | None, optional
            1-based line number where the error occurred.
        """
        super().__init__(message)
        self.line = line


def reformat_epoch(
    text: str,
    record_kind: RecordKind,
    revision: int,
    target_revision: int,
    time_scale: TimeScale = TimeScale.UTC,
) -> str:
    """Rewrite an epoch field for another revision.

    Parameters
    ----------
    text : str
        Epoch field as written in a ``revision`` file.
    record_kind : RecordKind
        Kind of record the field belongs to.
    revision : int
        Revision ``text`` is written in. Parsing does not depend on it; it is
        kept for symmetry with ``target_revision``.
    target_revision : int
        Revision to write.
    time_scale : TimeScale, optional
        Scale the written date is read in, by default UTC.

    Returns
    -------
    str
        Epoch field in the ``target_revision`` layout, flag preserved.

    Raises
    ------
    EpochParsingError
        If ``text`` cannot be parsed.

    Examples
    --------
        >>> reformat_epoch(" 21 12 21  0  0 30.0000000  1", RecordKind.OBSERVATION_DATA, 2, 3)
        '2021 12 21 00 00 30.0000000  1'
    """
    epoch, flag = parse_epoch(text, time_scale)
    return format_epoch(epoch, flag, record_kind, target_revision)


def convert_file(
    input_path: str | Path,
    output_path: str | Path,
    *,
    record_kind: RecordKind | str = RecordKind.OBSERVATION_DATA,
    revision: int = 3,
    target_revision: int | None = None,
    time_scale: TimeScale | str = TimeScale.UTC,
    strict: bool = False,
    log_path: str | Path | None = None,
) -> ConversionResult:
    """Convert a file holding one epoch field per line.

    Parameters
    ----------
    input_path : str | Path
        File to read.
    output_path : str | Path
        File to write, one reformatted epoch per line.
    record_kind : RecordKind | str, optional
        Record kind of the epochs, by default observation data.
    revision : int, optional
        Revision of the input, by default 3.
    target_revision : int | None, optional
        Revision to write. If None, same as ``revision``.
    time_scale : TimeScale | str, optional
        Scale the written dates are read in, by default UTC.
    strict : bool, optional
        If True, fail on the first unparsable line, by default False.
    log_path : str | Path | None, optional
        JSONL audit log to append events to.

    Returns
    -------
    ConversionResult
        Counters, errors and the written output path.

    Raises
    ------
    FileNotFoundError
        If the input file does not exist.
    ConversionError
        If the conversion fails.
    """
    from rinex_epoch.engine import ConversionConfig, run_conversion

    input_path_obj = Path(input_path)

    if not input_path_obj.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    config = ConversionConfig(
        record_kind=record_kind,
        revision=revision,
        target_revision=target_revision,
        time_scale=time_scale,
        strict=strict,
    )

    result = run_conversion(
        input_path_obj,
        Path(output_path),
        config=config,
        log_path=Path(log_path) if log_path is not None else None,
    )

    if not result.success:
        raise ConversionError(f"Conversion failed: {result.error_message}")

    return result
