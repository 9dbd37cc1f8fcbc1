"""Batch conversion of epoch fields.

Reads one epoch field per line, rewrites each one for the target revision
and reports per-line failures through the audit logger.
"""

import sys
import time
import traceback
from collections.abc import Iterable
from pathlib import Path

from rinex_epoch.api import ConversionError, reformat_epoch
from rinex_epoch.audit import AuditLogger, generate_run_id
from rinex_epoch.engine.config import ConversionConfig, ConversionResult
from rinex_epoch.errors import EpochParsingError

STAGE_CONVERT = "convert"


def convert_lines(
    lines: Iterable[str],
    config: ConversionConfig,
    logger: AuditLogger | None = None,
) -> ConversionResult:
    """Reformat epoch lines according to ``config``.

    Blank lines are skipped. Unparsable lines are left out of the output
    and reported as ``"Line N: <message>"``.

    Parameters
    ----------
    lines : Iterable[str]
        Epoch fields, one per line (trailing newlines allowed).
    config : ConversionConfig
        Conversion settings.
    logger : AuditLogger | None, optional
        Audit logger for rejected lines. If None, no logging.

    Returns
    -------
    ConversionResult
        Reformatted lines and counters.

    Raises
    ------
    ConversionError
        On the first unparsable line when ``config.strict`` is set.
    """
    target_revision = config.target_revision or config.revision
    output_lines: list[str] = []
    errors: list[str] = []
    lines_read = 0

    for line_num, raw in enumerate(lines, start=1):
        text = raw.rstrip("\r\n")
        if not text.strip():
            continue
        lines_read += 1

        try:
            output_lines.append(
                reformat_epoch(
                    text,
                    config.record_kind,
                    config.revision,
                    target_revision,
                    config.time_scale,
                )
            )
        except EpochParsingError as e:
            if logger is not None:
                logger.line_rejected(line_num, text, type(e).__name__, str(e))
            if config.strict:
                raise ConversionError(f"Line {line_num}: {e}", line=line_num) from e
            errors.append(f"Line {line_num}: {e}")

    return ConversionResult(
        success=True,
        lines_read=lines_read,
        lines_converted=len(output_lines),
        lines_rejected=len(errors),
        output_lines=output_lines,
        errors=errors,
    )


def run_conversion(
    input_path: Path | str,
    output_path: Path | str,
    config: ConversionConfig | None = None,
    log_path: Path | None = None,
) -> ConversionResult:
    """Convert a file of epoch fields and write the result.

    Parameters
    ----------
    input_path : Path | str
        File to read.
    output_path : Path | str
        File to write, one epoch field per line.
    config : ConversionConfig | None, optional
        Conversion settings. If None, uses defaults.
    log_path : Path | None, optional
        JSONL audit log. If None, no logging.

    Returns
    -------
    ConversionResult
        Conversion results; ``success`` is False when the run aborted.

    Examples
    --------
        >>> from rinex_epoch.engine import ConversionConfig, run_conversion
        >>> config = ConversionConfig(revision=2, target_revision=3)
        >>> result = run_conversion("epochs_v2.txt", "epochs_v3.txt", config=config)
        >>> print(result.lines_converted)
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    if config is None:
        config = ConversionConfig()

    logger = AuditLogger(generate_run_id(), log_path) if log_path is not None else None
    started = time.monotonic()

    try:
        if logger is not None:
            logger.run_started(command=sys.argv, parameters=config.to_dict())
            logger.set_stage(STAGE_CONVERT)

        with input_path.open("r", encoding="utf-8") as f:
            result = convert_lines(f, config, logger)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8", newline="\n") as f:
            for line in result.output_lines:
                f.write(line + "\n")
        result.output_path = str(output_path)

        if logger is not None:
            logger.set_stage(None)
            logger.run_finished(
                status="partial" if result.lines_rejected else "success",
                duration_seconds=time.monotonic() - started,
                lines_converted=result.lines_converted,
            )
        return result

    except (ConversionError, OSError, UnicodeDecodeError) as e:
        if logger is not None:
            logger.error(type(e).__name__, str(e), traceback=traceback.format_exc())
            logger.run_finished(status="failed", duration_seconds=time.monotonic() - started)
        return ConversionResult(
            success=False,
            lines_read=0,
            lines_converted=0,
            lines_rejected=0,
            error_message=str(e),
        )

    finally:
        if logger is not None:
            logger.close()
