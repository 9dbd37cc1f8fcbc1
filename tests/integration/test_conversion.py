"""End-to-end tests for batch conversion."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from rinex_epoch.api import ConversionError
from rinex_epoch.audit import AuditLogger
from rinex_epoch.engine import ConversionConfig, convert_lines, run_conversion


def _read_events(path: Path) -> list[dict]:
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.integration
def test_convert_lines_collects_errors() -> None:
    """Bad lines are reported with their number and left out of the output."""
    config = ConversionConfig(record_kind="obs", revision=3, target_revision=2)

    result = convert_lines(
        [
            "2021 12 21 00 00 30.0000000  0\n",
            "\n",
            "2021 12 21 00 00 30.0000000  7\n",
            "2021 12 21 00 01 00.0000000  1\n",
        ],
        config,
    )

    assert result.success
    assert result.lines_read == 3
    assert result.lines_converted == 2
    assert result.lines_rejected == 1
    assert result.output_lines == [
        "21 12 21  0  0 30.0000000  0",
        "21 12 21  0  1  0.0000000  1",
    ]
    assert result.errors == ['Line 3: unknown epoch flag "7"']


@pytest.mark.integration
def test_convert_lines_strict() -> None:
    """Strict mode raises on the first rejected line."""
    config = ConversionConfig(record_kind="nav", revision=2, strict=True)

    with pytest.raises(ConversionError) as exc_info:
        convert_lines(["20 12 31 23 45  0.0", "20 12 31 23 45"], config)

    assert exc_info.value.line == 2


@pytest.mark.integration
def test_convert_lines_logs_rejections(tmp_path: Path) -> None:
    """Each rejected line produces a WARN event naming the failing field."""
    config = ConversionConfig(record_kind="other")
    log_path = tmp_path / "events.jsonl"

    with AuditLogger("run", log_path) as logger:
        convert_lines(["2x21 01 01 00 00 00", "2021 01 01 00 00 00"], config, logger)

    (event,) = _read_events(log_path)
    assert event["event"] == "line_rejected"
    assert event["level"] == "WARN"
    assert event["line"] == 1
    assert event["data"]["exception_class"] == "YearFieldError"


@pytest.mark.integration
def test_run_conversion_end_to_end(write_lines: Callable[..., Path], tmp_path: Path) -> None:
    """A v2 navigation file is rewritten for v3 with a complete audit trail."""
    input_path = write_lines(
        [
            " 20 12 31 23 45  0.0",
            " 21  1  1  9 45  0.0",
            " 21  2 30  0  0  0.0",
        ]
    )
    output_path = tmp_path / "out" / "nav_v3.txt"
    log_path = tmp_path / "events.jsonl"
    config = ConversionConfig(record_kind="nav", revision=2, target_revision=3)

    result = run_conversion(input_path, output_path, config=config, log_path=log_path)

    assert result.success
    assert result.output_path == str(output_path)
    assert output_path.read_text(encoding="utf-8").splitlines() == [
        "2020 12 31 23 45 00",
        "2021 01 01 09 45 00",
    ]

    events = _read_events(log_path)
    assert [e["event"] for e in events] == ["run_started", "line_rejected", "run_finished"]
    assert events[0]["data"]["parameters"]["record_kind"] == "navigation_data"
    assert isinstance(events[0]["data"]["version"], str)
    assert events[1]["stage"] == "convert"
    assert events[1]["data"]["exception_class"] == "EpochConstructionError"
    assert events[2]["data"]["status"] == "partial"
    assert events[2]["data"]["lines_converted"] == 2
    assert len({e["run_id"] for e in events}) == 1


@pytest.mark.integration
def test_run_conversion_success_status(write_lines: Callable[..., Path], tmp_path: Path) -> None:
    """A clean run finishes with status success."""
    input_path = write_lines(["2022 01 04 00 00 00"])
    log_path = tmp_path / "events.jsonl"

    run_conversion(
        input_path,
        tmp_path / "out.txt",
        config=ConversionConfig(record_kind="meteo", time_scale="GPST"),
        log_path=log_path,
    )

    assert _read_events(log_path)[-1]["data"]["status"] == "success"


@pytest.mark.integration
def test_run_conversion_strict_failure(write_lines: Callable[..., Path], tmp_path: Path) -> None:
    """An aborted run reports failure and logs the error."""
    input_path = write_lines(["2021 01 01 00 00 00", "2021 01 01"])
    output_path = tmp_path / "out.txt"
    log_path = tmp_path / "events.jsonl"

    result = run_conversion(
        input_path,
        output_path,
        config=ConversionConfig(record_kind="other", strict=True),
        log_path=log_path,
    )

    assert not result.success
    assert "Line 2" in result.error_message
    assert not output_path.exists()

    events = _read_events(log_path)
    assert [e["event"] for e in events][-2:] == ["error", "run_finished"]
    assert events[-2]["data"]["exception_class"] == "ConversionError"
    assert events[-1]["data"]["status"] == "failed"


@pytest.mark.integration
def test_run_conversion_missing_input(tmp_path: Path) -> None:
    """I/O failures are returned as an unsuccessful result."""
    result = run_conversion(tmp_path / "missing.txt", tmp_path / "out.txt")

    assert not result.success
    assert result.error_message


@pytest.mark.integration
def test_run_conversion_without_log(write_lines: Callable[..., Path], tmp_path: Path) -> None:
    """Conversion works without an audit log."""
    input_path = write_lines(["2021 12 21 00 00 30.1234567  0"])

    result = run_conversion(input_path, tmp_path / "out.txt")

    assert result.success
    assert result.output_lines == ["2021 12 21 00 00 30.1234567  0"]
