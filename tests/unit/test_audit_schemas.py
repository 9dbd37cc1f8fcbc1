"""Tests for schema validation of audit events."""

import json
from collections.abc import Callable
from pathlib import Path

import jsonschema
import pytest

from rinex_epoch.engine import ConversionConfig, run_conversion

_SCHEMAS_DIR = Path(__file__).parent.parent.parent / "schemas"


@pytest.fixture(scope="module")
def event_schema() -> dict:
    """Load log event JSON schema."""
    with (_SCHEMAS_DIR / "log_event.schema.json").open() as f:
        return json.load(f)


@pytest.mark.unit
def test_schema_is_valid(event_schema: dict) -> None:
    """The schema itself is a valid draft 2020-12 schema."""
    jsonschema.Draft202012Validator.check_schema(event_schema)


@pytest.mark.unit
def test_generated_events_validate(
    write_lines: Callable[..., Path],
    tmp_path: Path,
    event_schema: dict,
) -> None:
    """Events of a run with rejected lines validate against the schema."""
    input_path = write_lines(["2021 01 01 00 00 00", "2021 13 01 00 00 00", "x"])
    log_path = tmp_path / "events.jsonl"

    run_conversion(
        input_path,
        tmp_path / "out.txt",
        config=ConversionConfig(record_kind="other"),
        log_path=log_path,
    )

    with log_path.open() as f:
        events = [json.loads(line) for line in f]

    assert len(events) == 4
    for event in events:
        jsonschema.validate(instance=event, schema=event_schema)


@pytest.mark.unit
@pytest.mark.parametrize(
    "event",
    [
        {"ts": "2026-01-01T00:00:00Z", "run_id": "r", "level": "TRACE", "event": "e", "data": {}},
        {"ts": "yesterday", "run_id": "r", "level": "INFO", "event": "e", "data": {}},
        {"ts": "2026-01-01T00:00:00Z", "run_id": "r", "level": "INFO", "event": "e"},
        {
            "ts": "2026-01-01T00:00:00Z",
            "run_id": "r",
            "level": "INFO",
            "event": "e",
            "data": {},
            "line": 0,
        },
        {
            "ts": "2026-01-01T00:00:00Z",
            "run_id": "r",
            "level": "INFO",
            "event": "e",
            "data": {},
            "extra": 1,
        },
    ],
)
def test_invalid_events_rejected(event: dict, event_schema: dict) -> None:
    """Malformed envelopes fail validation."""
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=event, schema=event_schema)
