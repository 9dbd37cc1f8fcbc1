"""Tests for conversion configuration."""

import pytest

from rinex_epoch.engine import ConversionConfig, ConversionResult
from rinex_epoch.models import RecordKind, TimeScale


@pytest.mark.unit
def test_defaults() -> None:
    """Defaults convert v3 observation epochs to themselves on UTC."""
    config = ConversionConfig()

    assert config.record_kind is RecordKind.OBSERVATION_DATA
    assert config.revision == 3
    assert config.target_revision == 3
    assert config.time_scale is TimeScale.UTC
    assert config.strict is False


@pytest.mark.unit
def test_string_values_coerced() -> None:
    """Names and aliases are resolved to enums."""
    config = ConversionConfig(record_kind="nav", time_scale="gps", revision=2)

    assert config.record_kind is RecordKind.NAVIGATION_DATA
    assert config.time_scale is TimeScale.GPST
    assert config.target_revision == 2


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {"revision": 0},
        {"revision": 5},
        {"target_revision": 9},
        {"record_kind": "sp3"},
        {"time_scale": "GLONASST"},
    ],
)
def test_invalid_values_rejected(kwargs: dict) -> None:
    """Unknown kinds, scales and revisions are rejected at construction."""
    with pytest.raises(ValueError):
        ConversionConfig(**kwargs)


@pytest.mark.unit
def test_to_dict_is_json_ready() -> None:
    """Enums are serialized by value."""
    data = ConversionConfig(record_kind="ionex", revision=1, target_revision=1).to_dict()

    assert data == {
        "record_kind": "ionosphere_maps",
        "revision": 1,
        "target_revision": 1,
        "time_scale": "UTC",
        "strict": False,
    }


@pytest.mark.unit
def test_result_to_dict() -> None:
    """Result serializes every counter."""
    result = ConversionResult(
        success=True,
        lines_read=2,
        lines_converted=1,
        lines_rejected=1,
        output_lines=["2021 01 01 00 00 00"],
        errors=["Line 2: boom"],
    )

    data = result.to_dict()

    assert data["lines_rejected"] == 1
    assert data["errors"] == ["Line 2: boom"]
    assert data["output_path"] is None
