"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from rinex_epoch.models import Epoch  # noqa: E402


@pytest.fixture
def utc_epoch() -> Callable[..., Epoch]:
    """Factory for UTC epochs from civil components."""

    def _factory(
        year: int = 2021,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanos: int = 0,
    ) -> Epoch:
        return Epoch.from_gregorian_utc(year, month, day, hour, minute, second, nanos)

    return _factory


@pytest.fixture
def write_lines(tmp_path: Path) -> Callable[..., Path]:
    """Write epoch lines to a temporary input file."""

    def _write(lines: list[str], name: str = "epochs.txt") -> Path:
        path = tmp_path / name
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path

    return _write
