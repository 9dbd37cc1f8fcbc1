"""Tests for epoch flag codec."""

import pytest

from rinex_epoch.errors import EpochFlagError, EpochParsingError
from rinex_epoch.models import EpochFlag

ALL_FLAGS = [
    ("0", EpochFlag.OK),
    ("1", EpochFlag.POWER_FAILURE),
    ("2", EpochFlag.ANTENNA_BEING_MOVED),
    ("3", EpochFlag.NEW_SITE_OCCUPATION),
    ("4", EpochFlag.HEADER_INFORMATION_FOLLOWS),
    ("5", EpochFlag.EXTERNAL_EVENT),
    ("6", EpochFlag.CYCLE_SLIP),
]


@pytest.mark.unit
@pytest.mark.parametrize(("token", "expected"), ALL_FLAGS)
def test_from_str_known_codes(token: str, expected: EpochFlag) -> None:
    """Codes 0 to 6 map to the flags in declaration order."""
    assert EpochFlag.from_str(token) is expected
    assert EpochFlag.from_str(f"  {token} ") is expected


@pytest.mark.unit
@pytest.mark.parametrize(("token", "flag"), ALL_FLAGS)
def test_str_is_inverse_of_from_str(token: str, flag: EpochFlag) -> None:
    """Formatting a flag yields its single-digit code."""
    assert str(flag) == token
    assert f"{flag}" == token


@pytest.mark.unit
@pytest.mark.parametrize("token", ["7", "-1", "01", "x", "", "1.0", "OK"])
def test_from_str_rejects_unknown_tokens(token: str) -> None:
    """Anything but a single known digit is rejected with the token kept."""
    with pytest.raises(EpochFlagError) as exc_info:
        EpochFlag.from_str(token)

    assert exc_info.value.text == token
    assert isinstance(exc_info.value, EpochParsingError)


@pytest.mark.unit
def test_default_and_is_ok() -> None:
    """Default flag is OK and only OK reports is_ok."""
    assert EpochFlag.default() is EpochFlag.OK
    assert EpochFlag.OK.is_ok()
    assert not EpochFlag.CYCLE_SLIP.is_ok()
