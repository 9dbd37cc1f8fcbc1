"""Epoch flag: event status attached to observation timestamps."""

from enum import IntEnum

from rinex_epoch.errors import EpochFlagError

__all__ = ["EpochFlag"]


class EpochFlag(IntEnum):
    """Observation epoch status codes.

    The integer value is the code written in the file.

    Attributes
    ----------
    OK : int
        Nominal epoch.
    POWER_FAILURE : int
        Power failure between previous and current epoch.
    ANTENNA_BEING_MOVED : int
        Start of a moving antenna period.
    NEW_SITE_OCCUPATION : int
        New site occupation (end of kinematic data).
    HEADER_INFORMATION_FOLLOWS : int
        Header records follow.
    EXTERNAL_EVENT : int
        External event, epoch is significant.
    CYCLE_SLIP : int
        Cycle slip records follow.
    """

    OK = 0
    POWER_FAILURE = 1
    ANTENNA_BEING_MOVED = 2
    NEW_SITE_OCCUPATION = 3
    HEADER_INFORMATION_FOLLOWS = 4
    EXTERNAL_EVENT = 5
    CYCLE_SLIP = 6

    @classmethod
    def default(cls) -> "EpochFlag":
        """Flag assumed when none is written."""
        return cls.OK

    @classmethod
    def from_str(cls, token: str) -> "EpochFlag":
        """Decode a flag token.

        Parameters
        ----------
        token : str
            Single-digit code, surrounding whitespace allowed.

        Returns
        -------
        EpochFlag
            Decoded flag.

        Raises
        ------
        EpochFlagError
            If the token is not one of "0" to "6".
        """
        code = token.strip()
        if len(code) != 1 or not "0" <= code <= "6":
            raise EpochFlagError(token)
        return cls(int(code))

    def is_ok(self) -> bool:
        return self is EpochFlag.OK

    def __str__(self) -> str:
        return str(self.value)
