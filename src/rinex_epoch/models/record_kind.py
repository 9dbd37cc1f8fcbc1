"""Record kinds that select an epoch layout."""

from enum import StrEnum

__all__ = ["RecordKind"]

_ALIASES: dict[str, str] = {
    "obs": "observation_data",
    "nav": "navigation_data",
    "ionex": "ionosphere_maps",
    "meteo": "meteo_data",
    "clock": "clock_data",
    "antex": "antenna_data",
}


class RecordKind(StrEnum):
    """Kind of RINEX record carrying the epoch.

    Meteo, clock and antenna records share the generic layout of ``OTHER``.
    """

    OBSERVATION_DATA = "observation_data"
    NAVIGATION_DATA = "navigation_data"
    IONOSPHERE_MAPS = "ionosphere_maps"
    METEO_DATA = "meteo_data"
    CLOCK_DATA = "clock_data"
    ANTENNA_DATA = "antenna_data"
    OTHER = "other"

    @classmethod
    def from_str(cls, value: str) -> "RecordKind":
        """Resolve a record kind from its value or short alias.

        Parameters
        ----------
        value : str
            e.g. ``"observation_data"`` or ``"obs"`` (case-insensitive).

        Returns
        -------
        RecordKind
            Matching record kind.

        Raises
        ------
        ValueError
            If the value names no known record kind.
        """
        key = value.strip().casefold()
        return cls(_ALIASES.get(key, key))
