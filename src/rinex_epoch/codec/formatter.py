"""Epoch field formatter.

Layouts are looked up on ``(record kind, legacy revision)``; revisions
before 3 write two-digit years.
"""

from collections.abc import Callable

from rinex_epoch.models import Epoch, EpochFlag, GregorianComponents, RecordKind

__all__ = ["format_epoch", "two_digit_year"]

LEGACY_REVISION_LIMIT = 3

LayoutFn = Callable[[GregorianComponents, EpochFlag], str]


def two_digit_year(year: int) -> int:
    """Two-digit year of legacy revisions.

    Ambiguous outside 1900-2099: the format only has two digits.
    """
    short = year - 2000
    if short < 0:
        # files recorded before 2000
        short += 100
    return short


def _obs_legacy(c: GregorianComponents, flag: EpochFlag) -> str:
    y, m, d, hh, mm, ss, ns = c
    return (
        f"{two_digit_year(y):02d} {m:2d} {d:2d} {hh:2d} {mm:2d} {ss:2d}.{ns // 100:07d}  {flag}"
    )


def _obs_modern(c: GregorianComponents, flag: EpochFlag) -> str:
    y, m, d, hh, mm, ss, ns = c
    return f"{y:04d} {m:02d} {d:02d} {hh:02d} {mm:02d} {ss:2d}.{ns // 100:07d}  {flag}"


def _nav_legacy(c: GregorianComponents, flag: EpochFlag) -> str:
    y, m, d, hh, mm, ss, ns = c
    return f"{two_digit_year(y):02d} {m:2d} {d:2d} {hh:2d} {mm:2d} {ss:2d}.{ns // 100_000_000:1d}"


def _whole_seconds_modern(c: GregorianComponents, flag: EpochFlag) -> str:
    y, m, d, hh, mm, ss, _ = c
    return f"{y:04d} {m:02d} {d:02d} {hh:02d} {mm:02d} {ss:02d}"


def _whole_seconds_legacy(c: GregorianComponents, flag: EpochFlag) -> str:
    y, m, d, hh, mm, ss, _ = c
    return f"{two_digit_year(y):02d} {m:2d} {d:2d} {hh:2d} {mm:2d} {ss:2d}"


def _ionex(c: GregorianComponents, flag: EpochFlag) -> str:
    y, m, d, hh, mm, ss, _ = c
    return f"{y:04d}   {m:2d}    {d:2d}    {hh:2d}    {mm:2d}    {ss:2d}"


_LAYOUTS: dict[tuple[RecordKind, bool], LayoutFn] = {
    (RecordKind.OBSERVATION_DATA, True): _obs_legacy,
    (RecordKind.OBSERVATION_DATA, False): _obs_modern,
    (RecordKind.NAVIGATION_DATA, True): _nav_legacy,
    (RecordKind.NAVIGATION_DATA, False): _whole_seconds_modern,
    (RecordKind.IONOSPHERE_MAPS, True): _ionex,
    (RecordKind.IONOSPHERE_MAPS, False): _ionex,
    (RecordKind.OTHER, True): _whole_seconds_legacy,
    (RecordKind.OTHER, False): _whole_seconds_modern,
}

# Kinds without a dedicated epoch layout
_GENERIC_KINDS = frozenset(
    {RecordKind.METEO_DATA, RecordKind.CLOCK_DATA, RecordKind.ANTENNA_DATA, RecordKind.OTHER}
)


def format_epoch(
    epoch: Epoch,
    flag: EpochFlag | None,
    record_kind: RecordKind,
    revision: int,
) -> str:
    """Format an epoch the way ``record_kind`` records of ``revision`` write it.

    Parameters
    ----------
    epoch : Epoch
        Epoch to format, decomposed on its own time scale.
    flag : EpochFlag | None
        Event flag; only observation layouts write it. Defaults to OK.
    record_kind : RecordKind
        Record kind selecting the layout.
    revision : int
        File format major version.

    Returns
    -------
    str
        Epoch field text, without surrounding line framing.

    Examples
    --------
        >>> from rinex_epoch import parse_utc
        >>> epoch, _ = parse_utc("20 12 31 23 45  0.0")
        >>> format_epoch(epoch, None, RecordKind.NAVIGATION_DATA, 2)
        '20 12 31 23 45  0.0'
    """
    kind = RecordKind.OTHER if record_kind in _GENERIC_KINDS else record_kind
    layout = _LAYOUTS[(kind, revision < LEGACY_REVISION_LIMIT)]
    return layout(epoch.to_gregorian(), flag if flag is not None else EpochFlag.default())
