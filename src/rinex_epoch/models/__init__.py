"""Value types shared by the epoch codec.

- EpochFlag: observation event status codes
- RecordKind: record kind selecting an epoch layout
- TimeScale: time scales and their fixed UTC offsets
- Epoch: nanosecond instant tagged with a time scale
"""

from rinex_epoch.models.epoch import Epoch, GregorianComponents
from rinex_epoch.models.flag import EpochFlag
from rinex_epoch.models.record_kind import RecordKind
from rinex_epoch.models.timescale import TimeScale

__all__ = [
    "Epoch",
    "GregorianComponents",
    "EpochFlag",
    "RecordKind",
    "TimeScale",
]
