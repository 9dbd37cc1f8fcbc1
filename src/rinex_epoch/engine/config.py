"""Conversion configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from typing import Any

from rinex_epoch.models import RecordKind, TimeScale

# Major RINEX revisions in circulation
SUPPORTED_REVISIONS = range(1, 5)


@dataclass
class ConversionConfig:
    """Configuration for converting a file of epoch fields.

    Attributes
    ----------
    record_kind : RecordKind
        Kind of record the epochs belong to (default: observation data).
    revision : int
        Major revision the input is written in (default: 3).
    target_revision : int | None
        Major revision to write. If None, same as ``revision``.
    time_scale : TimeScale
        Scale the written dates are read in (default: UTC).
    strict : bool
        Abort on the first rejected line instead of collecting errors.
    """

    record_kind: RecordKind = RecordKind.OBSERVATION_DATA
    revision: int = 3
    target_revision: int | None = None
    time_scale: TimeScale = TimeScale.UTC
    strict: bool = False

    def __post_init__(self) -> None:
        """Coerce enum values and validate revisions."""
        if not isinstance(self.record_kind, RecordKind):
            self.record_kind = RecordKind.from_str(self.record_kind)

        if not isinstance(self.time_scale, TimeScale):
            self.time_scale = TimeScale.from_str(self.time_scale)

        if self.target_revision is None:
            self.target_revision = self.revision

        for name in ("revision", "target_revision"):
            value = getattr(self, name)
            if value not in SUPPORTED_REVISIONS:
                raise ValueError(
                    f"{name} must be in [{SUPPORTED_REVISIONS.start}, "
                    f"{SUPPORTED_REVISIONS.stop - 1}], got {value}"
                )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["record_kind"] = str(self.record_kind)
        data["time_scale"] = str(self.time_scale)
        return data


@dataclass
class ConversionResult:
    """Results from converting epoch lines.

    Attributes
    ----------
    success : bool
        Whether conversion completed (rejected lines do not fail a
        non-strict run).
    lines_read : int
        Non-blank input lines.
    lines_converted : int
        Lines successfully reformatted.
    lines_rejected : int
        Lines that failed to parse.
    output_lines : list[str]
        Reformatted epoch fields, in input order.
    errors : list[str]
        One message per rejected line, prefixed with its line number.
    output_path : str | None
        Written file, when converting a file.
    error_message : str | None
        Error message if failed.
    """

    success: bool
    lines_read: int
    lines_converted: int
    lines_rejected: int
    output_lines: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    output_path: str | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
