"""Audit logging subsystem for rinex-epoch.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: structured event written per line
"""

from rinex_epoch.audit.helpers import generate_run_id, get_package_version
from rinex_epoch.audit.logger import AuditLogger
from rinex_epoch.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
    "get_package_version",
]
