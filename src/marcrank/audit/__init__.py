"""Audit logging for marcrank.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: event envelope
"""

from marcrank.audit.helpers import event_timestamp, generate_run_id
from marcrank.audit.logger import AuditLogger
from marcrank.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "event_timestamp",
    "generate_run_id",
]
