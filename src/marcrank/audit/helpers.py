"""Run identifiers and event timestamps for the audit log."""

import secrets
from datetime import UTC, datetime

__all__ = ["event_timestamp", "generate_run_id"]


def event_timestamp(now: datetime | None = None) -> str:
    """Format *now* (default: current time) as UTC ISO-8601 with milliseconds.

    Examples
    --------
        >>> event_timestamp(datetime(2026, 10, 19, 8, 30, tzinfo=UTC))
        '2026-10-19T08:30:00.000Z'
    """
    moment = (now or datetime.now(UTC)).astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_run_id(command: str = "rank") -> str:
    """Return an identifier shared by all events of one CLI invocation.

    Format is ``<command>-<YYYYMMDDTHHMMSSZ>-<8 hex chars>``, so ids sort by
    start time within a command.
    """
    started = datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ")
    return f"{command}-{started}-{secrets.token_hex(4)}"
