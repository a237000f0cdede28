"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle. Ranking itself never logs; the API and CLI
layers report configuration resolution and ranked pairs here.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from marcrank.audit.helpers import event_timestamp
from marcrank.audit.models import LogEvent

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        """
        self.run_id = run_id
        self.log_path = log_path

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "pair_ranked").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        """
        log_event = LogEvent(
            ts=event_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data or {},
        )
        json.dump(asdict(log_event), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def configuration_resolved(self, features: list[str]) -> None:
        """Log configuration_resolved event.

        Parameters
        ----------
        features : list[str]
            Labels of the resolved features, in vector order.
        """
        self.event(
            "configuration_resolved",
            data={"feature_count": len(features), "features": features},
        )

    def pair_ranked(
        self,
        record_ids: tuple[str, str],
        score: int,
        breakdown: dict[str, Any] | None = None,
    ) -> None:
        """Log pair_ranked event.

        Parameters
        ----------
        record_ids : tuple[str, str]
            Identifiers of the ranked records (e.g., file names).
        score : int
            Ranking score; positive prefers the first record.
        breakdown : dict[str, Any] | None, optional
            Per-feature breakdown from ``RankResult.to_dict``.
        """
        data: dict[str, Any] = {"records": list(record_ids), "score": score}
        if breakdown is not None:
            data["features"] = breakdown["features"]
        self.event("pair_ranked", data=data)

    def error(self, exception_class: str, message: str) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        """
        self.event(
            "error",
            data={"exception_class": exception_class, "message": message},
            level="ERROR",
        )
