"""
Per-session "most recent report" store.

Export always reads the report from the caller's own latest analysis.  Keys
are opaque session identifiers (cookie value, CLI invocation id...); two
sessions never see each other's reports.

The store is guarded by a lock so one instance can back a multi-threaded
server.  Reports are immutable, so handing them out needs no copying.
"""

from __future__ import annotations

import threading

from freeseo.errors import NoReportError
from freeseo.models.report import Report


class ReportSessionStore:
    """Thread-safe mapping of session id -> latest ``Report``."""

    def __init__(self) -> None:
        self._reports: dict[str, Report] = {}
        self._lock = threading.Lock()

    def remember(self, session_id: str, report: Report) -> None:
        """Record ``report`` as the latest for ``session_id``, replacing any older one."""
        with self._lock:
            self._reports[session_id] = report

    def latest(self, session_id: str) -> Report | None:
        with self._lock:
            return self._reports.get(session_id)

    def require(self, session_id: str) -> Report:
        """Return the latest report for ``session_id``.

        Raises:
            NoReportError: If the session has not completed an analysis.
        """
        report = self.latest(session_id)
        if report is None:
            raise NoReportError("Run an analysis first.")
        return report

    def forget(self, session_id: str) -> None:
        """Drop the session's report (no-op when absent)."""
        with self._lock:
            self._reports.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._reports)
