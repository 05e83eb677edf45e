"""
Exception hierarchy for FreeSEO.

Scoring and report synthesis never raise on a valid ``RawAudit``; every error
below originates at a boundary (payload parsing, the collector HTTP call, or
a session export lookup).
"""

from __future__ import annotations


class FreeSEOError(Exception):
    """Base class for all FreeSEO errors."""


class InvalidAuditError(FreeSEOError, ValueError):
    """A raw audit payload is malformed or violates a count invariant."""


class CollectorError(FreeSEOError):
    """The audit collector service could not be reached or returned an error.

    Attributes:
        status_code: HTTP status from the collector, or ``None`` for
            transport-level failures (DNS, timeout, refused connection).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NoReportError(FreeSEOError, LookupError):
    """Export was requested for a session with no completed analysis."""
