"""Time helpers for report timestamps."""

from __future__ import annotations

from datetime import datetime, timezone

REPORT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def utcnow() -> datetime:
    """Return the current UTC datetime with timezone info.

    Prefer this over ``datetime.utcnow()`` (which returns naive datetimes).
    """
    return datetime.now(tz=timezone.utc)


def format_report_timestamp(dt: datetime) -> str:
    """Render ``dt`` in UTC for report headers.

    Naive datetimes are assumed to already be UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime(REPORT_TIMESTAMP_FORMAT)
