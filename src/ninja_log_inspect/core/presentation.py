"""Duration and timestamp rendering for decoded records."""

from __future__ import annotations

from datetime import datetime, tzinfo

from .models import LogRecord


def duration_ms(record: LogRecord) -> int:
    """Signed `end - start`; negative when the log has end < start."""
    return record.end - record.start


def local_timestamp(record: LogRecord, tz: tzinfo | None = None) -> datetime:
    """Record timestamp in `tz`, or the process-local zone when None."""
    return record.timestamp.astimezone(tz)


def format_record(record: LogRecord, tz: tzinfo | None = None) -> str:
    """Render `<duration> <name> <timestamp>`."""
    ts = local_timestamp(record, tz).isoformat(sep=" ")
    return f"{duration_ms(record)} {record.name} {ts}"
