"""Core data models for ninja log inspection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

SUPPORTED_VERSION = 5

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class LogHeader:
    """Format version declared on the first line of a log."""

    version: int


@dataclass(frozen=True, slots=True)
class LogRecord:
    """One completed build step as recorded in the log."""

    line_no: int
    start: int  # ms since the log start
    end: int  # ms since the log start; may be < start
    timestamp_ns: int  # ns since the Unix epoch (UTC)
    name: str
    hash: str

    @property
    def timestamp(self) -> datetime:
        """Timezone-aware UTC datetime (microsecond precision)."""
        return timestamp_from_ns(self.timestamp_ns)


def timestamp_from_ns(ns: int) -> datetime:
    """Convert nanoseconds since the epoch to an aware UTC datetime."""
    return _EPOCH + timedelta(microseconds=ns // 1000)
