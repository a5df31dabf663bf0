"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import os
from datetime import UTC, tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field

from ninja_log_inspect.core.errors import RecordDecodeError
from ninja_log_inspect.core.formats import iter_decoded
from ninja_log_inspect.core.log_service import open_log, read_header
from ninja_log_inspect.core.models import LogRecord
from ninja_log_inspect.core.presentation import duration_ms, local_timestamp

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000
BASE_DIR_ENV = "NINJA_LOG_BASE_DIR"


class RecordView(BaseModel):
    line_no: int = Field(description="1-based line number in the log file.")
    start: int = Field(ge=0, description="Step start, ms since the log start.")
    end: int = Field(ge=0, description="Step end, ms since the log start.")
    duration_ms: int = Field(description="end - start; negative when end < start.")
    name: str = Field(description="Build output name.")
    hash: str = Field(description="Command hash, passed through uninterpreted.")
    timestamp_ns: int = Field(ge=0, description="Nanoseconds since the Unix epoch.")
    timestamp: str = Field(description="ISO-8601 timestamp in the requested zone.")


class InspectResult(BaseModel):
    version: int = Field(description="Log format version from the header.")
    count: int = Field(description="Number of records returned.")
    truncated: bool = Field(description="True when more records exist beyond the limit.")
    records: list[RecordView] = Field(default_factory=list)


def base_dir() -> Path:
    """Return the resolved base directory for log paths."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _resolve_tz(tz: str | None) -> tzinfo | None:
    if not tz:
        return None
    if tz.upper() in ("UTC", "Z"):
        return UTC
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone '{tz}'. Use an IANA name such as 'Europe/Berlin'.") from e


def _record_view(record: LogRecord, *, tz: tzinfo | None) -> RecordView:
    return RecordView(
        line_no=record.line_no,
        start=record.start,
        end=record.end,
        duration_ms=duration_ms(record),
        name=record.name,
        hash=record.hash,
        timestamp_ns=record.timestamp_ns,
        timestamp=local_timestamp(record, tz).isoformat(),
    )


def inspect_ninja_log_impl(
    *,
    log_path: str,
    limit: int | None = None,
    tz: str | None = None,
) -> dict[str, Any]:
    """Implementation for the `inspect_ninja_log` MCP tool.

    Notes
    -----
    - Records are returned in file order, without deduplication.
    - A decode failure anywhere in the file fails the whole call, even past
      `limit`; partial results are never returned.
    """
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    if limit > HARD_LIMIT:
        limit = HARD_LIMIT

    zone = _resolve_tz(tz)
    path = safe_resolve(log_path)

    records: list[RecordView] = []
    total = 0
    with open_log(path) as f:
        header = read_header(f)
        for item in iter_decoded(f):
            if isinstance(item, RecordDecodeError):
                raise item
            total += 1
            if len(records) < limit:
                records.append(_record_view(item, tz=zone))

    result = InspectResult(
        version=header.version,
        count=len(records),
        truncated=total > len(records),
        records=records,
    )
    return result.model_dump()
