"""Tab-separated record decoder."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..errors import RecordDecodeError
from ..models import LogRecord

FIELD_COUNT = 5
U64_MAX = 2**64 - 1
U64_DIGITS = len(str(U64_MAX))
COMMENT_PREFIX = b"#"


def is_skippable(raw: bytes) -> bool:
    """Comment lines and blank lines never produce a record."""
    return raw.startswith(COMMENT_PREFIX) or not _strip_terminator(raw)


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


@dataclass(frozen=True, slots=True)
class RecordDecoder:
    """Decode `start<TAB>end<TAB>timestamp_ns<TAB>name<TAB>hash` lines."""

    encoding: str = "utf-8"

    def decode(self, line_no: int, raw: bytes) -> LogRecord:
        """Decode one record line or raise RecordDecodeError."""
        fields = _strip_terminator(raw).split(b"\t")
        if len(fields) != FIELD_COUNT:
            raise RecordDecodeError(
                line_no, raw, f"expected {FIELD_COUNT} tab-separated fields, found {len(fields)}"
            )

        start = self._unsigned(line_no, raw, "start", fields[0])
        end = self._unsigned(line_no, raw, "end", fields[1])
        timestamp_ns = self._unsigned(line_no, raw, "timestamp", fields[2])

        return LogRecord(
            line_no=line_no,
            start=start,
            end=end,
            timestamp_ns=timestamp_ns,
            name=self._text(line_no, raw, "name", fields[3]),
            hash=self._text(line_no, raw, "hash", fields[4]),
        )

    @staticmethod
    def _unsigned(line_no: int, raw: bytes, field: str, value: bytes) -> int:
        # bytes.isdigit() only accepts ASCII digits; int() alone would allow
        # signs, whitespace and underscores.
        if not value.isdigit():
            raise RecordDecodeError(line_no, raw, f"{field} is not an unsigned integer: {value!r}")
        digits = value.lstrip(b"0") or b"0"
        if len(digits) > U64_DIGITS:
            raise RecordDecodeError(line_no, raw, f"{field} overflows a 64-bit unsigned integer")
        n = int(digits)
        if n > U64_MAX:
            raise RecordDecodeError(line_no, raw, f"{field} overflows a 64-bit unsigned integer")
        return n

    def _text(self, line_no: int, raw: bytes, field: str, value: bytes) -> str:
        try:
            return value.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise RecordDecodeError(line_no, raw, f"{field} is not valid {self.encoding}") from exc


def iter_decoded(
    lines: Iterable[bytes],
    *,
    decoder: RecordDecoder | None = None,
    first_line_no: int = 2,
) -> Iterator[LogRecord | RecordDecodeError]:
    """Lazily decode lines, yielding a record or the error for each one.

    Failures are yielded rather than raised so the caller decides whether to
    stop. Skipped lines produce nothing. `first_line_no` is the file line
    number of the first item in `lines` (the header is line 1).
    """
    decoder = decoder or RecordDecoder()
    for line_no, raw in enumerate(lines, start=first_line_no):
        if is_skippable(raw):
            continue
        try:
            yield decoder.decode(line_no, raw)
        except RecordDecodeError as exc:
            yield exc
