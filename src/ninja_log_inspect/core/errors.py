"""Error types raised while reading ninja logs."""

from __future__ import annotations


class NinjaLogError(ValueError):
    """Base class for header and record failures."""


class HeaderParseError(NinjaLogError):
    """The first line does not match `# ninja log v<N>\\n`."""

    def __init__(self, line: bytes) -> None:
        super().__init__("cannot parse header line")
        self.line = line


class UnsupportedVersionError(NinjaLogError):
    def __init__(self, version: int) -> None:
        super().__init__(f"unsupported Ninja log version {version}")
        self.version = version


class RecordDecodeError(NinjaLogError):
    """A record line failed to decode.

    Carries the 1-based line number and the raw line so callers can report
    the failure in context.
    """

    def __init__(self, line_no: int, line: bytes, reason: str) -> None:
        super().__init__(f"reading record at line {line_no}: {reason}")
        self.line_no = line_no
        self.line = line
        self.reason = reason
