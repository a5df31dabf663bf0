"""Header line parser."""

from __future__ import annotations

import re

from ..errors import HeaderParseError, UnsupportedVersionError
from ..models import SUPPORTED_VERSION, LogHeader

_HEADER_RE = re.compile(rb"# ninja log v(?P<version>[0-9]+)\n")
_MAX_VERSION = 255
_MAX_VERSION_DIGITS = 3


def parse_header(line: bytes) -> int:
    """Return the version declared by a header line.

    The whole line, including its trailing newline, must match; anything
    after the newline is a failure.
    """
    m = _HEADER_RE.fullmatch(line)
    if not m:
        raise HeaderParseError(line)
    digits = m.group("version").lstrip(b"0") or b"0"
    if len(digits) > _MAX_VERSION_DIGITS:
        raise HeaderParseError(line)
    version = int(digits)
    if version > _MAX_VERSION:
        raise HeaderParseError(line)
    return version


def check_version(version: int) -> LogHeader:
    """Gate on the single supported format version."""
    if version != SUPPORTED_VERSION:
        raise UnsupportedVersionError(version)
    return LogHeader(version=version)
