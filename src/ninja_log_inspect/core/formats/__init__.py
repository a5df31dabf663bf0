"""Ninja log grammar: header line and tab-separated records."""

from __future__ import annotations

from .header import check_version, parse_header
from .record import RecordDecoder, is_skippable, iter_decoded

__all__ = [
    "RecordDecoder",
    "check_version",
    "is_skippable",
    "iter_decoded",
    "parse_header",
]
