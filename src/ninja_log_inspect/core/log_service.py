"""Log loading and record iteration.

This module is the integration point that opens a ninja log, gates on its
header and streams decoded records.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from .errors import RecordDecodeError
from .formats import RecordDecoder, check_version, iter_decoded, parse_header
from .models import LogHeader, LogRecord

LOGGER = logging.getLogger(__name__)


@contextmanager
def open_log(log_path: str | Path) -> Iterator[BinaryIO]:
    """Open a log file for binary line reading."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")
    with path.open("rb") as f:
        yield f


def read_header(stream: BinaryIO) -> LogHeader:
    """Read the first line and check its version."""
    line = stream.readline()
    version = parse_header(line)
    LOGGER.debug("Ninja log version %d", version)
    return check_version(version)


def iter_results(
    log_path: str | Path,
    *,
    decoder: RecordDecoder | None = None,
) -> Iterator[LogRecord | RecordDecodeError]:
    """Yield each record or its decode error, in file order.

    Header failures are raised before anything is yielded.
    """
    with open_log(log_path) as f:
        read_header(f)
        yield from iter_decoded(f, decoder=decoder)


def iter_records(
    log_path: str | Path,
    *,
    decoder: RecordDecoder | None = None,
) -> Iterator[LogRecord]:
    """Yield records, raising on the first line that fails to decode.

    Records before the failing line have already been yielded when the error
    is raised.
    """
    count = 0
    for item in iter_results(log_path, decoder=decoder):
        if isinstance(item, RecordDecodeError):
            LOGGER.debug("Decode failed after %d records: %s", count, item)
            raise item
        count += 1
        yield item
    LOGGER.debug("Decoded %d records from %s", count, log_path)


def get_records(log_path: str | Path, **iter_kwargs) -> list[LogRecord]:
    """Collect iter_records into a list."""
    return list(iter_records(log_path, **iter_kwargs))
