from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from ninja_log_inspect import __version__
from ninja_log_inspect.core.errors import RecordDecodeError
from ninja_log_inspect.core.log_service import iter_records
from ninja_log_inspect.core.presentation import format_record

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = os.getenv("NINJA_LOG_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> None:
    p = argparse.ArgumentParser(
        prog="ninja-log-inspect",
        description="Print duration, output name and local timestamp for each step in a .ninja_log.",
    )
    p.add_argument("log_path", metavar=".ninja_log", help="Path to the ninja log file")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = p.parse_args(argv)

    _configure_logging()

    printed = 0
    try:
        for record in iter_records(args.log_path):
            print(format_record(record))
            printed += 1
    except RecordDecodeError as e:
        # Earlier records were already printed; the run still fails.
        print(f"Error: {e} ({printed} records printed before the failure)", file=sys.stderr)
        raise SystemExit(2)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    LOGGER.info("Printed %d records", printed)


if __name__ == "__main__":
    main()
