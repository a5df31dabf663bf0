from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

HEADER = b"# ninja log v5\n"


@pytest.fixture
def write_ninja_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_bytes(
            HEADER
            + b"".join(
                [
                    b"100\t150\t1700000000000000000\tfoo.o\tabcde\n",
                    b"# restart\n",
                    b"150\t420\t1700000000250000000\tbar.o\t0f1e2d\n",
                    b"420\t980\t1700000000810000000\tapp\t9a8b7c\n",
                ]
            )
        )

    return _write


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write
