from __future__ import annotations

import asyncio

from ninja_log_inspect.core.formats import iter_decoded
from ninja_log_inspect.resources.registry import SAMPLE_LOG
from ninja_log_inspect.server.log_server import mcp


def test_server_exposes_inspect_tool() -> None:
    tools = asyncio.run(mcp.list_tools())
    assert "inspect_ninja_log" in [t.name for t in tools]


def test_server_registers_resources() -> None:
    resources = asyncio.run(mcp.list_resources())
    uris = {str(r.uri) for r in resources}
    assert "app://ninja-log/help" in uris
    assert "app://ninja-log/examples/sample-log" in uris
    assert "app://ninja-log/schemas/inspect-result" in uris


def test_sample_log_is_a_v5_log() -> None:
    assert SAMPLE_LOG.startswith("# ninja log v5\n")


def test_sample_log_decodes() -> None:
    lines = SAMPLE_LOG.encode().splitlines(keepends=True)
    records = list(iter_decoded(lines[1:]))
    assert [r.name for r in records] == ["foo.o", "bar.o", "app"]
