"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (inspect a ninja log)
- Resources: addressable data blobs (help text, sample log, result schema)

Run locally (stdio):
    python -m ninja_log_inspect.server.log_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from ninja_log_inspect.resources.registry import register_resources
from ninja_log_inspect.tools.inspect_log import inspect_ninja_log_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("NINJA_LOG_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("ninja-log", json_response=True)

register_resources(mcp)


@mcp.tool()
def inspect_ninja_log(
    log_path: str,
    limit: int | None = None,
    tz: str | None = None,
) -> dict[str, Any]:
    """Return per-step durations, output names and timestamps from a .ninja_log.

    Parameters
    ----------
    log_path:
        Path to a ninja log (format v5), relative to NINJA_LOG_BASE_DIR or absolute
        inside it.
    limit:
        Maximum number of records returned (hard-capped in the implementation).
    tz:
        IANA time zone for rendered timestamps (e.g., "UTC", "Europe/Berlin").
        Defaults to the server's local zone.

    Returns
    -------
    dict:
        {"version": int, "count": int, "truncated": bool, "records": list[dict]}
    """
    return inspect_ninja_log_impl(log_path=log_path, limit=limit, tz=tz)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
