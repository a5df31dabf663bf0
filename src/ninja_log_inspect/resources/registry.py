"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from ninja_log_inspect.core.models import SUPPORTED_VERSION
from ninja_log_inspect.tools.inspect_log import BASE_DIR_ENV, InspectResult, base_dir

SAMPLE_LOG = (
    "# ninja log v5\n"
    "100\t150\t1700000000000000000\tfoo.o\tabcde\n"
    "# restart\n"
    "150\t420\t1700000000250000000\tbar.o\t0f1e2d\n"
    "420\t980\t1700000000810000000\tapp\t9a8b7c\n"
)


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://ninja-log/help")
    def help_resource() -> str:
        """Return a short description of the log format and resources."""
        return (
            "Resources:\n"
            "- app://ninja-log/help\n"
            "- app://ninja-log/examples/sample-log\n"
            "- app://ninja-log/schemas/inspect-result\n"
            f"\nSupported log version: {SUPPORTED_VERSION}\n"
            "Record format: start<TAB>end<TAB>timestamp_ns<TAB>name<TAB>hash\n"
            "Lines starting with '#' after the header are ignored.\n"
            f"\nBase directory ({BASE_DIR_ENV}): {base_dir()}\n"
        )

    @mcp.resource("app://ninja-log/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny sample log for demos and tests."""
        return SAMPLE_LOG

    @mcp.resource("app://ninja-log/schemas/inspect-result")
    def inspect_result_schema() -> dict[str, Any]:
        """Return the JSON schema for inspect_ninja_log results."""
        return InspectResult.model_json_schema()
