"""Server bootstrap for the forge MCP bridge.

Resolves the API configuration once, creates the FastMCP instance,
wires the forge client into the tools, and starts the MCP server
(stdio transport).
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from clients.forge.client import ForgeClient
from config import LOG_LEVEL, load_config
from core.models import ApiConfig

from tools.branches import register as register_branches
from tools.connection import register as register_connection
from tools.issues import register as register_issues
from tools.pulls import register as register_pulls
from tools.repos import register as register_repos

logger = logging.getLogger(__name__)

SERVER_NAME = "forge-mcp"


class ForgeMCP(FastMCP):
    """FastMCP that refuses arguments a tool does not declare."""

    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> Any:
        tool = self._tool_manager.get_tool(name)
        if tool is not None:
            declared = set(tool.parameters.get("properties", {}))
            unknown = sorted(set(arguments or {}) - declared)
            if unknown:
                raise ToolError(f"Unknown argument(s) for {name}: {', '.join(unknown)}")

        logger.info("Tool called: %s", name)
        return await super().call_tool(name, arguments)


def register_tools(mcp: FastMCP, *, config: ApiConfig, client: ForgeClient) -> None:
    register_repos(mcp, client=client)
    register_issues(mcp, client=client)
    register_branches(mcp, client=client)
    register_pulls(mcp, client=client)
    register_connection(mcp, config=config)


def create_server(
    config: Optional[ApiConfig] = None,
    *,
    client: Optional[ForgeClient] = None,
) -> ForgeMCP:
    cfg = config or load_config()
    mcp = ForgeMCP(SERVER_NAME)
    register_tools(mcp, config=cfg, client=client or ForgeClient(cfg))
    return mcp


def main() -> None:
    # stdout carries the MCP stdio stream, so logs go to stderr
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        mcp = create_server()
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:  # pylint: disable=broad-exception-caught
        logger.exception("FATAL: forge MCP server failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
