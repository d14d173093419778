"""MCP tool reporting the resolved connection settings.

Registers 'get_connection_info'. It makes no API call; it only re-reads
the git remote so the answer reflects the checkout as it is now.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import anyio
from mcp.server.fastmcp import FastMCP

from config import PROJECT_ROOT
from core.git_remote import read_origin_url
from core.models import ApiConfig


def connection_info(config: ApiConfig, remote_url: Optional[str]) -> Dict[str, Any]:
    # The token itself is never reported
    return {
        "api_url": config.api_url,
        "is_github": config.is_github,
        "authenticated": config.authenticated,
        "detected_owner": config.owner,
        "detected_repo": config.repo,
        "git_remote": remote_url or "not detected",
    }


def register(
    mcp: FastMCP,
    *,
    config: ApiConfig,
    project_root: Optional[Path] = None,
    read_remote: Optional[Callable[[Path], Optional[str]]] = None,
) -> None:
    root = project_root or PROJECT_ROOT

    @mcp.tool(name="get_connection_info")
    async def get_connection_info() -> str:
        """Get current connection configuration and detected git remote info."""
        reader = read_remote or read_origin_url
        # read_origin_url blocks on a git subprocess
        remote_url = await anyio.to_thread.run_sync(reader, root)
        return json.dumps(connection_info(config, remote_url), indent=2)
