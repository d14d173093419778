from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from clients.forge.client import ForgeClient
from clients.forge.inputs import normalize_segment
from core.formatting import format_branch_list


def register(mcp: FastMCP, *, client: ForgeClient) -> None:
    @mcp.tool(name="list_branches")
    async def list_branches(owner: str, repo: str) -> str:
        """List branches in a repository, one name per line."""
        branches = await client.list_branches(
            owner=normalize_segment(owner, "owner"),
            repo=normalize_segment(repo, "repo"),
        )
        return format_branch_list(branches)
