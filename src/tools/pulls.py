"""MCP tool that opens a pull request on the forge.

Registers 'create_pull_request'; the base branch defaults to "main".
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from clients.forge.client import ForgeClient
from clients.forge.inputs import normalize_branch, normalize_segment, normalize_title
from core.formatting import format_created

DEFAULT_BASE_BRANCH = "main"


def register(mcp: FastMCP, *, client: ForgeClient) -> None:
    @mcp.tool(name="create_pull_request")
    async def create_pull_request(
        owner: str,
        repo: str,
        title: str,
        head: str,
        base: Optional[str] = None,
        body: Optional[str] = None,
    ) -> str:
        """Create a pull request from `head` into `base`.

        Params:
          - owner, repo: repository coordinates (required).
          - title: PR title (required).
          - head: branch with the changes (required).
          - base: target branch (default: "main").
          - body: PR description.

        Returns:
          "Created PR #<number>: <title>" followed by the PR URL.
        """
        pr = await client.create_pull_request(
            owner=normalize_segment(owner, "owner"),
            repo=normalize_segment(repo, "repo"),
            title=normalize_title(title),
            head=normalize_branch(head, "head"),
            base=normalize_branch(base, "base", default=DEFAULT_BASE_BRANCH),
            body=body,
        )
        return format_created("PR", pr)
