"""MCP tools for repositories: 'list_repos' and 'get_repo'.

Both delegate to ForgeClient; list_repos renders a text summary while
get_repo returns the repository JSON unchanged (pretty-printed).
"""

from __future__ import annotations

import json
from typing import Optional

from mcp.server.fastmcp import FastMCP

from clients.forge.client import ForgeClient
from clients.forge.inputs import normalize_page, normalize_per_page, normalize_segment
from core.formatting import format_repo_list


def register(mcp: FastMCP, *, client: ForgeClient) -> None:
    @mcp.tool(name="list_repos")
    async def list_repos(
        org: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> str:
        """List all repositories for the authenticated user or a specific organization.

        Params:
          - org: organization name (omit for the configured owner or the token's user).
          - page: page number (default: 1).
          - per_page: results per page (default: 100, max: 100).

        Returns:
          A numbered summary with visibility, language, stars, forks,
          description, URL, default branch and timestamps per repository.

        Raises:
          ConfigurationError when no org, default owner or token is available;
          RemoteAPIError when the API answers with an error object.
        """
        org_clean = normalize_segment(org, "org") if org is not None and org.strip() else None
        repos = await client.list_repos(
            org=org_clean,
            page=normalize_page(page),
            per_page=normalize_per_page(per_page, client.config.repo_page_size),
        )
        return format_repo_list(repos)

    @mcp.tool(name="get_repo")
    async def get_repo(owner: str, repo: str) -> str:
        """Get details of a specific repository as pretty-printed JSON."""
        data = await client.get_repo(
            owner=normalize_segment(owner, "owner"),
            repo=normalize_segment(repo, "repo"),
        )
        return json.dumps(data, indent=2)
