"""MCP tools for issues: 'list_issues' and 'create_issue'."""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from clients.forge.client import ForgeClient
from clients.forge.inputs import (
    normalize_page,
    normalize_per_page,
    normalize_segment,
    normalize_title,
)
from core.formatting import format_created, format_issue_list
from core.models import IssueState


def register(mcp: FastMCP, *, client: ForgeClient) -> None:
    @mcp.tool(name="list_issues")
    async def list_issues(
        owner: str,
        repo: str,
        state: IssueState = "open",
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> str:
        """List issues in a repository, one "#<number>: <title> [<state>]" per line.

        Params:
          - owner, repo: repository coordinates (required).
          - state: "open", "closed" or "all" (default: "open").
          - page: page number (default: 1).
          - per_page: results per page (default: 20, max: 100).
        """
        issues = await client.list_issues(
            owner=normalize_segment(owner, "owner"),
            repo=normalize_segment(repo, "repo"),
            state=state,
            page=normalize_page(page),
            per_page=normalize_per_page(per_page, client.config.issue_page_size),
        )
        return format_issue_list(issues)

    @mcp.tool(name="create_issue")
    async def create_issue(
        owner: str,
        repo: str,
        title: str,
        body: Optional[str] = None,
    ) -> str:
        """Create a new issue in a repository and return its number and URL."""
        issue = await client.create_issue(
            owner=normalize_segment(owner, "owner"),
            repo=normalize_segment(repo, "repo"),
            title=normalize_title(title),
            body=body,
        )
        return format_created("issue", issue)
