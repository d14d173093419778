"""Immutable dataclasses shared by the client, tools and server.

ApiConfig is resolved once at startup (see config.load_config) and
passed explicitly to everything that talks to the forge API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


IssueState = Literal["open", "closed", "all"]

GITHUB_API_URL = "https://api.github.com"
GITHUB_DOMAIN = "github.com"


@dataclass(frozen=True)
class GitRemote:
    """Owner/repo pair parsed from a git remote URL."""

    owner: str
    repo: str
    url: str


@dataclass(frozen=True)
class ApiConfig:
    """Resolved connection settings for a Gitea or GitHub API.

    Field groups:
    - Endpoint: api_url, is_github, timeout, verify
    - Auth: token (may be empty)
    - Defaults: owner, repo, remote_url
    - Paging: repo_page_size, issue_page_size
    """

    api_url: str = GITHUB_API_URL
    token: str = ""
    is_github: bool = True

    owner: str = ""
    repo: str = ""
    remote_url: Optional[str] = None

    timeout: float = 30.0
    verify: bool = True

    repo_page_size: int = 100
    issue_page_size: int = 20

    @property
    def authenticated(self) -> bool:
        return bool(self.token)

    @property
    def auth_header(self) -> Optional[str]:
        if not self.token:
            return None
        scheme = "Bearer" if self.is_github else "token"
        return f"{scheme} {self.token}"
