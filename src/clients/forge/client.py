"""Forge client module: one REST call per repository operation.

This module provides a small async client for Gitea- and GitHub-compatible
REST APIs. Every public method issues exactly one HTTP request, parses the
JSON body and runs the shape check from `responses` before handing the data
back. Nothing is cached or retried.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from core.errors import ConfigurationError, ExternalServiceError
from core.models import ApiConfig, IssueState

from .responses import expect_list, expect_record

logger = logging.getLogger(__name__)


def _drop_none(values: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if values is None:
        return None
    return {k: v for k, v in values.items() if v is not None}


class ForgeClient:
    """Async client for the handful of repository endpoints the tools need.

    Purpose:
      - list_repos / get_repo
      - list_issues / create_issue
      - list_branches
      - create_pull_request

    Key behavior:
      - Authorization is "Bearer <token>" for GitHub and "token <token>" for Gitea.
      - HTTP error statuses are not raised; their JSON bodies go through the
        shape checks so the remote "message" reaches the caller.
      - Transport failures and unparseable bodies raise ExternalServiceError.
    """

    JSON_ACCEPT = "application/json"
    USER_AGENT = "forge-mcp"

    def __init__(self, config: ApiConfig) -> None:
        self._config = config
        self._headers = self._build_headers()

    @property
    def config(self) -> ApiConfig:
        return self._config

    def build_url(self, endpoint: str) -> str:
        return f"{self._config.api_url}{endpoint}"

    # --- Repositories ---

    async def list_repos(
        self,
        *,
        org: Optional[str] = None,
        page: int = 1,
        per_page: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """List repos of `org`, the configured owner, or the authenticated user."""
        target = org or self._config.owner
        if target:
            endpoint = f"/orgs/{target}/repos"
        elif self._config.token:
            endpoint = "/user/repos"
        else:
            raise ConfigurationError(
                "No org specified and no auth token. Provide an org name or set GITEA_TOKEN."
            )

        size = per_page or self._config.repo_page_size
        data = await self.request(
            "GET",
            endpoint,
            params={"page": page, "per_page": size, "limit": size, "type": "all"},
        )
        return expect_list(data, context="list_repos")

    async def get_repo(self, *, owner: str, repo: str) -> Dict[str, Any]:
        data = await self.request("GET", f"/repos/{owner}/{repo}")
        return expect_record(data, key="full_name", context="get_repo")

    # --- Issues ---

    async def list_issues(
        self,
        *,
        owner: str,
        repo: str,
        state: IssueState = "open",
        page: int = 1,
        per_page: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        size = per_page or self._config.issue_page_size
        data = await self.request(
            "GET",
            f"/repos/{owner}/{repo}/issues",
            params={"state": state, "page": page, "per_page": size, "limit": size},
        )
        return expect_list(data, context="list_issues")

    async def create_issue(
        self,
        *,
        owner: str,
        repo: str,
        title: str,
        body: Optional[str] = None,
    ) -> Dict[str, Any]:
        data = await self.request(
            "POST",
            f"/repos/{owner}/{repo}/issues",
            body={"title": title, "body": body},
        )
        return expect_record(data, key="number", context="create_issue")

    # --- Branches / pull requests ---

    async def list_branches(self, *, owner: str, repo: str) -> List[Dict[str, Any]]:
        data = await self.request("GET", f"/repos/{owner}/{repo}/branches")
        return expect_list(data, context="list_branches")

    async def create_pull_request(
        self,
        *,
        owner: str,
        repo: str,
        title: str,
        head: str,
        base: str = "main",
        body: Optional[str] = None,
    ) -> Dict[str, Any]:
        data = await self.request(
            "POST",
            f"/repos/{owner}/{repo}/pulls",
            body={"title": title, "head": head, "base": base, "body": body},
        )
        return expect_record(data, key="number", context="create_pull_request")

    # --- HTTP helpers ---

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": self.JSON_ACCEPT,
            "Content-Type": self.JSON_ACCEPT,
            "User-Agent": self.USER_AGENT,
        }
        auth = self._config.auth_header
        if auth:
            headers["Authorization"] = auth
        return headers

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.api_url,
            headers=self._headers,
            timeout=self._config.timeout,
            verify=self._config.verify,
        )

    def _external(self, context: str, err: BaseException) -> ExternalServiceError:
        return ExternalServiceError(f"Forge request failed ({context}): {err}")

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Send one request and return the parsed JSON body.

        None-valued query parameters and body fields are omitted.
        """
        context = f"{method} {endpoint}"
        query = _drop_none(params)
        payload = _drop_none(body)

        try:
            async with self._create_client() as client:
                resp = await client.request(method, endpoint, params=query, json=payload)
        except httpx.HTTPError as e:
            logger.warning("Forge request failed: %s: %s", context, e)
            raise self._external(context, e) from e

        logger.debug("%s %s -> %s", method, self.build_url(endpoint), resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise ExternalServiceError(
                f"Malformed JSON from forge API ({context}, HTTP {resp.status_code})"
            ) from e
