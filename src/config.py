"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and
load_config(), which merges the environment with the owner/repo
detected from the local git remote into an immutable ApiConfig.
A `.env` file, if present, is loaded once at import time.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Mapping, Optional

from dotenv import load_dotenv

from clients.forge.inputs import MAX_PER_PAGE
from core.git_remote import detect_git_remote
from core.models import GITHUB_API_URL, GITHUB_DOMAIN, ApiConfig, GitRemote

load_dotenv(override=False)

logger = logging.getLogger(__name__)

RemoteDetector = Callable[[Path], Optional[GitRemote]]


def _env_str(env: Mapping[str, str], name: str, default: str = "") -> str:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip() or default


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_page_size(env: Mapping[str, str], name: str, default: int) -> int:
    n = _env_int(env, name, default)
    if n < 1 or n > MAX_PER_PAGE:
        logger.warning("%s=%s is outside 1..%s, using %s", name, n, MAX_PER_PAGE, default)
        return default
    return n


# Git checkout used for owner/repo auto-detection
PROJECT_ROOT = Path(os.environ.get("PROJECT_ROOT", ".")).resolve()

LOG_LEVEL = _env_str(os.environ, "LOG_LEVEL", "INFO").upper()


def load_config(
    env: Optional[Mapping[str, str]] = None,
    *,
    project_root: Optional[Path] = None,
    detect: RemoteDetector = detect_git_remote,
) -> ApiConfig:
    """Resolve the API configuration.

    Precedence:
      - api_url: GITEA_API_URL > https://api.github.com
      - token: GITEA_TOKEN > GITHUB_TOKEN > ""
      - owner/repo: git "origin" remote > GITEA_OWNER / GITEA_REPO > ""

    The GitHub flavor (Bearer auth) is selected when either the API URL or
    the detected remote points at github.com.
    """
    env = os.environ if env is None else env
    root = project_root or PROJECT_ROOT

    api_url = _env_str(env, "GITEA_API_URL", GITHUB_API_URL).rstrip("/")
    token = _env_str(env, "GITEA_TOKEN") or _env_str(env, "GITHUB_TOKEN")

    remote = detect(root)
    remote_url = remote.url if remote else None

    is_github = GITHUB_DOMAIN in api_url or (remote_url is not None and GITHUB_DOMAIN in remote_url)

    cfg = ApiConfig(
        api_url=api_url,
        token=token,
        is_github=is_github,
        owner=(remote.owner if remote else "") or _env_str(env, "GITEA_OWNER"),
        repo=(remote.repo if remote else "") or _env_str(env, "GITEA_REPO"),
        remote_url=remote_url,
        timeout=_env_float(env, "GITEA_TIMEOUT", 30.0),
        verify=_env_bool(env, "HTTP_VERIFY", True),
        repo_page_size=_env_page_size(env, "GITEA_REPO_PAGE_SIZE", 100),
        issue_page_size=_env_page_size(env, "GITEA_ISSUE_PAGE_SIZE", 20),
    )

    logger.info(
        "Resolved forge config: api_url=%s github=%s authenticated=%s owner=%s repo=%s",
        cfg.api_url,
        cfg.is_github,
        cfg.authenticated,
        cfg.owner or "-",
        cfg.repo or "-",
    )
    return cfg
