"""Detect the default owner/repo from the local git checkout.

Reads the URL of the "origin" remote with one `git` subprocess and
parses the trailing owner/repo segment. Any failure is reported as
"not detected" (None).
"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path
from typing import Optional, Union

from core.models import GitRemote

logger = logging.getLogger(__name__)

# Matches both "https://host/owner/repo(.git)" and "git@host:owner/repo(.git)"
_REMOTE_RE = re.compile(r"[/:]([^/:]+)/([^/:]+?)(?:\.git)?/?$")

GIT_TIMEOUT_SECONDS = 5.0


def parse_remote_url(url: str) -> Optional[GitRemote]:
    raw = (url or "").strip()
    m = _REMOTE_RE.search(raw)
    if not m:
        return None
    return GitRemote(owner=m.group(1), repo=m.group(2), url=raw)


def read_origin_url(cwd: Union[str, Path, None] = None) -> Optional[str]:
    """Return the URL of the "origin" remote, or None if git cannot tell us."""
    try:
        proc = subprocess.run(
            ["git", "remote", "get-url", "origin"],
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            check=True,
            timeout=GIT_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("git remote detection failed: %s", e)
        return None

    url = (proc.stdout or "").strip()
    return url or None


def detect_git_remote(cwd: Union[str, Path, None] = None) -> Optional[GitRemote]:
    url = read_origin_url(cwd)
    if url is None:
        return None

    remote = parse_remote_url(url)
    if remote is None:
        logger.debug("Unrecognized git remote URL: %s", url)
    return remote
