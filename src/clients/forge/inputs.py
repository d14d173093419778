from __future__ import annotations

import re
from typing import Optional

from core.errors import ValidationError


# Owner, org and repo names end up as URL path segments
_SEGMENT_RE = re.compile(r"^[A-Za-z0-9._-]+$")

MAX_PER_PAGE = 100


def normalize_segment(value: str, field: str) -> str:
    raw = (value or "").strip()
    if not raw:
        raise ValidationError(f"{field} must be non-empty")
    if not _SEGMENT_RE.match(raw) or raw in (".", ".."):
        raise ValidationError(f"Invalid {field}: {raw!r}")
    return raw


def normalize_page(page: Optional[int]) -> int:
    if page is None:
        return 1
    n = int(page)
    if n < 1:
        raise ValidationError("page must be >= 1")
    return n


def normalize_per_page(per_page: Optional[int], default: int) -> int:
    if per_page is None:
        # Configured defaults are clamped; only explicit values are rejected
        return min(max(int(default), 1), MAX_PER_PAGE)
    n = int(per_page)
    if n < 1 or n > MAX_PER_PAGE:
        raise ValidationError(f"per_page must be between 1 and {MAX_PER_PAGE}")
    return n


def normalize_title(title: str) -> str:
    if not (title or "").strip():
        raise ValidationError("title must be non-empty")
    return title


def normalize_branch(name: Optional[str], field: str, default: Optional[str] = None) -> str:
    clean = (name or "").strip() or (default or "")
    if not clean:
        raise ValidationError(f"{field} must be non-empty")
    return clean
