"""Shape checks applied right after a forge response is parsed.

Gitea and GitHub answer the same endpoint with either the expected
payload or an error object such as {"message": "Not Found"}. These
helpers split the two cases before anything formats the data.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from core.errors import RemoteAPIError


def error_message(payload: Any) -> str:
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return json.dumps(payload, default=str)


def expect_list(payload: Any, *, context: str) -> List[Any]:
    if isinstance(payload, list):
        return payload
    raise RemoteAPIError(f"API error ({context}): {error_message(payload)}")


def expect_record(payload: Any, *, key: str, context: str) -> Dict[str, Any]:
    # A record without its identifying key is an error body in disguise
    if isinstance(payload, dict) and key in payload:
        return payload
    raise RemoteAPIError(f"API error ({context}): {error_message(payload)}")
