"""Text summaries returned by the listing and creation tools."""

from __future__ import annotations

from typing import Any, Mapping, Sequence


def _or(value: Any, fallback: Any) -> Any:
    # null, "" and 0 all take the fallback
    return value if value else fallback


def format_repo(index: int, r: Mapping[str, Any]) -> str:
    visibility = "Private" if r.get("private") else "Public"
    return "\n".join(
        [
            f"{index}. {r.get('full_name')} [{visibility}]",
            f"   Language: {_or(r.get('language'), 'N/A')} | "
            f"Stars: {_or(r.get('stargazers_count'), 0)} | "
            f"Forks: {_or(r.get('forks_count'), 0)}",
            f"   Description: {_or(r.get('description'), 'No description')}",
            f"   URL: {r.get('html_url')}",
            f"   Default Branch: {_or(r.get('default_branch'), 'N/A')}",
            f"   Created: {_or(r.get('created_at'), 'N/A')}",
            f"   Updated: {_or(r.get('updated_at'), 'N/A')}",
        ]
    )


def format_repo_list(repos: Sequence[Mapping[str, Any]]) -> str:
    if not repos:
        return "No repositories found."
    blocks = "\n\n".join(format_repo(i, r) for i, r in enumerate(repos, start=1))
    return f"Found {len(repos)} repositories:\n\n{blocks}"


def format_issue_list(issues: Sequence[Mapping[str, Any]]) -> str:
    lines = [f"#{i.get('number')}: {i.get('title')} [{i.get('state')}]" for i in issues]
    return "\n".join(lines) or "No issues found."


def format_branch_list(branches: Sequence[Mapping[str, Any]]) -> str:
    return "\n".join(str(b.get("name")) for b in branches) or "No branches found."


def format_created(kind: str, record: Mapping[str, Any]) -> str:
    """Summarize a created issue ("issue") or pull request ("PR")."""
    return f"Created {kind} #{record.get('number')}: {record.get('title')}\nURL: {record.get('html_url')}"
