from core.formatting import (
    format_branch_list,
    format_created,
    format_issue_list,
    format_repo_list,
)


def test_format_repo_list_full_record():
    repos = [
        {
            "full_name": "acme/widget",
            "private": True,
            "language": "Python",
            "stargazers_count": 3,
            "forks_count": 1,
            "description": "Widgets",
            "html_url": "https://x/acme/widget",
            "default_branch": "main",
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-02-01T00:00:00Z",
        }
    ]

    assert format_repo_list(repos) == (
        "Found 1 repositories:\n\n"
        "1. acme/widget [Private]\n"
        "   Language: Python | Stars: 3 | Forks: 1\n"
        "   Description: Widgets\n"
        "   URL: https://x/acme/widget\n"
        "   Default Branch: main\n"
        "   Created: 2024-01-01T00:00:00Z\n"
        "   Updated: 2024-02-01T00:00:00Z"
    )


def test_format_repo_list_missing_fields_and_separator():
    out = format_repo_list([{"full_name": "a/b"}, {"full_name": "a/c", "description": ""}])

    assert "1. a/b [Public]" in out
    assert "   Language: N/A | Stars: 0 | Forks: 0" in out
    assert "   Description: No description" in out
    assert "   Default Branch: N/A" in out
    assert "\n\n2. a/c [Public]" in out


def test_format_empty_lists():
    assert format_repo_list([]) == "No repositories found."
    assert format_issue_list([]) == "No issues found."
    assert format_branch_list([]) == "No branches found."


def test_format_issue_and_branch_lines():
    issues = [
        {"number": 1, "title": "First", "state": "open"},
        {"number": 2, "title": "Second", "state": "closed"},
    ]
    assert format_issue_list(issues) == "#1: First [open]\n#2: Second [closed]"
    assert format_branch_list([{"name": "main"}, {"name": "dev"}]) == "main\ndev"


def test_format_created():
    rec = {"number": 7, "title": "Bug", "html_url": "https://x/7"}
    assert format_created("issue", rec) == "Created issue #7: Bug\nURL: https://x/7"
    assert format_created("PR", rec) == "Created PR #7: Bug\nURL: https://x/7"
