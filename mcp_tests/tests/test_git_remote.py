import subprocess

import pytest

from core import git_remote
from core.git_remote import detect_git_remote, parse_remote_url


@pytest.mark.parametrize(
    "url",
    [
        "git@host:acme/widget.git",
        "git@github.com:acme/widget",
        "https://gitea.example.com/acme/widget.git",
        "https://gitea.example.com/acme/widget/",
        "ssh://git@host:2222/acme/widget.git",
    ],
)
def test_parse_remote_url_variants(url):
    remote = parse_remote_url(url)
    assert remote is not None
    assert (remote.owner, remote.repo) == ("acme", "widget")
    assert remote.url == url


def test_parse_remote_url_keeps_dots_in_repo_name():
    remote = parse_remote_url("https://host/acme/widget.js.git")
    assert remote.repo == "widget.js"


@pytest.mark.parametrize("bad", ["", "not a url", "widget"])
def test_parse_remote_url_malformed(bad):
    assert parse_remote_url(bad) is None


def _fake_run(stdout="", exc=None):
    def run(*args, **kwargs):
        if exc is not None:
            raise exc
        return subprocess.CompletedProcess(args=args[0], returncode=0, stdout=stdout, stderr="")
    return run


def test_detect_git_remote_success(monkeypatch):
    monkeypatch.setattr(git_remote.subprocess, "run", _fake_run("git@host:acme/widget.git\n"))
    remote = detect_git_remote("/tmp")
    assert (remote.owner, remote.repo, remote.url) == ("acme", "widget", "git@host:acme/widget.git")


@pytest.mark.parametrize(
    "exc",
    [
        FileNotFoundError("git"),
        subprocess.CalledProcessError(2, ["git"]),
        subprocess.TimeoutExpired(["git"], 5),
    ],
)
def test_detect_git_remote_failures_return_none(monkeypatch, exc):
    monkeypatch.setattr(git_remote.subprocess, "run", _fake_run(exc=exc))
    assert detect_git_remote("/tmp") is None


def test_detect_git_remote_unparseable_returns_none(monkeypatch):
    monkeypatch.setattr(git_remote.subprocess, "run", _fake_run("somewhere\n"))
    assert detect_git_remote("/tmp") is None
