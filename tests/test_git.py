"""
Tests for local repository access.
"""

import subprocess

import pytest

from hubfork import git as git_module
from hubfork.exceptions import GitCommandError, NotAGitHubProjectError, NotFoundError
from hubfork.fork import locate_source_remote
from hubfork.git import LocalRepository, parse_remotes
from hubfork.testing import FakeLocalRepository
from hubfork.types.project import HostedProject

REMOTE_OUTPUT = """\
origin\tgit@github.com:me/widget.git (fetch)
origin\tgit@github.com:me/widget.git (push)
upstream\thttps://github.com/upstream-org/widget.git (fetch)
upstream\tno_push (push)
backup\t/srv/backup/widget.git (fetch)
backup\t/srv/backup/widget.git (push)
"""


def test_parse_remotes_keeps_fetch_urls_in_order() -> None:
    remotes = parse_remotes(REMOTE_OUTPUT)

    assert [r.name for r in remotes] == ["origin", "upstream", "backup"]
    assert remotes[1].url.raw == "https://github.com/upstream-org/widget.git"
    assert remotes[2].url.scheme == "file"
    assert remotes[2].project is None


def test_parse_remotes_ignores_blank_lines() -> None:
    assert parse_remotes("\n\n") == []


def test_parse_remotes_keeps_local_paths_with_spaces() -> None:
    output = (
        "origin\t/home/me/My Projects/widget (fetch)\n"
        "origin\t/home/me/My Projects/widget (push)\n"
        "upstream\tgit@github.com:upstream-org/widget.git (fetch)\n"
    )

    remotes = parse_remotes(output)

    assert [r.name for r in remotes] == ["origin", "upstream"]
    assert remotes[0].url.raw == "/home/me/My Projects/widget"
    assert remotes[0].project is None
    assert remotes[1].project == HostedProject("upstream-org", "widget")


def test_remotes_runs_git_remote_v(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, 0, stdout=REMOTE_OUTPUT, stderr="")

    monkeypatch.setattr(git_module.subprocess, "run", fake_run)
    repo = LocalRepository("/work/widget")

    repo.remotes()
    repo.remotes()

    assert len(calls) == 1
    cmd, kwargs = calls[0]
    assert cmd == ["git", "remote", "-v"]
    assert str(kwargs["cwd"]) == "/work/widget"


def test_git_failure_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd, **kwargs):
        return subprocess.CompletedProcess(
            cmd, 128, stdout="", stderr="fatal: not a git repository\n"
        )

    monkeypatch.setattr(git_module.subprocess, "run", fake_run)

    with pytest.raises(GitCommandError) as exc_info:
        LocalRepository("/tmp").remotes()

    assert exc_info.value.returncode == 128
    assert "not a git repository" in exc_info.value.message


def test_main_project_prefers_upstream() -> None:
    repo = FakeLocalRepository(
        {
            "origin": "git@github.com:me/widget.git",
            "upstream": "https://github.com/upstream-org/widget.git",
        }
    )
    assert repo.main_project() == HostedProject("upstream-org", "widget")


def test_main_project_falls_back_to_other_remotes() -> None:
    repo = FakeLocalRepository(
        {
            "origin": "/srv/git/widget.git",
            "mine": "git@github.com:me/widget.git",
        }
    )
    assert repo.main_project() == HostedProject("me", "widget")


def test_main_project_requires_known_host() -> None:
    repo = FakeLocalRepository({"origin": "git@git.example.com:team/widget.git"})
    with pytest.raises(NotAGitHubProjectError):
        repo.main_project()

    enterprise = FakeLocalRepository(
        {"origin": "git@git.example.com:team/widget.git"},
        known_hosts=["github.com", "git.example.com"],
    )
    assert enterprise.main_project() == HostedProject("team", "widget", host="git.example.com")


def test_remote_by_name() -> None:
    repo = FakeLocalRepository({"origin": "git@github.com:me/widget.git"})

    assert repo.origin_remote().name == "origin"
    with pytest.raises(NotFoundError):
        repo.remote_by_name("upstream")


def test_origin_with_spaces_in_path_is_found(monkeypatch: pytest.MonkeyPatch) -> None:
    output = (
        "origin\t/srv/git mirrors/widget.git (fetch)\n"
        "origin\t/srv/git mirrors/widget.git (push)\n"
        "upstream\tgit@github.com:upstream-org/widget.git (fetch)\n"
    )
    monkeypatch.setattr(
        git_module.subprocess,
        "run",
        lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 0, stdout=output, stderr=""),
    )
    repo = LocalRepository("/work/widget")

    assert locate_source_remote(repo).url.raw == "/srv/git mirrors/widget.git"
    assert repo.main_project() == HostedProject("upstream-org", "widget")
