"""
Local git repository access.

Reads the remotes configured in a checkout and maps them to hosted projects.
"""

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from hubfork.exceptions import GitCommandError, NotAGitHubProjectError, NotFoundError
from hubfork.logging import log_git_command
from hubfork.types.project import DEFAULT_HOST, HostedProject
from hubfork.urls import GitURL, parse_url

ORIGIN = "origin"
UPSTREAM = "upstream"

# Remotes checked first when looking for the main project.
PREFERRED_REMOTES = (UPSTREAM, "github", ORIGIN)


@dataclass(frozen=True)
class RemoteReference:
    """A configured git remote."""

    name: str
    url: GitURL

    @property
    def project(self) -> HostedProject | None:
        return self.url.project

    @classmethod
    def from_url(cls, name: str, raw_url: str) -> "RemoteReference":
        """
        Build a remote from a configured URL string.

        URLs that are not network URLs (local paths) get a "file" URL that
        maps to no project.
        """
        try:
            url = parse_url(raw_url)
        except ValueError:
            url = GitURL(raw=raw_url, scheme="file", host="", path=raw_url)
        return cls(name=name, url=url)


def run_git(args: Sequence[str], cwd: str | Path | None = None) -> str:
    """
    Run a git command and return its stdout.

    Raises:
        GitCommandError: If git exits with a non-zero status or is missing
    """
    cmd = ["git", *args]
    log_git_command(cmd, str(cwd) if cwd is not None else None)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise GitCommandError(cmd, 127, str(e)) from e
    if result.returncode != 0:
        raise GitCommandError(cmd, result.returncode, result.stderr)
    return result.stdout


def parse_remotes(output: str) -> list[RemoteReference]:
    """
    Parse `git remote -v` output into fetch remotes, in configuration order.

    Each line is "NAME<TAB>URL (fetch|push)"; the URL itself may contain spaces.
    """
    remotes: list[RemoteReference] = []
    seen: set[str] = set()
    for line in output.splitlines():
        name, sep, rest = line.partition("\t")
        rest = rest.strip()
        if not sep or not name or not rest:
            continue
        raw_url, kind = rest, "(fetch)"
        head, _, tail = rest.rpartition(" ")
        if head and tail in ("(fetch)", "(push)"):
            raw_url, kind = head.rstrip(), tail
        if kind != "(fetch)" or name in seen:
            continue
        seen.add(name)
        remotes.append(RemoteReference.from_url(name, raw_url))
    return remotes


class LocalRepository:
    """
    Git checkout accessor.

    Example:
        ```python
        repo = LocalRepository(".", known_hosts=["github.com"])
        project = repo.main_project()
        origin = repo.origin_remote()
        ```
    """

    def __init__(
        self,
        path: str | Path = ".",
        known_hosts: Sequence[str] = (DEFAULT_HOST,),
    ) -> None:
        self.path = Path(path)
        self.known_hosts = [host.lower() for host in known_hosts]
        self._remotes: list[RemoteReference] | None = None

    def remotes(self) -> list[RemoteReference]:
        """
        All configured remotes in configuration order.

        Raises:
            GitCommandError: If the path is not a git checkout
        """
        if self._remotes is None:
            self._remotes = parse_remotes(run_git(["remote", "-v"], cwd=self.path))
        return self._remotes

    def remote_by_name(self, name: str) -> RemoteReference:
        """
        Look up a remote by name.

        Raises:
            NotFoundError: If no remote has that name
        """
        for remote in self.remotes():
            if remote.name == name:
                return remote
        raise NotFoundError("REMOTE_NOT_FOUND", f"Can't find git remote {name}")

    def origin_remote(self) -> RemoteReference:
        """The remote named "origin"."""
        return self.remote_by_name(ORIGIN)

    def main_project(self) -> HostedProject:
        """
        Hosted project of the primary remote.

        Checks "upstream", "github" and "origin" first, then every other
        remote in configuration order, and returns the first project on a
        known host.

        Raises:
            NotAGitHubProjectError: If no remote points at a known host
        """
        remotes = self.remotes()
        preferred = [r for name in PREFERRED_REMOTES for r in remotes if r.name == name]
        others = [r for r in remotes if r.name not in PREFERRED_REMOTES]
        for remote in preferred + others:
            project = remote.project
            if project is not None and project.host in self.known_hosts:
                return project
        raise NotAGitHubProjectError()


__all__ = [
    "LocalRepository",
    "RemoteReference",
    "parse_remotes",
    "run_git",
]
