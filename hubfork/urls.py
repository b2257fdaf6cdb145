"""
Git remote URL parsing.

Turns the URL strings found in git configuration and in hosting service
responses into a GitURL that knows which hosted project, if any, it points at.
"""

import re
from dataclasses import dataclass
from urllib.parse import urlparse

from hubfork.types.project import HostedProject

# git@github.com:owner/name.git
_SCP_LIKE = re.compile(r"^(?:(?P<user>[^@/]+)@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")

_URL_SCHEMES = ("ssh", "git", "http", "https", "git+ssh", "ssh+git")


@dataclass(frozen=True)
class GitURL:
    """A parsed remote URL."""

    raw: str
    scheme: str
    host: str
    path: str
    project: HostedProject | None = None

    def __str__(self) -> str:
        return self.raw


def normalize_host(host: str) -> str:
    """
    Lowercase a host and fold the aliases GitHub serves git over.

    "ssh.github.com" and "www.github.com" both map to "github.com".
    """
    host = host.lower()
    for prefix in ("ssh.", "www."):
        if host.startswith(prefix):
            host = host[len(prefix):]
    return host


def project_from_path(host: str, path: str) -> HostedProject | None:
    """
    Build a HostedProject from the path component of a URL.

    Args:
        host: Already normalized host name
        path: URL path such as "/owner/name.git" or "owner/name/tree/main"

    Returns:
        The project, or None if the path does not start with owner/name
    """
    parts = [part for part in path.strip("/").split("/") if part]
    if len(parts) < 2:
        return None
    owner, name = parts[0], parts[1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    if not owner or not name:
        return None
    return HostedProject(owner=owner, name=name, host=host)


def parse_url(raw: str) -> GitURL:
    """
    Parse a git remote URL.

    Accepts scheme URLs (https, http, ssh, git) and the scp-like
    "user@host:path" syntax git uses for SSH remotes.

    Args:
        raw: URL string

    Returns:
        GitURL with the project filled in when the path has owner/name

    Raises:
        ValueError: If the string is not a remote URL (e.g. a local path)
    """
    text = raw.strip()
    if not text:
        raise ValueError("empty remote URL")

    if "://" in text:
        parsed = urlparse(text)
        scheme = parsed.scheme.lower()
        if scheme not in _URL_SCHEMES or not parsed.hostname:
            raise ValueError(f"unsupported remote URL: {raw}")
        host = normalize_host(parsed.hostname)
        return GitURL(
            raw=raw,
            scheme=scheme,
            host=host,
            path=parsed.path,
            project=project_from_path(host, parsed.path),
        )

    match = _SCP_LIKE.match(text)
    if match is None:
        raise ValueError(f"unsupported remote URL: {raw}")

    host = normalize_host(match.group("host"))
    path = match.group("path")
    return GitURL(
        raw=raw,
        scheme="ssh",
        host=host,
        path=path,
        project=project_from_path(host, path),
    )


__all__ = [
    "GitURL",
    "normalize_host",
    "parse_url",
    "project_from_path",
]
