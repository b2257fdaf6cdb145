"""Hosted project coordinates."""

from dataclasses import dataclass

DEFAULT_HOST = "github.com"

GIT_PROTOCOLS = ("ssh", "https", "git")


@dataclass(frozen=True)
class HostedProject:
    """A repository on a hosting service, identified by host, owner and name."""

    owner: str
    name: str
    host: str = DEFAULT_HOST

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"

    def same_as(self, other: "HostedProject | None") -> bool:
        """
        Compare project identity case-insensitively.

        Args:
            other: Project to compare against (None never matches)

        Returns:
            True if host, owner and name all match ignoring case
        """
        if other is None:
            return False
        return (
            self.host.lower() == other.host.lower()
            and self.owner.lower() == other.owner.lower()
            and self.name.lower() == other.name.lower()
        )

    def web_url(self) -> str:
        """Browser URL of the project."""
        return f"https://{self.host}/{self.owner}/{self.name}"

    def git_url(self, protocol: str = "ssh") -> str:
        """
        Clone URL of the project for a concrete protocol.

        Args:
            protocol: One of "ssh", "https" or "git"

        Returns:
            Clone URL, e.g. "git@github.com:owner/name.git"

        Raises:
            ValueError: If the protocol is not supported
        """
        if protocol == "ssh":
            return f"git@{self.host}:{self.owner}/{self.name}.git"
        if protocol == "https":
            return f"https://{self.host}/{self.owner}/{self.name}.git"
        if protocol == "git":
            return f"git://{self.host}/{self.owner}/{self.name}.git"
        raise ValueError(
            f"Invalid git protocol: {protocol}. Must be one of {', '.join(GIT_PROTOCOLS)}"
        )


@dataclass(frozen=True)
class HostCredentials:
    """Authenticated identity for a host."""

    host: str
    user: str
    token: str

    def __repr__(self) -> str:
        return f"HostCredentials(host={self.host!r}, user={self.user!r}, token='[REDACTED]')"
