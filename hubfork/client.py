"""
GitHub API client.

Provides the interface hubfork uses to talk to github.com or a GitHub
Enterprise host.
"""

from typing import Any

import httpx

from hubfork.clients import ReposClient, UsersClient
from hubfork.transport import HTTPTransport, api_base_url
from hubfork.types.project import DEFAULT_HOST, HostCredentials


class GitHubClient:
    """
    Client for the GitHub REST API of a single host.

    Aggregates the resource clients and handles authentication.

    Example:
        ```python
        from hubfork import GitHubClient, HostedProject

        with GitHubClient("github.com", token="ghp_...") as client:
            repo = client.repos.get(HostedProject("octocat", "hello-world"))
            print(repo.parent)
        ```
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        token: str | None = None,
        timeout: float | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            host: Host name (default: github.com)
            token: Access token (optional for anonymous calls)
            timeout: Request timeout in seconds (default: no timeout)
            http_transport: Custom httpx transport (used by tests)
        """
        self.host = host
        self.base_url = api_base_url(host)

        self._transport = HTTPTransport(
            base_url=self.base_url,
            token=token,
            timeout=timeout,
            http_transport=http_transport,
        )

        self.repos = ReposClient(self._transport)
        self.users = UsersClient(self._transport)

    @classmethod
    def from_credentials(
        cls,
        credentials: HostCredentials,
        timeout: float | None = None,
    ) -> "GitHubClient":
        """Create a client authenticated as the given host identity."""
        return cls(
            host=credentials.host,
            token=credentials.token,
            timeout=timeout,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
