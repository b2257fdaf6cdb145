"""Repositories resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from hubfork.exceptions import ServerError
from hubfork.types.fork import ForkOptions
from hubfork.types.project import HostedProject
from hubfork.types.repos import ParentRepository, RemoteRepository

if TYPE_CHECKING:
    from hubfork.transport import HTTPTransport


def _repo_path(project: HostedProject) -> str:
    return f"/repos/{quote(project.owner, safe='')}/{quote(project.name, safe='')}"


def _parse_repository(data: dict[str, Any]) -> RemoteRepository:
    """
    Parse a repository payload from the REST API.

    Raises:
        ServerError: If the payload has no repository name
    """
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ServerError("INVALID_RESPONSE", "Repository response is missing a name")
    parent_data = data.get("parent")
    parent = None
    if isinstance(parent_data, dict):
        parent = ParentRepository(
            full_name=parent_data.get("full_name", ""),
            html_url=parent_data.get("html_url", ""),
        )
    owner = data.get("owner")
    if not isinstance(owner, dict):
        owner = {}
    return RemoteRepository(
        owner=owner.get("login", ""),
        name=name,
        html_url=data.get("html_url", ""),
        clone_url=data.get("clone_url", ""),
        is_fork=bool(data.get("fork", False)),
        parent=parent,
    )


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, project: HostedProject) -> RemoteRepository:
        """
        Get repository information.

        Args:
            project: Owner and name of the repository

        Returns:
            RemoteRepository including its parent when it is a fork

        Raises:
            NotFoundError: If repository not found
        """
        data = self.transport.request("GET", _repo_path(project))
        return _parse_repository(data)

    def fork(
        self,
        project: HostedProject,
        options: ForkOptions | None = None,
    ) -> RemoteRepository:
        """
        Fork a repository.

        The service answers before the copy is complete; the returned owner
        and name are authoritative for where the fork lives.

        Args:
            project: Repository to fork
            options: Fork options (target organization)

        Returns:
            The fork as reported by the service

        Raises:
            AuthorizationError: If forking into the organization is not allowed
            ValidationError: If the request is rejected
        """
        body = (options or ForkOptions()).to_body()
        data = self.transport.request(
            "POST",
            f"{_repo_path(project)}/forks",
            body=body or None,
        )
        return _parse_repository(data)
