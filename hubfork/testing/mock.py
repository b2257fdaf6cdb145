"""
Test doubles for the fork workflow's collaborators.

Provides a MockGitHubClient that mimics the real client interface without
making API calls, a FakeLocalRepository with in-memory remotes, and a
StaticHostConfig that never prompts.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from hubfork.exceptions import HubForkError, NotFoundError
from hubfork.git import LocalRepository, RemoteReference
from hubfork.types.fork import ForkOptions
from hubfork.types.project import DEFAULT_HOST, HostCredentials, HostedProject
from hubfork.types.repos import ParentRepository, RemoteRepository


@dataclass
class MockResponse:
    """Configuration for a mock response."""

    data: Any
    error: Exception | None = None
    call_count: int = 0


@dataclass
class MockCall:
    """Record of a method call."""

    method: str
    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def _key(owner: str, name: str) -> tuple[str, str]:
    return owner.lower(), name.lower()


class MockReposClient:
    """Mock repos client backed by an in-memory set of repositories."""

    def __init__(self, mock_client: "MockGitHubClient") -> None:
        self._mock = mock_client
        self._responses: dict[str, MockResponse] = {}
        self._repositories: dict[tuple[str, str], RemoteRepository] = {}

    def configure_get(
        self,
        response: RemoteRepository | None = None,
        error: Exception | None = None,
    ) -> None:
        """Configure the response for get() calls."""
        self._responses["get"] = MockResponse(data=response, error=error)

    def configure_fork(
        self,
        response: RemoteRepository | None = None,
        error: Exception | None = None,
    ) -> None:
        """Configure the response for fork() calls."""
        self._responses["fork"] = MockResponse(data=response, error=error)

    def add_repository(self, repository: RemoteRepository) -> None:
        """Make a repository visible to get()."""
        self._repositories[_key(repository.owner, repository.name)] = repository

    def get(self, project: HostedProject) -> RemoteRepository:
        """Mock get method; unknown repositories raise NotFoundError."""
        self._mock._record_call("repos.get", (project,), {})
        configured = self._configured("get")
        if configured is not None:
            return configured

        repository = self._repositories.get(_key(project.owner, project.name))
        if repository is None:
            raise NotFoundError("NOT_FOUND", "Not Found")
        return repository

    def fork(
        self,
        project: HostedProject,
        options: ForkOptions | None = None,
    ) -> RemoteRepository:
        """Mock fork method; the fork becomes visible to later get() calls."""
        options = options or ForkOptions()
        self._mock._record_call("repos.fork", (project,), {"options": options})
        repository = self._configured("fork")
        if repository is None:
            repository = create_mock_repository(
                owner=options.organization or self._mock.user,
                name=project.name,
                host=project.host,
                parent=project,
            )
        self.add_repository(repository)
        return repository

    def _configured(self, method: str) -> Any:
        """Return the configured data for a method, raising its error if set."""
        resp = self._responses.get(method)
        if resp is None:
            return None
        resp.call_count += 1
        if resp.error:
            raise resp.error
        return resp.data


class MockUsersClient:
    """Mock users client for testing."""

    def __init__(self, mock_client: "MockGitHubClient") -> None:
        self._mock = mock_client

    def current(self) -> str:
        self._mock._record_call("users.current", (), {})
        return self._mock.user


class MockGitHubClient:
    """
    Mock GitHub client for testing.

    Provides the same interface as GitHubClient but serves repositories from
    memory instead of making API calls.

    Example:
        ```python
        from hubfork.testing import MockGitHubClient

        mock = MockGitHubClient(user="octocat")
        workflow = ForkWorkflow(repo, config, client_factory=lambda creds: mock)
        workflow.run(ForkRequest())

        assert mock.call_count("repos.fork") == 1
        ```
    """

    def __init__(self, host: str = DEFAULT_HOST, user: str = "mock-user") -> None:
        """
        Initialize the mock client.

        Args:
            host: Host the client pretends to talk to
            user: Login of the authenticated user
        """
        self.host = host
        self.user = user
        self._calls: list[MockCall] = []

        self.repos = MockReposClient(self)
        self.users = MockUsersClient(self)

    def _record_call(
        self,
        method: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        """Record a method call for verification."""
        self._calls.append(MockCall(method=method, args=args, kwargs=kwargs))

    def was_called(self, method: str) -> bool:
        """
        Check if a method was called.

        Args:
            method: Method name (e.g., "repos.get", "repos.fork")
        """
        return any(call.method == method for call in self._calls)

    def call_count(self, method: str) -> int:
        """Get the number of times a method was called."""
        return sum(1 for call in self._calls if call.method == method)

    def get_calls(self, method: str | None = None) -> list[MockCall]:
        """Get recorded calls, optionally filtered by method."""
        if method is None:
            return list(self._calls)
        return [call for call in self._calls if call.method == method]

    def reset(self) -> None:
        """Reset recorded calls, configured responses and stored repositories."""
        self._calls.clear()
        self.repos._responses.clear()
        self.repos._repositories.clear()

    def close(self) -> None:
        """No-op for compatibility with real client."""
        pass

    def __enter__(self) -> "MockGitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class FakeLocalRepository(LocalRepository):
    """LocalRepository whose remotes come from a mapping instead of git."""

    def __init__(
        self,
        remotes: Mapping[str, str] | Iterable[tuple[str, str]],
        known_hosts: Iterable[str] = (DEFAULT_HOST,),
    ) -> None:
        super().__init__(".", known_hosts=tuple(known_hosts))
        pairs = remotes.items() if isinstance(remotes, Mapping) else remotes
        self._remotes = [RemoteReference.from_url(name, url) for name, url in pairs]


class StaticHostConfig:
    """Host configuration that returns fixed credentials without prompting."""

    def __init__(
        self,
        user: str = "mock-user",
        token: str = "mock-token",
        protocol: str = "ssh",
        error: HubForkError | None = None,
    ) -> None:
        self.user = user
        self.token = token
        self._protocol = protocol
        self.error = error
        self.prompted_hosts: list[str] = []

    def known_hosts(self) -> list[str]:
        return [DEFAULT_HOST]

    def protocol(self, host: str) -> str:
        return self._protocol

    def prompt_for_host(self, host: str) -> HostCredentials:
        self.prompted_hosts.append(host)
        if self.error is not None:
            raise self.error
        return HostCredentials(host=host, user=self.user, token=self.token)


def create_mock_repository(
    owner: str = "mock-user",
    name: str = "mock-repo",
    host: str = DEFAULT_HOST,
    parent: HostedProject | None = None,
) -> RemoteRepository:
    """Create a RemoteRepository, optionally forked from parent."""
    project = HostedProject(owner=owner, name=name, host=host)
    parent_repo = None
    if parent is not None:
        parent_repo = ParentRepository(full_name=str(parent), html_url=parent.web_url())
    return RemoteRepository(
        owner=owner,
        name=name,
        html_url=project.web_url(),
        clone_url=project.git_url("https"),
        is_fork=parent is not None,
        parent=parent_repo,
    )
