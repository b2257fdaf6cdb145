"""
Pytest fixtures for testing code built on hubfork.
"""

from collections.abc import Generator

import pytest

from hubfork.testing.mock import (
    FakeLocalRepository,
    MockGitHubClient,
    StaticHostConfig,
    create_mock_repository,
)
from hubfork.types.project import HostedProject
from hubfork.types.repos import RemoteRepository

SOURCE_URL = "git@github.com:upstream-org/widget.git"


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient authenticated as "mock-user".

    Example:
        ```python
        def test_fork(mock_client):
            mock_client.repos.configure_fork(error=ValidationError("VALIDATION_FAILED", "nope"))
            ...
            assert mock_client.was_called("repos.fork")
        ```
    """
    client = MockGitHubClient(user="mock-user")
    yield client
    client.reset()


@pytest.fixture
def source_project() -> HostedProject:
    """The project the checkout's origin remote points at."""
    return HostedProject(owner="upstream-org", name="widget")


@pytest.fixture
def local_repo() -> FakeLocalRepository:
    """A checkout with a single "origin" remote on github.com."""
    return FakeLocalRepository({"origin": SOURCE_URL})


@pytest.fixture
def host_config() -> StaticHostConfig:
    """Credentials for "mock-user" that never prompt."""
    return StaticHostConfig(user="mock-user")


@pytest.fixture
def existing_fork(source_project: HostedProject) -> RemoteRepository:
    """mock-user's fork of the source project."""
    return create_mock_repository(
        owner="mock-user", name=source_project.name, parent=source_project
    )


@pytest.fixture
def mock_client_with_fork(
    mock_client: MockGitHubClient, existing_fork: RemoteRepository
) -> MockGitHubClient:
    """A mock client that already has mock-user's fork."""
    mock_client.repos.add_repository(existing_fork)
    return mock_client
