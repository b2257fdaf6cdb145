"""hubfork testing utilities.

Provides mock collaborators and fixtures for testing the fork workflow
without git or network access.
"""

from hubfork.testing.mock import (
    FakeLocalRepository,
    MockCall,
    MockGitHubClient,
    MockResponse,
    StaticHostConfig,
    create_mock_repository,
)

__all__ = [
    # Mock collaborators
    "MockGitHubClient",
    "FakeLocalRepository",
    "StaticHostConfig",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository",
]
