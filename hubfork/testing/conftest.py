"""
Pytest plugin for hubfork testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["hubfork.testing.conftest"]
"""

from hubfork.testing.fixtures import (
    existing_fork,
    host_config,
    local_repo,
    mock_client,
    mock_client_with_fork,
    source_project,
)

__all__ = [
    "mock_client",
    "mock_client_with_fork",
    "source_project",
    "local_repo",
    "host_config",
    "existing_fork",
]
