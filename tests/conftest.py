from hubfork.testing.fixtures import (  # noqa: F401
    existing_fork,
    host_config,
    local_repo,
    mock_client,
    mock_client_with_fork,
    source_project,
)
