"""hubfork - fork the current GitHub project and add a git remote for it."""

from hubfork.client import GitHubClient
from hubfork.commands import CommandPlan, CommandRunner, PlannedCommand
from hubfork.config import HostConfig
from hubfork.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ForkAlreadyExistsError,
    ForkCreationError,
    GitCommandError,
    HostResolutionError,
    HubForkError,
    NoOriginRemoteError,
    NotAGitHubProjectError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from hubfork.fork import ForkRequest, ForkWorkflow
from hubfork.git import LocalRepository, RemoteReference
from hubfork.logging import configure_logging, get_logger
from hubfork.transport import HTTPTransport
from hubfork.types import (
    ForkOptions,
    ForkResult,
    ForkTarget,
    HostCredentials,
    HostedProject,
    ParentRepository,
    RemoteRepository,
)
from hubfork.urls import GitURL, parse_url

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Workflow
    "ForkWorkflow",
    "ForkRequest",
    "ForkResult",
    "ForkTarget",
    "ForkOptions",
    # Collaborators
    "GitHubClient",
    "HostConfig",
    "LocalRepository",
    "RemoteReference",
    "CommandPlan",
    "CommandRunner",
    "PlannedCommand",
    # Types
    "HostedProject",
    "HostCredentials",
    "RemoteRepository",
    "ParentRepository",
    "GitURL",
    "parse_url",
    # Exceptions
    "HubForkError",
    "NotAGitHubProjectError",
    "HostResolutionError",
    "NoOriginRemoteError",
    "ForkAlreadyExistsError",
    "ForkCreationError",
    "GitCommandError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "ConfigurationError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
