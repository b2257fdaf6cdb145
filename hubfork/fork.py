"""
The fork workflow.

Forks the current project on the hosting service and plans the git commands
that add a local remote for the fork. The stages run strictly in order and
each either returns a value or raises a HubForkError; nothing is retried and
no command is planned unless every stage succeeded.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import click

from hubfork.client import GitHubClient
from hubfork.commands import CommandPlan
from hubfork.exceptions import (
    ForkAlreadyExistsError,
    ForkCreationError,
    HostResolutionError,
    HubForkError,
    NoOriginRemoteError,
    NotAGitHubProjectError,
)
from hubfork.git import UPSTREAM
from hubfork.logging import get_logger
from hubfork.types.fork import ForkOptions, ForkResult, ForkTarget
from hubfork.types.project import HostCredentials, HostedProject
from hubfork.urls import parse_url

if TYPE_CHECKING:
    from hubfork.config import HostConfig
    from hubfork.git import LocalRepository, RemoteReference

logger = get_logger("fork")

ClientFactory = Callable[[HostCredentials], GitHubClient]


@dataclass(frozen=True)
class ForkRequest:
    """Command-line choices for one fork run."""

    no_remote: bool = False
    remote_name: str | None = None
    organization: str | None = None
    noop: bool = False


def resolve_project(
    local_repo: "LocalRepository", host_config: "HostConfig"
) -> tuple[HostedProject, HostCredentials]:
    """
    Find the hosted project of the checkout and the credentials for its host.

    Raises:
        NotAGitHubProjectError: If no remote maps to a hosted project
        HostResolutionError: If credentials cannot be resolved
    """
    try:
        project = local_repo.main_project()
    except HubForkError as e:
        logger.debug("main project lookup failed: %s", e)
        raise NotAGitHubProjectError() from e

    try:
        credentials = host_config.prompt_for_host(project.host)
    except HubForkError as e:
        raise HostResolutionError("forking repository", e) from e

    return project, credentials


def locate_source_remote(local_repo: "LocalRepository") -> "RemoteReference":
    """
    Pick the remote whose URL seeds the fork's remote: "origin", else "upstream".

    Raises:
        NoOriginRemoteError: If neither remote is configured
    """
    try:
        return local_repo.origin_remote()
    except HubForkError:
        pass
    try:
        return local_repo.remote_by_name(UPSTREAM)
    except HubForkError as e:
        raise NoOriginRemoteError() from e


def plan_fork_target(
    credentials: HostCredentials,
    organization: str | None = None,
    remote_name: str | None = None,
) -> ForkTarget:
    """Decide who owns the fork and what the local remote is called."""
    owner = organization or credentials.user
    options = ForkOptions(organization=organization or None)
    return ForkTarget(
        owner=owner,
        remote_name=remote_name or owner,
        options=options,
    )


def reconcile_fork(
    client: GitHubClient,
    source: HostedProject,
    target: ForkTarget,
    noop: bool = False,
) -> tuple[HostedProject, bool]:
    """
    Make sure the fork exists and return where it lives.

    An existing repository at the target is reused only when the service
    reports the source project as its parent. Any lookup error counts as
    "does not exist".

    Args:
        client: API client for the source host
        source: Project being forked
        target: Planned owner and options
        noop: Skip the creation request

    Returns:
        (fork coordinates, whether a creation request was made)

    Raises:
        ForkAlreadyExistsError: If the target is taken by something that is not a fork of source
        ForkCreationError: If the creation request fails
    """
    planned = HostedProject(owner=target.owner, name=source.name, host=source.host)

    try:
        existing = client.repos.get(planned)
    except HubForkError as e:
        logger.debug("%s not found on %s: %s", planned, planned.host, e)
    else:
        parent_project = None
        if existing.parent is not None:
            try:
                parent_project = parse_url(existing.parent.html_url).project
            except ValueError:
                parent_project = None
        if not source.same_as(parent_project):
            raise ForkAlreadyExistsError(str(planned), planned.host)
        logger.info("Reusing existing fork %s", planned)
        return planned, False

    if noop:
        logger.info("Dry run: not forking %s", source)
        return planned, False

    logger.info("Forking %s into %s", source, target.owner)
    try:
        created = client.repos.fork(source, target.options)
    except HubForkError as e:
        raise ForkCreationError(e) from e

    return HostedProject(owner=created.owner, name=created.name, host=source.host), True


def emit_remote_commands(
    plan: CommandPlan,
    source_remote: "RemoteReference",
    fork: HostedProject,
    remote_name: str,
    protocol: str,
    echo: Callable[[str], None] = click.echo,
) -> None:
    """
    Queue the commands that add the fork's remote.

    The remote is added and fetched from the source URL first and only then
    pointed at the fork, followed by a confirmation line.
    """
    fork_url = fork.git_url(protocol)
    plan.before("git", "remote", "add", "-f", remote_name, source_remote.url.raw)
    plan.before("git", "remote", "set-url", remote_name, fork_url)

    def confirm() -> None:
        echo(f"new remote: {remote_name}")

    plan.after_fn(confirm)


class ForkWorkflow:
    """
    Runs the fork stages against a checkout.

    Example:
        ```python
        workflow = ForkWorkflow(LocalRepository("."), HostConfig.from_env())
        result = workflow.run(ForkRequest(organization="acme"))
        CommandRunner().run(result.plan)
        ```
    """

    def __init__(
        self,
        local_repo: "LocalRepository",
        host_config: "HostConfig",
        client_factory: ClientFactory = GitHubClient.from_credentials,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self.local_repo = local_repo
        self.host_config = host_config
        self.client_factory = client_factory
        self.echo = echo

    def run(self, request: ForkRequest) -> ForkResult:
        """
        Fork the current project and plan the remote commands.

        Returns:
            ForkResult whose plan is empty when request.no_remote is set

        Raises:
            HubForkError: Any fatal stage error; nothing is planned in that case
        """
        source, credentials = resolve_project(self.local_repo, self.host_config)
        source_remote = locate_source_remote(self.local_repo)
        target = plan_fork_target(
            credentials,
            organization=request.organization,
            remote_name=request.remote_name,
        )
        protocol = None
        if not request.no_remote:
            protocol = self.host_config.protocol(source.host)

        with self.client_factory(credentials) as client:
            fork, created = reconcile_fork(client, source, target, noop=request.noop)

        plan = CommandPlan()
        plan.no_forward()
        if protocol is not None:
            emit_remote_commands(
                plan,
                source_remote,
                fork,
                target.remote_name,
                protocol,
                echo=self.echo,
            )

        return ForkResult(
            source=source,
            fork=fork,
            remote_name=target.remote_name,
            created=created,
            plan=plan,
        )
