"""hubfork command line interface."""

import logging
import os

import click

from hubfork import __version__
from hubfork.commands import CommandRunner
from hubfork.config import HostConfig
from hubfork.exceptions import HubForkError
from hubfork.fork import ForkRequest, ForkWorkflow
from hubfork.git import LocalRepository
from hubfork.logging import configure_logging

FORK_HELP = """Fork the current project on GitHub and add a git remote for it.

\b
Examples:
  $ hubfork fork
  [ repo forked on GitHub ]
  > git remote add -f USER git@github.com:USER/REPO.git

\b
  $ hubfork fork --org=ORGANIZATION
  [ repo forked on GitHub into the ORGANIZATION organization ]
  > git remote add -f ORGANIZATION git@github.com:ORGANIZATION/REPO.git
"""


@click.group()
@click.version_option(__version__, prog_name="hubfork")
@click.option(
    "-n",
    "--noop",
    is_flag=True,
    help="Show which commands would run without running them or changing anything on GitHub.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log API calls and git commands.")
@click.pass_context
def main(ctx: click.Context, noop: bool, verbose: bool) -> None:
    """Git helper for working with GitHub forks."""
    ctx.ensure_object(dict)
    ctx.obj["noop"] = noop

    if verbose or os.environ.get("HUBFORK_DEBUG") == "1":
        configure_logging(level=logging.DEBUG)


@main.command(help=FORK_HELP)
@click.option("--no-remote", is_flag=True, help="Skip adding a git remote for the fork.")
@click.option(
    "--remote-name",
    metavar="REMOTE",
    default=None,
    help="Name of the new git remote (default: the fork owner).",
)
@click.option(
    "--org",
    "organization",
    metavar="ORGANIZATION",
    default=None,
    help="Fork the repository within this organization.",
)
@click.pass_context
def fork(
    ctx: click.Context,
    no_remote: bool,
    remote_name: str | None,
    organization: str | None,
) -> None:
    noop = ctx.obj.get("noop", False)
    try:
        host_config = ctx.obj.get("host_config") or HostConfig.from_env()
        local_repo = ctx.obj.get("local_repo") or LocalRepository(
            ".", known_hosts=host_config.known_hosts()
        )
        workflow_kwargs = {}
        if "client_factory" in ctx.obj:
            workflow_kwargs["client_factory"] = ctx.obj["client_factory"]
        workflow = ForkWorkflow(local_repo, host_config, **workflow_kwargs)

        result = workflow.run(
            ForkRequest(
                no_remote=no_remote,
                remote_name=remote_name,
                organization=organization,
                noop=noop,
            )
        )

        runner = ctx.obj.get("runner") or CommandRunner(noop=noop)
        runner.run(result.plan)
    except HubForkError as e:
        click.echo(e.message, err=True)
        ctx.exit(1)


if __name__ == "__main__":
    main()
