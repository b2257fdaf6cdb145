"""
Deferred git commands.

A CommandPlan collects the git invocations a workflow wants run once its own
logic has finished, plus actions to call after they all succeed. The
CommandRunner executes a plan, or only prints it in no-op mode.
"""

import shlex
import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import click

from hubfork.exceptions import GitCommandError
from hubfork.logging import get_logger, log_git_command

logger = get_logger("commands")

AfterAction = Callable[[], None]


@dataclass(frozen=True)
class PlannedCommand:
    """One queued command as an argument vector."""

    argv: tuple[str, ...]

    def __str__(self) -> str:
        return shlex.join(self.argv)


@dataclass
class CommandPlan:
    """Ordered commands and post-execution actions."""

    commands: list[PlannedCommand] = field(default_factory=list)
    after: list[AfterAction] = field(default_factory=list)
    forward: bool = True

    def before(self, *argv: str) -> None:
        """Queue a command to run after the workflow returns."""
        self.commands.append(PlannedCommand(tuple(argv)))

    def after_fn(self, action: AfterAction) -> None:
        """Queue an action to call once every command has succeeded."""
        self.after.append(action)

    def no_forward(self) -> None:
        """Do not forward the invoking subcommand to git itself."""
        self.forward = False

    def __len__(self) -> int:
        return len(self.commands)


class CommandRunner:
    """Executes a CommandPlan in order."""

    def __init__(
        self,
        cwd: str | Path | None = None,
        noop: bool = False,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        """
        Args:
            cwd: Directory to run the commands in (default: current directory)
            noop: Print the commands instead of running them
            echo: Output function for no-op mode
        """
        self.cwd = cwd
        self.noop = noop
        self.echo = echo

    def run(self, plan: CommandPlan) -> None:
        """
        Run every command, then every after-action.

        Raises:
            GitCommandError: On the first command that fails; later commands
                and all after-actions are skipped
        """
        for command in plan.commands:
            if self.noop:
                self.echo(str(command))
                continue
            self._execute(command)

        for action in plan.after:
            action()

    def _execute(self, command: PlannedCommand) -> None:
        log_git_command(command.argv, str(self.cwd) if self.cwd is not None else None)
        try:
            result = subprocess.run(list(command.argv), cwd=self.cwd)
        except OSError as e:
            raise GitCommandError(list(command.argv), 127, str(e)) from e
        if result.returncode != 0:
            logger.debug("%s exited with %d", command, result.returncode)
            raise GitCommandError(list(command.argv), result.returncode)
