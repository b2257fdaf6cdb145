"""Fork workflow data models."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from hubfork.types.project import HostedProject

if TYPE_CHECKING:
    from hubfork.commands import CommandPlan


@dataclass(frozen=True)
class ForkOptions:
    """Options sent with a fork creation request."""

    organization: str | None = None

    def to_body(self) -> dict[str, Any]:
        """Request body for the creation call; empty when no option is set."""
        body: dict[str, Any] = {}
        if self.organization:
            body["organization"] = self.organization
        return body


@dataclass(frozen=True)
class ForkTarget:
    """Planned owner and local remote name for the fork."""

    owner: str
    remote_name: str
    options: ForkOptions = field(default_factory=ForkOptions)


@dataclass
class ForkResult:
    """Outcome of a fork workflow run."""

    source: HostedProject
    fork: HostedProject
    remote_name: str
    created: bool
    plan: "CommandPlan"
