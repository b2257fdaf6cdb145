"""Repository-related data models."""

from dataclasses import dataclass


@dataclass
class ParentRepository:
    """The repository a fork was created from."""

    full_name: str
    html_url: str


@dataclass
class RemoteRepository:
    """Repository information as reported by the hosting service."""

    owner: str
    name: str
    html_url: str
    clone_url: str = ""
    is_fork: bool = False
    parent: ParentRepository | None = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"
