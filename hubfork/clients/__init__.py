"""Resource clients for the GitHub REST API."""

from hubfork.clients.repos import ReposClient
from hubfork.clients.users import UsersClient

__all__ = [
    "ReposClient",
    "UsersClient",
]
