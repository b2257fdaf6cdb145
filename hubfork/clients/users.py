"""Users resource client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hubfork.transport import HTTPTransport


class UsersClient:
    """Client for the authenticated user."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def current(self) -> str:
        """
        Login of the user the token belongs to.

        Raises:
            AuthenticationError: If the token is rejected
        """
        data = self.transport.request("GET", "/user")
        return data["login"]
