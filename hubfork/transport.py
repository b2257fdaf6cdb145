"""
HTTP Transport for the GitHub REST API.

Handles HTTP communication, token authentication and error handling. Every
call is made exactly once; failures surface immediately.
"""

import time
from typing import Any

import httpx

from hubfork.exceptions import (
    AuthenticationError,
    AuthorizationError,
    HubForkError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from hubfork.logging import log_http_request, log_http_response

USER_AGENT = "hubfork"
GITHUB_MEDIA_TYPE = "application/vnd.github+json"


def api_base_url(host: str) -> str:
    """
    REST API root for a host.

    github.com is served from api.github.com; Enterprise hosts serve the API
    under /api/v3.
    """
    if host.lower() == "github.com":
        return "https://api.github.com"
    return f"https://{host}/api/v3"


class HTTPTransport:
    """
    HTTP transport layer with token authentication.

    Handles:
    - Authorization and media type headers on every request
    - Error response parsing into typed exceptions
    - Rate limit reset times from Retry-After and X-RateLimit-Reset
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: OAuth or personal access token (optional for anonymous calls)
            timeout: Request timeout in seconds (default: no timeout)
            http_transport: Custom httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        headers = {
            "Accept": GITHUB_MEDIA_TYPE,
            "User-Agent": USER_AGENT,
        }
        if token:
            headers["Authorization"] = f"token {token}"

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
            transport=http_transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method
            path: API path (e.g., "/repos/owner/name")
            params: Query parameters
            body: JSON request body (for POST/PATCH)

        Returns:
            Parsed JSON object (empty dict for empty bodies)

        Raises:
            HubForkError: On API errors, connection failures and replies
                that are not a JSON object
        """
        log_http_request(method, f"{self.base_url}{path}", dict(self._client.headers), body)
        started = time.monotonic()
        try:
            response = self._client.request(method, path, params=params, json=body)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e
        elapsed_ms = (time.monotonic() - started) * 1000

        if response.status_code >= 400:
            log_http_response(
                response.status_code, str(response.request.url), None, elapsed_ms
            )
            raise self._parse_error_response(response)

        data = self._parse_body(response)
        log_http_response(response.status_code, str(response.request.url), data, elapsed_ms)
        return data

    @staticmethod
    def _parse_body(response: httpx.Response) -> dict[str, Any]:
        """
        Decode a successful response body.

        Raises:
            ServerError: If the body is not a JSON object
        """
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            content_type = response.headers.get("Content-Type", "unknown content type")
            raise ServerError(
                "INVALID_RESPONSE",
                f"Unexpected non-JSON response from {response.request.url.host} "
                f"({content_type})",
                response.headers.get("X-GitHub-Request-Id"),
            ) from e
        if not isinstance(data, dict):
            raise ServerError(
                "INVALID_RESPONSE",
                f"Unexpected JSON {type(data).__name__} from {response.request.url.host}",
                response.headers.get("X-GitHub-Request-Id"),
            )
        return data

    def _parse_error_response(self, response: httpx.Response) -> HubForkError:
        """
        Parse a GitHub error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate HubForkError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        message = data.get("message") or f"HTTP {response.status_code}"
        details = [
            error.get("message") or error.get("code")
            for error in data.get("errors", [])
            if isinstance(error, dict) and (error.get("message") or error.get("code"))
        ]
        if details:
            message = f"{message} ({'; '.join(details)})"
        request_id = response.headers.get("X-GitHub-Request-Id")

        status_code = response.status_code

        if status_code == 429 or (
            status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            return RateLimitedError(
                "RATE_LIMITED", message, self._rate_limit_wait(response), request_id
            )
        elif status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id)
        elif status_code == 403:
            return AuthorizationError("FORBIDDEN", message, request_id)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, request_id)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id)
        else:
            return ValidationError("VALIDATION_FAILED", message, request_id)

    @staticmethod
    def _rate_limit_wait(response: httpx.Response) -> int:
        """Seconds until the rate limit resets, from Retry-After or X-RateLimit-Reset."""
        retry_after = response.headers.get("Retry-After")
        if retry_after is not None:
            try:
                return int(retry_after)
            except ValueError:
                pass
        reset = response.headers.get("X-RateLimit-Reset")
        if reset is not None:
            try:
                return max(0, int(reset) - int(time.time()))
            except ValueError:
                pass
        return 60
