"""hubfork exception classes."""


class HubForkError(Exception):
    """Base exception for all hubfork errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(HubForkError):
    """Raised when local configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class GitCommandError(HubForkError):
    """Raised when a git subprocess exits with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, stderr: str = "") -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__("GIT_COMMAND_FAILED", f"{' '.join(args)}: {detail}")


# Hosting service errors, parsed from HTTP responses.


class AuthenticationError(HubForkError):
    """Raised when the token is missing or rejected (401)."""

    pass


class AuthorizationError(HubForkError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(HubForkError):
    """Raised when a resource is not found."""

    pass


class RateLimitedError(HubForkError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(HubForkError):
    """Raised on validation errors (422 and other 4xx)."""

    pass


class ServerError(HubForkError):
    """Raised on server errors (5xx), connection failures and unreadable replies."""

    pass


# Fork workflow errors. All of them are fatal.


class NotAGitHubProjectError(HubForkError):
    """No configured remote maps to a known hosted project."""

    def __init__(self) -> None:
        super().__init__(
            "NOT_A_GITHUB_PROJECT",
            "Error: repository under 'origin' remote is not a GitHub project",
        )


class HostResolutionError(HubForkError):
    """Resolving credentials for a host failed."""

    def __init__(self, context: str, cause: Exception) -> None:
        self.cause = cause
        reason = getattr(cause, "message", None) or str(cause)
        super().__init__("HOST_RESOLUTION_FAILED", f"Error {context}: {reason}")


class NoOriginRemoteError(HubForkError):
    """Neither an 'origin' nor an 'upstream' remote is configured."""

    def __init__(self) -> None:
        super().__init__(
            "NO_ORIGIN_REMOTE", "Error creating fork: No origin git remote found"
        )


class ForkAlreadyExistsError(HubForkError):
    """A repository occupies the fork target but is not a fork of the source."""

    def __init__(self, project: str, host: str) -> None:
        self.project = project
        self.host = host
        super().__init__(
            "FORK_ALREADY_EXISTS",
            f"Error creating fork: {project} already exists on {host}",
        )


class ForkCreationError(HubForkError):
    """The fork creation request failed; the service message is kept as-is."""

    def __init__(self, cause: HubForkError) -> None:
        self.cause = cause
        super().__init__(cause.code, cause.message, cause.request_id)
