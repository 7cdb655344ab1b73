"""GitHub Actions adapter exceptions.

Every HTTP-level failure is one ``GitHubAPIError`` tagged with an
``ErrorKind``; callers branch on ``error.kind`` rather than on subclasses.
Local failures that never reach GitHub have their own classes under the
shared ``GitHubAdapterError`` base.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Mapping

RATE_LIMIT_FALLBACK_SECONDS = 60


class ErrorKind(str, Enum):
    """Closed set of GitHub API failure kinds."""

    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    PERMISSION = "permission"
    RATE_LIMIT = "rate_limit"
    CONFLICT = "conflict"
    TIMEOUT = "timeout"
    NETWORK = "network"
    GENERIC = "generic"


class GitHubAdapterError(Exception):
    """Base exception for GitHub Actions adapter."""

    pass


class GitHubInputError(GitHubAdapterError, ValueError):
    """Malformed input rejected before any network call."""

    pass


class GitHubResponseShapeError(GitHubAdapterError):
    """GitHub answered with a body that is not valid JSON or not the expected shape."""

    pass


class GitHubAPIError(GitHubAdapterError):
    """A classified GitHub API failure.

    Attributes:
        kind: Which branch of the taxonomy this error belongs to
        status: HTTP status (408/500 for locally synthesised timeout/network)
        response: Raw response payload, or a synthesised one
        reset_at: When the rate limit resets (RATE_LIMIT only)
        timeout_ms: Configured timeout that elapsed (TIMEOUT only)
        error_code: Low-level transport code such as ``ECONNREFUSED`` (NETWORK only)
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status: int,
        response: Any = None,
        *,
        reset_at: datetime | None = None,
        timeout_ms: int | None = None,
        error_code: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status = status
        self.response = response if response is not None else {"message": message}
        self.reset_at = reset_at
        self.timeout_ms = timeout_ms
        self.error_code = error_code

    def __repr__(self) -> str:
        return f"GitHubAPIError(kind={self.kind.value!r}, status={self.status}, message={self.message!r})"

    @classmethod
    def from_response(
        cls,
        status: int,
        body: Any,
        headers: Mapping[str, str] | None = None,
    ) -> "GitHubAPIError":
        """Classify a non-2xx response by exact status.

        Unmapped statuses fall through to GENERIC and keep the original status.
        """
        upstream_message = _body_message(body)

        if status == 401:
            message = upstream_message or "Authentication failed"
            return cls(ErrorKind.AUTHENTICATION, message, 401, {"message": message})
        if status == 403:
            message = upstream_message or "Insufficient permissions"
            return cls(ErrorKind.PERMISSION, message, 403, {"message": message})
        if status == 404:
            resource = upstream_message or "Resource"
            return cls(
                ErrorKind.RESOURCE_NOT_FOUND,
                f"Resource not found: {resource}",
                404,
                {"message": f"{resource} not found"},
            )
        if status == 409:
            message = upstream_message or "Conflict occurred"
            return cls(ErrorKind.CONFLICT, message, 409, {"message": message})
        if status == 422:
            return cls(
                ErrorKind.VALIDATION,
                upstream_message or "Validation failed",
                422,
                body,
            )
        if status == 429:
            return cls.rate_limited(
                upstream_message or "Rate limit exceeded",
                _rate_limit_reset(body, headers),
            )
        return cls(
            ErrorKind.GENERIC,
            upstream_message or "GitHub API error",
            status,
            body,
        )

    @classmethod
    def rate_limited(cls, message: str, reset_at: datetime) -> "GitHubAPIError":
        return cls(
            ErrorKind.RATE_LIMIT,
            message,
            429,
            {"message": message, "reset_at": reset_at.isoformat()},
            reset_at=reset_at,
        )

    @classmethod
    def timeout(cls, timeout_ms: int) -> "GitHubAPIError":
        """Local synthesis: the per-call timeout elapsed."""
        message = f"Request timeout after {timeout_ms}ms"
        return cls(
            ErrorKind.TIMEOUT,
            message,
            408,
            {"message": message, "timeout_ms": timeout_ms},
            timeout_ms=timeout_ms,
        )

    @classmethod
    def network(cls, error_code: str) -> "GitHubAPIError":
        """Local synthesis: no connection could be made."""
        message = "Unable to connect to GitHub API"
        return cls(
            ErrorKind.NETWORK,
            message,
            500,
            {"message": message, "error_code": error_code},
            error_code=error_code,
        )

    @classmethod
    def wrap(cls, error: BaseException) -> "GitHubAPIError":
        """Wrap an unclassified failure as GENERIC."""
        message = str(error) or type(error).__name__
        return cls(ErrorKind.GENERIC, message, 500, {"message": message})


def _body_message(body: Any) -> str | None:
    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return str(message)
    return None


def _rate_limit_reset(body: Any, headers: Mapping[str, str] | None) -> datetime:
    # Fallback of now + 60s is a guess; GitHub does not always say when the limit resets.
    if isinstance(body, dict) and body.get("reset_at"):
        try:
            reset_at = datetime.fromisoformat(str(body["reset_at"]).replace("Z", "+00:00"))
        except ValueError:
            pass
        else:
            if reset_at.tzinfo is None:
                reset_at = reset_at.replace(tzinfo=timezone.utc)
            return reset_at

    if headers is not None:
        raw = headers.get("x-ratelimit-reset")
        if raw:
            try:
                return datetime.fromtimestamp(int(raw), tz=timezone.utc)
            except (ValueError, OverflowError, OSError):
                pass

    return datetime.now(timezone.utc) + timedelta(seconds=RATE_LIMIT_FALLBACK_SECONDS)
