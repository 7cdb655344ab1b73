"""
Error-to-text formatting for the MCP boundary.

The host sees exactly one error channel: a ``ToolInvocationError`` whose
message is picked by the kind of the underlying adapter error.
"""

import json

from gha_tools.adapters.github_actions.exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
    GitHubInputError,
    GitHubResponseShapeError,
)


class ToolInvocationError(Exception):
    """Single descriptive failure reported back to the host."""

    pass


_PREFIXES = {
    ErrorKind.VALIDATION: "Validation Error",
    ErrorKind.RESOURCE_NOT_FOUND: "Not Found",
    ErrorKind.AUTHENTICATION: "Authentication Failed",
    ErrorKind.PERMISSION: "Permission Denied",
    ErrorKind.RATE_LIMIT: "Rate Limit Exceeded",
    ErrorKind.CONFLICT: "Conflict",
    ErrorKind.TIMEOUT: "Timeout",
    ErrorKind.NETWORK: "Network Error",
}


def format_github_error(error: GitHubAPIError) -> str:
    """Human-readable message for a classified GitHub API error."""
    prefix = _PREFIXES.get(error.kind, "GitHub API Error")
    message = f"{prefix}: {error.message}"

    if error.kind is ErrorKind.VALIDATION and error.response:
        message += f"\nDetails: {json.dumps(error.response, default=str)}"
    elif error.kind is ErrorKind.RATE_LIMIT and error.reset_at is not None:
        message += f"\nResets at: {error.reset_at.isoformat()}"
    elif error.kind is ErrorKind.TIMEOUT and error.timeout_ms is not None:
        message += f"\nTimeout setting: {error.timeout_ms}ms"
    elif error.kind is ErrorKind.NETWORK and error.error_code:
        message += f"\nError code: {error.error_code}"

    return message


def format_adapter_error(error: GitHubAdapterError) -> str:
    if isinstance(error, GitHubAPIError):
        return format_github_error(error)
    if isinstance(error, GitHubInputError):
        return f"Invalid input: {error}"
    if isinstance(error, GitHubResponseShapeError):
        return f"Unexpected GitHub response: {error}"
    return f"GitHub API Error: {error}"
