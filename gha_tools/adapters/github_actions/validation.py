"""
Input validation for owner, repository and identifier arguments.

Everything here runs before a URL is built, so malformed input never
reaches the network.
"""

import re

from .exceptions import GitHubInputError

_OWNER_RE = re.compile(r"^[a-z0-9](?:[a-z0-9]|-(?=[a-z0-9])){0,38}$")
_REPO_RE = re.compile(r"^[a-z0-9_.-]+$")
_WORKFLOW_FILE_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def validate_owner_name(owner: str) -> str:
    """Normalise and validate a GitHub user or organisation name.

    Returns the stripped, lowercased name. Names must start with a letter
    or digit, contain at most 39 characters, and use single hyphens only
    between alphanumerics.
    """
    sanitized = owner.strip().lower()
    if not sanitized:
        raise GitHubInputError("Owner name cannot be empty")
    if not _OWNER_RE.match(sanitized):
        raise GitHubInputError(
            "Owner name must start with a letter or number and can contain up to 39 characters"
        )
    return sanitized


def validate_repository_name(name: str) -> str:
    """Normalise and validate a repository name."""
    sanitized = name.strip().lower()
    if not sanitized:
        raise GitHubInputError("Repository name cannot be empty")
    if not _REPO_RE.match(sanitized):
        raise GitHubInputError(
            "Repository name can only contain lowercase letters, numbers, hyphens, periods, and underscores"
        )
    if sanitized.startswith(".") or sanitized.endswith("."):
        raise GitHubInputError("Repository name cannot start or end with a period")
    return sanitized


def validate_workflow_id(workflow_id: str | int) -> str | int:
    """Accept a numeric workflow ID or a workflow file name such as ``ci.yml``."""
    if isinstance(workflow_id, bool):
        raise GitHubInputError("Workflow ID must be a number or a workflow file name")
    if isinstance(workflow_id, int):
        if workflow_id <= 0:
            raise GitHubInputError("Workflow ID must be a positive integer")
        return workflow_id

    sanitized = workflow_id.strip()
    if not sanitized:
        raise GitHubInputError("Workflow ID cannot be empty")
    if sanitized in (".", "..") or not _WORKFLOW_FILE_RE.match(sanitized):
        raise GitHubInputError(
            "Workflow ID must be a numeric ID or a file name of letters, numbers, hyphens, periods, and underscores"
        )
    return sanitized


def validate_run_id(run_id: int) -> int:
    if isinstance(run_id, bool) or not isinstance(run_id, int) or run_id <= 0:
        raise GitHubInputError("Run ID must be a positive integer")
    return run_id


def validate_ref(ref: str) -> str:
    sanitized = ref.strip()
    if not sanitized:
        raise GitHubInputError("Ref cannot be empty")
    return sanitized
