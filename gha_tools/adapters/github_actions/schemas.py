"""GitHub Actions adapter Pydantic schemas.

Response models check the fields the tools rely on and keep every other
field GitHub sends (``extra="allow"``), so new upstream fields never break
validation. Input models describe the arguments each tool accepts; the MCP
server publishes their JSON schema.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _Passthrough(BaseModel):
    model_config = ConfigDict(extra="allow")


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================


class Workflow(_Passthrough):
    """A workflow declared in ``.github/workflows``."""

    id: int
    node_id: str
    name: str
    path: str
    state: str
    created_at: str
    updated_at: str
    url: str
    html_url: str
    badge_url: str


class WorkflowList(_Passthrough):
    total_count: int
    workflows: list[Workflow]


class Account(_Passthrough):
    login: str
    id: int
    node_id: str
    avatar_url: str
    url: str
    html_url: str
    type: str


class Repository(_Passthrough):
    id: int
    node_id: str
    name: str
    full_name: str
    owner: Account
    html_url: str
    description: str | None
    fork: bool
    url: str
    created_at: str | None = None
    updated_at: str | None = None


class WorkflowRun(_Passthrough):
    """One execution of a workflow."""

    id: int
    name: str | None
    node_id: str
    head_branch: str | None
    head_sha: str
    path: str
    display_title: str | None
    run_number: int
    event: str
    status: str | None
    conclusion: str | None
    workflow_id: int
    check_suite_id: int
    check_suite_node_id: str
    url: str
    html_url: str
    created_at: str | None = None
    updated_at: str | None = None
    run_attempt: int
    run_started_at: str | None = None
    jobs_url: str
    logs_url: str
    check_suite_url: str
    artifacts_url: str
    cancel_url: str
    rerun_url: str
    previous_attempt_url: str | None
    workflow_url: str
    repository: Repository
    head_repository: Repository


class WorkflowRunList(_Passthrough):
    total_count: int
    workflow_runs: list[WorkflowRun]


class JobStep(_Passthrough):
    name: str
    status: str
    conclusion: str | None
    number: int
    started_at: str | None
    completed_at: str | None


class Job(_Passthrough):
    """A job within a workflow run."""

    id: int
    run_id: int
    workflow_name: str
    head_branch: str
    run_url: str
    run_attempt: int
    node_id: str
    head_sha: str
    url: str
    html_url: str
    status: str
    conclusion: str | None
    created_at: str
    started_at: str
    completed_at: str | None
    name: str
    steps: list[JobStep]
    check_run_url: str
    labels: list[str]
    runner_id: int | None
    runner_name: str | None
    runner_group_id: int | None
    runner_group_name: str | None


class JobList(_Passthrough):
    total_count: int
    jobs: list[Job]


class PlatformUsage(_Passthrough):
    total_ms: int | None = None
    jobs: int | None = None


class BillableUsage(_Passthrough):
    UBUNTU: PlatformUsage | None = None
    MACOS: PlatformUsage | None = None
    WINDOWS: PlatformUsage | None = None


class WorkflowUsage(_Passthrough):
    """Billable minutes for a workflow in the current billing cycle."""

    billable: BillableUsage | None = None


class ActionAck(BaseModel):
    """Returned by trigger/cancel/rerun, whose endpoints send no body."""

    success: Literal[True] = True
    message: str


# ============================================================================
# TOOL INPUT SCHEMAS
# ============================================================================

RunStatus = Literal[
    "completed",
    "action_required",
    "cancelled",
    "failure",
    "neutral",
    "skipped",
    "stale",
    "success",
    "timed_out",
    "in_progress",
    "queued",
    "requested",
    "waiting",
    "pending",
]


class RepositoryInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    owner: str = Field(..., description="Repository owner (username or organization)")
    repo: str = Field(..., description="Repository name")


class ListWorkflowsInput(RepositoryInput):
    """Input schema for ListWorkflowsTool."""

    page: int | None = Field(None, ge=1, description="Page number for pagination")
    per_page: int | None = Field(
        None, alias="perPage", ge=1, le=100, description="Results per page (max 100)"
    )


class GetWorkflowInput(RepositoryInput):
    """Input schema for GetWorkflowTool and GetWorkflowUsageTool."""

    workflow_id: str | int = Field(
        ..., alias="workflowId", description="The ID of the workflow or filename"
    )


class ListWorkflowRunsInput(RepositoryInput):
    """Input schema for ListWorkflowRunsTool."""

    workflow_id: str | int | None = Field(
        None, alias="workflowId", description="The ID of the workflow or filename"
    )
    actor: str | None = Field(
        None, description="Returns someone's workflow runs. Use the login for the user"
    )
    branch: str | None = Field(None, description="Returns workflow runs associated with a branch")
    event: str | None = Field(None, description="Returns workflow runs triggered by the event")
    status: RunStatus | None = Field(
        None, description="Returns workflow runs with the check run status"
    )
    created: str | None = Field(
        None, description="Returns workflow runs created within date range (YYYY-MM-DD)"
    )
    exclude_pull_requests: bool | None = Field(
        None,
        alias="excludePullRequests",
        description="If true, pull requests are omitted from the response",
    )
    check_suite_id: int | None = Field(
        None, alias="checkSuiteId", description="Returns workflow runs with the check_suite_id"
    )
    page: int | None = Field(None, ge=1, description="Page number for pagination")
    per_page: int | None = Field(
        None, alias="perPage", ge=1, le=100, description="Results per page (max 100)"
    )


class RunInput(RepositoryInput):
    """Input schema for the single-run tools (get, cancel, rerun)."""

    run_id: int = Field(..., alias="runId", description="The ID of the workflow run")


class GetWorkflowRunJobsInput(RunInput):
    """Input schema for GetWorkflowRunJobsTool."""

    filter: Literal["latest", "all"] | None = Field(
        None, description="Filter jobs by their completed_at date"
    )
    page: int | None = Field(None, ge=1, description="Page number for pagination")
    per_page: int | None = Field(
        None, alias="perPage", ge=1, le=100, description="Results per page (max 100)"
    )


class TriggerWorkflowInput(RepositoryInput):
    """Input schema for TriggerWorkflowTool."""

    workflow_id: str | int = Field(
        ..., alias="workflowId", description="The ID of the workflow or filename"
    )
    ref: str = Field(..., description="The reference of the workflow run (branch, tag, or SHA)")
    inputs: dict[str, str] | None = Field(None, description="Input parameters for the workflow")
