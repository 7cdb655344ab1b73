"""GitHub Actions API client.

``GitHubActionsClient.request`` is the only place that talks to GitHub.
It restricts calls to the trusted API host, applies the shared request
quota and the per-call timeout, and turns every failure into one of the
adapter's exceptions. The operation methods build on it, one REST call
each, and validate the shape of what comes back.

No retries: a single attempt per call is the whole failure policy.
"""

import asyncio
import errno
import socket
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from gha_config.settings import Settings
from gha_obs.logging import get_logger
from gha_tools import __version__

from .exceptions import (
    GitHubAPIError,
    GitHubInputError,
    GitHubResponseShapeError,
)
from .quota import RequestQuota
from .schemas import (
    ActionAck,
    JobList,
    Workflow,
    WorkflowList,
    WorkflowRun,
    WorkflowRunList,
    WorkflowUsage,
)
from .validation import (
    validate_owner_name,
    validate_ref,
    validate_repository_name,
    validate_run_id,
    validate_workflow_id,
)

API_BASE_URL = "https://api.github.com"
API_HOST = "api.github.com"
DEFAULT_TIMEOUT_MS = 30000
USER_AGENT = f"github-actions-mcp/v{__version__} python-httpx/{httpx.__version__}"

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = get_logger(__name__)


def build_url(base_url: str, params: Mapping[str, Any]) -> str:
    """Append query parameters to ``base_url``, skipping ``None`` values.

    Booleans become ``"true"``/``"false"``; everything else goes through ``str()``.
    """
    query: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query.append((key, "true" if value else "false"))
        else:
            query.append((key, str(value)))

    url = httpx.URL(base_url)
    if query:
        url = url.copy_merge_params(query)
    return str(url)


class GitHubActionsClient:
    """GitHub Actions REST client.

    Provides:
    - Trusted-host URL check
    - Client-side request quota (shared ``RequestQuota``)
    - Per-call timeout
    - Error classification into ``GitHubAPIError`` kinds
    - Shape validation of every read response
    """

    def __init__(
        self,
        token: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        quota: RequestQuota | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize GitHub Actions client.

        Args:
            token: GitHub personal access token (no Authorization header when empty)
            timeout_ms: Default per-call timeout in milliseconds
            quota: Shared request quota; a private 60/minute quota when omitted
            http_client: Reusable HTTP client; a short-lived one per call when omitted
        """
        self.token = token
        self.timeout_ms = timeout_ms
        self.quota = quota if quota is not None else RequestQuota()
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        quota: RequestQuota | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "GitHubActionsClient":
        return cls(
            token=settings.GITHUB_PERSONAL_ACCESS_TOKEN or None,
            timeout_ms=settings.GITHUB_REQUEST_TIMEOUT_MS,
            quota=quota
            if quota is not None
            else RequestQuota(max_requests=settings.GITHUB_RATE_LIMIT_PER_MINUTE),
            http_client=http_client,
        )

    async def aclose(self) -> None:
        """Close the HTTP client handed to the constructor, if any."""
        if self._http_client is not None:
            await self._http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    # ========================================================================
    # REQUEST GATEWAY
    # ========================================================================

    def _get_headers(self, overrides: Mapping[str, str] | None = None) -> dict[str, str]:
        """Get request headers with authentication."""
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            **(overrides or {}),
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    @staticmethod
    def _check_trusted_url(url: str) -> None:
        message = f"Invalid GitHub API URL. Only {API_BASE_URL}/ URLs are allowed."
        if not url.startswith(f"{API_BASE_URL}/"):
            raise GitHubInputError(message)
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise GitHubInputError(message) from e
        if parsed.scheme != "https" or parsed.host != API_HOST or parsed.port is not None:
            raise GitHubInputError(message)

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: Any,
        timeout_seconds: float,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {"headers": headers, "timeout": timeout_seconds}
        if body is not None:
            kwargs["json"] = body

        if self._http_client is not None:
            return await self._http_client.request(method, url, **kwargs)

        async with httpx.AsyncClient(timeout=timeout_seconds) as client:
            return await client.request(method, url, **kwargs)

    async def request(
        self,
        url: str,
        *,
        method: str = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> Any:
        """Send one request to the GitHub API.

        Args:
            url: Absolute ``https://api.github.com/...`` URL
            method: HTTP method
            body: JSON-serialisable request body
            headers: Header overrides merged over the defaults
            timeout_ms: Per-call timeout, defaults to the client's

        Returns:
            Parsed JSON body, or the raw text for non-JSON responses

        Raises:
            GitHubInputError: URL outside the trusted host
            GitHubAPIError: Quota exhausted, non-2xx status, timeout or transport failure
            GitHubResponseShapeError: JSON body could not be decoded
        """
        self._check_trusted_url(url)
        try:
            self.quota.acquire()
        except GitHubAPIError:
            logger.warning("github_quota_exhausted", method=method, url=url)
            raise

        timeout_ms = timeout_ms or self.timeout_ms
        logger.debug(
            "github_request", method=method, url=url, quota_remaining=self.quota.remaining
        )

        try:
            response = await asyncio.wait_for(
                self._send(method, url, self._get_headers(headers), body, timeout_ms / 1000),
                timeout=timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning("github_request_timeout", method=method, url=url, timeout_ms=timeout_ms)
            raise GitHubAPIError.timeout(timeout_ms) from e
        except Exception as e:
            error_code = _transport_error_code(e)
            if error_code is not None:
                logger.warning(
                    "github_request_network_error", method=method, url=url, error_code=error_code
                )
                raise GitHubAPIError.network(error_code) from e
            logger.warning("github_request_transport_error", method=method, url=url, error=str(e))
            raise GitHubAPIError.wrap(e) from e

        parsed = _parse_body(response)

        if not response.is_success:
            error = GitHubAPIError.from_response(response.status_code, parsed, response.headers)
            logger.warning(
                "github_request_failed",
                method=method,
                url=url,
                status=error.status,
                kind=error.kind.value,
            )
            raise error

        return parsed

    # ========================================================================
    # OPERATIONS
    # ========================================================================

    @staticmethod
    def _actions_url(owner: str, repo: str, path: str) -> str:
        owner = validate_owner_name(owner)
        repo = validate_repository_name(repo)
        return f"{API_BASE_URL}/repos/{owner}/{repo}/actions/{path}"

    @staticmethod
    def _parse(model: type[ModelT], body: Any) -> ModelT:
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise GitHubResponseShapeError(
                f"Unexpected {model.__name__} response from GitHub: {e}"
            ) from e

    async def list_workflows(
        self,
        owner: str,
        repo: str,
        page: int | None = None,
        per_page: int | None = None,
    ) -> WorkflowList:
        """List workflows in a repository.

        Args:
            owner: Repository owner
            repo: Repository name
            page: Page number
            per_page: Results per page (max 100)

        Returns:
            Validated workflow list
        """
        url = build_url(
            self._actions_url(owner, repo, "workflows"),
            {"page": page, "per_page": per_page},
        )
        return self._parse(WorkflowList, await self.request(url))

    async def get_workflow(self, owner: str, repo: str, workflow_id: str | int) -> Workflow:
        """Get one workflow by numeric ID or file name."""
        workflow_id = validate_workflow_id(workflow_id)
        url = self._actions_url(owner, repo, f"workflows/{workflow_id}")
        return self._parse(Workflow, await self.request(url))

    async def get_workflow_usage(
        self, owner: str, repo: str, workflow_id: str | int
    ) -> WorkflowUsage:
        """Get billable usage of a workflow."""
        workflow_id = validate_workflow_id(workflow_id)
        url = self._actions_url(owner, repo, f"workflows/{workflow_id}/timing")
        return self._parse(WorkflowUsage, await self.request(url))

    async def list_workflow_runs(
        self,
        owner: str,
        repo: str,
        workflow_id: str | int | None = None,
        actor: str | None = None,
        branch: str | None = None,
        event: str | None = None,
        status: str | None = None,
        created: str | None = None,
        exclude_pull_requests: bool | None = None,
        check_suite_id: int | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> WorkflowRunList:
        """List workflow runs for a repository, or for one workflow.

        Args:
            owner: Repository owner
            repo: Repository name
            workflow_id: Restrict to this workflow (ID or file name)
            actor: Login of the user who triggered the runs
            branch: Branch the runs are associated with
            event: Triggering event, e.g. ``push``
            status: Check run status or conclusion
            created: Date range such as ``>=2024-01-01``
            exclude_pull_requests: Omit pull requests from the response
            check_suite_id: Runs of this check suite
            page: Page number
            per_page: Results per page (max 100)

        Returns:
            Validated run list
        """
        if workflow_id is not None:
            workflow_id = validate_workflow_id(workflow_id)
            path = f"workflows/{workflow_id}/runs"
        else:
            path = "runs"

        url = build_url(
            self._actions_url(owner, repo, path),
            {
                "actor": actor,
                "branch": branch,
                "event": event,
                "status": status,
                "created": created,
                "exclude_pull_requests": exclude_pull_requests,
                "check_suite_id": check_suite_id,
                "page": page,
                "per_page": per_page,
            },
        )
        return self._parse(WorkflowRunList, await self.request(url))

    async def get_workflow_run(self, owner: str, repo: str, run_id: int) -> WorkflowRun:
        run_id = validate_run_id(run_id)
        url = self._actions_url(owner, repo, f"runs/{run_id}")
        return self._parse(WorkflowRun, await self.request(url))

    async def get_workflow_run_jobs(
        self,
        owner: str,
        repo: str,
        run_id: int,
        filter: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> JobList:
        """List jobs of a workflow run.

        Args:
            owner: Repository owner
            repo: Repository name
            run_id: Workflow run ID
            filter: ``latest`` or ``all`` attempts
            page: Page number
            per_page: Results per page (max 100)

        Returns:
            Validated job list
        """
        run_id = validate_run_id(run_id)
        url = build_url(
            self._actions_url(owner, repo, f"runs/{run_id}/jobs"),
            {"filter": filter, "page": page, "per_page": per_page},
        )
        return self._parse(JobList, await self.request(url))

    async def trigger_workflow(
        self,
        owner: str,
        repo: str,
        workflow_id: str | int,
        ref: str,
        inputs: dict[str, str] | None = None,
    ) -> ActionAck:
        """Dispatch a ``workflow_dispatch`` event.

        Args:
            owner: Repository owner
            repo: Repository name
            workflow_id: Workflow ID or file name
            ref: Branch, tag or SHA to run on
            inputs: Workflow inputs; omitted from the body when empty

        Returns:
            Acknowledgement naming the workflow and ref
        """
        workflow_id = validate_workflow_id(workflow_id)
        ref = validate_ref(ref)
        url = self._actions_url(owner, repo, f"workflows/{workflow_id}/dispatches")

        body: dict[str, Any] = {"ref": ref}
        if inputs:
            body["inputs"] = inputs

        # 204 No Content on success
        await self.request(url, method="POST", body=body)
        return ActionAck(message=f"Workflow {workflow_id} triggered on {ref}")

    async def cancel_workflow_run(self, owner: str, repo: str, run_id: int) -> ActionAck:
        run_id = validate_run_id(run_id)
        url = self._actions_url(owner, repo, f"runs/{run_id}/cancel")
        await self.request(url, method="POST")
        return ActionAck(message=f"Workflow run {run_id} cancelled")

    async def rerun_workflow_run(self, owner: str, repo: str, run_id: int) -> ActionAck:
        run_id = validate_run_id(run_id)
        url = self._actions_url(owner, repo, f"runs/{run_id}/rerun")
        await self.request(url, method="POST")
        return ActionAck(message=f"Workflow run {run_id} restarted")


def _parse_body(response: httpx.Response) -> Any:
    """Decode JSON bodies; anything else is returned as text."""
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type and response.content:
        try:
            return response.json()
        except ValueError as e:
            logger.error("github_response_invalid_json", status=response.status_code, error=str(e))
            raise GitHubResponseShapeError(f"Error parsing JSON response: {e}") from e
    return response.text


def _transport_error_code(error: BaseException) -> str | None:
    """Find a low-level error code (``ECONNREFUSED``, ``ENOTFOUND``, ...) in the cause chain."""
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, socket.gaierror):
            return "ENOTFOUND"
        if isinstance(current, OSError) and current.errno:
            code = errno.errorcode.get(current.errno)
            if code:
                return code
        current = current.__cause__ or current.__context__
    return None
