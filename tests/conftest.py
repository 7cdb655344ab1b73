"""Pytest fixtures."""

import inspect
from typing import Any, Callable

import httpx
import pytest

from gha_tools.adapters.github_actions.client import GitHubActionsClient
from gha_tools.adapters.github_actions.quota import RequestQuota


class FakeClock:
    """Hand-driven monotonic clock for RequestQuota."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def github_token():
    """Mock GitHub token."""
    return "ghp_mock_token_12345"


@pytest.fixture
def mock_ctx():
    """Mock execution context."""
    return {"actor": "test_user", "trace_id": "test_trace"}


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def quota(fake_clock):
    return RequestQuota(max_requests=60, window_seconds=60, clock=fake_clock)


@pytest.fixture
def make_client(github_token, quota):
    """Build a client whose HTTP traffic goes to ``responder``.

    Returns ``(client, requests)``; ``requests`` collects every request that
    reached the transport.
    """

    def _make(
        responder: Callable[[httpx.Request], Any],
        **kwargs: Any,
    ) -> tuple[GitHubActionsClient, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        async def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            result = responder(request)
            if inspect.isawaitable(result):
                result = await result
            return result

        kwargs.setdefault("token", github_token)
        kwargs.setdefault("quota", quota)
        client = GitHubActionsClient(
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(_handler)),
            **kwargs,
        )
        return client, requests

    return _make


# ============================================================================
# GITHUB PAYLOADS
# ============================================================================


@pytest.fixture
def workflow_payload():
    return {
        "id": 161335,
        "node_id": "MDg6V29ya2Zsb3cxNjEzMzU=",
        "name": "CI",
        "path": ".github/workflows/ci.yml",
        "state": "active",
        "created_at": "2024-01-10T12:00:00Z",
        "updated_at": "2024-03-02T08:30:00Z",
        "url": "https://api.github.com/repos/octo/demo/actions/workflows/161335",
        "html_url": "https://github.com/octo/demo/blob/main/.github/workflows/ci.yml",
        "badge_url": "https://github.com/octo/demo/workflows/CI/badge.svg",
    }


def _repository() -> dict[str, Any]:
    return {
        "id": 1296269,
        "node_id": "MDEwOlJlcG9zaXRvcnkxMjk2MjY5",
        "name": "demo",
        "full_name": "octo/demo",
        "owner": {
            "login": "octo",
            "id": 1,
            "node_id": "MDQ6VXNlcjE=",
            "avatar_url": "https://github.com/images/error/octo_happy.gif",
            "url": "https://api.github.com/users/octo",
            "html_url": "https://github.com/octo",
            "type": "User",
        },
        "html_url": "https://github.com/octo/demo",
        "description": None,
        "fork": False,
        "url": "https://api.github.com/repos/octo/demo",
    }


@pytest.fixture
def run_payload():
    base = "https://api.github.com/repos/octo/demo/actions/runs/30433642"
    return {
        "id": 30433642,
        "name": "CI",
        "node_id": "MDEyOldvcmtmbG93IFJ1bjI2OTI4OQ==",
        "head_branch": "main",
        "head_sha": "acb5820ced9479c074f688cc328bf03f341a511d",
        "path": ".github/workflows/ci.yml",
        "display_title": "Fix flaky test",
        "run_number": 562,
        "event": "push",
        "status": "completed",
        "conclusion": "success",
        "workflow_id": 161335,
        "check_suite_id": 42,
        "check_suite_node_id": "MDEwOkNoZWNrU3VpdGU0Mg==",
        "url": base,
        "html_url": "https://github.com/octo/demo/actions/runs/30433642",
        "created_at": "2024-03-02T08:30:00Z",
        "updated_at": "2024-03-02T08:35:00Z",
        "run_attempt": 1,
        "run_started_at": "2024-03-02T08:30:00Z",
        "jobs_url": f"{base}/jobs",
        "logs_url": f"{base}/logs",
        "check_suite_url": "https://api.github.com/repos/octo/demo/check-suites/42",
        "artifacts_url": f"{base}/artifacts",
        "cancel_url": f"{base}/cancel",
        "rerun_url": f"{base}/rerun",
        "previous_attempt_url": None,
        "workflow_url": "https://api.github.com/repos/octo/demo/actions/workflows/161335",
        "repository": _repository(),
        "head_repository": _repository(),
        "pull_requests": [],
    }


@pytest.fixture
def job_payload():
    return {
        "id": 399444496,
        "run_id": 30433642,
        "workflow_name": "CI",
        "head_branch": "main",
        "run_url": "https://api.github.com/repos/octo/demo/actions/runs/30433642",
        "run_attempt": 1,
        "node_id": "MDg6Q2hlY2tSdW4zOTk0NDQ0OTY=",
        "head_sha": "acb5820ced9479c074f688cc328bf03f341a511d",
        "url": "https://api.github.com/repos/octo/demo/actions/jobs/399444496",
        "html_url": "https://github.com/octo/demo/runs/399444496",
        "status": "completed",
        "conclusion": "failure",
        "created_at": "2024-03-02T08:30:00Z",
        "started_at": "2024-03-02T08:30:05Z",
        "completed_at": "2024-03-02T08:34:00Z",
        "name": "test",
        "steps": [
            {
                "name": "Run pytest",
                "status": "completed",
                "conclusion": "failure",
                "number": 3,
                "started_at": "2024-03-02T08:31:00Z",
                "completed_at": "2024-03-02T08:34:00Z",
            }
        ],
        "check_run_url": "https://api.github.com/repos/octo/demo/check-runs/399444496",
        "labels": ["ubuntu-latest"],
        "runner_id": 1,
        "runner_name": "GitHub Actions 1",
        "runner_group_id": 2,
        "runner_group_name": "GitHub Actions",
    }
