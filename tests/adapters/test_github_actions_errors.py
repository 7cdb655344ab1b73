"""Tests for the error taxonomy and the client-side request quota."""

from datetime import datetime, timedelta, timezone

import httpx
import pytest

from gha_tools.adapters.github_actions.exceptions import ErrorKind, GitHubAPIError
from gha_tools.adapters.github_actions.quota import RequestQuota


@pytest.mark.parametrize(
    "status, kind",
    [
        (401, ErrorKind.AUTHENTICATION),
        (403, ErrorKind.PERMISSION),
        (404, ErrorKind.RESOURCE_NOT_FOUND),
        (409, ErrorKind.CONFLICT),
        (422, ErrorKind.VALIDATION),
        (429, ErrorKind.RATE_LIMIT),
        (400, ErrorKind.GENERIC),
        (418, ErrorKind.GENERIC),
        (502, ErrorKind.GENERIC),
    ],
)
def test_status_maps_to_kind(status, kind):
    error = GitHubAPIError.from_response(status, {"message": "boom"})

    assert error.kind is kind
    assert error.status == status


def test_unmapped_status_keeps_payload():
    body = {"message": "I'm a teapot", "documentation_url": "https://docs.github.com"}
    error = GitHubAPIError.from_response(418, body)

    assert error.kind is ErrorKind.GENERIC
    assert error.status == 418
    assert error.message == "I'm a teapot"
    assert error.response == body


def test_not_found_message_defaults_to_resource():
    error = GitHubAPIError.from_response(404, "")

    assert error.message == "Resource not found: Resource"
    assert error.response == {"message": "Resource not found"}


def test_validation_keeps_full_payload():
    body = {
        "message": "Unexpected inputs provided",
        "errors": [{"field": "inputs", "code": "invalid"}],
    }
    error = GitHubAPIError.from_response(422, body)

    assert error.message == "Unexpected inputs provided"
    assert error.response == body


def test_default_messages_when_body_has_none():
    assert GitHubAPIError.from_response(401, None).message == "Authentication failed"
    assert GitHubAPIError.from_response(403, {}).message == "Insufficient permissions"
    assert GitHubAPIError.from_response(409, "text").message == "Conflict occurred"
    assert GitHubAPIError.from_response(500, None).message == "GitHub API error"


def test_rate_limit_reset_from_body():
    error = GitHubAPIError.from_response(
        429, {"message": "slow down", "reset_at": "2030-01-01T00:00:00Z"}
    )

    assert error.kind is ErrorKind.RATE_LIMIT
    assert error.reset_at == datetime(2030, 1, 1, tzinfo=timezone.utc)
    assert error.response["reset_at"] == "2030-01-01T00:00:00+00:00"


def test_rate_limit_reset_from_header():
    headers = httpx.Headers({"X-RateLimit-Reset": "1893456000"})
    error = GitHubAPIError.from_response(429, {"message": "slow down"}, headers)

    assert error.reset_at == datetime.fromtimestamp(1893456000, tz=timezone.utc)


def test_rate_limit_reset_defaults_to_a_minute_from_now():
    before = datetime.now(timezone.utc)
    error = GitHubAPIError.from_response(429, {})
    after = datetime.now(timezone.utc)

    assert error.message == "Rate limit exceeded"
    assert before + timedelta(seconds=60) <= error.reset_at <= after + timedelta(seconds=60)


def test_local_synthesis():
    timeout = GitHubAPIError.timeout(30000)
    assert (timeout.kind, timeout.status, timeout.timeout_ms) == (ErrorKind.TIMEOUT, 408, 30000)
    assert timeout.response == {"message": "Request timeout after 30000ms", "timeout_ms": 30000}

    network = GitHubAPIError.network("ECONNREFUSED")
    assert (network.kind, network.status, network.error_code) == (
        ErrorKind.NETWORK,
        500,
        "ECONNREFUSED",
    )

    wrapped = GitHubAPIError.wrap(RuntimeError("socket closed"))
    assert (wrapped.kind, wrapped.status, wrapped.message) == (
        ErrorKind.GENERIC,
        500,
        "socket closed",
    )


class TestRequestQuota:
    """Tests for RequestQuota."""

    def test_sixty_admissions_then_fail(self, quota):
        for _ in range(60):
            quota.acquire()

        with pytest.raises(GitHubAPIError) as exc:
            quota.acquire()

        assert exc.value.kind is ErrorKind.RATE_LIMIT
        assert exc.value.status == 429
        assert "Please try again in 60 seconds" in exc.value.message
        assert quota.count == 60

    def test_wait_time_is_rounded_up(self, quota, fake_clock):
        for _ in range(60):
            quota.acquire()
        fake_clock.advance(44.5)

        with pytest.raises(GitHubAPIError, match="try again in 16 seconds"):
            quota.acquire()

    def test_window_resets(self, quota, fake_clock):
        for _ in range(60):
            quota.acquire()
        fake_clock.advance(61)

        assert quota.remaining == 60
        quota.acquire()
        assert quota.count == 1

    def test_custom_ceiling(self, fake_clock):
        quota = RequestQuota(max_requests=2, clock=fake_clock)
        quota.acquire()
        quota.acquire()

        assert quota.remaining == 0
        with pytest.raises(GitHubAPIError):
            quota.acquire()
