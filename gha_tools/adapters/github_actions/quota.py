"""Client-side request quota.

A fixed 60-second window with a request ceiling. One ``RequestQuota`` is
shared by every tool in the process; the clock is injectable so tests can
move time by hand.
"""

import math
import time
from datetime import datetime, timedelta, timezone
from typing import Callable

from .exceptions import GitHubAPIError

DEFAULT_MAX_REQUESTS = 60
DEFAULT_WINDOW_SECONDS = 60.0


class RequestQuota:
    """Counts admitted requests per window and fails fast once the ceiling is met."""

    def __init__(
        self,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        window_seconds: float = DEFAULT_WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize quota.

        Args:
            max_requests: Requests admitted per window
            window_seconds: Window length
            clock: Monotonic seconds source
        """
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self.count = 0
        self.reset_time = clock() + window_seconds

    def _roll_window(self) -> float:
        now = self._clock()
        if now > self.reset_time:
            self.count = 0
            self.reset_time = now + self.window_seconds
        return now

    @property
    def remaining(self) -> int:
        self._roll_window()
        return max(self.max_requests - self.count, 0)

    def acquire(self) -> None:
        """Admit one request or raise a local RATE_LIMIT error.

        Raises:
            GitHubAPIError: ceiling reached; no request should be sent
        """
        now = self._roll_window()

        if self.count >= self.max_requests:
            wait_seconds = max(self.reset_time - now, 0.0)
            reset_at = datetime.now(timezone.utc) + timedelta(seconds=wait_seconds)
            raise GitHubAPIError.rate_limited(
                f"Rate limit exceeded. Please try again in {math.ceil(wait_seconds)} seconds.",
                reset_at,
            )

        self.count += 1
