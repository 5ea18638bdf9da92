"""Fixed-delay pacing for translation calls."""

import time


class RequestPacer:
    """Inserts a fixed pause between consecutive requests.

    This is a serialization point, not a backoff: nothing is retried and the
    delay never grows. The first request of a run goes out immediately.

    Example:
        >>> pacer = RequestPacer(delay_seconds=0.1)
        >>> pacer.wait_if_needed()  # returns at once
        >>> pacer.wait_if_needed()  # sleeps 0.1s
    """

    def __init__(self, delay_seconds: float):
        """Initialize the pacer.

        Args:
            delay_seconds: Pause between two requests, in seconds
        """
        self.delay_seconds = delay_seconds
        self.requests_made = 0

    def wait_if_needed(self) -> None:
        """Sleep for the fixed delay unless this is the first request.

        Call this before each request.
        """
        if self.requests_made and self.delay_seconds > 0:
            time.sleep(self.delay_seconds)
        self.requests_made += 1

    def reset(self) -> None:
        """Forget previous requests (useful for testing)."""
        self.requests_made = 0
