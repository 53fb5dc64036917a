"""Time budgets for chains of blocking remote calls."""

import time
from collections.abc import Callable

from voicenote_common.exceptions import DeadlineExceededError


class Deadline:
    """
    A fixed time budget measured on the monotonic clock.

    Each remote call made under the deadline asks for ``timeout(cap)`` and uses
    the result as its own timeout, so the whole chain finishes (or fails)
    within the budget even when a single dependency stalls.
    """

    def __init__(
        self, budget_seconds: float, clock: Callable[[], float] = time.monotonic
    ):
        self._clock = clock
        self._budget = budget_seconds
        self._expires_at = clock() + budget_seconds

    @property
    def budget(self) -> float:
        return self._budget

    def remaining(self) -> float:
        """Seconds left before the deadline, never negative."""
        return max(0.0, self._expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0

    def timeout(self, cap: float, operation: str) -> float:
        """
        Returns the timeout to use for the next call.

        Args:
            cap: The call's own maximum timeout.
            operation: Name of the call, used in the error.

        Raises:
            DeadlineExceededError: If no time is left for the call.
        """
        remaining = self.remaining()
        if remaining <= 0.0:
            raise DeadlineExceededError(operation, self._budget)
        return min(cap, remaining)
