"""Fixed-delay retry loop over typed attempt outcomes."""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from .result import Fatal, Outcome, Retryable, Success

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryPolicy:
    """Bounded retry with a fixed delay between attempts.

    Most malformed-output failures are model noise rather than overload, so
    attempts are separated by a short constant wait with no backoff.

    Attributes:
        max_attempts: Total attempts, including the first.
        delay: Seconds to wait between attempts.
        sleep: Wait function; replaced in tests.

    Example:
        >>> policy = RetryPolicy(max_attempts=3, delay=0.5)
        >>> outcome = policy.run(lambda attempt: Success(attempt))
    """

    max_attempts: int = 3
    delay: float = 0.5
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    def run(self, attempt_fn: Callable[[int], Outcome[T]], label: str = "generation") -> Outcome[T]:
        """Run attempts until success, a fatal error, or the budget is spent.

        Args:
            attempt_fn: Called with the 1-based attempt number.
            label: Flow name for log messages.

        Returns:
            The first Success or Fatal, else the last Retryable.
        """
        attempts = max(1, self.max_attempts)
        last: Retryable | None = None
        for attempt in range(1, attempts + 1):
            outcome = attempt_fn(attempt)
            if isinstance(outcome, (Success, Fatal)):
                return outcome
            last = outcome
            logger.warning(
                f"{label} attempt {attempt}/{attempts} failed: "
                f"{type(outcome.error).__name__}: {outcome.error}"
            )
            if attempt < attempts and self.delay > 0:
                self.sleep(self.delay)
        return last


__all__ = ["RetryPolicy"]
