from dataclasses import dataclass

from netkit.constants import DEFAULT_RETRY_DELAY

__all__ = ["RetryPolicy"]


@dataclass(frozen=True)
class RetryPolicy:
    """
    Fixed-delay retry policy for a single call.

    ``attempts`` counts the first try, so ``attempts=1`` means no retry.
    The same ``delay`` is waited between every pair of attempts.
    """

    attempts: int
    delay: float = DEFAULT_RETRY_DELAY

    def __post_init__(self) -> None:
        if self.attempts < 1:
            raise ValueError("attempts must be >= 1")
        if self.delay < 0:
            raise ValueError("delay must be >= 0")
