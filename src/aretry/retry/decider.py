r"""Retry decision logic for determining whether to retry an operation.

This module provides the RetryDecider class that encapsulates the logic
for deciding whether a failed attempt should be retried based on the
remaining retry budget and the retry condition of the policy.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    The budget is checked first: once ``max_retries`` retries have been
    performed the error is final, whatever the retry condition says.

    Args:
        retry_condition: Predicate deciding whether an error is retryable.

    Example:
        ```pycon
        >>> from aretry.retry import RetryDecider
        >>> decider = RetryDecider(lambda error: isinstance(error, ConnectionError))
        >>> decider.should_retry(ConnectionError("reset"), retries=0, max_retries=3)
        (True, 'ConnectionError')
        >>> decider.should_retry(ValueError("bad"), retries=0, max_retries=3)
        (False, 'retry_condition returned False')
        >>> decider.should_retry(ConnectionError("reset"), retries=3, max_retries=3)
        (False, 'max retries exhausted')

        ```
    """

    def __init__(self, retry_condition: Callable[[Exception], bool]) -> None:
        self.retry_condition = retry_condition

    def should_retry(
        self,
        error: Exception,
        retries: int,
        max_retries: int,
    ) -> tuple[bool, str]:
        """Determine if an error should trigger a retry.

        Args:
            error: The exception raised by the attempt.
            retries: Number of retries performed so far.
            max_retries: Maximum number of retries.

        Returns:
            Tuple of (should_retry, reason).
        """
        if self.is_exhausted(retries, max_retries):
            return (False, "max retries exhausted")
        if not self.retry_condition(error):
            return (False, "retry_condition returned False")
        return (True, type(error).__name__)

    @staticmethod
    def is_exhausted(retries: int, max_retries: int) -> bool:
        """Indicate if the retry budget is used up.

        Args:
            retries: Number of retries performed so far.
            max_retries: Maximum number of retries.

        Returns:
            ``True`` if no retry is left.
        """
        return retries >= max_retries
