r"""Retry strategy for calculating backoff delays."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.sleep import calculate_sleep_time


class RetryStrategy:
    """Strategy for calculating retry delays with backoff and jitter.

    Args:
        initial_delay: Delay in seconds before the first retry.
        factor: Exponential multiplier applied per additional retry.
        max_delay: Cap in seconds on the un-jittered delay.
        jitter: Whether to scale each delay by a random factor in [0.8, 1.0].

    Attributes:
        backoff_strategy: The exponential backoff computing base delays.
        jitter: Whether jitter is applied.
    """

    def __init__(
        self,
        initial_delay: float,
        factor: float,
        max_delay: float,
        jitter: bool,
    ) -> None:
        self.backoff_strategy: ExponentialBackoff = ExponentialBackoff(
            initial_delay=initial_delay, factor=factor, max_delay=max_delay
        )
        self.jitter = jitter

    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay before the next retry.

        Args:
            attempt: The retry number (1-indexed).

        Returns:
            Sleep time in seconds.
        """
        return calculate_sleep_time(
            attempt=attempt,
            jitter=self.jitter,
            backoff_strategy=self.backoff_strategy,
        )
