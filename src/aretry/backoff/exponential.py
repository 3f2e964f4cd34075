r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import math

from aretry.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: min(max_delay, initial_delay * factor ** (attempt - 1)).

    Args:
        initial_delay: The delay in seconds before the first retry (default: 1.0).
        factor: The multiplier applied per additional retry (default: 2.0).
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(initial_delay=0.1, factor=2.0)
        >>> backoff.calculate(1)  # First retry
        0.1
        >>> backoff.calculate(2)  # Second retry
        0.2
        >>> backoff.calculate(3)  # Third retry
        0.4
        >>> # With max_delay cap
        >>> backoff = ExponentialBackoff(initial_delay=1.0, max_delay=5.0)
        >>> backoff.calculate(11)  # Would be 1024.0, but capped
        5.0

        ```
    """

    def __init__(
        self,
        initial_delay: float = 1.0,
        factor: float = 2.0,
        max_delay: float | None = None,
    ) -> None:
        if not math.isfinite(initial_delay) or initial_delay < 0:
            msg = f"initial_delay must be non-negative and finite, got {initial_delay}"
            raise ValueError(msg)
        if not math.isfinite(factor) or factor <= 0:
            msg = f"factor must be positive and finite, got {factor}"
            raise ValueError(msg)
        if max_delay is not None and (math.isnan(max_delay) or max_delay < 0):
            msg = f"max_delay must be non-negative if specified, got {max_delay}"
            raise ValueError(msg)

        self.initial_delay = initial_delay
        self.factor = factor
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay}, "
            f"factor={self.factor}, max_delay={self.max_delay})"
        )

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The retry number (1-indexed).

        Returns:
            The calculated delay: initial_delay * (factor ** (attempt - 1)),
            capped at max_delay if set.
        """
        if self.initial_delay == 0:
            return 0.0
        try:
            delay = self.initial_delay * (self.factor ** (attempt - 1))
        except OverflowError:
            delay = float("inf")
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
