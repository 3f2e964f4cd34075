r"""Sleep time calculation with backoff strategy and jitter.

This module provides the function computing how long the retry loop
waits before the next attempt.
"""

from __future__ import annotations

__all__ = ["JITTER_RANGE", "calculate_sleep_time"]

import logging
import random
from typing import TYPE_CHECKING

from aretry.backoff.exponential import ExponentialBackoff

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)

# Jitter scales the delay down to between 80% and 100% of its base value
JITTER_RANGE = (0.8, 1.0)


def calculate_sleep_time(
    attempt: int,
    jitter: bool,
    backoff_strategy: BaseBackoffStrategy | None = None,
) -> float:
    """Calculate sleep time for a retry with backoff strategy and jitter.

    The sleep time is calculated as follows:
    1. Determine base sleep time: backoff_strategy.calculate(attempt)
    2. Apply jitter (if jitter is enabled):
       - total_sleep_time = base_sleep_time * random.uniform(0.8, 1.0)

    Jitter only ever shortens the delay, so the total time spent
    sleeping is bounded by ``max_retries * max_delay``.

    Args:
        attempt: The retry number (1-indexed).
        jitter: Whether to scale the delay by a random factor.
        backoff_strategy: BaseBackoffStrategy instance or None.
            Defaults to ExponentialBackoff().

    Returns:
        The calculated sleep time in seconds, including any jitter applied.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff, calculate_sleep_time
        >>> backoff = ExponentialBackoff(initial_delay=0.1, factor=2.0)
        >>> calculate_sleep_time(attempt=1, jitter=False, backoff_strategy=backoff)
        0.1
        >>> calculate_sleep_time(attempt=2, jitter=False, backoff_strategy=backoff)
        0.2
        >>> 0.16 <= calculate_sleep_time(attempt=2, jitter=True, backoff_strategy=backoff) <= 0.2
        True

        ```
    """
    if backoff_strategy is None:
        backoff_strategy = ExponentialBackoff()
    sleep_time = backoff_strategy.calculate(attempt)

    if jitter:
        scale = random.uniform(*JITTER_RANGE)  # noqa: S311
        total_sleep_time = sleep_time * scale
        logger.debug(
            f"Waiting {total_sleep_time:.3f}s before retry (base={sleep_time:.3f}s, jitter={scale:.2f})"
        )
    else:
        total_sleep_time = sleep_time
        logger.debug(f"Waiting {total_sleep_time:.3f}s before retry")

    return total_sleep_time
