r"""Parameter validation utilities for retry and polling configuration.

This module provides validation functions for retry policy and condition
polling parameters to ensure they meet the required constraints before
being used in the retry loop.
"""

from __future__ import annotations

__all__ = ["validate_poll_params", "validate_retry_params"]

import math


def validate_retry_params(
    max_retries: int,
    initial_delay: float,
    max_delay: float,
    factor: float,
) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retry attempts after the first one.
            Must be >= 0. A value of 0 means no retries (only the initial attempt).
        initial_delay: Base delay in seconds before the first retry.
            Must be >= 0 and finite.
        max_delay: Upper bound in seconds on any computed delay. Must be
            >= 0; ``inf`` means no cap.
        factor: Exponential multiplier applied per additional retry.
            Must be > 0 and finite.

    Raises:
        ValueError: If max_retries, initial_delay or max_delay are negative
            or NaN, if initial_delay is infinite,
            or if factor is non-positive or not finite.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_retry_params
        >>> validate_retry_params(max_retries=3, initial_delay=1.0, max_delay=30.0, factor=2.0)
        >>> validate_retry_params(
        ...     max_retries=-1, initial_delay=1.0, max_delay=30.0, factor=2.0
        ... )  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if not math.isfinite(initial_delay) or initial_delay < 0:
        msg = f"initial_delay must be >= 0 and finite, got {initial_delay}"
        raise ValueError(msg)
    # inf is accepted and disables the cap
    if math.isnan(max_delay) or max_delay < 0:
        msg = f"max_delay must be >= 0, got {max_delay}"
        raise ValueError(msg)
    if not math.isfinite(factor) or factor <= 0:
        msg = f"factor must be > 0 and finite, got {factor}"
        raise ValueError(msg)


def validate_poll_params(timeout: float, interval: float) -> None:
    """Validate condition polling parameters.

    Args:
        timeout: Maximum seconds to wait for the condition. Must be > 0
            and finite.
        interval: Seconds to wait between two evaluations. Must be > 0
            and finite.

    Raises:
        ValueError: If timeout or interval is non-positive, NaN or
            infinite.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_poll_params
        >>> validate_poll_params(timeout=5.0, interval=0.5)

        ```
    """
    if not math.isfinite(timeout) or timeout <= 0:
        msg = f"timeout must be > 0 and finite, got {timeout}"
        raise ValueError(msg)
    if not math.isfinite(interval) or interval <= 0:
        msg = f"interval must be > 0 and finite, got {interval}"
        raise ValueError(msg)
