r"""Shared core logic for retry executors.

This module provides the helpers used by both the synchronous and the
asynchronous retry executors to report retry and failure events through
the logging side channel and the lifecycle callbacks.
"""

from __future__ import annotations

__all__ = ["report_failure", "report_retry"]

import logging
from typing import TYPE_CHECKING

from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from aretry.retry.manager import CallbackManager

logger: logging.Logger = logging.getLogger(__name__)


def report_retry(
    callbacks: CallbackManager,
    attempt: int,
    max_retries: int,
    sleep_time: float,
    error: Exception,
) -> None:
    """Log a scheduled retry at WARNING level and invoke on_retry.

    Args:
        callbacks: Callback manager for invoking on_retry.
        attempt: The retry about to happen (1-indexed).
        max_retries: Maximum number of retries.
        sleep_time: Sleep time in seconds before the retry.
        error: The exception that triggered the retry.
    """
    log_structured(
        logger,
        logging.WARNING,
        f"Retry attempt {attempt} of {max_retries} after {sleep_time:.3f}s delay: {error!r}",
        attempt=attempt,
        max_retries=max_retries,
        delay=sleep_time,
        error=str(error),
        error_type=type(error).__name__,
    )
    callbacks.on_retry(attempt, max_retries, sleep_time, error)


def report_failure(
    callbacks: CallbackManager,
    retries: int,
    max_retries: int,
    error: Exception,
    exhausted: bool,
    start_time: float,
) -> None:
    """Log the final failure at ERROR level and invoke on_failure.

    Args:
        callbacks: Callback manager for invoking on_failure.
        retries: Number of retries performed before the final failure.
        max_retries: Maximum number of retries.
        error: The error about to be re-raised.
        exhausted: ``True`` if the retry budget was used up, ``False`` if
            the retry condition rejected the error.
        start_time: Timestamp when the first attempt started.
    """
    if exhausted:
        message = f"Operation failed after {max_retries} retries: {error!r}"
    else:
        message = f"Operation failed with non-retryable error: {error!r}"
    log_structured(
        logger,
        logging.ERROR,
        message,
        attempt=retries + 1,
        max_retries=max_retries,
        error=str(error),
        error_type=type(error).__name__,
        exhausted=exhausted,
    )
    callbacks.on_failure(retries, max_retries, error, exhausted, start_time)
