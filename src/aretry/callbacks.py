r"""Callback types and data structures for observability.

This module provides callback support for the retry executors, enabling
users to hook into the retry lifecycle for reporting, metrics and
alerting without parsing log output.

The callback system provides three lifecycle hooks:
- on_retry: Called before each backoff sleep
- on_success: Called when the operation succeeds
- on_failure: Called right before the final error is re-raised

Example:
    ```pycon
    >>> from aretry import execute_with_retry
    >>> from aretry.callbacks import RetryInfo
    >>> from aretry.retry import CallbackConfig
    >>> def log_retry(retry_info: RetryInfo) -> None:
    ...     print(f"Retry {retry_info.attempt}/{retry_info.max_retries}")
    ...
    >>> execute_with_retry(fetch, callbacks=CallbackConfig(on_retry=log_retry))  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["FailureInfo", "RetryInfo", "SuccessInfo"]

from dataclasses import dataclass


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        attempt: The retry about to happen (1-indexed). First retry is 1.
        max_retries: Maximum number of retries configured.
        wait_time: The sleep time in seconds before this retry.
        error: The exception that triggered the retry.
    """

    attempt: int
    max_retries: int
    wait_time: float
    error: Exception


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        attempt: The attempt that succeeded (1-indexed). First attempt is 1.
        max_retries: Maximum number of retries configured.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    attempt: int
    max_retries: int
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        attempt: The final attempt (1-indexed).
        max_retries: Maximum number of retries configured.
        error: The error about to be re-raised.
        exhausted: ``True`` if the retry budget was used up, ``False`` if
            the retry condition rejected the error.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    attempt: int
    max_retries: int
    error: Exception
    exhausted: bool
    total_time: float
