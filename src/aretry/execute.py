r"""Execute blocking operations with automatic retry logic.

This module provides the functional entry points for synchronous
operations: the general ``execute_with_retry`` and the composite
policies retrying only on specific, network or rate-limit errors.
Each call builds its own ``RetryExecutor``, so no state is shared
between calls.
"""

from __future__ import annotations

__all__ = [
    "execute_with_retry",
    "retry_on_network_errors",
    "retry_on_rate_limit_errors",
    "retry_on_specific_errors",
]

from typing import TYPE_CHECKING, TypeVar

from aretry.conditions import is_network_error, is_rate_limit_error, matches_any
from aretry.core.config import with_retry_condition
from aretry.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.conditions import ErrorPattern
    from aretry.core.config import RetryPolicy
    from aretry.retry.config import CallbackConfig

T = TypeVar("T")


def execute_with_retry(
    operation: Callable[[], T],
    policy: RetryPolicy | None = None,
    *,
    callbacks: CallbackConfig | None = None,
) -> T:
    """Execute a blocking operation, retrying failures with backoff.

    Args:
        operation: Zero-argument callable to execute.
        policy: Retry policy. Defaults to ``RetryPolicy()``.
        callbacks: Optional lifecycle callbacks.

    Returns:
        The result of the first successful attempt.

    Raises:
        Exception: The error of the final attempt, unchanged.

    Example:
        ```pycon
        >>> from aretry import RetryPolicy, execute_with_retry
        >>> execute_with_retry(lambda: 42, RetryPolicy(max_retries=0))
        42

        ```
    """
    return RetryExecutor(policy, callbacks).execute(operation)


def retry_on_specific_errors(
    operation: Callable[[], T],
    patterns: Iterable[ErrorPattern],
    policy: RetryPolicy | None = None,
    *,
    callbacks: CallbackConfig | None = None,
) -> T:
    """Execute a blocking operation, retrying only errors matching patterns.

    The ``retry_condition`` of ``policy`` is replaced by
    ``matches_any(patterns)``.

    Args:
        operation: Zero-argument callable to execute.
        patterns: Substrings or compiled regular expressions tested
            against the error message.
        policy: Retry policy. Defaults to ``RetryPolicy()``.
        callbacks: Optional lifecycle callbacks.

    Returns:
        The result of the first successful attempt.

    Raises:
        Exception: The error of the final attempt, unchanged.
    """
    return execute_with_retry(
        operation, with_retry_condition(policy, matches_any(patterns)), callbacks=callbacks
    )


def retry_on_network_errors(
    operation: Callable[[], T],
    policy: RetryPolicy | None = None,
    *,
    callbacks: CallbackConfig | None = None,
) -> T:
    """Execute a blocking operation, retrying only network errors.

    See ``aretry.conditions.is_network_error`` for the recognized errors.
    """
    return execute_with_retry(
        operation, with_retry_condition(policy, is_network_error), callbacks=callbacks
    )


def retry_on_rate_limit_errors(
    operation: Callable[[], T],
    policy: RetryPolicy | None = None,
    *,
    callbacks: CallbackConfig | None = None,
) -> T:
    """Execute a blocking operation, retrying only rate-limit errors.

    See ``aretry.conditions.is_rate_limit_error`` for the recognized errors.
    """
    return execute_with_retry(
        operation, with_retry_condition(policy, is_rate_limit_error), callbacks=callbacks
    )
