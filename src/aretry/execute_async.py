r"""Execute async operations with automatic retry logic.

This module provides the functional entry points for asynchronous
operations. They mirror ``aretry.execute``: every call builds a fresh
``AsyncRetryExecutor``, so concurrent callers never interact.
"""

from __future__ import annotations

__all__ = [
    "execute_with_retry_async",
    "retry_on_network_errors_async",
    "retry_on_rate_limit_errors_async",
    "retry_on_specific_errors_async",
]

from typing import TYPE_CHECKING, TypeVar

from aretry.conditions import is_network_error, is_rate_limit_error, matches_any
from aretry.core.config import with_retry_condition
from aretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from aretry.conditions import ErrorPattern
    from aretry.core.config import RetryPolicy
    from aretry.retry.config import CallbackConfig

T = TypeVar("T")


async def execute_with_retry_async(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    *,
    callbacks: CallbackConfig | None = None,
) -> T:
    """Execute an async operation, retrying failures with backoff.

    Args:
        operation: Zero-argument callable returning an awaitable.
        policy: Retry policy. Defaults to ``RetryPolicy()``.
        callbacks: Optional lifecycle callbacks.

    Returns:
        The result of the first successful attempt.

    Raises:
        Exception: The error of the final attempt, unchanged.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aretry import RetryPolicy, execute_with_retry_async
        >>> async def main() -> httpx.Response:
        ...     async with httpx.AsyncClient() as client:
        ...         return await execute_with_retry_async(
        ...             lambda: client.get("https://api.example.com/data"),
        ...             RetryPolicy(max_retries=2, initial_delay=0.1, jitter=False),
        ...         )
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """
    return await AsyncRetryExecutor(policy, callbacks).execute(operation)


async def retry_on_specific_errors_async(
    operation: Callable[[], Awaitable[T]],
    patterns: Iterable[ErrorPattern],
    policy: RetryPolicy | None = None,
    *,
    callbacks: CallbackConfig | None = None,
) -> T:
    """Execute an async operation, retrying only errors matching patterns.

    Args:
        operation: Zero-argument callable returning an awaitable.
        patterns: Substrings or compiled regular expressions tested
            against the error message.
        policy: Retry policy. Defaults to ``RetryPolicy()``.
        callbacks: Optional lifecycle callbacks.

    Returns:
        The result of the first successful attempt.

    Raises:
        Exception: The error of the final attempt, unchanged.
    """
    return await execute_with_retry_async(
        operation, with_retry_condition(policy, matches_any(patterns)), callbacks=callbacks
    )


async def retry_on_network_errors_async(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    *,
    callbacks: CallbackConfig | None = None,
) -> T:
    """Execute an async operation, retrying only network errors."""
    return await execute_with_retry_async(
        operation, with_retry_condition(policy, is_network_error), callbacks=callbacks
    )


async def retry_on_rate_limit_errors_async(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    *,
    callbacks: CallbackConfig | None = None,
) -> T:
    """Execute an async operation, retrying only rate-limit errors."""
    return await execute_with_retry_async(
        operation, with_retry_condition(policy, is_rate_limit_error), callbacks=callbacks
    )
