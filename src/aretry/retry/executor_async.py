r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that executes an
async operation with automatic retry logic.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import inspect
import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.core.config import RetryPolicy
from aretry.retry.config import CallbackConfig
from aretry.retry.decider import RetryDecider
from aretry.retry.executor_core import report_failure, report_retry
from aretry.retry.manager import CallbackManager
from aretry.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes an async operation with automatic retry logic.

    This class implements the core retry loop for asynchronous
    operations. It uses composition with strategy objects for better
    separation of concerns:
    - RetryStrategy: Calculates backoff delays between retries
    - RetryDecider: Determines whether an error is retried
    - CallbackManager: Invokes user-defined callbacks at lifecycle events

    The executor holds no mutable state, so concurrent ``execute`` calls
    on one instance never share an attempt counter or backoff state.

    Attributes:
        policy: Retry policy containing max retries, backoff settings and
            the retry condition.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.core.config import RetryPolicy
        >>> from aretry.retry import AsyncRetryExecutor
        >>> async def fetch() -> str:
        ...     return "ok"
        ...
        >>> executor = AsyncRetryExecutor(RetryPolicy(max_retries=2, jitter=False))
        >>> asyncio.run(executor.execute(fetch))
        'ok'

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        callback_config: CallbackConfig | None = None,
    ) -> None:
        """Initialize async retry executor.

        Args:
            policy: Retry policy. Defaults to ``RetryPolicy()``.
            callback_config: Configuration for lifecycle callbacks
                (on_retry, on_success, on_failure).
        """
        self.policy: RetryPolicy = policy if policy is not None else RetryPolicy()
        self.strategy: RetryStrategy = RetryStrategy(
            initial_delay=self.policy.initial_delay,
            factor=self.policy.factor,
            max_delay=self.policy.max_delay,
            jitter=self.policy.jitter,
        )
        self.decider: RetryDecider = RetryDecider(self.policy.retry_condition)
        self.callbacks: CallbackManager = CallbackManager(
            callback_config if callback_config is not None else CallbackConfig()
        )

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Execute the async operation with automatic retry logic.

        Attempts the operation up to max_retries + 1 times (initial attempt
        plus retries), waiting progressively longer between attempts.

        The retry loop handles:
        - Success: Returns the result immediately, no delay follows
        - Retryable error with budget left: Logs, sleeps, tries again
        - Retry budget exhausted: Logs and re-raises the last error
        - Error rejected by the retry condition: Logs and re-raises at once

        Note:
            This method uses asyncio.sleep() for backoff delays, allowing
            other tasks to run during retry waits. Attempt N+1 never starts
            before attempt N settles. No timeout is applied to a single
            attempt, and a cancelled task stops the loop immediately.

        Args:
            operation: Zero-argument callable returning an awaitable. It
                is called again after each retryable failure, so it should
                be safe to repeat.

        Returns:
            The value produced by the first successful attempt, unchanged.

        Raises:
            Exception: The error of the final attempt, re-raised unchanged.
            TypeError: If ``operation`` returns a value that is not
                awaitable. This is raised at once, without retrying.
        """
        max_retries = self.policy.max_retries
        start_time = time.time()
        retries = 0

        while True:
            try:
                awaitable = operation()
                if inspect.isawaitable(awaitable):
                    result = await awaitable
            except Exception as exc:
                should_retry, reason = self.decider.should_retry(exc, retries, max_retries)
                if not should_retry:
                    report_failure(
                        self.callbacks,
                        retries=retries,
                        max_retries=max_retries,
                        error=exc,
                        exhausted=self.decider.is_exhausted(retries, max_retries),
                        start_time=start_time,
                    )
                    raise

                retries += 1
                logger.debug(f"Operation will be retried ({reason})")
                sleep_time = self.strategy.calculate_delay(retries)
                report_retry(self.callbacks, retries, max_retries, sleep_time, exc)
                await asyncio.sleep(sleep_time)
            else:
                if not inspect.isawaitable(awaitable):
                    msg = (
                        "operation must return an awaitable, "
                        f"got {type(awaitable).__name__}; use execute_with_retry for "
                        "blocking callables"
                    )
                    raise TypeError(msg)
                self.callbacks.on_success(retries, max_retries, start_time)
                return result
