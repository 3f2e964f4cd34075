r"""Synchronous retry executor.

This module provides the RetryExecutor class that executes a blocking
operation with automatic retry logic.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

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
    from collections.abc import Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes a blocking operation with automatic retry logic.

    The executor holds no mutable state: the policy, strategy, decider
    and callback manager are fixed at construction, and each call to
    ``execute`` keeps its own attempt counter. One instance can safely be
    shared by concurrent callers.

    Attributes:
        policy: Retry policy containing max retries, backoff settings and
            the retry condition.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryPolicy
        >>> from aretry.retry import RetryExecutor
        >>> executor = RetryExecutor(RetryPolicy(max_retries=2, initial_delay=0.0, jitter=False))
        >>> executor.execute(lambda: "ok")
        'ok'

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        callback_config: CallbackConfig | None = None,
    ) -> None:
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

    def execute(self, operation: Callable[[], T]) -> T:
        """Execute the operation with automatic retry logic.

        Calls ``operation`` up to ``max_retries + 1`` times, sleeping with
        exponential backoff between attempts.

        Args:
            operation: Zero-argument callable to execute. It is called
                again after each retryable failure, so it should be safe to
                repeat.

        Returns:
            The value returned by the first successful attempt, unchanged.

        Raises:
            Exception: The error of the final attempt, re-raised unchanged,
                once the retry budget is exhausted or as soon as the retry
                condition rejects an error.
        """
        max_retries = self.policy.max_retries
        start_time = time.time()
        retries = 0

        while True:
            try:
                result = operation()
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
                time.sleep(sleep_time)
            else:
                self.callbacks.on_success(retries, max_retries, start_time)
                return result
