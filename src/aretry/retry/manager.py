r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that handles invocation
of user-defined callbacks at various points in the retry lifecycle.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

import time
from typing import TYPE_CHECKING

from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo

if TYPE_CHECKING:
    from aretry.retry.config import CallbackConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attempt numbers are converted from the executor's internal counter
    (retries performed so far) to the 1-indexed values exposed in the
    info objects.

    Attributes:
        callbacks: Configuration containing callback functions for lifecycle events.
    """

    def __init__(self, callbacks: CallbackConfig) -> None:
        self.callbacks = callbacks

    def on_retry(
        self,
        attempt: int,
        max_retries: int,
        sleep_time: float,
        error: Exception,
    ) -> None:
        """Invoke on_retry callback.

        Args:
            attempt: The retry about to happen (1-indexed).
            max_retries: Maximum number of retries.
            sleep_time: Sleep time before the retry.
            error: Exception that triggered the retry.
        """
        if self.callbacks.on_retry:
            self.callbacks.on_retry(
                RetryInfo(
                    attempt=attempt,
                    max_retries=max_retries,
                    wait_time=sleep_time,
                    error=error,
                )
            )

    def on_success(self, retries: int, max_retries: int, start_time: float) -> None:
        """Invoke on_success callback.

        Args:
            retries: Number of retries performed before the success.
            max_retries: Maximum number of retries.
            start_time: Timestamp when the first attempt started.
        """
        if self.callbacks.on_success:
            self.callbacks.on_success(
                SuccessInfo(
                    attempt=retries + 1,
                    max_retries=max_retries,
                    total_time=time.time() - start_time,
                )
            )

    def on_failure(
        self,
        retries: int,
        max_retries: int,
        error: Exception,
        exhausted: bool,
        start_time: float,
    ) -> None:
        """Invoke on_failure callback.

        Args:
            retries: Number of retries performed before the final failure.
            max_retries: Maximum number of retries.
            error: The error about to be re-raised.
            exhausted: Whether the retry budget was used up.
            start_time: Timestamp when the first attempt started.
        """
        if self.callbacks.on_failure:
            self.callbacks.on_failure(
                FailureInfo(
                    attempt=retries + 1,
                    max_retries=max_retries,
                    error=error,
                    exhausted=exhausted,
                    total_time=time.time() - start_time,
                )
            )
