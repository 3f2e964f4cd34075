r"""Retry loop of aretry, split into small collaborating objects.

``RetryExecutor`` and ``AsyncRetryExecutor`` run the loop. They delegate
delay computation to ``RetryStrategy``, the retry-or-raise decision to
``RetryDecider`` and lifecycle notifications to ``CallbackManager``,
configured through ``CallbackConfig``. Most callers use the functions
of ``aretry.execute`` and ``aretry.execute_async`` instead.
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackConfig",
    "CallbackManager",
    "RetryDecider",
    "RetryExecutor",
    "RetryStrategy",
]

from aretry.retry.config import CallbackConfig
from aretry.retry.decider import RetryDecider
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.manager import CallbackManager
from aretry.retry.strategy import RetryStrategy
