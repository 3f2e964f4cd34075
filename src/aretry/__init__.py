r"""aretry - Retry operations with exponential backoff and jitter.

This package executes blocking or async operations and retries them
transparently when they fail, waiting progressively longer between
attempts. It keeps flaky steps of test suites and API clients from
failing on transient errors, while surfacing the original error
untouched once retrying stops.

Key Features:
    - Exponential backoff with a delay cap and optional jitter
    - Retry predicates deciding which errors are retried
    - Composite policies for network errors and rate-limit errors
    - Sync and async executors with identical semantics
    - Condition polling with a timeout
    - Structured logging and lifecycle callbacks for observability

Example:
    ```pycon
    >>> from aretry import RetryPolicy, execute_with_retry, retry_on_network_errors
    >>> # Use the default policy
    >>> data = execute_with_retry(fetch_data)  # doctest: +SKIP
    >>> # Retry only network errors, with a custom policy
    >>> data = retry_on_network_errors(
    ...     fetch_data, RetryPolicy(max_retries=5, initial_delay=0.5)
    ... )  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackConfig",
    "ConditionTimeoutError",
    "RetryExecutor",
    "RetryPolicy",
    "__version__",
    "execute_with_retry",
    "execute_with_retry_async",
    "is_network_error",
    "is_rate_limit_error",
    "matches_any",
    "retry_on_network_errors",
    "retry_on_network_errors_async",
    "retry_on_rate_limit_errors",
    "retry_on_rate_limit_errors_async",
    "retry_on_specific_errors",
    "retry_on_specific_errors_async",
    "wait_for_condition",
    "wait_for_condition_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.conditions import is_network_error, is_rate_limit_error, matches_any
from aretry.core.config import RetryPolicy
from aretry.exceptions import ConditionTimeoutError
from aretry.execute import (
    execute_with_retry,
    retry_on_network_errors,
    retry_on_rate_limit_errors,
    retry_on_specific_errors,
)
from aretry.execute_async import (
    execute_with_retry_async,
    retry_on_network_errors_async,
    retry_on_rate_limit_errors_async,
    retry_on_specific_errors_async,
)
from aretry.polling import wait_for_condition
from aretry.polling_async import wait_for_condition_async
from aretry.retry import AsyncRetryExecutor, CallbackConfig, RetryExecutor

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
