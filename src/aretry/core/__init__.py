r"""Core configuration and validation shared by sync and async
executors."""

from __future__ import annotations

__all__ = [
    "DEFAULT_FACTOR",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_POLL_INTERVAL",
    "DEFAULT_POLL_TIMEOUT",
    "RetryPolicy",
    "validate_poll_params",
    "validate_retry_params",
    "with_retry_condition",
]

from aretry.core.config import (
    DEFAULT_FACTOR,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_DELAY,
    DEFAULT_MAX_RETRIES,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_POLL_TIMEOUT,
    RetryPolicy,
    with_retry_condition,
)
from aretry.core.validation import validate_poll_params, validate_retry_params
