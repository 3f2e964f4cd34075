r"""Configuration dataclass and defaults for the retry executors.

This module provides configuration constants and the immutable
``RetryPolicy`` dataclass consumed by ``RetryExecutor`` and
``AsyncRetryExecutor``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_FACTOR",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_POLL_INTERVAL",
    "DEFAULT_POLL_TIMEOUT",
    "ENV_PREFIX",
    "RetryPolicy",
    "with_retry_condition",
]

import os
from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any

from aretry.conditions import always_retry
from aretry.core.validation import validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Default delay in seconds before the first retry
# Delay = initial_delay * (factor ** (retry - 1))
# With 1.0 and factor 2: 1st retry waits 1s, 2nd waits 2s, 3rd waits 4s
DEFAULT_INITIAL_DELAY = 1.0

# Default cap in seconds on a single backoff delay
DEFAULT_MAX_DELAY = 30.0

# Default exponential multiplier
DEFAULT_FACTOR = 2.0

# Defaults for condition polling, in seconds
DEFAULT_POLL_TIMEOUT = 30.0
DEFAULT_POLL_INTERVAL = 0.5

# Prefix of the environment variables read by RetryPolicy.from_env
ENV_PREFIX = "ARETRY_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class RetryPolicy:
    """Retry policy for a single call to a retry executor.

    A policy is a transient, immutable value: it is built (or defaulted)
    at the call site and holds no state across calls. The retry loop
    itself keeps its attempt counter locally.

    Note:
        The executor does not deduplicate or memoize attempts. Retrying a
        non-idempotent operation (for example a write that timed out after
        being applied) can apply it more than once. Whether a given
        operation needs at-most-once or at-least-once semantics is left to
        the caller.

    Args:
        max_retries: Number of additional attempts after the first one.
            Must be >= 0. Total attempts = max_retries + 1.
        initial_delay: Base delay in seconds before the first retry. Must be >= 0.
        max_delay: Upper bound in seconds on the computed delay. Must be >= 0.
        factor: Exponential multiplier applied per additional retry. Must be > 0.
        jitter: If ``True``, each delay is scaled by a uniformly random
            value in [0.8, 1.0] to desynchronize concurrent retriers.
        retry_condition: Predicate deciding whether an error is retryable.
            Defaults to retrying every error.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryPolicy
        >>> policy = RetryPolicy()  # Use defaults
        >>> policy.max_retries
        3
        >>> policy = RetryPolicy(max_retries=5, jitter=False)
        >>> merged = policy.merge(max_retries=10)  # Override specific parameters
        >>> merged.max_retries
        10
        >>> policy.max_retries  # Original unchanged
        5

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    initial_delay: float = DEFAULT_INITIAL_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    factor: float = DEFAULT_FACTOR
    jitter: bool = True
    retry_condition: Callable[[Exception], bool] = field(default=always_retry)

    def __post_init__(self) -> None:
        """Validate policy parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_retry_params(
            max_retries=self.max_retries,
            initial_delay=self.initial_delay,
            max_delay=self.max_delay,
            factor=self.factor,
        )

    def merge(self, **overrides: Any) -> RetryPolicy:
        """Create a new policy with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryPolicy instance with overrides applied.

        Example:
            ```pycon
            >>> from aretry.core.config import RetryPolicy
            >>> policy = RetryPolicy(max_retries=3)
            >>> policy.merge(max_retries=5, jitter=None).max_retries
            5

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the policy to dictionary format.

        Returns:
            Dictionary with the policy parameters.

        Example:
            ```pycon
            >>> from aretry.core.config import RetryPolicy
            >>> RetryPolicy(max_retries=5).to_dict()["max_retries"]
            5

            ```
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> RetryPolicy:
        """Create a policy from ``ARETRY_*`` environment variables.

        Recognized variables are ``ARETRY_MAX_RETRIES``,
        ``ARETRY_INITIAL_DELAY``, ``ARETRY_MAX_DELAY``, ``ARETRY_FACTOR``
        and ``ARETRY_JITTER``. Missing variables fall back to the module
        defaults. Keyword overrides win over the environment.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
            **overrides: Explicit values applied on top of the environment.

        Returns:
            The configured RetryPolicy.

        Raises:
            ValueError: If a variable cannot be parsed or fails validation.

        Example:
            ```pycon
            >>> from aretry.core.config import RetryPolicy
            >>> policy = RetryPolicy.from_env({"ARETRY_MAX_RETRIES": "5", "ARETRY_JITTER": "false"})
            >>> policy.max_retries, policy.jitter
            (5, False)

            ```
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {
            "max_retries": _read_env(env, "MAX_RETRIES", int, DEFAULT_MAX_RETRIES),
            "initial_delay": _read_env(env, "INITIAL_DELAY", float, DEFAULT_INITIAL_DELAY),
            "max_delay": _read_env(env, "MAX_DELAY", float, DEFAULT_MAX_DELAY),
            "factor": _read_env(env, "FACTOR", float, DEFAULT_FACTOR),
            "jitter": _read_env(env, "JITTER", _parse_bool, True),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    msg = f"invalid boolean value {value!r}"
    raise ValueError(msg)


def _read_env(
    env: Mapping[str, str],
    name: str,
    parser: Callable[[str], Any],
    default: Any,
) -> Any:
    key = f"{ENV_PREFIX}{name}"
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parser(raw.strip())
    except ValueError as exc:
        msg = f"Invalid value for {key}: {raw!r}"
        raise ValueError(msg) from exc


def with_retry_condition(
    policy: RetryPolicy | None, retry_condition: Callable[[Exception], bool]
) -> RetryPolicy:
    """Return a copy of ``policy`` using another retry condition.

    Args:
        policy: The policy to copy. ``None`` means ``RetryPolicy()``.
        retry_condition: The predicate replacing the policy's one.

    Returns:
        A new RetryPolicy with every other parameter unchanged.

    Example:
        ```pycon
        >>> from aretry.conditions import is_network_error
        >>> from aretry.core.config import RetryPolicy, with_retry_condition
        >>> policy = with_retry_condition(RetryPolicy(max_retries=5), is_network_error)
        >>> policy.max_retries, policy.retry_condition is is_network_error
        (5, True)

        ```
    """
    base = policy if policy is not None else RetryPolicy()
    return base.merge(retry_condition=retry_condition)
