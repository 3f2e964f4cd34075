r"""Retry predicates deciding whether an error is eligible for a retry.

A retry predicate is a plain callable ``(error) -> bool``. The
composite policies (network errors, rate-limit errors) are predicates
pre-built from a fixed list of error-matching rules, where each rule is
either a substring or a compiled regular expression tested against the
error message.
"""

from __future__ import annotations

__all__ = [
    "NETWORK_ERROR_PATTERNS",
    "RATE_LIMIT_ERROR_PATTERNS",
    "always_retry",
    "error_status_code",
    "is_network_error",
    "is_rate_limit_error",
    "matches_any",
]

import re
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

ErrorPattern = str | re.Pattern[str]

NETWORK_ERROR_PATTERNS: tuple[ErrorPattern, ...] = (
    "ECONNRESET",
    "ETIMEDOUT",
    "ECONNREFUSED",
    "EPIPE",
    "EHOSTUNREACH",
    "ENETUNREACH",
    "ENOTFOUND",
    "socket hang up",
    "network error",
    "Network Error",
    "Connection reset",
    "Connection refused",
    "connection failure",
    re.compile(r"^5\d\d$"),  # 5xx status code as the whole message
    "timeout",
    "Timeout",
    "aborted",
    "socket disconnected",
    "Cannot connect",
    "connection closed",
)

RATE_LIMIT_ERROR_PATTERNS: tuple[ErrorPattern, ...] = (
    "rate limit",
    "Rate limit",
    "ratelimit",
    "RateLimit",
    "Too Many Requests",
    "too many requests",
    "429",
    "quota",
    "Quota",
    "exceeded",
    "Exceeded",
    "throttled",
    "Throttled",
)


def always_retry(error: Exception | None) -> bool:  # noqa: ARG001
    """Retry every error.

    This is the default retry condition of ``RetryPolicy``.

    Example:
        ```pycon
        >>> from aretry.conditions import always_retry
        >>> always_retry(ValueError("boom"))
        True

        ```
    """
    return True


def matches_any(patterns: Iterable[ErrorPattern]) -> Callable[[Exception | None], bool]:
    r"""Build a predicate matching the error message against patterns.

    A ``str`` pattern matches when it is a substring of ``str(error)``; a
    compiled regular expression matches when ``pattern.search`` finds it
    in ``str(error)``. A ``None`` error never matches.

    Args:
        patterns: The substrings and compiled patterns to test.

    Returns:
        A predicate returning ``True`` if any pattern matches.

    Raises:
        TypeError: If a pattern is neither a string nor a compiled
            regular expression.

    Example:
        ```pycon
        >>> import re
        >>> from aretry.conditions import matches_any
        >>> predicate = matches_any(["deadlock", re.compile(r"lock wait \d+")])
        >>> predicate(RuntimeError("deadlock detected"))
        True
        >>> predicate(RuntimeError("lock wait 50 exceeded"))
        True
        >>> predicate(RuntimeError("syntax error"))
        False

        ```
    """
    rules = tuple(patterns)
    for rule in rules:
        if not isinstance(rule, (str, re.Pattern)):
            msg = f"Error patterns must be str or re.Pattern, got {type(rule).__name__}"
            raise TypeError(msg)

    def predicate(error: Exception | None) -> bool:
        if error is None:
            return False
        message = str(error)
        for rule in rules:
            if isinstance(rule, str):
                if rule in message:
                    return True
            elif rule.search(message):
                return True
        return False

    return predicate


def error_status_code(error: Exception | None) -> int | None:
    """Return the HTTP status code carried by an ``httpx`` error.

    Args:
        error: The error to inspect.

    Returns:
        The response status code of an ``httpx.HTTPStatusError``, or None
        for any other error.
    """
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code
    return None


_matches_network_error = matches_any(NETWORK_ERROR_PATTERNS)
_matches_rate_limit_error = matches_any(RATE_LIMIT_ERROR_PATTERNS)


def is_network_error(error: Exception | None) -> bool:
    """Indicate if an error looks like a transient network failure.

    Connection resets, timeouts, DNS failures and 5xx status codes are
    recognized from the error message. ``httpx`` transport errors and
    ``httpx.HTTPStatusError`` with a 5xx status are recognized from
    their type.

    Args:
        error: The error to classify.

    Returns:
        ``True`` if the error should be retried as a network error.

    Example:
        ```pycon
        >>> from aretry.conditions import is_network_error
        >>> is_network_error(ConnectionError("ECONNRESET"))
        True
        >>> is_network_error(RuntimeError("503"))
        True
        >>> is_network_error(ValueError("validation failed"))
        False

        ```
    """
    if isinstance(error, httpx.TransportError):
        return True
    status_code = error_status_code(error)
    if status_code is not None and 500 <= status_code < 600:
        return True
    return _matches_network_error(error)


def is_rate_limit_error(error: Exception | None) -> bool:
    """Indicate if an error signals rate limiting or quota exhaustion.

    Args:
        error: The error to classify.

    Returns:
        ``True`` if the error should be retried as a rate-limit error.

    Example:
        ```pycon
        >>> from aretry.conditions import is_rate_limit_error
        >>> is_rate_limit_error(RuntimeError("429 Too Many Requests"))
        True
        >>> is_rate_limit_error(RuntimeError("404 Not Found"))
        False

        ```
    """
    if error_status_code(error) == 429:
        return True
    return _matches_rate_limit_error(error)
