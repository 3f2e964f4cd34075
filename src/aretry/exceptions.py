r"""Exceptions synthesized by aretry.

Errors raised by a wrapped operation are never wrapped: the executors
re-raise them unchanged. The only error the library creates itself is
the timeout of the condition polling helpers.
"""

from __future__ import annotations

__all__ = ["ConditionTimeoutError"]


class ConditionTimeoutError(TimeoutError):
    """Raised when a polled condition does not become true in time.

    Args:
        message: Human-readable error message.
        timeout: The timeout in seconds that elapsed.
        interval: The polling interval in seconds.

    Example:
        ```pycon
        >>> from aretry.exceptions import ConditionTimeoutError
        >>> error = ConditionTimeoutError("Page never loaded", timeout=5.0, interval=0.5)
        >>> str(error)
        'Page never loaded'
        >>> error.timeout
        5.0

        ```
    """

    def __init__(self, message: str, timeout: float, interval: float) -> None:
        super().__init__(message)
        self.message = message
        self.timeout = timeout
        self.interval = interval
