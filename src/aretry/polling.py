r"""Wait until a blocking condition becomes true.

The condition is evaluated on a fixed interval until it returns a truthy
value or the timeout elapses. An evaluation that raises is logged and
counted as "not yet true", so one flaky check does not abort the wait.
"""

from __future__ import annotations

__all__ = ["log_condition_error", "timeout_error", "wait_for_condition"]

import logging
import time
from typing import TYPE_CHECKING

from aretry.core.config import DEFAULT_POLL_INTERVAL, DEFAULT_POLL_TIMEOUT
from aretry.core.validation import validate_poll_params
from aretry.exceptions import ConditionTimeoutError
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


def wait_for_condition(
    condition: Callable[[], object],
    timeout: float = DEFAULT_POLL_TIMEOUT,
    interval: float = DEFAULT_POLL_INTERVAL,
    timeout_message: str | None = None,
) -> None:
    """Poll ``condition`` until it is true or ``timeout`` elapses.

    Args:
        condition: Zero-argument callable returning a truthy value once
            the awaited state is reached.
        timeout: Maximum seconds to wait. Must be > 0.
        interval: Seconds to wait between evaluations. Must be > 0.
        timeout_message: Message of the timeout error. Defaults to a
            message naming the timeout.

    Raises:
        ValueError: If timeout or interval is non-positive or not finite.
        ConditionTimeoutError: If the condition is still false when the
            timeout elapses.

    Example:
        ```pycon
        >>> from aretry import wait_for_condition
        >>> wait_for_condition(lambda: True, timeout=1.0, interval=0.1)

        ```
    """
    validate_poll_params(timeout=timeout, interval=interval)
    start_time = time.monotonic()
    checks = 0
    while time.monotonic() - start_time < timeout:
        checks += 1
        try:
            if condition():
                logger.debug(f"Condition met after {checks} check(s)")
                return
        except Exception as exc:
            log_condition_error(exc, checks)
        time.sleep(interval)

    raise timeout_error(timeout, interval, timeout_message)


def log_condition_error(error: Exception, checks: int) -> None:
    """Log an error raised while evaluating a polled condition.

    Args:
        error: The error raised by the condition.
        checks: Number of evaluations so far, including the failed one.
    """
    log_structured(
        logger,
        logging.WARNING,
        f"Error checking condition: {error!r}",
        attempt=checks,
        error=str(error),
        error_type=type(error).__name__,
    )


def timeout_error(
    timeout: float, interval: float, timeout_message: str | None
) -> ConditionTimeoutError:
    """Build the error raised when a polled condition times out.

    Args:
        timeout: The timeout in seconds that elapsed.
        interval: The polling interval in seconds.
        timeout_message: Caller-supplied message, if any.

    Returns:
        The ConditionTimeoutError to raise.
    """
    message = timeout_message or f"Timed out after {timeout}s waiting for condition"
    logger.debug(message)
    return ConditionTimeoutError(message, timeout=timeout, interval=interval)
