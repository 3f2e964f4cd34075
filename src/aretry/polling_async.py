r"""Wait until an async condition becomes true."""

from __future__ import annotations

__all__ = ["wait_for_condition_async"]

import asyncio
import inspect
import logging
import time
from typing import TYPE_CHECKING

from aretry.core.config import DEFAULT_POLL_INTERVAL, DEFAULT_POLL_TIMEOUT
from aretry.core.validation import validate_poll_params
from aretry.polling import log_condition_error, timeout_error

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger: logging.Logger = logging.getLogger(__name__)


async def wait_for_condition_async(
    condition: Callable[[], Awaitable[object]],
    timeout: float = DEFAULT_POLL_TIMEOUT,
    interval: float = DEFAULT_POLL_INTERVAL,
    timeout_message: str | None = None,
) -> None:
    """Poll an async ``condition`` until it is true or ``timeout``
    elapses.

    Errors raised by ``condition`` are logged at WARNING level and treated
    as "not yet true"; the wait goes on. Cancelling the awaiting task
    stops the wait immediately.

    Args:
        condition: Zero-argument callable returning an awaitable that
            resolves to a truthy value once the awaited state is reached.
        timeout: Maximum seconds to wait. Must be > 0.
        interval: Seconds to wait between evaluations. Must be > 0.
        timeout_message: Message of the timeout error. Defaults to a
            message naming the timeout.

    Raises:
        ValueError: If timeout or interval is non-positive or not finite.
        ConditionTimeoutError: If the condition is still false when the
            timeout elapses.
        TypeError: If ``condition`` returns a value that is not awaitable.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import wait_for_condition_async
        >>> async def ready() -> bool:
        ...     return True
        ...
        >>> asyncio.run(wait_for_condition_async(ready, timeout=1.0, interval=0.1))

        ```
    """
    validate_poll_params(timeout=timeout, interval=interval)
    start_time = time.monotonic()
    checks = 0
    while time.monotonic() - start_time < timeout:
        checks += 1
        try:
            awaitable = condition()
            if inspect.isawaitable(awaitable) and await awaitable:
                logger.debug(f"Condition met after {checks} check(s)")
                return
        except Exception as exc:
            log_condition_error(exc, checks)
        else:
            if not inspect.isawaitable(awaitable):
                msg = (
                    "condition must return an awaitable, "
                    f"got {type(awaitable).__name__}; use wait_for_condition for "
                    "blocking callables"
                )
                raise TypeError(msg)
        await asyncio.sleep(interval)

    raise timeout_error(timeout, interval, timeout_message)
