r"""Unit tests for callback manager."""

from __future__ import annotations

import time
from unittest.mock import Mock

from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo
from aretry.retry import CallbackConfig, CallbackManager


def test_callback_manager_creation() -> None:
    config = CallbackConfig()
    assert CallbackManager(config).callbacks is config


def test_callback_manager_without_callbacks() -> None:
    manager = CallbackManager(CallbackConfig())
    error = RuntimeError("boom")
    manager.on_retry(1, 3, 0.5, error)
    manager.on_success(0, 3, time.time())
    manager.on_failure(3, 3, error, True, time.time())


def test_callback_manager_on_retry(mock_callback: Mock) -> None:
    manager = CallbackManager(CallbackConfig(on_retry=mock_callback))
    error = ConnectionError("reset")

    manager.on_retry(attempt=2, max_retries=3, sleep_time=0.4, error=error)

    mock_callback.assert_called_once_with(
        RetryInfo(attempt=2, max_retries=3, wait_time=0.4, error=error)
    )


def test_callback_manager_on_success(mock_callback: Mock) -> None:
    manager = CallbackManager(CallbackConfig(on_success=mock_callback))

    manager.on_success(retries=2, max_retries=3, start_time=time.time())

    mock_callback.assert_called_once()
    info = mock_callback.call_args.args[0]
    assert isinstance(info, SuccessInfo)
    assert info.attempt == 3
    assert info.max_retries == 3
    assert info.total_time >= 0


def test_callback_manager_on_failure(mock_callback: Mock) -> None:
    manager = CallbackManager(CallbackConfig(on_failure=mock_callback))
    error = ValueError("bad")

    manager.on_failure(
        retries=0, max_retries=3, error=error, exhausted=False, start_time=time.time()
    )

    info = mock_callback.call_args.args[0]
    assert isinstance(info, FailureInfo)
    assert info.attempt == 1
    assert info.max_retries == 3
    assert info.error is error
    assert info.exhausted is False
    assert info.total_time >= 0
