from __future__ import annotations

import pytest

from aretry.core.validation import validate_poll_params, validate_retry_params

###########################################
#     Tests for validate_retry_params     #
###########################################


@pytest.mark.parametrize("max_retries", [0, 1, 10])
def test_validate_retry_params_valid_max_retries(max_retries: int) -> None:
    validate_retry_params(max_retries=max_retries, initial_delay=1.0, max_delay=30.0, factor=2.0)


def test_validate_retry_params_zero_delays() -> None:
    validate_retry_params(max_retries=3, initial_delay=0.0, max_delay=0.0, factor=1.0)


def test_validate_retry_params_negative_max_retries() -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 0, got -1"):
        validate_retry_params(max_retries=-1, initial_delay=1.0, max_delay=30.0, factor=2.0)


def test_validate_retry_params_negative_initial_delay() -> None:
    with pytest.raises(ValueError, match=r"initial_delay must be >= 0"):
        validate_retry_params(max_retries=3, initial_delay=-1.0, max_delay=30.0, factor=2.0)


def test_validate_retry_params_negative_max_delay() -> None:
    with pytest.raises(ValueError, match=r"max_delay must be >= 0"):
        validate_retry_params(max_retries=3, initial_delay=1.0, max_delay=-30.0, factor=2.0)


@pytest.mark.parametrize("factor", [0, -1.0])
def test_validate_retry_params_non_positive_factor(factor: float) -> None:
    with pytest.raises(ValueError, match=r"factor must be > 0"):
        validate_retry_params(max_retries=3, initial_delay=1.0, max_delay=30.0, factor=factor)


@pytest.mark.parametrize("initial_delay", [float("nan"), float("inf")])
def test_validate_retry_params_non_finite_initial_delay(initial_delay: float) -> None:
    with pytest.raises(ValueError, match=r"initial_delay must be >= 0 and finite"):
        validate_retry_params(
            max_retries=3, initial_delay=initial_delay, max_delay=30.0, factor=2.0
        )


def test_validate_retry_params_nan_max_delay() -> None:
    with pytest.raises(ValueError, match=r"max_delay must be >= 0, got nan"):
        validate_retry_params(max_retries=3, initial_delay=1.0, max_delay=float("nan"), factor=2.0)


def test_validate_retry_params_infinite_max_delay() -> None:
    validate_retry_params(max_retries=3, initial_delay=1.0, max_delay=float("inf"), factor=2.0)


@pytest.mark.parametrize("factor", [float("nan"), float("inf")])
def test_validate_retry_params_non_finite_factor(factor: float) -> None:
    with pytest.raises(ValueError, match=r"factor must be > 0 and finite"):
        validate_retry_params(max_retries=3, initial_delay=1.0, max_delay=30.0, factor=factor)


##########################################
#     Tests for validate_poll_params     #
##########################################


def test_validate_poll_params_valid() -> None:
    validate_poll_params(timeout=5.0, interval=0.5)


@pytest.mark.parametrize("timeout", [0, -1.0])
def test_validate_poll_params_invalid_timeout(timeout: float) -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        validate_poll_params(timeout=timeout, interval=0.5)


@pytest.mark.parametrize("interval", [0, -0.5])
def test_validate_poll_params_invalid_interval(interval: float) -> None:
    with pytest.raises(ValueError, match=r"interval must be > 0"):
        validate_poll_params(timeout=5.0, interval=interval)


@pytest.mark.parametrize(
    ("timeout", "interval"),
    [(float("nan"), 0.5), (float("inf"), 0.5), (5.0, float("nan")), (5.0, float("inf"))],
)
def test_validate_poll_params_non_finite(timeout: float, interval: float) -> None:
    with pytest.raises(ValueError, match=r"must be > 0 and finite"):
        validate_poll_params(timeout=timeout, interval=interval)
