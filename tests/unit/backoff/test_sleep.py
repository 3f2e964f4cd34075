r"""Unit tests for calculate_sleep_time."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from aretry.backoff import ExponentialBackoff, calculate_sleep_time
from aretry.backoff.sleep import JITTER_RANGE


def test_calculate_sleep_time_no_jitter() -> None:
    backoff = ExponentialBackoff(initial_delay=0.1, factor=2.0)
    assert calculate_sleep_time(attempt=1, jitter=False, backoff_strategy=backoff) == 0.1
    assert calculate_sleep_time(attempt=2, jitter=False, backoff_strategy=backoff) == 0.2
    assert calculate_sleep_time(attempt=3, jitter=False, backoff_strategy=backoff) == 0.4


def test_calculate_sleep_time_default_strategy() -> None:
    assert calculate_sleep_time(attempt=1, jitter=False) == 1.0
    assert calculate_sleep_time(attempt=3, jitter=False) == 4.0


def test_calculate_sleep_time_respects_max_delay() -> None:
    backoff = ExponentialBackoff(initial_delay=1.0, max_delay=3.0)
    assert calculate_sleep_time(attempt=5, jitter=False, backoff_strategy=backoff) == 3.0


def test_jitter_range() -> None:
    assert JITTER_RANGE == (0.8, 1.0)


def test_calculate_sleep_time_jitter_scales_delay() -> None:
    backoff = ExponentialBackoff(initial_delay=1.0, factor=2.0)
    with patch("aretry.backoff.sleep.random.uniform", return_value=0.9) as uniform:
        sleep_time = calculate_sleep_time(attempt=2, jitter=True, backoff_strategy=backoff)
    assert sleep_time == pytest.approx(1.8)
    uniform.assert_called_once_with(0.8, 1.0)


@pytest.mark.parametrize("attempt", [1, 2, 3, 4, 5, 6])
def test_calculate_sleep_time_jitter_bounds(attempt: int) -> None:
    backoff = ExponentialBackoff(initial_delay=0.5, factor=2.0, max_delay=10.0)
    base = backoff.calculate(attempt)
    for _ in range(50):
        sleep_time = calculate_sleep_time(attempt=attempt, jitter=True, backoff_strategy=backoff)
        assert 0.8 * base <= sleep_time <= base


def test_calculate_sleep_time_jitter_never_exceeds_max_delay() -> None:
    backoff = ExponentialBackoff(initial_delay=1.0, max_delay=2.0)
    for attempt in range(1, 20):
        assert calculate_sleep_time(attempt=attempt, jitter=True, backoff_strategy=backoff) <= 2.0
