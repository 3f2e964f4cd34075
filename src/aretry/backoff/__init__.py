r"""Backoff strategies and utilities for retry delays."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ExponentialBackoff", "calculate_sleep_time"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.sleep import calculate_sleep_time
