r"""Shared test helpers for the retry executor and polling tests."""

from __future__ import annotations

__all__ = ["FakeClock", "FlakyOperation", "make_http_status_error"]

import httpx


class FakeClock:
    """Monotonic clock advanced only by the patched sleep functions."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    async def asleep(self, seconds: float) -> None:
        self.sleep(seconds)


class FlakyOperation:
    """Operation raising the given errors in order, then returning a
    value.

    Attributes:
        calls: Number of times the operation was invoked.
    """

    def __init__(self, errors: list[Exception], result: object = "ok") -> None:
        self.errors = list(errors)
        self.result = result
        self.calls = 0

    def __call__(self) -> object:
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return self.result

    async def run_async(self) -> object:
        return self()


def make_http_status_error(status_code: int) -> httpx.HTTPStatusError:
    """Create the error raised by ``httpx.Response.raise_for_status``."""
    request = httpx.Request("GET", "https://api.example.com/data")
    response = httpx.Response(status_code, request=request)
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        return exc
    msg = f"status {status_code} is not an error status"
    raise ValueError(msg)
