from __future__ import annotations

import asyncio
import json
import logging
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import Mock

import pytest

from aretry import RetryPolicy, execute_with_retry
from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def json_stream() -> Generator[StringIO, None, None]:
    """Attach a JSON handler to the ``aretry`` and ``test_structured``
    loggers."""
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    loggers = [logging.getLogger("aretry"), logging.getLogger("test_structured")]
    levels = [logger.level for logger in loggers]
    for logger in loggers:
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    try:
        yield stream
    finally:
        for logger, level in zip(loggers, levels):
            logger.removeHandler(handler)
            logger.setLevel(level)


def read_entries(stream: StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


#############################################
#     Tests for correlation ID handling     #
#############################################


def test_correlation_id_default_none() -> None:
    assert get_correlation_id() is None


def test_set_and_clear_correlation_id() -> None:
    set_correlation_id("op-1")
    assert get_correlation_id() == "op-1"
    set_correlation_id("op-2")
    assert get_correlation_id() == "op-2"
    clear_correlation_id()
    assert get_correlation_id() is None


@pytest.mark.asyncio
async def test_correlation_id_isolated_between_tasks() -> None:
    async def worker(name: str) -> str | None:
        set_correlation_id(name)
        await asyncio.sleep(0)
        return get_correlation_id()

    results = await asyncio.gather(worker("a"), worker("b"))

    assert results == ["a", "b"]
    assert get_correlation_id() is None


#########################################
#     Tests for StructuredFormatter     #
#########################################


def test_structured_formatter_fields(json_stream: StringIO) -> None:
    logging.getLogger("test_structured").info("Hello %s", "world")

    (entry,) = read_entries(json_stream)
    assert entry["message"] == "Hello world"
    assert entry["level"] == "INFO"
    assert entry["logger"] == "test_structured"
    assert entry["module"] == "test_structured_logging"
    assert entry["function"] == "test_structured_formatter_fields"
    assert isinstance(entry["line"], int)
    assert "correlation_id" not in entry
    assert "exception" not in entry


def test_structured_formatter_timestamp_is_iso_utc(json_stream: StringIO) -> None:
    logging.getLogger("test_structured").warning("tick")

    timestamp = read_entries(json_stream)[0]["timestamp"]
    # YYYY-MM-DDTHH:MM:SS.mmmZ
    assert len(timestamp) == 24
    assert timestamp[10] == "T"
    assert timestamp.endswith("Z")


def test_structured_formatter_correlation_id(json_stream: StringIO) -> None:
    set_correlation_id("checkout-42")
    logging.getLogger("test_structured").info("step")

    assert read_entries(json_stream)[0]["correlation_id"] == "checkout-42"


def test_structured_formatter_exception(json_stream: StringIO) -> None:
    try:
        msg = "broken"
        raise ValueError(msg)
    except ValueError:
        logging.getLogger("test_structured").exception("failed")

    entry = read_entries(json_stream)[0]
    assert entry["level"] == "ERROR"
    assert "ValueError: broken" in entry["exception"]


def test_structured_formatter_non_serializable_extra(json_stream: StringIO) -> None:
    error = RuntimeError("boom")
    logging.getLogger("test_structured").info("with object", extra={"error_obj": error})

    assert read_entries(json_stream)[0]["error_obj"] == repr(error)


####################################
#     Tests for log_structured     #
####################################


def test_log_structured_extra_fields(json_stream: StringIO) -> None:
    log_structured(
        logging.getLogger("test_structured"),
        logging.WARNING,
        "Retry scheduled",
        attempt=2,
        max_retries=5,
        delay=0.4,
    )

    entry = read_entries(json_stream)[0]
    assert entry["message"] == "Retry scheduled"
    assert entry["level"] == "WARNING"
    assert (entry["attempt"], entry["max_retries"], entry["delay"]) == (2, 5, 0.4)


def test_log_structured_respects_level(json_stream: StringIO) -> None:
    logger = logging.getLogger("test_structured")
    logger.setLevel(logging.WARNING)

    log_structured(logger, logging.DEBUG, "hidden")
    log_structured(logger, logging.INFO, "hidden")
    log_structured(logger, logging.ERROR, "shown")

    assert [entry["message"] for entry in read_entries(json_stream)] == ["shown"]


def test_log_structured_retry_events(json_stream: StringIO, mock_sleep: Mock) -> None:  # noqa: ARG001
    set_correlation_id("sync-job")
    policy = RetryPolicy(max_retries=1, initial_delay=0.25, jitter=False)

    with pytest.raises(ConnectionError):
        execute_with_retry(Mock(side_effect=ConnectionError("ECONNRESET")), policy)

    entries = [e for e in read_entries(json_stream) if e["level"] in {"WARNING", "ERROR"}]
    assert [e["level"] for e in entries] == ["WARNING", "ERROR"]
    retry_entry, failure_entry = entries
    assert retry_entry["logger"] == "aretry.retry.executor_core"
    assert retry_entry["attempt"] == 1
    assert retry_entry["max_retries"] == 1
    assert retry_entry["delay"] == 0.25
    assert retry_entry["error"] == "ECONNRESET"
    assert retry_entry["error_type"] == "ConnectionError"
    assert retry_entry["correlation_id"] == "sync-job"
    assert failure_entry["attempt"] == 2
    assert failure_entry["exhausted"] is True
