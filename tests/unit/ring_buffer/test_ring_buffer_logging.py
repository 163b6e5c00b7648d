"""Circular buffer logging tests."""

from __future__ import annotations

import logging

import pytest

from circularbuffer.ring_buffer import CircularBuffer

RING_LOGGER = "circularbuffer.ring_buffer"


def _eviction_messages(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [
        record.getMessage()
        for record in caplog.records
        if record.name == RING_LOGGER and record.getMessage().startswith("Eviction")
    ]


def test_evictions_are_sampled(caplog: pytest.LogCaptureFixture) -> None:
    """Verify only the first and every Nth eviction is logged.

    Pushing into a full buffer is the hot path, so logging every eviction
    would flood the logs.
    """
    caplog.set_level(logging.DEBUG, logger=RING_LOGGER)
    ring: CircularBuffer[int] = CircularBuffer(2, eviction_log_interval=2)

    ring.extend([1, 2, 3, 4, 5, 6])

    assert _eviction_messages(caplog) == [
        "Eviction #1: buffer full (capacity=2), dropped oldest element 1",
        "Eviction #2: buffer full (capacity=2), dropped oldest element 2",
        "Eviction #4: buffer full (capacity=2), dropped oldest element 4",
    ]


def test_no_eviction_logged_below_capacity(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger=RING_LOGGER)
    ring: CircularBuffer[int] = CircularBuffer(3, eviction_log_interval=1)

    ring.extend([1, 2, 3])

    assert _eviction_messages(caplog) == []


def test_resize_dropping_elements_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Verify a lossy resize says how many elements it dropped."""
    caplog.set_level(logging.DEBUG, logger=RING_LOGGER)
    ring: CircularBuffer[int] = CircularBuffer(4)
    ring.extend([1, 2, 3, 4])

    ring.resize(1, policy="drop_oldest")  # type: ignore[arg-type]

    assert "Resized circular buffer 4 -> 1, dropped 3 oldest elements" in [
        record.getMessage() for record in caplog.records
    ]
