"""Shared fixtures for circular buffer unit tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from circularbuffer.ring_buffer import CircularBuffer


@pytest.fixture
def buffer() -> CircularBuffer[int]:
    """Empty buffer with five slots."""
    return CircularBuffer(5)


@pytest.fixture
def wrapped_buffer() -> CircularBuffer[int]:
    """Buffer whose occupied window wraps past the end of storage.

    Capacity 5 after pushing 10..60 and popping once: logically
    [30, 40, 50, 60], stored as [60, _, 30, 40, 50] with tail=2 and head=1.
    """
    ring: CircularBuffer[int] = CircularBuffer(5)
    ring.extend([10, 20, 30, 40, 50, 60])
    ring.pop()
    return ring


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing YAML text to a config file under tmp_path."""

    def _write(text: str, name: str = "buffer.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
