"""Circular buffer iteration and membership tests."""

from __future__ import annotations

import pytest

from circularbuffer.ring_buffer import CircularBuffer

# =============================================================================
# Iteration
# =============================================================================


def test_iteration_is_oldest_to_newest(wrapped_buffer: CircularBuffer[int]) -> None:
    """Verify iteration follows logical order, not storage order.

    Storage holds [60, _, 30, 40, 50]; a raw left-to-right scan would yield 60
    first.
    """
    assert list(wrapped_buffer) == [30, 40, 50, 60]


def test_iterating_empty_buffer_yields_nothing(buffer: CircularBuffer[int]) -> None:
    assert list(buffer) == []


def test_iterator_is_lazy_and_can_be_abandoned(
    wrapped_buffer: CircularBuffer[int],
) -> None:
    """Verify an iterator can stop early without touching the buffer."""
    iterator = iter(wrapped_buffer)

    assert next(iterator) == 30
    del iterator

    assert len(wrapped_buffer) == 4
    assert list(wrapped_buffer) == [30, 40, 50, 60]


def test_independent_iterators(wrapped_buffer: CircularBuffer[int]) -> None:
    """Verify two iterators over an unchanged buffer do not interfere."""
    first = iter(wrapped_buffer)
    second = iter(wrapped_buffer)

    assert next(first) == 30
    assert next(first) == 40
    assert next(second) == 30


@pytest.mark.parametrize(
    "mutate",
    [
        lambda ring: ring.push(99),
        lambda ring: ring.pop(),
        lambda ring: ring.clear(),
        lambda ring: ring.resize(8),
    ],
    ids=["push", "pop", "clear", "resize"],
)
def test_mutation_during_iteration_raises(
    wrapped_buffer: CircularBuffer[int], mutate
) -> None:
    """Verify a live iterator never observes elements removed under it."""
    iterator = iter(wrapped_buffer)
    next(iterator)

    mutate(wrapped_buffer)

    with pytest.raises(RuntimeError):
        next(iterator)


def test_mutation_before_first_step_raises(
    wrapped_buffer: CircularBuffer[int],
) -> None:
    """Verify the iterator is bound to the state at the time it was created."""
    iterator = iter(wrapped_buffer)
    wrapped_buffer.clear()

    with pytest.raises(RuntimeError):
        next(iterator)


def test_empty_pop_does_not_invalidate_iterator(buffer: CircularBuffer[int]) -> None:
    """Verify a no-op pop on an empty buffer is not treated as a mutation."""
    iterator = iter(buffer)
    buffer.pop()

    assert list(iterator) == []


def test_to_list_is_a_snapshot(wrapped_buffer: CircularBuffer[int]) -> None:
    """Verify the returned list is detached from the buffer."""
    snapshot = wrapped_buffer.to_list()
    snapshot.append(1000)
    wrapped_buffer.push(70)

    assert snapshot == [30, 40, 50, 60, 1000]
    assert wrapped_buffer.to_list() == [30, 40, 50, 60, 70]


# =============================================================================
# Membership
# =============================================================================


def test_contains_after_push(buffer: CircularBuffer[int]) -> None:
    """Verify an element is found right after being pushed."""
    buffer.push(42)

    assert buffer.contains(42)
    assert 42 in buffer
    assert 43 not in buffer


def test_contains_false_after_pop(buffer: CircularBuffer[int]) -> None:
    """Verify a popped element is not reported from its stale slot."""
    buffer.extend([1, 2])
    buffer.pop()

    assert not buffer.contains(1)
    assert buffer.contains(2)


def test_contains_false_after_eviction() -> None:
    """Verify an evicted element is no longer found."""
    ring: CircularBuffer[int] = CircularBuffer(2)
    ring.extend([1, 2, 3])

    assert 1 not in ring
    assert 2 in ring
    assert 3 in ring


def test_contains_across_wrap(wrapped_buffer: CircularBuffer[int]) -> None:
    """Verify elements on both sides of the storage boundary are found."""
    assert all(value in wrapped_buffer for value in (30, 40, 50, 60))
    assert 10 not in wrapped_buffer
    assert 20 not in wrapped_buffer


def test_contains_none_ignores_empty_slots(buffer: CircularBuffer[object]) -> None:
    """Verify empty slots are not mistaken for a stored None."""
    buffer.push("a")

    assert None not in buffer


def test_contains_uses_equality(buffer: CircularBuffer[object]) -> None:
    """Verify membership compares by value rather than identity."""
    buffer.push([1, 2])

    assert [1, 2] in buffer
    assert 1.0 not in buffer
