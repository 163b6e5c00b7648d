"""Fixed-capacity ring buffer with overwrite-on-full semantics."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from typing import Generic, TextIO, TypeVar

from circularbuffer.config.buffer_config import BufferConfig, ResizePolicy
from circularbuffer.const import (
    DEFAULT_EVICTION_LOG_INTERVAL,
    DISPLAY_PREFIX,
    EMPTY_SLOT_MARKER,
)
from circularbuffer.exceptions import (
    InvalidArgumentError,
    InvalidCapacityError,
    SlotIndexError,
)
from circularbuffer.sampled_logger import make_sampled_logger

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Marks an unoccupied slot so that None remains a storable value
_EMPTY: object = object()


def _validate_capacity(capacity: object) -> int:
    """Return capacity unchanged if it is a positive int.

    Raises:
        InvalidCapacityError: for zero, negative or non-integer capacities.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidCapacityError(
            f"capacity must be an integer, got {type(capacity).__name__}",
            capacity=capacity,
        )
    if capacity <= 0:
        raise InvalidCapacityError(
            f"capacity must be positive, got {capacity}", capacity=capacity
        )
    return capacity


def _validate_policy(policy: object) -> ResizePolicy:
    """Return policy as a ResizePolicy.

    Raises:
        InvalidArgumentError: if policy is not a known resize policy.
    """
    try:
        return ResizePolicy(policy)
    except ValueError as exc:
        valid = ", ".join(member.value for member in ResizePolicy)
        raise InvalidArgumentError(
            f"resize policy must be one of {valid}, got {policy!r}"
        ) from exc


class CircularBuffer(Generic[T]):
    """Ring buffer holding up to ``capacity`` elements.

    Pushing into a full buffer silently evicts the oldest element. Callers that
    must not lose data should check ``is_full()`` before pushing.

    - ``head`` is the slot the next element is written to.
    - ``tail`` is the slot of the oldest element (meaningful when non-empty).
    - Full and empty are told apart by the element count, never by
      ``head == tail``.

    Not safe for concurrent use.
    """

    def __init__(
        self,
        capacity: int,
        *,
        resize_policy: ResizePolicy = ResizePolicy.REJECT,
        empty_slot_marker: str = EMPTY_SLOT_MARKER,
        eviction_log_interval: int = DEFAULT_EVICTION_LOG_INTERVAL,
    ) -> None:
        """Initialize an empty buffer.

        Args:
            capacity: Number of slots. Must be a positive integer.
            resize_policy: Default policy for ``resize`` when the new capacity
                is smaller than the number of stored elements.
            empty_slot_marker: Placeholder rendered for empty slots.
            eviction_log_interval: Log the first eviction and every Nth after.

        Raises:
            InvalidCapacityError: if capacity is not a positive integer.
            InvalidArgumentError: if any other option is invalid.
        """
        self._capacity = _validate_capacity(capacity)
        if not isinstance(empty_slot_marker, str) or not empty_slot_marker:
            raise InvalidArgumentError(
                f"empty_slot_marker must be a non-empty string, "
                f"got {empty_slot_marker!r}"
            )
        if (
            isinstance(eviction_log_interval, bool)
            or not isinstance(eviction_log_interval, int)
            or eviction_log_interval <= 0
        ):
            raise InvalidArgumentError(
                f"eviction_log_interval must be a positive integer, "
                f"got {eviction_log_interval!r}"
            )
        self._slots: list[object] = [_EMPTY] * self._capacity
        self.head = 0
        self.tail = 0
        self._count = 0
        self._mutations = 0
        self._resize_policy = _validate_policy(resize_policy)
        self._empty_slot_marker = empty_slot_marker
        self._log_eviction = make_sampled_logger(
            "Eviction #%d: buffer full (capacity=%d), dropped oldest element %r",
            log_interval=eviction_log_interval,
            target_logger=logger,
        )
        logger.debug("Created circular buffer with capacity %d", self._capacity)

    @classmethod
    def from_config(cls, config: BufferConfig) -> CircularBuffer[T]:
        """Build an empty buffer from a validated configuration."""
        return cls(
            config.capacity,
            resize_policy=config.resize_policy,
            empty_slot_marker=config.empty_slot_marker,
            eviction_log_interval=config.eviction_log_interval,
        )

    @property
    def capacity(self) -> int:
        """Return the total number of slots."""
        return self._capacity

    @property
    def resize_policy(self) -> ResizePolicy:
        """Return the policy applied by ``resize`` when no policy is given."""
        return self._resize_policy

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def is_full(self) -> bool:
        """Return True when every slot holds an element."""
        return self._count == self._capacity

    def is_empty(self) -> bool:
        """Return True when the buffer holds no elements."""
        return self._count == 0

    def push(self, item: T) -> None:
        """Append an element, evicting the oldest one if the buffer is full.

        :param item: the element to store
        """
        if self.is_full():
            evicted = self._slots[self.tail]
            self.tail = (self.tail + 1) % self._capacity
            self._log_eviction(self._capacity, evicted)
        else:
            self._count += 1

        self._slots[self.head] = item
        self.head = (self.head + 1) % self._capacity
        self._mutations += 1

    def extend(self, items: Iterable[T]) -> None:
        """Push every element of ``items`` in order."""
        for item in items:
            self.push(item)

    def pop(self, default: T | None = None) -> T | None:
        """Remove and return the oldest element.

        Returns ``default`` (None unless given) when the buffer is empty, in
        which case the buffer is left untouched.
        """
        if self.is_empty():
            return default

        item = self._slots[self.tail]
        self._slots[self.tail] = _EMPTY
        self.tail = (self.tail + 1) % self._capacity
        self._count -= 1
        self._mutations += 1
        return item  # type: ignore[return-value]

    def peek(self, default: T | None = None) -> T | None:
        """Return the oldest element without removing it, or ``default``."""
        if self.is_empty():
            return default
        return self._slots[self.tail]  # type: ignore[return-value]

    def clear(self) -> None:
        """Remove every element. Capacity is unchanged."""
        self._slots = [_EMPTY] * self._capacity
        self.head = 0
        self.tail = 0
        self._count = 0
        self._mutations += 1
        logger.debug("Cleared circular buffer (capacity=%d)", self._capacity)

    def contains(self, item: T) -> bool:
        """Return True if an equal element is currently stored.

        Only elements inside the occupied window are compared.
        """
        return any(element is item or element == item for element in self)

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        """Iterate lazily from oldest to newest element.

        The iterator is a live view: mutating the buffer after it was created
        makes the next step raise ``RuntimeError``.
        """
        return self._iter_live(self._mutations)

    def _iter_live(self, expected_mutations: int) -> Iterator[T]:
        for offset in range(self._count):
            if self._mutations != expected_mutations:
                raise RuntimeError("circular buffer mutated during iteration")
            yield self._slots[(self.tail + offset) % self._capacity]  # type: ignore[misc]
        if self._mutations != expected_mutations:
            raise RuntimeError("circular buffer mutated during iteration")

    def to_list(self) -> list[T]:
        """Return a snapshot of the stored elements, oldest first."""
        return list(self)

    def resize(self, new_capacity: int, policy: ResizePolicy | None = None) -> None:
        """Reallocate the buffer to ``new_capacity`` slots.

        Stored elements are compacted to the start of the new storage in
        oldest-to-newest order, so afterwards ``tail == 0``.

        Args:
            new_capacity: Number of slots after resizing. Must be positive.
            policy: What to do when ``new_capacity`` is smaller than the number
                of stored elements. Defaults to the buffer's resize policy.
                ``REJECT`` raises, ``DROP_OLDEST`` keeps the newest elements.

        Raises:
            InvalidCapacityError: if the capacity is not a positive integer, or
                is too small for the stored elements under ``REJECT``. The
                buffer is unchanged when this is raised.
        """
        _validate_capacity(new_capacity)
        policy = self._resize_policy if policy is None else _validate_policy(policy)

        retained = self._count
        if new_capacity < self._count:
            if policy is ResizePolicy.REJECT:
                raise InvalidCapacityError(
                    f"cannot resize to {new_capacity} slots while holding "
                    f"{self._count} elements",
                    capacity=new_capacity,
                    count=self._count,
                )
            retained = new_capacity

        dropped = self._count - retained
        new_slots: list[object] = [_EMPTY] * new_capacity
        for index in range(retained):
            new_slots[index] = self._slots[
                (self.tail + dropped + index) % self._capacity
            ]

        old_capacity = self._capacity
        self._slots = new_slots
        self._capacity = new_capacity
        self._count = retained
        self.tail = 0
        self.head = retained % new_capacity
        self._mutations += 1

        if dropped:
            logger.debug(
                "Resized circular buffer %d -> %d, dropped %d oldest elements",
                old_capacity,
                new_capacity,
                dropped,
            )
        else:
            logger.debug("Resized circular buffer %d -> %d", old_capacity, new_capacity)

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the number of stored elements.

        No-op when the buffer is full, or empty since a capacity of zero is
        not allowed.
        """
        if 0 < self._count < self._capacity:
            self.resize(self._count)

    def render(self) -> str:
        """Return a one-line rendering of every slot in storage order."""
        tokens = [
            self._empty_slot_marker if value is _EMPTY else repr(value)
            for value in self._slots
        ]
        return " ".join([DISPLAY_PREFIX, *tokens])

    def display(self, stream: TextIO | None = None) -> None:
        """Write the one-line slot rendering to ``stream`` (stdout by default)."""
        print(self.render(), file=stream if stream is not None else sys.stdout)

    def slot(self, index: int) -> tuple[bool, T | None]:
        """Return ``(occupied, value)`` for the raw storage slot at ``index``.

        Intended for diagnostics; ``value`` is None for an empty slot.

        Raises:
            SlotIndexError: if index is outside ``[0, capacity)``.
        """
        if not 0 <= index < self._capacity:
            raise SlotIndexError(
                f"slot index {index} out of range for capacity {self._capacity}"
            )
        value = self._slots[index]
        if value is _EMPTY:
            return False, None
        return True, value  # type: ignore[return-value]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"items={self.to_list()!r})"
        )
