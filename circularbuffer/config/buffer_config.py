"""Pydantic models for circular buffer configuration."""

from enum import Enum

from pydantic import BaseModel, Field

from circularbuffer.const import (
    DEFAULT_CAPACITY,
    DEFAULT_EVICTION_LOG_INTERVAL,
    EMPTY_SLOT_MARKER,
)


class ResizePolicy(str, Enum):
    """What resize does when the new capacity cannot hold every element."""

    REJECT = "reject"
    DROP_OLDEST = "drop_oldest"


class BufferConfig(BaseModel):
    """Configuration options for a circular buffer instance.

    Attributes:
        capacity: number of slots in the buffer.
        resize_policy: behaviour of resize when shrinking below the element count.
        empty_slot_marker: placeholder rendered for empty slots by display.
        eviction_log_interval: log the first eviction and then every Nth one.
    """

    capacity: int = Field(default=DEFAULT_CAPACITY, gt=0)
    resize_policy: ResizePolicy = ResizePolicy.REJECT
    empty_slot_marker: str = Field(default=EMPTY_SLOT_MARKER, min_length=1)
    eviction_log_interval: int = Field(default=DEFAULT_EVICTION_LOG_INTERVAL, gt=0)
