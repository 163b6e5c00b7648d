"""Fixed-capacity ring buffer with overwrite-oldest semantics."""

from .config import BufferConfig, ResizePolicy, load_buffer_config
from .exceptions import (
    CircularBufferError,
    ConfigLoadError,
    ConfigValidationError,
    InvalidArgumentError,
    InvalidCapacityError,
    SlotIndexError,
)
from .ring_buffer import CircularBuffer

__version__ = "0.1.0"

__all__ = [
    "BufferConfig",
    "CircularBuffer",
    "CircularBufferError",
    "ConfigLoadError",
    "ConfigValidationError",
    "InvalidArgumentError",
    "InvalidCapacityError",
    "ResizePolicy",
    "SlotIndexError",
    "load_buffer_config",
]
