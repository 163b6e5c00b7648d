"""Exception classes for the circular buffer."""

from __future__ import annotations


class CircularBufferError(Exception):
    """Base error for the circular buffer package."""


class InvalidCapacityError(CircularBufferError, ValueError):
    """Raised when a buffer would be created or resized to an illegal capacity."""

    def __init__(self, message: str, capacity: object, count: int | None = None):
        """Initialize InvalidCapacityError.

        Args:
            message: Human readable description of the failure.
            capacity: The rejected capacity value.
            count: Number of stored elements, when the capacity was rejected
                because it could not hold them.
        """
        super().__init__(message)
        self.capacity = capacity
        self.count = count


class ConfigLoadError(CircularBufferError):
    """Raised when a buffer config file cannot be loaded."""


class ConfigValidationError(CircularBufferError):
    """Raised when buffer config fails validation."""

    def __init__(self, errors: list[str]):
        """Initialize ConfigValidationError with list of error messages.

        Args:
            errors: List of error messages from validation.
        """
        message = "\n".join(errors)
        super().__init__(message)
        self.errors = errors


class InvalidArgumentError(CircularBufferError, ValueError):
    """Raised when a buffer option other than the capacity is invalid."""


class SlotIndexError(CircularBufferError, IndexError):
    """Raised when a raw slot index falls outside ``[0, capacity)``."""
