"""Sampled logger for high-frequency log messages.

Provides utilities to reduce log spam by only logging at configurable intervals.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


def make_sampled_logger(
    log_format: str,
    log_interval: int = 1000,
    target_logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Callable[..., None]:
    """Create a sampled logger that logs the first and every Nth occurrence.

    Args:
        log_format: Format string for the log message. First placeholder receives
                    the occurrence number, remaining placeholders receive
                    format_args.
        log_interval: Log every Nth occurrence (default 1000)
        target_logger: Logger instance to use (default: module logger)
        level: Log level to use (default: DEBUG)

    Returns:
        A function: (*format_args) -> None

    Raises:
        ValueError: If log_interval is not positive.
    """
    if log_interval <= 0:
        raise ValueError(f"log_interval must be positive, got {log_interval}")

    occurrences = 0
    _logger = target_logger or logger

    def log_sampled(*format_args: object) -> None:
        nonlocal occurrences

        occurrences += 1
        should_log = occurrences == 1 or occurrences % log_interval == 0

        # Skip formatting entirely when the level is filtered out
        if should_log and _logger.isEnabledFor(level):
            _logger.log(level, log_format, occurrences, *format_args)

    return log_sampled
