"""Load and save buffer configuration files."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from circularbuffer.config.buffer_config import BufferConfig
from circularbuffer.exceptions import ConfigLoadError, ConfigValidationError

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: ValidationError) -> list[str]:
    """Flatten pydantic errors into ``field: message`` strings."""
    messages: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        messages.append(f"{location}: {error['msg']}")
    return messages


def load_buffer_config(path: Path) -> BufferConfig:
    """Read a YAML buffer config from disk.

    Args:
        path: Path to a YAML file holding a mapping of BufferConfig fields.

    Returns:
        The validated configuration. An empty file yields the defaults.

    Raises:
        ConfigLoadError: If the file cannot be read or is not a YAML mapping.
        ConfigValidationError: If a field has an invalid value.
    """
    try:
        with Path(path).open("r", encoding="utf-8") as config_file:
            raw_config = yaml.safe_load(config_file) or {}
    except OSError as exc:
        raise ConfigLoadError(f"Failed to read buffer config '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"Failed to parse buffer config '{path}': {exc}") from exc

    if not isinstance(raw_config, dict):
        raise ConfigLoadError(
            f"Buffer config '{path}' must contain a mapping, "
            f"got {type(raw_config).__name__}"
        )

    try:
        config = BufferConfig.model_validate(raw_config)
    except ValidationError as exc:
        raise ConfigValidationError(_format_validation_errors(exc)) from exc

    logger.debug("Loaded buffer config from %s: %s", path, config)
    return config


def save_buffer_config(config: BufferConfig, path: Path) -> None:
    """Write a buffer config to disk as YAML.

    Args:
        config: Configuration to persist.
        path: Destination file. Parent directories are created when missing.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as config_file:
        yaml.safe_dump(config.model_dump(mode="json"), config_file)
