"""Configuration models and loaders for circular buffers."""

from circularbuffer.config.buffer_config import BufferConfig, ResizePolicy
from circularbuffer.config.loader import load_buffer_config, save_buffer_config

__all__ = ["BufferConfig", "ResizePolicy", "load_buffer_config", "save_buffer_config"]
