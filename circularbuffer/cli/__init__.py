"""Command line interface for circular buffers."""
