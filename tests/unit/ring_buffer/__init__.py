"""Circular buffer test suite.

This package contains the tests for the CircularBuffer container:
- Construction, push/pop/peek and overwrite-on-full behaviour
- Resizing and shrinking
- Iteration and membership
- Eviction logging
"""
