"""Constants for the circular buffer."""

DEFAULT_CAPACITY = 16

EMPTY_SLOT_MARKER = "_"  # placeholder rendered for an unoccupied slot
DISPLAY_PREFIX = "Buffer:"

# Evictions happen on every push into a full buffer, so only every Nth is logged
DEFAULT_EVICTION_LOG_INTERVAL = 1000

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
