"""Shared constants for rkeys."""

RKEYS_HOME_EXT = ".rkeys"  # user-level state/config directory suffix

DEFAULT_URL = "redis://localhost:6379"

# Keys requested per SCAN page
SCAN_PAGE_SIZE = 10_000

# Keys per pipelined read or bulk delete
CHUNK_SIZE = 1_000

# Pause between delete chunks
DELETE_COOLDOWN_SECS = 1.0

# Group for keys that carry the prefix but no delimiter
OTHER_LABEL = "other"
