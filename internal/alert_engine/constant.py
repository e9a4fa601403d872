"""Constants for the alert engine."""

# Output cap after ranking
DEFAULT_MAX_ALERTS = 32
DEFAULT_MAX_WORKERS = 1

# Base min volume never drops below this share of the batch
BATCH_MIN_VOLUME_FACTOR = 0.01

# A child alert survives next to a parent with the same primary signal
# only when parent.score < child.score * DEDUP_PARENT_RATIO
DEDUP_PARENT_RATIO = 0.85

TITLE_SEPARATOR = " · "

# Compact number suffixes, largest first
COMPACT_UNITS = (
    (1_000_000_000, "mil M"),
    (1_000_000, "M"),
    (1_000, "mil"),
)
