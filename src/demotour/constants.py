"""Constants for demotour."""

# Staggered reveal delay between code lines (milliseconds)
DEFAULT_REVEAL_DELAY_MS = 30

CONFIG_DIR_NAME = ".demotour"
CONFIG_FILE_NAME = "config.toml"

# Labels recognised at the start of a status line
STATUS_LABELS = ("Writers", "Readers", "Storage", "Lag", "Scaling")

SUCCESS_MARK = "✓"
