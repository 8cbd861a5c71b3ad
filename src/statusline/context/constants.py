"""Thresholds and display constants for the status line."""

# Percentage thresholds for the colour buckets
YELLOW_THRESHOLD = 70
RED_THRESHOLD = 90

# Token count unit boundaries
THOUSAND = 1_000
MILLION = 1_000_000

# Segment icons
MODEL_ICON = "\U0001F916"  # robot
DIR_ICON = "\U0001F4C1"  # folder
BRANCH_ICON = "\U0001F33F"  # herb
TOKEN_ICON = "\U0001FA99"  # coin

SEPARATOR = " | "
UNKNOWN_MODEL = "Unknown"
