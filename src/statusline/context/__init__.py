"""Context tracking module for statusline.

This module turns the status payload into display values:
- Tolerant parsing of the JSON payload (defaults for anything missing)
- Bounded percentage calculations (0-100%) with colour buckets
- Abbreviated token counts (K/M suffixes)
"""

from .models import ContextLevel, ContextStats, StatusInput, TokenUsage
from .parser import parse_status
from .service import (
    ContextService,
    calculate_percentage,
    classify_percentage,
    format_token_count,
)

__all__ = [
    "ContextLevel",
    "ContextService",
    "ContextStats",
    "StatusInput",
    "TokenUsage",
    "calculate_percentage",
    "classify_percentage",
    "format_token_count",
    "parse_status",
]
