"""Data models for context tracking."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Any, Optional

from .constants import UNKNOWN_MODEL


@dataclass(frozen=True)
class TokenUsage:
    """Token usage reported for the current context window."""

    input_tokens: int = 0
    cache_creation_tokens: int = 0
    cache_read_tokens: int = 0

    @property
    def total_input(self) -> int:
        """Total input tokens including cache."""
        return self.input_tokens + self.cache_creation_tokens + self.cache_read_tokens


@dataclass(frozen=True)
class StatusInput:
    """Status payload sent by the assistant shell on stdin.

    Every field is optional in the payload; absent values are kept as None
    (or 0 for counts) and resolved to display defaults by the properties.
    """

    model_name: Optional[str] = None
    current_dir: Optional[str] = None  # workspace.current_dir
    cwd: Optional[str] = None
    context_window_size: int = 0
    usage: TokenUsage = field(default_factory=TokenUsage)

    @property
    def model_display(self) -> str:
        return self.model_name or UNKNOWN_MODEL

    @property
    def effective_dir(self) -> str:
        """Directory the session runs in; workspace wins over cwd."""
        return self.current_dir or self.cwd or "."

    @property
    def dir_name(self) -> str:
        """Last path segment of the effective directory, never empty."""
        return PurePath(self.effective_dir).name or "."

    @property
    def total_tokens(self) -> int:
        return self.usage.total_input


class ContextLevel(Enum):
    """Colour bucket for the context usage percentage."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


@dataclass
class ContextStats:
    """Statistics about context window usage."""

    percentage: int  # Bounded 0-100
    percentage_raw: float  # Unbounded (for diagnostics)
    total_input_tokens: int
    context_window_size: int
    level: ContextLevel

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "percentage": self.percentage,
            "percentage_raw": self.percentage_raw,
            "total_input_tokens": self.total_input_tokens,
            "context_window_size": self.context_window_size,
            "level": self.level.value,
        }
