"""Context usage calculation and formatting."""

import click

from .constants import MILLION, RED_THRESHOLD, THOUSAND, YELLOW_THRESHOLD
from .models import ContextLevel, ContextStats, TokenUsage


def format_token_count(tokens: int) -> str:
    """Abbreviate a token count with a K/M suffix.

    Values are rounded to one decimal place. The unit is picked from the raw
    count, so 999_999 renders as "1000.0K" rather than "1.0M".

    Examples:
        >>> format_token_count(999)
        '999'
        >>> format_token_count(1500)
        '1.5K'
        >>> format_token_count(2_500_000)
        '2.5M'
    """
    if tokens >= MILLION:
        return f"{tokens / MILLION:.1f}M"
    if tokens >= THOUSAND:
        return f"{tokens / THOUSAND:.1f}K"
    return str(tokens)


def calculate_percentage(total_tokens: int, context_window_size: int) -> int:
    """Whole-number usage percentage, rounded half up and clamped to 0-100.

    Returns 0 when the window size is unknown (0).
    """
    if context_window_size <= 0:
        return 0
    # Integer round-half-up avoids float drift at the 70/90 boundaries
    pct = (200 * total_tokens + context_window_size) // (2 * context_window_size)
    return max(0, min(100, pct))


def classify_percentage(percentage: int) -> ContextLevel:
    """Map a percentage to its colour bucket."""
    if percentage >= RED_THRESHOLD:
        return ContextLevel.RED
    if percentage >= YELLOW_THRESHOLD:
        return ContextLevel.YELLOW
    return ContextLevel.GREEN


class ContextService:
    """Service for calculating and formatting context window usage.

    Example:
        service = ContextService(context_window_size=200_000)

        # Update from the status payload's current_usage block
        service.update_from_dict({"input_tokens": 50_000})

        pct = service.get_percentage()  # 25
        text = service.format_percentage()  # "\\x1b[32m25%\\x1b[0m"
    """

    def __init__(self, context_window_size: int = 0):
        """Initialize context service.

        Args:
            context_window_size: Size of the model's context window in tokens.
                                 0 means unknown; percentages are then 0.
        """
        self._context_window = max(0, context_window_size)
        self._usage = TokenUsage()

    @property
    def context_window_size(self) -> int:
        """Get the context window size."""
        return self._context_window

    @property
    def usage(self) -> TokenUsage:
        return self._usage

    def update(
        self,
        input_tokens: int = 0,
        cache_creation_tokens: int = 0,
        cache_read_tokens: int = 0,
    ) -> None:
        """Replace the current token usage.

        Args:
            input_tokens: Uncached input tokens
            cache_creation_tokens: Cache creation tokens
            cache_read_tokens: Cache read tokens
        """
        self._usage = TokenUsage(
            input_tokens=input_tokens,
            cache_creation_tokens=cache_creation_tokens,
            cache_read_tokens=cache_read_tokens,
        )

    def update_from_usage(self, usage: TokenUsage) -> None:
        self._usage = usage

    def update_from_dict(self, usage: dict) -> None:
        """Update from a usage dictionary.

        Args:
            usage: Dictionary with keys like 'input_tokens',
                   'cache_creation_input_tokens', 'cache_read_input_tokens'.
        """
        self.update(
            input_tokens=usage.get("input_tokens", 0),
            cache_creation_tokens=usage.get("cache_creation_input_tokens", 0),
            cache_read_tokens=usage.get("cache_read_input_tokens", 0),
        )

    def get_percentage(self) -> int:
        """Get bounded context percentage (0-100).

        Returns:
            Context usage as a whole percentage, bounded to 0-100 range.
        """
        return calculate_percentage(self._usage.total_input, self._context_window)

    def get_percentage_raw(self) -> float:
        """Get unbounded context percentage.

        Returns:
            Raw context usage percentage (can exceed 100%).
        """
        if self._context_window <= 0:
            return 0.0
        return (self._usage.total_input / self._context_window) * 100

    def get_stats(self) -> ContextStats:
        """Get full context statistics.

        Returns:
            ContextStats with bounded percentage, colour level and diagnostic info.
        """
        pct = self.get_percentage()
        return ContextStats(
            percentage=pct,
            percentage_raw=round(self.get_percentage_raw(), 1),
            total_input_tokens=self._usage.total_input,
            context_window_size=self._context_window,
            level=classify_percentage(pct),
        )

    def format_tokens(self) -> str:
        """Format the total input token count, e.g. "50.0K"."""
        return format_token_count(self._usage.total_input)

    def format_percentage(self, color: bool = True) -> str:
        """Format the percentage as "NN%", wrapped in its bucket's ANSI colour."""
        stats = self.get_stats()
        text = f"{stats.percentage}%"
        if not color:
            return text
        return click.style(text, fg=stats.level.value)
