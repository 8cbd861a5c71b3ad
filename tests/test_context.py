"""Tests for the context tracking module."""

import pytest

from statusline.context import (
    ContextLevel,
    ContextService,
    StatusInput,
    TokenUsage,
    calculate_percentage,
    classify_percentage,
    format_token_count,
)


class TestTokenUsage:
    """Tests for TokenUsage dataclass."""

    def test_total_input_calculation(self):
        """Verify total_input includes cache tokens."""
        usage = TokenUsage(
            input_tokens=50_000,
            cache_creation_tokens=10_000,
            cache_read_tokens=5_000,
        )
        assert usage.total_input == 65_000

    def test_default_values(self):
        """Verify default values are zero."""
        usage = TokenUsage()
        assert usage.input_tokens == 0
        assert usage.cache_creation_tokens == 0
        assert usage.cache_read_tokens == 0
        assert usage.total_input == 0


class TestStatusInput:
    """Tests for StatusInput display properties."""

    def test_defaults(self):
        status = StatusInput()
        assert status.model_display == "Unknown"
        assert status.effective_dir == "."
        assert status.dir_name == "."
        assert status.total_tokens == 0

    def test_workspace_dir_wins_over_cwd(self):
        status = StatusInput(current_dir="/a/b", cwd="/c/d")
        assert status.effective_dir == "/a/b"
        assert status.dir_name == "b"

    def test_cwd_used_without_workspace(self):
        status = StatusInput(cwd="/path/to/my-project")
        assert status.dir_name == "my-project"

    def test_trailing_slash_is_ignored(self):
        assert StatusInput(cwd="/home/user/project/").dir_name == "project"

    def test_root_directory_falls_back_to_dot(self):
        assert StatusInput(cwd="/").dir_name == "."

    def test_is_immutable(self):
        status = StatusInput()
        with pytest.raises(AttributeError):
            status.model_name = "Other"


class TestFormatTokenCount:
    """Tests for K/M abbreviation."""

    @pytest.mark.parametrize("tokens", [0, 1, 500, 999])
    def test_small_counts_are_plain(self, tokens):
        assert format_token_count(tokens) == str(tokens)

    @pytest.mark.parametrize(
        "tokens,expected",
        [
            (1_000, "1.0K"),
            (1_500, "1.5K"),
            (10_000, "10.0K"),
            (65_000, "65.0K"),
            (999_999, "1000.0K"),
        ],
    )
    def test_thousands(self, tokens, expected):
        assert format_token_count(tokens) == expected

    @pytest.mark.parametrize(
        "tokens,expected",
        [
            (1_000_000, "1.0M"),
            (1_500_000, "1.5M"),
            (2_500_000, "2.5M"),
            (10_000_000, "10.0M"),
        ],
    )
    def test_millions(self, tokens, expected):
        assert format_token_count(tokens) == expected

    def test_rounds_to_nearest_tenth(self):
        """One decimal place is rounded, not truncated."""
        assert format_token_count(1_049) == "1.0K"
        assert format_token_count(1_051) == "1.1K"
        assert format_token_count(1_099) == "1.1K"
        assert format_token_count(2_460_000) == "2.5M"


class TestPercentage:
    """Tests for usage percentage calculation."""

    def test_zero_window_is_zero_percent(self):
        assert calculate_percentage(0, 0) == 0
        assert calculate_percentage(50_000, 0) == 0

    def test_exact_values(self):
        assert calculate_percentage(50_000, 200_000) == 25
        assert calculate_percentage(140_000, 200_000) == 70

    def test_rounds_half_up(self):
        # 69.5% -> 70, 69.49% -> 69
        assert calculate_percentage(695, 1_000) == 70
        assert calculate_percentage(6_949, 10_000) == 69
        # 89.5% -> 90, 89.4% -> 89
        assert calculate_percentage(895, 1_000) == 90
        assert calculate_percentage(894, 1_000) == 89

    def test_clamped_to_100(self):
        assert calculate_percentage(300_000, 200_000) == 100


class TestClassifyPercentage:
    """Tests for the colour buckets."""

    @pytest.mark.parametrize(
        "percentage,level",
        [
            (0, ContextLevel.GREEN),
            (69, ContextLevel.GREEN),
            (70, ContextLevel.YELLOW),
            (89, ContextLevel.YELLOW),
            (90, ContextLevel.RED),
            (100, ContextLevel.RED),
        ],
    )
    def test_boundaries(self, percentage, level):
        assert classify_percentage(percentage) is level


class TestContextService:
    """Tests for ContextService."""

    def test_update_from_dict_uses_payload_keys(self):
        service = ContextService(context_window_size=200_000)
        service.update_from_dict(
            {
                "input_tokens": 50_000,
                "cache_creation_input_tokens": 10_000,
                "cache_read_input_tokens": 5_000,
            }
        )
        assert service.usage.total_input == 65_000
        assert service.get_percentage() == 33
        assert service.format_tokens() == "65.0K"

    def test_stats_keep_raw_percentage(self):
        service = ContextService(context_window_size=100_000)
        service.update(input_tokens=150_000)
        stats = service.get_stats()
        assert stats.percentage == 100
        assert stats.percentage_raw == 150.0
        assert stats.level is ContextLevel.RED
        assert stats.to_dict()["level"] == "red"

    def test_negative_window_treated_as_unknown(self):
        service = ContextService(context_window_size=-5)
        service.update(input_tokens=10)
        assert service.context_window_size == 0
        assert service.get_percentage() == 0
        assert service.get_percentage_raw() == 0.0

    @pytest.mark.parametrize(
        "tokens,code",
        [(10_000, "\x1b[32m"), (70_000, "\x1b[33m"), (95_000, "\x1b[31m")],
    )
    def test_format_percentage_colour(self, tokens, code):
        service = ContextService(context_window_size=100_000)
        service.update(input_tokens=tokens)
        text = service.format_percentage()
        assert text.startswith(code)
        assert text.endswith("\x1b[0m")

    def test_format_percentage_plain(self):
        service = ContextService(context_window_size=100_000)
        service.update(input_tokens=25_000)
        assert service.format_percentage(color=False) == "25%"

    def test_service_has_no_session_state(self):
        """Usage is replaced per payload; there is no session to reset."""
        assert not hasattr(ContextService, "reset")
