"""Assemble the status line from a parsed payload.

    🤖 Claude Opus | 📁 my-project | 🌿 main | 🪙 50.0K | 25%

The model segment is dropped when ``show_model`` is off and the branch
segment when the directory is not in a git working tree.
"""

import logging
from typing import List, Optional

from .context import ContextService, StatusInput, parse_status
from .context.constants import (
    BRANCH_ICON,
    DIR_ICON,
    MODEL_ICON,
    SEPARATOR,
    TOKEN_ICON,
)
from .core.config import StatusConfig
from .core.git import BranchResolver, get_git_branch

logger = logging.getLogger(__name__)


def build_status_line(
    status: StatusInput,
    config: Optional[StatusConfig] = None,
    resolve_branch: BranchResolver = get_git_branch,
) -> str:
    """Build the status line for a parsed payload.

    Args:
        status: Parsed status payload.
        config: Display settings. Defaults to StatusConfig().
        resolve_branch: Branch lookup for the effective directory.

    Returns:
        The rendered line, without a trailing newline.
    """
    if config is None:
        config = StatusConfig()

    context = ContextService(status.context_window_size)
    context.update_from_usage(status.usage)
    logger.debug("context stats: %s", context.get_stats().to_dict())

    segments: List[str] = []
    if config.show_model:
        segments.append(f"{MODEL_ICON} {status.model_display}")

    segments.append(f"{DIR_ICON} {status.dir_name}")

    branch = resolve_branch(status.effective_dir)
    if branch:
        segments.append(f"{BRANCH_ICON} {branch}")

    segments.append(f"{TOKEN_ICON} {context.format_tokens()}")
    segments.append(context.format_percentage(color=config.colors))

    return SEPARATOR.join(segments)


def render(
    text: str,
    config: Optional[StatusConfig] = None,
    resolve_branch: BranchResolver = get_git_branch,
) -> str:
    """Parse raw stdin text and build its status line."""
    return build_status_line(parse_status(text), config, resolve_branch)
