"""Path resolution for statusline.

Config follows the XDG Base Directory Specification via platformdirs. The
debug log keeps the location the assistant shell's other tools use:

    ~/.config/statusline/config.yaml     # optional settings (Linux)
    ~/.claude/status_line_debug.log      # debug log when STATUSLINE_DEBUG is set
    ~/.claude/status_line_debug.log.1    # rotated generations .1 .. .N
"""

import os
from pathlib import Path

import platformdirs

APP_NAME = "statusline"


def get_config_dir() -> Path:
    """Get the statusline config directory.

    Uses XDG standard paths via platformdirs:
    - Linux: ~/.config/statusline
    - macOS: ~/Library/Application Support/statusline
    - Windows: ~/AppData/Local/statusline

    Returns:
        Path to the config directory.
    """
    return Path(platformdirs.user_config_dir(APP_NAME, appauthor=False))


def get_config_file() -> Path:
    """Get the path to the config file.

    Can be overridden with the STATUSLINE_CONFIG environment variable.

    Returns:
        Path to config.yaml.
    """
    env_file = os.environ.get("STATUSLINE_CONFIG")
    if env_file:
        return Path(env_file).expanduser()
    return get_config_dir() / "config.yaml"


def get_claude_home() -> Path:
    """Get the assistant shell's home directory (~/.claude)."""
    return Path.home() / ".claude"


def get_debug_log_file() -> Path:
    """Get the default path of the debug log."""
    return get_claude_home() / "status_line_debug.log"


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Path to the directory.

    Returns:
        The path (for chaining).
    """
    path.mkdir(parents=True, exist_ok=True)
    return path
