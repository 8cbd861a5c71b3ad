"""Optional debug log for diagnosing slow or broken status lines.

When debug is enabled, every module's logger under ``statusline`` writes
timestamped, pid-tagged lines to a size-rotated file:

    [2025-01-01 12:00:00.123 pid:4242] stdin received: 512 bytes

The log never touches stdout and failures to open it are ignored.
"""

import logging
import logging.handlers
from typing import Optional

from .config import StatusConfig
from .paths import ensure_directory

ROOT_LOGGER = "statusline"
LOG_FORMAT = "[%(asctime)s.%(msecs)03d pid:%(process)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_debug_logging(config: StatusConfig) -> Optional[logging.Handler]:
    """Attach the rotating debug log handler when debug is enabled.

    Args:
        config: Resolved configuration (debug flag, log path, rotation limits).

    Returns:
        The installed handler, or None when debug is off or the log file
        cannot be opened.
    """
    root = logging.getLogger(ROOT_LOGGER)
    # Keep library logging silent unless a handler is attached
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())

    if not config.debug:
        return None

    try:
        ensure_directory(config.log_file.parent)
        handler = logging.handlers.RotatingFileHandler(
            config.log_file,
            maxBytes=config.max_log_bytes,
            backupCount=config.log_backups,
            encoding="utf-8",
        )
    except OSError:
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    return handler


def close_debug_logging(handler: Optional[logging.Handler]) -> None:
    """Detach and close a handler installed by configure_debug_logging."""
    if handler is None:
        return
    logging.getLogger(ROOT_LOGGER).removeHandler(handler)
    handler.close()
