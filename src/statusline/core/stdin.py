"""Bounded read of the status payload from stdin."""

import logging
import sys
from threading import Thread
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 3.0


def read_stdin(timeout: float = DEFAULT_TIMEOUT, stream: Optional[TextIO] = None) -> str:
    """Read all of stdin, giving up after ``timeout`` seconds.

    The read runs on a daemon thread so a shell that never closes the pipe
    cannot hang the status line; the abandoned thread dies with the process.

    Args:
        timeout: Maximum seconds to wait for end of input.
        stream: Stream to read. Defaults to sys.stdin.

    Returns:
        The text read, or "" on timeout or read error.
    """
    if stream is None:
        stream = sys.stdin
    if stream is None:
        logger.debug("stdin error: no stdin attached")
        return ""

    result: List[str] = []
    errors: List[BaseException] = []

    def reader() -> None:
        try:
            result.append(stream.read())
        except (OSError, ValueError, UnicodeDecodeError) as e:
            errors.append(e)

    thread = Thread(target=reader, name="stdin-reader", daemon=True)
    thread.start()
    thread.join(timeout)

    if thread.is_alive():
        logger.debug("stdin error: no input received within %s seconds", timeout)
        return ""
    if errors:
        logger.debug("stdin error: %s", errors[0])
        return ""
    if not result:
        return ""

    text = result[0] or ""
    logger.debug("stdin received: %d bytes", len(text.encode("utf-8", "replace")))
    return text
