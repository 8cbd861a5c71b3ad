"""Parse the JSON status payload into a StatusInput.

The payload looks like::

    {
      "model": {"display_name": "Claude Opus"},
      "workspace": {"current_dir": "/path/to/project"},
      "cwd": "/path/to/project",
      "context_window": {
        "context_window_size": 200000,
        "current_usage": {
          "input_tokens": 50000,
          "cache_creation_input_tokens": 0,
          "cache_read_input_tokens": 0
        }
      }
    }

No field is required. Each one is extracted on its own so a malformed value
only defaults that field; parse_status never raises.
"""

import json
import logging
from typing import Any, Dict, Optional

from .models import StatusInput, TokenUsage

logger = logging.getLogger(__name__)


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return a nested object, or {} when missing or not an object."""
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _text(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


def _count(data: Dict[str, Any], key: str) -> int:
    """Return a non-negative integer field, 0 when missing or malformed."""
    value = data.get(key)
    # bool is an int subclass; true/false is not a token count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value


def load_payload(text: str) -> Dict[str, Any]:
    """Decode the raw payload, returning {} for anything but a JSON object."""
    if not text or not text.strip():
        return {}
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug("invalid status JSON: %s", e)
        return {}
    if not isinstance(data, dict):
        logger.debug("status JSON is %s, not an object", type(data).__name__)
        return {}
    return data


def from_dict(data: Dict[str, Any]) -> StatusInput:
    """Build a StatusInput from an already-decoded payload."""
    context_window = _section(data, "context_window")
    current_usage = _section(context_window, "current_usage")

    return StatusInput(
        model_name=_text(_section(data, "model"), "display_name"),
        current_dir=_text(_section(data, "workspace"), "current_dir"),
        cwd=_text(data, "cwd"),
        context_window_size=_count(context_window, "context_window_size"),
        usage=TokenUsage(
            input_tokens=_count(current_usage, "input_tokens"),
            cache_creation_tokens=_count(current_usage, "cache_creation_input_tokens"),
            cache_read_tokens=_count(current_usage, "cache_read_input_tokens"),
        ),
    )


def parse_status(text: str) -> StatusInput:
    """Parse raw stdin text into a StatusInput, defaulting anything unusable."""
    return from_dict(load_payload(text))
