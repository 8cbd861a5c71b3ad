"""Configuration for statusline.

Settings are layered, lowest precedence first:

1. StatusConfig defaults
2. YAML config file (see paths.get_config_file)
3. Environment toggles (CC_STATUSLINE_NO_MODEL, STATUSLINE_DEBUG)
4. Command line options (applied by the CLI via with_overrides)

The resulting StatusConfig is passed explicitly to the renderer; nothing
below the CLI reads the environment.
"""

import dataclasses
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .paths import get_config_file, get_debug_log_file

TRUTHY = frozenset({"1", "true", "yes", "on"})
FALSY = frozenset({"", "0", "false", "no", "off"})

NO_MODEL_ENV = "CC_STATUSLINE_NO_MODEL"
DEBUG_ENV = "STATUSLINE_DEBUG"


def is_truthy(value: Optional[str]) -> bool:
    """True for 1/true/yes/on (case-insensitive)."""
    return value is not None and value.strip().lower() in TRUTHY


def is_enabled(value: Optional[str]) -> bool:
    """True when a variable is set to anything but an explicit false value."""
    return value is not None and value.strip().lower() not in FALSY


@dataclass
class StatusConfig:
    """Status line configuration.

    Optionally stored in ~/.config/statusline/config.yaml
    """

    # Show the model segment
    show_model: bool = True

    # Colour the percentage with ANSI escapes
    colors: bool = True

    # Debug logging
    debug: bool = False
    log_file: Path = field(default_factory=get_debug_log_file)
    max_log_bytes: int = 1_048_576
    log_backups: int = 5

    # Timeouts in seconds
    stdin_timeout: float = 3.0
    git_timeout: float = 1.0

    # Problems found while loading, logged once the debug log is attached
    notes: List[str] = field(default_factory=list, compare=False, repr=False)

    @classmethod
    def load(
        cls,
        path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "StatusConfig":
        """Load configuration from the config file and environment.

        Args:
            path: Path to config file. Defaults to standard location.
            environ: Environment mapping. Defaults to os.environ.

        Returns:
            StatusConfig instance. A missing or malformed file yields defaults.
        """
        if environ is None:
            environ = os.environ
        if path is None:
            path = get_config_file()

        config = cls.from_file(path)
        return config.apply_environ(environ)

    @classmethod
    def from_file(cls, path: Path) -> "StatusConfig":
        """Read the YAML config file, falling back to defaults on any error."""
        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            return cls(notes=[f"ignoring config file {path}: {e}"])

        # Handle empty file (yaml.safe_load returns None)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            return cls(notes=[f"ignoring config file {path}: not a mapping"])

        config = cls.from_dict(data)
        config.notes.insert(0, f"loaded config file {path}")
        return config

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatusConfig":
        """Create config from dictionary.

        Unknown keys are ignored and values of the wrong type fall back to
        the default for that key.

        Args:
            data: Dictionary with config values.

        Returns:
            StatusConfig instance.
        """
        defaults = cls()
        values: Dict[str, Any] = {}
        notes: List[str] = []
        for f in dataclasses.fields(cls):
            if f.name == "notes" or f.name not in data:
                continue
            value = _coerce(data[f.name], getattr(defaults, f.name))
            if value is None:
                notes.append(f"ignoring config value {f.name}={data[f.name]!r}")
                continue
            values[f.name] = value
        return dataclasses.replace(defaults, notes=notes, **values)

    def apply_environ(self, environ: Mapping[str, str]) -> "StatusConfig":
        """Return a copy with the environment toggles applied."""
        config = self
        if is_truthy(environ.get(NO_MODEL_ENV)):
            config = dataclasses.replace(config, show_model=False)
        if is_enabled(environ.get(DEBUG_ENV)):
            config = dataclasses.replace(config, debug=True)
        return config

    def with_overrides(self, **overrides: Any) -> "StatusConfig":
        """Return a copy with the non-None overrides applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary.

        Returns:
            Dictionary representation.
        """
        data = asdict(self)
        del data["notes"]
        data["log_file"] = str(self.log_file)
        return data


def _coerce(value: Any, default: Any) -> Any:
    """Convert a raw config value to the type of its default, or None."""
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            if is_truthy(value):
                return True
            if value.strip().lower() in FALSY:
                return False
        return None
    if isinstance(default, int):
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        return None
    if isinstance(default, float):
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
            return float(value)
        return None
    if isinstance(default, Path):
        if isinstance(value, str) and value:
            return Path(value).expanduser()
        return None
    return None
