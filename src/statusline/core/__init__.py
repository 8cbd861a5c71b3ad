"""Core modules for statusline.

This package contains the process-level collaborators:
    - config: Layered configuration (YAML file, environment, CLI)
    - paths: XDG-compliant path resolution
    - stdin: Timeout-bounded stdin reader
    - git: Git branch lookup
    - debug_log: Rotating debug log
"""

from . import config
from . import debug_log
from . import git
from . import paths
from . import stdin

__all__ = [
    "config",
    "debug_log",
    "git",
    "paths",
    "stdin",
]
