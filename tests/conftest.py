"""Pytest configuration for statusline tests.

Puts src/ at the front of sys.path so the tests exercise the working tree
even when an older statusline is installed, and provides fixtures that
isolate tests from the developer's environment.
"""
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    """Hook called after command line options have been parsed.

    This runs BEFORE test collection, allowing us to manipulate
    sys.path before any test modules are imported.
    """
    repo_root = Path(__file__).parent.parent.absolute()
    src_path = str(repo_root / "src")

    modules_to_remove = [key for key in list(sys.modules.keys())
                         if key == 'statusline' or key.startswith('statusline.')]
    for mod in modules_to_remove:
        del sys.modules[mod]

    if src_path in sys.path:
        sys.path.remove(src_path)
    sys.path.insert(0, src_path)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Clear statusline environment toggles and point config/home at tmp_path."""
    for var in ("CC_STATUSLINE_NO_MODEL", "STATUSLINE_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("STATUSLINE_CONFIG", str(tmp_path / "missing-config.yaml"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return tmp_path


@pytest.fixture
def no_branch():
    """Branch resolver stub for a directory outside any working tree."""
    return lambda directory: None
