"""Pytest configuration for all crosspath tests.

Ensures the project root is on sys.path and isolates tests from the
user's real config file.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
_root = Path(__file__).resolve().parents[1]
if _root not in [Path(p) for p in sys.path]:
    sys.path.insert(0, str(_root))


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at an empty directory and clear config/log env vars."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("CROSSPATH_CONFIG", raising=False)
    monkeypatch.delenv("CROSSPATH_LOG_LEVEL", raising=False)
    return home
