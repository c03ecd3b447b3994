"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import sequtils...' works, and
isolates every test from the cached settings and default random source.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from sequtils.config.settings import reset_settings  # noqa: E402
from sequtils.utils.randomness import set_default_random_source  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_defaults():
    """Start and finish each test without cached settings or default source."""
    reset_settings()
    set_default_random_source(None)
    yield
    reset_settings()
    set_default_random_source(None)
