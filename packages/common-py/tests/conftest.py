"""Pytest configuration and fixtures for common-py tests.

This conftest.py ensures tests work for both developers (source checkout)
and users (pip installed package).
"""
import sys
from pathlib import Path

import pytest

# Add package root to path for local development
PACKAGE_ROOT = Path(__file__).parent.parent
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every DISTARCH_* variable for the duration of a test."""
    import os

    for key in list(os.environ):
        if key.startswith("DISTARCH_"):
            monkeypatch.delenv(key)
    return monkeypatch
