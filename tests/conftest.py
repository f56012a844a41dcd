"""
Pytest configuration and shared fixtures for reward tree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_recipients = importlib.import_module("fixtures.recipients")

make_address = _recipients.make_address
make_recipients = _recipients.make_recipients
make_letter_recipients = _recipients.make_letter_recipients

from rewardtree.config.runtime import MerkleConfig


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def recipients():
    """Five sorted recipients with valid addresses (pads to eight leaves)."""
    return make_recipients(5)


@pytest.fixture
def letter_recipients():
    """Recipients "A".."D" from the four-leaf worked example."""
    return make_letter_recipients("ABCD")


@pytest.fixture
def lenient_config():
    """MerkleConfig that accepts any non-empty string as an address."""
    return MerkleConfig(validate_addresses=False)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep REWARDTREE_* variables from the developer shell out of tests."""
    import os
    for key in list(os.environ):
        if key.startswith("REWARDTREE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
