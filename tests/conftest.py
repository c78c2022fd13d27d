"""
Pytest configuration and shared fixtures for merkle-engine tests.

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

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from merkle_engine.config import set_default_config
from merkle_engine.config.runtime import ENV_PREFIX
from merkle_engine.crypto import Sha256Hash
from merkle_engine.merkle import LayeredMerkleTree, LinkedMerkleTree


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(params=[LayeredMerkleTree, LinkedMerkleTree], ids=["layered", "linked"])
def tree_cls(request):
    """Run a test once per tree variant."""
    return request.param


@pytest.fixture
def sha256_hash():
    return Sha256Hash()


@pytest.fixture
def abc_items():
    """The odd-count scenario: three single-letter items."""
    return [b"a", b"b", b"c"]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove MERKLE_* variables and reset the cached default config."""
    import os

    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    set_default_config(None)
    yield monkeypatch
    set_default_config(None)


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
