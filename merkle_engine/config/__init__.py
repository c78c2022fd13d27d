"""
Runtime Configuration Module

Provides configuration loading and management for the Merkle engine.
"""

from .runtime import (
    ENV_PREFIX,
    RuntimeConfig,
    TreeConfig,
    BenchConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "ENV_PREFIX",
    "RuntimeConfig",
    "TreeConfig",
    "BenchConfig",
    "get_default_config",
    "set_default_config",
]
