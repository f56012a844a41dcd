"""
Runtime Configuration Module

Provides configuration loading and management for reward trees.
"""

from .runtime import (
    MerkleConfig,
    RuntimeConfig,
    get_default_config_template,
    load_config,
)

__all__ = [
    "MerkleConfig",
    "RuntimeConfig",
    "get_default_config_template",
    "load_config",
]
