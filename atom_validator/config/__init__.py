"""
Configuration Management
========================

Configuration utilities for the entry validator.
"""

from atom_validator.config.settings import (
    ValidatorConfig,
    get_default_config,
    load_config,
    save_config,
)

__all__ = [
    "ValidatorConfig",
    "get_default_config",
    "load_config",
    "save_config",
]
