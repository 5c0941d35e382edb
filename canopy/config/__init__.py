"""
Configuration management for Canopy.

Handles loading and validation of configuration files.
"""

from canopy.config.settings import (
    CanopyConfig,
    LoggingConfig,
    TreeConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "CanopyConfig",
    "LoggingConfig",
    "TreeConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
