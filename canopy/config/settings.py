"""
Configuration management for Canopy.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from canopy.exceptions import InvalidConfigurationError
from canopy.logging_config import get_logger
from canopy.merkle.hasher import DEFAULT_ALGORITHM, SUPPORTED_ALGORITHMS

logger = get_logger(__name__)


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${CANOPY_DIGEST}" -> value of CANOPY_DIGEST env var
        "${CANOPY_DIGEST:sha3_256}" -> value of CANOPY_DIGEST or "sha3_256" if not set
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


def _as_bool(value: Any) -> bool:
    # Env var substitution leaves strings behind
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass
class TreeConfig:
    """Merkle tree configuration."""

    digest_algorithm: str = DEFAULT_ALGORITHM  # "sha3_256", "sha256" or "blake2s"
    dedup_leaves: bool = False  # CLI pre-processing only, never applied by MerkleTree


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    format: str = "console"  # "json" or "console"


@dataclass
class CanopyConfig:
    """Main Canopy configuration."""

    tree: TreeConfig = field(default_factory=TreeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.canopy/config.yaml")


def get_default_config() -> CanopyConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        CanopyConfig: Default configuration object
    """
    return CanopyConfig()


def load_config(config_path: Optional[str] = None) -> CanopyConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        CanopyConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        )
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        )

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': top level must be a mapping"
        )

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except (TypeError, ValueError, InvalidConfigurationError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        )

    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> CanopyConfig:
    """
    Build CanopyConfig from dictionary loaded from YAML.

    Merges user configuration with defaults.

    Args:
        config_data: Dictionary loaded from YAML file

    Returns:
        CanopyConfig: Configuration object

    Raises:
        InvalidConfigurationError: If a section is not a mapping
    """
    for section in ('tree', 'logging'):
        section_data = config_data.get(section)
        if section_data is not None and not isinstance(section_data, dict):
            raise InvalidConfigurationError(
                f"'{section}' section must be a mapping, got {type(section_data).__name__}"
            )

    tree_data = config_data.get('tree') or {}
    tree = TreeConfig(
        digest_algorithm=str(tree_data.get('digest_algorithm', DEFAULT_ALGORITHM)),
        dedup_leaves=_as_bool(tree_data.get('dedup_leaves', False)),
    )

    logging_data = config_data.get('logging') or {}
    logging = LoggingConfig(
        level=str(logging_data.get('level', "INFO")),
        file=str(logging_data.get('file') or ""),
        format=str(logging_data.get('format', "console")),
    )

    return CanopyConfig(tree=tree, logging=logging)


def _validate_config(config: CanopyConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if config.tree.digest_algorithm not in SUPPORTED_ALGORITHMS:
        raise InvalidConfigurationError(
            f"digest_algorithm must be one of {list(SUPPORTED_ALGORITHMS)}, "
            f"got '{config.tree.digest_algorithm}'"
        )

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )

    valid_formats = ["json", "console"]
    if config.logging.format not in valid_formats:
        raise InvalidConfigurationError(
            f"logging format must be one of {valid_formats}, "
            f"got '{config.logging.format}'"
        )
