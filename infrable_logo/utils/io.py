"""
Input/output utilities for loading and merging configuration.
"""
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file or value cannot be used."""
    pass


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Dictionary containing configuration
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        raise ConfigError(f"Error loading configuration: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration in {config_path} must be a JSON object")

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def merge_configs(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge source config into a copy of target config.

    Nested dictionaries are merged key by key; any other value in source
    replaces the one in target.

    Args:
        target: Base configuration
        source: Configuration to merge on top

    Returns:
        New merged configuration dictionary
    """
    merged = copy.deepcopy(target)
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value
    return merged
