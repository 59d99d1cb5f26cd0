# file: src/module3_submission/config.py
"""
Configuration loading for score submissions.
"""

import copy
import functools
import logging
import os
from typing import Any, Dict, Optional

import yaml

from .submission_errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "envelope": {
            "strict_padding": False,
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config root in {path} must be a mapping, got {type(data).__name__}")
    return data


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a configuration dictionary.

    Raises:
        ConfigError: If a section or value is missing or invalid
    """
    try:
        strict = config['envelope']['strict_padding']
    except (KeyError, TypeError) as e:
        raise ConfigError(f"Missing required config key: {e}") from e

    if not isinstance(strict, bool):
        raise ConfigError(f"envelope.strict_padding must be a boolean, got {strict!r}")

    return config


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Path to a YAML file whose values override the defaults.
                     If None, the packaged default_config.yaml is used, or the
                     hardcoded defaults when that file is absent.

    Returns:
        Validated configuration dictionary

    Raises:
        FileNotFoundError: If config_path does not exist
        ConfigError: If the file is not valid YAML or holds invalid values
    """
    config = get_default_config()

    if config_path is None:
        if os.path.exists(DEFAULT_CONFIG_PATH):
            config = _merge(config, _read_yaml(DEFAULT_CONFIG_PATH))
    else:
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")
        config = _merge(config, _read_yaml(config_path))
        logger.debug("Loaded config overrides from %s", config_path)

    return validate_config(config)


@functools.lru_cache(maxsize=None)
def packaged_config() -> Dict[str, Any]:
    """Packaged defaults, read from disk on first use only."""
    return load_config()


def resolve_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Turn an optional caller config into a complete, validated one.

    None means the packaged defaults; a partial dictionary is merged over
    the hardcoded defaults. Neither case reads a file after the first call.
    """
    if config is None:
        return copy.deepcopy(packaged_config())
    return validate_config(_merge(get_default_config(), config))
