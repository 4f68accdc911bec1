"""Configuration management for passpolicy.

Handles loading of YAML policy files and parsing them into PolicyConfig.

Example file::

    policy:
      min_length: 14
      require_special_char: true
      minimum_special_chars: 2
      excluded_chars: "<>\\"'"
      error_separator: "\\n"
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml

from ..policy.options import PolicyConfig, PolicyConfigError
from .logger import get_logger

logger = get_logger("config")


def parse_policy_config(config_dict: Dict[str, Any]) -> PolicyConfig:
    """Parse the ``policy`` section of a configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        PolicyConfig instance; defaults when the section is absent

    Raises:
        PolicyConfigError: If the section is not a mapping or is inconsistent
    """
    policy_dict = config_dict.get("policy") or {}

    if not isinstance(policy_dict, dict):
        raise PolicyConfigError(
            f"policy section must be a mapping, got {type(policy_dict).__name__}",
            "policy",
        )

    return PolicyConfig.from_dict(policy_dict)


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        TypeError: If the document root is not a mapping
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    config = _expand_env_vars(config)
    logger.debug(f"Loaded configuration from {config_file}")

    return config


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration.

    Args:
        obj: Configuration object (dict, list, str, etc.)

    Returns:
        Configuration with expanded environment variables
    """
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_policy_config(config_path: str) -> PolicyConfig:
    """Load a YAML file and parse its policy section.

    Args:
        config_path: Path to configuration file

    Returns:
        PolicyConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        PolicyConfigError: If the policy section is inconsistent
    """
    policy = parse_policy_config(load_config(config_path))
    logger.info(f"Policy loaded from {config_path}: min_length={policy.min_length}")
    return policy
