"""Configuration management for gapihub.

Handles loading and saving YAML configuration from ~/.config/gapihub/.
"""

import os
import copy
import yaml
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    env_path = os.getenv("GAPIHUB_CONFIG_DIR")
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "gapihub"


def get_config_file_path() -> Path:
    """
    Get the path to the config file, respecting the GAPIHUB_CONFIG_FILE env var.
    """
    env_path = os.getenv("GAPIHUB_CONFIG_FILE")
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


DEFAULT_CONFIG = {
    "auth": {
        # token | adc | none
        "mode": "adc",
        "token_file": None,
    },
    "api_key": None,
    "http": {
        "timeout": 60,
        "user_agent": None,
    },
    "retry": {
        "max_attempts": 1,
        "initial_backoff": 1.0,
        "max_backoff": 32.0,
    },
    "base_urls": {},
}

# Environment variables that override single config keys
ENV_OVERRIDES = {
    "GAPIHUB_API_KEY": ("api_key",),
    "GAPIHUB_AUTH_MODE": ("auth", "mode"),
    "GAPIHUB_TOKEN_FILE": ("auth", "token_file"),
}


def _apply_env_overrides(config: dict) -> dict:
    for var, path in ENV_OVERRIDES.items():
        value = os.getenv(var)
        if not value:
            continue
        node = config
        for k in path[:-1]:
            node = node.setdefault(k, {})
        node[path[-1]] = value
    return config


def load_config() -> dict:
    """Load the gapihub configuration from the config file."""
    config_file = get_config_file_path()
    if not config_file.exists():
        logger.debug(f"Config file not found at {config_file}, using default config.")
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
            if config is None:
                return copy.deepcopy(DEFAULT_CONFIG)
            return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), config)
    except yaml.YAMLError as e:
        logger.error(f"Error loading config file {config_file}: {e}")
        return copy.deepcopy(DEFAULT_CONFIG)


def save_config(config_data: dict):
    """Save the gapihub configuration to the config file."""
    config_file = get_config_file_path()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, 'w') as f:
        yaml.safe_dump(config_data, f, default_flow_style=False)
    logger.debug(f"Configuration saved to {config_file}")


def get_config_value(key: str, default: Any = None) -> Any:
    """Retrieve a configuration value using a dot-separated key."""
    config_data = load_config()
    keys = key.split('.')
    value = config_data
    for k in keys:
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return default if value is None else value


def set_config_value(key: str, value: Any):
    """Set a configuration value using a dot-separated key and save."""
    config_data = load_config()
    keys = key.split('.')
    current_level = config_data
    for i, k in enumerate(keys):
        if i == len(keys) - 1:
            current_level[k] = value
        else:
            if k not in current_level or not isinstance(current_level[k], dict):
                current_level[k] = {}
            current_level = current_level[k]
    save_config(config_data)


def _deep_merge(base: dict, new: dict) -> dict:
    """Recursively merge dictionary `new` into `base`."""
    for k, v in new.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            base[k] = _deep_merge(base[k], v)
        else:
            base[k] = v
    return base


def load_effective_config() -> dict:
    """The file configuration with GAPIHUB_* environment overrides applied."""
    return _apply_env_overrides(load_config())
