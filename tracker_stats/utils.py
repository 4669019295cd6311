import logging
import os

import yaml

from config.settings import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def load_config(config_path=DEFAULT_CONFIG_PATH):
    """
    Load the YAML runtime configuration.

    Relative paths are also looked up one and two directories above the
    working directory so scripts run from a subfolder still find it.

    Returns:
        dict with the parsed config, or None if the file is missing
    """
    if not os.path.exists(config_path):
        if os.path.exists(os.path.join("..", config_path)):
            config_path = os.path.join("..", config_path)
        elif os.path.exists(os.path.join("..", "..", config_path)):
            config_path = os.path.join("..", "..", config_path)

    try:
        with open(config_path, 'r') as file:
            config = yaml.safe_load(file)
        return config or {}
    except FileNotFoundError:
        logger.error(f"Config file not found at {config_path}")
        return None


def get_option(config, section, key, default=None):
    """Read config[section][key], tolerating a missing config or section."""
    if not config:
        return default
    return (config.get(section) or {}).get(key, default)
