from __future__ import annotations

"""
Configuration Domain Management.

Handles default values and persistent storage of user preferences using
JSON in the user data directory. CLI overrides are merged on top of the
state returned here.
"""

import json
import logging
import os
from typing import Any, Dict

from verif.domain import constants as const
from verif.infra.fs import get_default_output_dir, get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"


def get_config_path() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Output
        "format": const.DEFAULT_FORMAT,
        "output_dir": get_default_output_dir(),

        # Preview server
        "host": const.DEFAULT_HOST,
        "port": const.DEFAULT_PORT,
        "serve": True,

        # Diagnostics
        "log_level": const.DEFAULT_LOG_LEVEL,
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    A missing file yields the defaults. A corrupted file is reported and
    ignored.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config = get_default_config()
    path = get_config_path()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    settings = data.get("settings", {})
    if isinstance(settings, dict):
        config.update(settings)
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.
    """
    path = get_config_path()
    state = {"version": CURRENT_CONFIG_VERSION, "settings": config}
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
