from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences (default depth, coloring,
ordering, logging) as JSON in the user data directory, with default
fallback when the file is missing or unreadable.
"""

import json
import logging
import os
from typing import Any, Dict

from xtree.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_DEPTH
from xtree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


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
        # Traversal
        "max_depth": DEFAULT_DEPTH,
        "sort_entries": True,

        # Rendering
        "color": True,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": "",
    }


def get_config_path() -> str:
    """Resolve the absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Unknown keys are ignored. A missing file is not an error; a corrupt one
    is reported and replaced by defaults for this run.

    Returns:
        Dict[str, Any]: Configuration dictionary (not yet validated).
    """
    config = get_default_config()
    path = get_config_path()

    if not os.path.exists(path):
        logger.debug("Config file not found. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config from '{path}': {e}. Using defaults.")
        return config

    settings = data.get("settings") if isinstance(data, dict) else None
    if not isinstance(settings, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return config

    for key in config:
        if key in settings:
            config[key] = settings[key]
    return config


def save_config(config: Dict[str, Any]) -> str:
    """
    Persist configuration values to disk.

    Args:
        config: Validated configuration dictionary.

    Returns:
        str: Path of the written file.

    Raises:
        OSError: If the file cannot be written.
    """
    defaults = get_default_config()
    settings = {k: config.get(k, v) for k, v in defaults.items()}
    state = {"version": CURRENT_CONFIG_VERSION, "settings": settings}

    get_user_data_dir(create=True)
    path = get_config_path()
    with open(path, "w", encoding="utf-8") as f:
        json.dump(state, f, ensure_ascii=False, indent=4)

    logger.debug(f"Configuration saved to {path}")
    return path
