from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration of the command-line front end
and loads optional JSON overrides from disk, falling back to defaults when
the file is missing or corrupted.
"""

import json
import logging
import os
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
LISTING_MODES: List[str] = ["print_list", "visitor"]
LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Listing
        "prefix": "",
        "mode": "print_list",
        "include_users": True,
        "find_suffix": "",

        # Output Format
        "json_output": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file.

    Unknown keys are discarded. A missing, unreadable or malformed file
    yields the defaults.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        Dict[str, Any]: Defaults updated with the values found in the file.
    """
    config = get_default_config()

    if not path or not os.path.exists(path):
        logger.debug(f"Config file not found at '{path}'. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read config file '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{path}' does not hold a JSON object. Using defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]

    ignored = sorted(set(data) - set(config))
    if ignored:
        logger.debug(f"Ignored unknown config keys: {ignored}")

    return config
