from __future__ import annotations

"""
Session Configuration Management.

Provides the default session settings and loads user overrides from an
explicit JSON file. The namespace tree itself is never persisted.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from fsnavigator.domain.constants import DEFAULT_PROMPT_PREFIX

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file exists but cannot be parsed."""

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default session configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Startup
        "populate_demo": True,
        "show_banner": True,

        # Interaction
        "prompt_prefix": DEFAULT_PROMPT_PREFIX,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": "",
    }


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """
    Load session configuration from a JSON file.

    A missing path or file yields the defaults. Keys from the file are
    merged over the defaults; validation happens later.

    Args:
        path: Path to a JSON object file, or None.

    Returns:
        Dict[str, Any]: Merged configuration.

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object.
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file not found at '{path}'. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot load config '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config '{path}' must contain a JSON object")

    config.update(data)
    logger.debug(f"Loaded config from {path}")
    return config
