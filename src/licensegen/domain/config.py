from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration and the optional user-level
JSON file that can pre-set values such as the copyright holder or the
header globs. The file is read-only from the tool's point of view.
"""

import datetime
import json
import logging
import os
from typing import Any, Dict, Optional

from licensegen.domain.constants import CONFIG_ENV_VAR, CONFIG_FILE_NAME, DEFAULT_OUTPUT
from licensegen.infra.fs import get_user_config_dir

logger = logging.getLogger(__name__)

# Keys a user config file is allowed to set
PERSISTABLE_KEYS = ("license", "name", "output", "headers", "force")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "license": "",
        "name": "",
        "year": str(datetime.date.today().year),
        "output": DEFAULT_OUTPUT,
        "headers": [],
        "force": False,
        "json_output": False,
        "dry_run": False,
        "base_dir": os.getcwd(),
    }


def get_config_path() -> str:
    """Location of the user config file, honouring the LICENSEGEN_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return os.path.abspath(os.path.expanduser(override))
    return os.path.join(get_user_config_dir(), CONFIG_FILE_NAME)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load defaults overlaid with the user config file, if one exists.

    Unknown keys are ignored. A corrupt or unreadable file is reported as a
    warning and the defaults are returned unchanged.

    Args:
        path: Explicit config file location; resolved via get_config_path if None.

    Returns:
        Dict[str, Any]: Merged configuration.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.isfile(config_path):
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable config file {config_path}: {e}")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {config_path}: top level is not an object.")
        return config

    for key in PERSISTABLE_KEYS:
        if key in data and data[key] is not None:
            config[key] = data[key]

    logger.debug(f"User configuration loaded from {config_path}")
    return config
