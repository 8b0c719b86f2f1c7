"""Persistent JSON config helpers.

Stores the preferred path policy used by the command-line tool.
Malformed or missing config falls back to defaults, and write failures
are logged rather than raised.
"""

from __future__ import annotations

import json
import logging
import os

from .locations import locate_user_config_file
from .policy import POLICIES, PathPolicy, policy_for_name

logger = logging.getLogger(__name__)

APP_NAME = "treepath"
CONFIG_FILENAME = "config.json"
# Overrides the platformdirs location when set.
CONFIG_PATH: str | None = None


def config_path() -> str:
    """Return the absolute location of the config file."""
    return locate_user_config_file(CONFIG_FILENAME, project=APP_NAME).as_os_string()


def _resolved_config_path() -> str:
    return CONFIG_PATH if CONFIG_PATH is not None else config_path()


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    path = _resolved_config_path()
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning(f"Ignoring unreadable config {path}: {exc}")
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> bool:
    """Persist config data as pretty-printed JSON, returning whether it was written."""
    path = _resolved_config_path()
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(json.dumps(data, indent=2) + "\n")
    except (OSError, TypeError) as exc:
        logger.warning(f"Failed to write config {path}: {exc}")
        return False
    return True


def load_platform_name() -> str | None:
    """Load the persisted policy name, returning ``None`` when unset/invalid."""
    value = load_config().get("platform")
    if not isinstance(value, str):
        return None
    stripped = value.strip().lower()
    return stripped if stripped in POLICIES else None


def save_platform_name(name: str) -> bool:
    """Persist a policy name; unknown names are rejected with ``False``."""
    stripped = str(name).strip().lower()
    if stripped not in POLICIES:
        return False
    config = load_config()
    config["platform"] = stripped
    return save_config(config)


def load_policy() -> PathPolicy:
    """Return the persisted policy, or the host policy when none is stored."""
    return policy_for_name(load_platform_name())


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "config_path",
    "load_config",
    "save_config",
    "load_platform_name",
    "save_platform_name",
    "load_policy",
]
