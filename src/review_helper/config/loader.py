"""
Configuration loader for review_helper.

The tool reads an optional JSON configuration file named ``config.json``
located in the ``~/.review_helper/`` directory. The location can be
overridden with the ``REVIEW_HELPER_CONFIG`` environment variable. When
the file does not exist, defaults are used. If the file is malformed or
contains unknown keys or values of the wrong type, a :class:`ConfigError`
is raised.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from review_helper.commit.categories import CommitCategory


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings in environments
# where logging has not been configured. The CLI configures the root
# logger explicitly.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


CONFIG_ENV_VAR = "REVIEW_HELPER_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    "report_dir": ".",
    "report_name": "code-review",
    "default_commit_type": None,
    "log_level": "INFO",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Raised when the configuration file is unreadable or invalid."""

    pass


def _get_config_directory() -> Path:
    """Return the per-user configuration directory (``~/.review_helper``)."""
    return Path.home() / ".review_helper"


def get_config_path() -> Path:
    """Return the configuration file path, honouring ``REVIEW_HELPER_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return _get_config_directory() / "config.json"


def load_config() -> Dict[str, Any]:
    """Load the configuration and merge it over :data:`DEFAULT_CONFIG`.

    Returns:
        A dictionary with the keys:
        - report_dir (str): Directory reports are written to
        - report_name (str): Report file name without extension
        - default_commit_type (str|None): Commit type used when none is given
        - log_level (str): Logging level name

    Raises:
        ConfigError: If the file exists but cannot be read or is invalid.
    """
    config_path = get_config_path()
    config = dict(DEFAULT_CONFIG)

    if not config_path.exists():
        logger.debug("No configuration file at %s; using defaults", config_path)
        return config

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid configuration file {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a JSON object")

    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    for key in ("report_dir", "report_name"):
        if key in data and (not isinstance(data[key], str) or not data[key]):
            raise ConfigError(f"'{key}' must be a non-empty string")

    if data.get("default_commit_type") is not None:
        if not isinstance(data["default_commit_type"], str):
            raise ConfigError("'default_commit_type' must be a string")
        try:
            data["default_commit_type"] = CommitCategory.parse(data["default_commit_type"]).value
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    if "log_level" in data:
        level = data["log_level"]
        if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"'log_level' must be one of: {', '.join(sorted(_LOG_LEVELS))}")
        data["log_level"] = level.upper()

    config.update(data)
    logger.debug("Loaded configuration from: %s", config_path)
    return config
