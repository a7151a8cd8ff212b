"""
Configuration loading for review_helper.

Provides a loader for the optional per-user JSON configuration file.
See :mod:`review_helper.config.loader` for implementation details.
"""

from .loader import ConfigError, load_config  # noqa: F401
