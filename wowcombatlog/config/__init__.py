"""
Configuration module for the combat log parser.

Provides environment-driven settings and YAML overrides.
"""

from .settings import ParserSettings, get_settings, reload_settings
from .loader import ConfigLoader, load_and_apply_config

__all__ = [
    "ParserSettings",
    "get_settings",
    "reload_settings",
    "ConfigLoader",
    "load_and_apply_config",
]
