"""
Configuration loader for parser settings.

Allows users to override settings via YAML configuration files:

    year: 2024
    poll_interval: 0.25
    workers: 4
    log_level: debug
"""

import yaml
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .settings import get_settings

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _positive(convert: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def check(value):
        value = convert(value)
        if value <= 0:
            raise ValueError(f"must be positive, got {value}")
        return value

    return check


def _log_level(value) -> str:
    level = str(value).lower()
    if level not in _LOG_LEVELS:
        raise ValueError(f"expected one of {', '.join(_LOG_LEVELS)}")
    return level


# key -> converter raising ValueError/TypeError on bad input
_SETTING_TYPES: Dict[str, Callable[[Any], Any]] = {
    "year": _positive(int),
    "poll_interval": _positive(float),
    "workers": _positive(int),
    "log_level": _log_level,
}


class ConfigLoader:
    """Loads and applies custom configuration from YAML files."""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to custom config file. If None, looks for:
                        1. wowcombatlog.yaml in current directory
                        2. config/wowcombatlog.yaml
                        3. ~/.wowcombatlog/wowcombatlog.yaml

        Returns:
            Configuration dictionary
        """
        search_paths = [
            Path("wowcombatlog.yaml"),
            Path("config/wowcombatlog.yaml"),
            Path.home() / ".wowcombatlog" / "wowcombatlog.yaml",
        ]

        if config_path:
            search_paths.insert(0, Path(config_path))

        for path in search_paths:
            if path.exists():
                try:
                    with open(path, "r") as f:
                        config = yaml.safe_load(f) or {}
                except (OSError, yaml.YAMLError) as e:
                    logger.error(f"Failed to load config from {path}: {e}")
                    continue

                if not isinstance(config, dict):
                    logger.error(f"Ignoring {path}: top level must be a mapping")
                    continue

                logger.info(f"Loaded configuration from {path}")
                return config

        logger.debug("No custom configuration file found, using defaults")
        return {}

    @staticmethod
    def apply_config(config: Dict[str, Any]) -> None:
        """
        Apply configuration values to the global settings.

        Unknown keys and invalid values are logged and skipped.
        """
        settings = get_settings()

        for key, value in config.items():
            convert = _SETTING_TYPES.get(key)
            if convert is None:
                logger.warning(f"Unknown configuration key: {key}")
                continue

            try:
                setattr(settings, key, convert(value))
                logger.debug(f"Set {key} = {getattr(settings, key)}")
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid value for {key} ({value!r}): {e}")

        logger.info("Custom configuration applied successfully")


def load_and_apply_config(config_path: Optional[str] = None) -> None:
    """
    Load and apply configuration in one step.

    Args:
        config_path: Optional path to custom config file
    """
    loader = ConfigLoader()
    config = loader.load_config(config_path)
    if config:
        loader.apply_config(config)
