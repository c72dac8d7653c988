"""
Configuration settings for the combat log parser.

Values come from environment variables and may be overridden by a YAML file
(see loader.py) or command line options.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def _default_workers() -> int:
    return os.cpu_count() or 1


@dataclass
class ParserSettings:
    """Parser configuration settings."""

    # Year applied to timestamps that do not carry one; None until configured
    year: Optional[int] = None
    # Seconds between polls while following a live log
    poll_interval: float = 0.1
    workers: int = _default_workers()
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "ParserSettings":
        """Load parser settings from environment variables."""
        return cls(
            year=int(os.environ["COMBATLOG_YEAR"]) if os.getenv("COMBATLOG_YEAR") else None,
            poll_interval=float(os.getenv("COMBATLOG_POLL_INTERVAL", "0.1")),
            workers=int(os.getenv("COMBATLOG_WORKERS", str(_default_workers()))),
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
        )

    def setup_logging(self):
        """Route log records through rich on stderr at the configured level."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)

        logging.basicConfig(
            level=level,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
            force=True,
        )

    def validate(self):
        """Validate configuration settings."""
        errors = []

        if self.year is not None and not (1 <= self.year <= 9999):
            errors.append(f"Invalid year: {self.year}")
        if self.poll_interval <= 0:
            errors.append(f"Poll interval must be positive: {self.poll_interval}")
        if self.workers < 1:
            errors.append(f"Worker count must be at least 1: {self.workers}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")


# Global settings instance
settings = ParserSettings.from_env()


def get_settings() -> ParserSettings:
    """Get the global settings instance."""
    return settings


def reload_settings() -> ParserSettings:
    """Reload settings from environment variables."""
    global settings
    settings = ParserSettings.from_env()
    return settings
