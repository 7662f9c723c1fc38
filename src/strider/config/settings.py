"""
Configuration management for Strider.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2026-10-19
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from strider.core.exceptions import ConfigurationError


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class BrowserSettings:
    """Browser behavior settings."""

    wrap_selection: bool = True  # cursor wraps at either end of the listing
    start_path: Optional[str] = None  # used when no path is given on the command line


@dataclass
class LoggingSettings:
    """Logging settings."""

    level: str = "WARNING"
    file: str = "~/.cache/strider/strider.log"


@dataclass
class Settings:
    """Main settings container."""

    browser: BrowserSettings = field(default_factory=BrowserSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/strider/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the config file is not valid YAML or not a mapping
        """
        settings = cls()

        # Load from config file
        if config_path is None:
            config_path = Path.home() / ".config" / "strider" / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(
                    f"Config file {config_path} must contain a mapping"
                )

            # Browser settings
            if "browser" in config_data:
                browser = _section(config_data, "browser", config_path)
                settings.browser = BrowserSettings(
                    wrap_selection=bool(browser.get("wrap_selection", True)),
                    start_path=browser.get("start_path"),
                )

            # Logging settings
            if "logging" in config_data:
                log = _section(config_data, "logging", config_path)
                settings.logging = LoggingSettings(
                    level=str(log.get("level", "WARNING")),
                    file=log.get("file", "~/.cache/strider/strider.log"),
                )

        # Override with environment variables
        wrap_env = os.getenv("STRIDER_WRAP")
        if wrap_env:
            settings.browser.wrap_selection = _parse_bool(wrap_env, "STRIDER_WRAP")

        start_path_env = os.getenv("STRIDER_START_PATH")
        if start_path_env:
            settings.browser.start_path = start_path_env

        log_level_env = os.getenv("STRIDER_LOG_LEVEL")
        if log_level_env:
            settings.logging.level = log_level_env

        log_file_env = os.getenv("STRIDER_LOG_FILE")
        if log_file_env:
            settings.logging.file = log_file_env

        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "browser": {
                "wrap_selection": self.browser.wrap_selection,
                "start_path": self.browser.start_path,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


def _section(config_data: Dict[str, Any], name: str, config_path: Path) -> Dict[str, Any]:
    section = config_data[name] or {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Section '{name}' in {config_path} must be a mapping"
        )
    return section


def _parse_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def get_config_dir() -> Path:
    """Get configuration directory, creating if needed."""
    config_dir = Path.home() / ".config" / "strider"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_cache_dir() -> Path:
    """Get cache directory, creating if needed."""
    cache_dir = Path.home() / ".cache" / "strider"
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir
