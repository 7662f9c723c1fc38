"""
Configuration management for Strider.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/strider/config.yaml)
- Environment variables

Modified: 2026-10-19
"""

from strider.config.settings import (
    Settings,
    BrowserSettings,
    LoggingSettings,
    get_config_dir,
    get_cache_dir,
)

__all__ = [
    "Settings",
    "BrowserSettings",
    "LoggingSettings",
    "get_config_dir",
    "get_cache_dir",
]
