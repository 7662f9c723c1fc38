"""
Core browsing logic for Strider.

Directory listing and the navigation state machine. Nothing in here knows
about the terminal; the TUI consumes these types.

Modified: 2026-10-19
"""

from strider.core.exceptions import (
    StriderError,
    StartupUnresolvableError,
    DirectoryUnreadableError,
    ConfigurationError,
)

__all__ = [
    "StriderError",
    "StartupUnresolvableError",
    "DirectoryUnreadableError",
    "ConfigurationError",
]
