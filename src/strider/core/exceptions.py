"""
Custom exceptions for Strider.

Modified: 2026-10-19
"""

from pathlib import Path
from typing import Optional, Union


class StriderError(Exception):
    """Base exception for all Strider errors."""

    pass


class StartupUnresolvableError(StriderError):
    """Raised when the initial directory of a session cannot be determined."""

    pass


class DirectoryUnreadableError(StriderError):
    """Raised when a directory cannot be listed.

    Covers permission errors, paths removed while browsing, and paths that
    are not directories at all.
    """

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason or "unknown error"
        super().__init__(f"Cannot read directory {self.path}: {self.reason}")


class ConfigurationError(StriderError):
    """Raised when configuration is invalid or missing."""

    pass
