"""Custom Textual messages for Strider.

Defines custom messages for communication between TUI components.

Modified: 2026-10-19
"""

from pathlib import Path

from textual.message import Message

from ..core.exceptions import DirectoryUnreadableError


class DirectoryChanged(Message):
    """Message sent after the browser moved to another directory."""

    def __init__(self, path: Path, entry_count: int, omitted: int = 0):
        super().__init__()
        self.path = path
        self.entry_count = entry_count
        self.omitted = omitted


class NavigationFailed(Message):
    """Message sent when a directory could not be entered.

    The browser stays where it was; this only reports the failure.
    """

    def __init__(self, error: DirectoryUnreadableError):
        super().__init__()
        self.error = error


class StatusMessage(Message):
    """Message sent to display a transient status message."""

    def __init__(self, message: str, duration: int = 3, warning: bool = False):
        super().__init__()
        self.message = message
        self.duration = duration
        self.warning = warning
