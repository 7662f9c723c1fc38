"""
Navigation state machine for Strider.

The controller owns the current path, the cached listing and the cursor.
Path changes read the target directory first and only commit once the read
succeeded, so a failed move leaves the state untouched.

Modified: 2026-10-19
"""

import logging
import os
from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from strider.core.exceptions import StartupUnresolvableError
from strider.core.lister import DirectoryLister
from strider.core.models import Entry, Listing, ListingView, NavigationState


logger = logging.getLogger(__name__)


class Command(Enum):
    """Discrete navigation actions derived from user input."""

    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    DESCEND = "descend"
    ASCEND = "ascend"
    REFRESH = "refresh"
    CONFIRM = "confirm"
    QUIT = "quit"


def resolve_start_path(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Determine the absolute directory a session starts in.

    Args:
        path: Optional user-supplied path; defaults to the working directory

    Returns:
        Absolute path with ``.`` and ``..`` collapsed (symlinks are kept as given)

    Raises:
        StartupUnresolvableError: If the working directory cannot be determined
    """
    if path is None or str(path) == "":
        try:
            return Path.cwd()
        except OSError as e:
            raise StartupUnresolvableError(
                f"Unable to determine the current directory: {e}"
            ) from e

    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        return Path(os.path.normpath(candidate))

    try:
        return Path(os.path.normpath(Path.cwd() / candidate))
    except OSError as e:
        raise StartupUnresolvableError(
            f"Unable to resolve {path} against the current directory: {e}"
        ) from e


class NavigationController:
    """Translates navigation commands into state transitions."""

    def __init__(
        self,
        start_path: Union[str, Path],
        lister: Optional[DirectoryLister] = None,
        wrap: bool = True,
    ):
        """Initialize the controller and read the starting directory.

        Args:
            start_path: Directory to start in
            lister: Directory reader (a fresh DirectoryLister by default)
            wrap: Whether the cursor wraps around at either end

        Raises:
            DirectoryUnreadableError: If the starting directory cannot be read
        """
        self.lister = lister or DirectoryLister()
        self.wrap = wrap
        self._state = NavigationState.from_listing(self.lister.list(Path(start_path)))

    # Read-only accessors

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def current_path(self) -> Path:
        return self._state.current_path

    @property
    def listing(self) -> Listing:
        return self._state.listing

    @property
    def selected_index(self) -> Optional[int]:
        return self._state.selected_index

    @property
    def selected_entry(self) -> Optional[Entry]:
        return self._state.selected_entry

    def view(self) -> ListingView:
        """Snapshot of the current state for the renderer."""
        return ListingView.from_state(self._state)

    # Commands

    def apply(self, command: Command) -> bool:
        """
        Apply a navigation command.

        CONFIRM and QUIT end the session and are handled by whoever owns it;
        here they leave the state alone.

        Returns:
            True if the state changed

        Raises:
            DirectoryUnreadableError: If DESCEND, ASCEND or REFRESH could not
                read the target directory. The state is left exactly as it was.
        """
        if command is Command.MOVE_DOWN:
            return self.move_selection(1)
        if command is Command.MOVE_UP:
            return self.move_selection(-1)
        if command is Command.DESCEND:
            return self.descend()
        if command is Command.ASCEND:
            return self.ascend()
        if command is Command.REFRESH:
            return self.refresh()
        return False

    def move_selection(self, delta: int) -> bool:
        """Move the cursor by ``delta`` rows, wrapping or clamping at the ends."""
        count = len(self._state.listing)
        if count == 0 or self._state.selected_index is None:
            return False

        new_index = self._state.selected_index + delta
        if self.wrap:
            new_index %= count
        else:
            new_index = max(0, min(new_index, count - 1))

        if new_index == self._state.selected_index:
            return False
        self._state = replace(self._state, selected_index=new_index)
        return True

    def descend(self) -> bool:
        """Enter the selected directory. Files and empty listings are no-ops."""
        entry = self._state.selected_entry
        if entry is None or not entry.is_dir:
            return False

        self._change_directory(self._state.current_path / entry.name)
        return True

    def ascend(self) -> bool:
        """Go to the parent directory. No-op at a filesystem root."""
        current = self._state.current_path
        parent = current.parent
        if parent == current:
            return False

        self._change_directory(parent)
        return True

    def confirm(self) -> Path:
        """Return the directory the session settled on."""
        return self._state.current_path

    def refresh(self) -> bool:
        """Re-read the current directory, keeping the cursor where possible."""
        listing = self.lister.list(self._state.current_path)
        selected = self._state.selected_entry

        index: Optional[int] = None
        if len(listing):
            index = 0
            if selected is not None and selected in listing.entries:
                index = listing.entries.index(selected)

        previous = self._state
        self._state = NavigationState(
            current_path=listing.path,
            listing=listing,
            selected_index=index,
        )
        return self._state != previous

    def _change_directory(self, target: Path) -> None:
        # Read before touching state; a failure propagates with nothing changed
        listing = self.lister.list(target)
        self._state = NavigationState.from_listing(listing)
        logger.debug(f"Changed directory to {target} ({len(listing)} entries)")
