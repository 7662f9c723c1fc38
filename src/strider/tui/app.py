"""Main Strider TUI application.

Feeds key presses to the navigation controller and repaints the listing
after every command.

Modified: 2026-10-19
"""

from pathlib import Path
from typing import Optional
import logging

from textual.app import App, ComposeResult
from textual.widgets import Header
from textual import events

from ..config.settings import Settings
from ..core.exceptions import DirectoryUnreadableError
from ..core.navigation import Command, NavigationController

from .ui.listing_panel import ListingPanel
from .ui.status_bar import StatusBar
from .messages import DirectoryChanged, NavigationFailed, StatusMessage
from .keybindings import KeybindingRegistry, registry as default_registry


logger = logging.getLogger(__name__)


class StriderApp(App[Path]):
    """Main application class for Strider.

    Exits with the chosen directory as its return value on confirm, or with
    no value on quit.
    """

    TITLE = "Strider"
    SUB_TITLE = "Directory Browser"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    def __init__(
        self,
        controller: NavigationController,
        keybindings: Optional[KeybindingRegistry] = None,
    ):
        """Initialize the application.

        Args:
            controller: Navigation controller, already pointed at the start directory
            keybindings: Key registry (the shared default registry if omitted)
        """
        super().__init__()

        self.controller = controller
        self.keybindings = keybindings or default_registry

        # UI components
        self.listing_panel: Optional[ListingPanel] = None
        self.status_bar: Optional[StatusBar] = None

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Header()

        self.listing_panel = ListingPanel(id="listing-panel")
        yield self.listing_panel

        self.status_bar = StatusBar(hints=self.keybindings.format_legend(), id="status-bar")
        yield self.status_bar

    async def on_mount(self) -> None:
        """Paint the starting directory."""
        await self.redraw()
        self._announce_directory()
        logger.info(f"Session started in {self.controller.current_path}")

    async def redraw(self) -> None:
        """Hand the controller's current state to the listing panel."""
        if self.listing_panel:
            await self.listing_panel.show(self.controller.view())

    async def run_command(self, command: Command) -> None:
        """Execute one navigation command and repaint.

        Args:
            command: Command to run
        """
        if command is Command.QUIT:
            logger.info("Session quit without a selection")
            self.exit(None)
            return

        if command is Command.CONFIRM:
            chosen = self.controller.confirm()
            logger.info(f"Session confirmed {chosen}")
            self.exit(chosen)
            return

        previous_path = self.controller.current_path
        try:
            changed = self.controller.apply(command)
        except DirectoryUnreadableError as e:
            self.post_message(NavigationFailed(e))
            return

        if not changed:
            return

        await self.redraw()
        if self.controller.current_path != previous_path or command is Command.REFRESH:
            self._announce_directory()

    def _announce_directory(self) -> None:
        listing = self.controller.listing
        self.post_message(
            DirectoryChanged(self.controller.current_path, len(listing), listing.omitted)
        )

    # Message handlers

    async def on_directory_changed(self, message: DirectoryChanged) -> None:
        """Update the status bar for the new directory."""
        self.sub_title = str(message.path)
        if self.status_bar:
            self.status_bar.update_context(
                str(message.path),
                entry_count=message.entry_count,
                omitted=message.omitted,
            )

    async def on_navigation_failed(self, message: NavigationFailed) -> None:
        """Report a directory that could not be opened; the browser stays put."""
        logger.warning(f"Navigation failed: {message.error}")
        self.notify(str(message.error), severity="warning", timeout=4)
        name = message.error.path.name or str(message.error.path)
        self.post_message(
            StatusMessage(f"Cannot open {name}: {message.error.reason}", warning=True)
        )

    async def on_status_message(self, message: StatusMessage) -> None:
        """Handle status messages."""
        if self.status_bar:
            self.status_bar.show_message(
                message.message,
                duration=message.duration,
                warning=message.warning,
            )

    async def on_key(self, event: events.Key) -> None:
        """Map key presses to navigation commands; anything unbound is ignored."""
        command = self.keybindings.command_for(event.key)
        if command is None:
            return

        event.stop()
        event.prevent_default()
        await self.run_command(command)


def run_app(
    start_path: Path,
    settings: Optional[Settings] = None,
) -> Optional[Path]:
    """Run a browsing session.

    Args:
        start_path: Absolute directory to start in
        settings: Loaded settings (defaults if omitted)

    Returns:
        The confirmed directory, or None if the user quit

    Raises:
        DirectoryUnreadableError: If the start directory cannot be read
    """
    settings = settings or Settings()
    controller = NavigationController(
        start_path,
        wrap=settings.browser.wrap_selection,
    )
    app = StriderApp(controller)
    return app.run()
