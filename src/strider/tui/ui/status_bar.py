"""Status bar widget for Strider.

Shows the current directory, entry counts and keyboard hints.

Modified: 2026-10-19
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static
from textual.widget import Widget
from textual.reactive import reactive


class StatusBar(Widget):
    """Status bar showing context, counts and hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        dock: bottom;
    }

    StatusBar > Horizontal {
        width: 100%;
        height: 1;
    }

    StatusBar .status-left {
        width: 2fr;
        padding: 0 1;
    }

    StatusBar .status-center {
        width: 2fr;
        text-align: center;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar .status-center.status-warning {
        color: $warning;
        text-style: bold;
    }

    StatusBar .status-right {
        width: 1fr;
        text-align: right;
        padding: 0 1;
    }
    """

    # Reactive properties
    context = reactive("")
    status = reactive("")
    counts = reactive("")

    def __init__(self, hints: str = "", *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hints = hints
        self.left_widget: Optional[Static] = None
        self.center_widget: Optional[Static] = None
        self.right_widget: Optional[Static] = None
        self._reset_timer = None

    def compose(self) -> ComposeResult:
        """Create status bar layout."""
        with Horizontal():
            self.left_widget = Static("", classes="status-left", markup=False)
            self.center_widget = Static("", classes="status-center", markup=False)
            self.right_widget = Static("", classes="status-right", markup=False)

            yield self.left_widget
            yield self.center_widget
            yield self.right_widget

    def on_mount(self) -> None:
        """Initialize status bar with default values."""
        self.update_hints()

    def update_context(self, context: str, entry_count: int = 0, omitted: int = 0) -> None:
        """Update the current directory (left) and entry counts (right).

        Args:
            context: Directory path to display
            entry_count: Number of entries in the listing
            omitted: Number of entries skipped as unreadable
        """
        self.context = context
        self.counts = f"{entry_count} items"
        if omitted:
            self.counts += f" ({omitted} hidden)"

        if self.left_widget:
            self.left_widget.update(context)
        if self.right_widget:
            self.right_widget.update(self.counts)

    def update_hints(self, custom_hints: Optional[str] = None) -> None:
        """Show keyboard hints in the center.

        Args:
            custom_hints: Hint text to use instead of the default legend
        """
        if custom_hints is not None:
            self.hints = custom_hints

        self.status = self.hints
        if self.center_widget:
            self.center_widget.remove_class("status-warning")
            self.center_widget.update(self.hints)

    def show_message(self, message: str, duration: int = 3, warning: bool = False) -> None:
        """Show a temporary message in the center, then restore the hints.

        Args:
            message: Message to display
            duration: Duration in seconds
            warning: Whether to style the message as a warning
        """
        self.status = message
        if self.center_widget:
            self.center_widget.set_class(warning, "status-warning")
            self.center_widget.update(message)

            if self._reset_timer is not None:
                self._reset_timer.stop()
            self._reset_timer = self.set_timer(duration, self.update_hints)
