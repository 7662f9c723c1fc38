"""Bordered listing panel for Strider.

Renders one directory listing with the cursor row highlighted.

Modified: 2026-10-19
"""

from typing import Optional

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import ScrollableContainer
from textual.widgets import Static

from ...core.models import ListingView


class ListingPanel(ScrollableContainer):
    """Scrollable panel showing the entries of the current directory."""

    DEFAULT_CSS = """
    ListingPanel {
        width: 100%;
        height: 1fr;
        border: round $accent;
        border-title-color: $text;
        border-title-style: bold;
        padding: 0 1;
    }

    ListingPanel > .entry {
        width: 100%;
        height: 1;
        padding: 0 1;
    }

    ListingPanel > .entry-dir {
        color: $accent;
        text-style: bold;
    }

    ListingPanel > .entry-file {
        color: $text;
    }

    ListingPanel > .entry.selected {
        background: $primary;
        color: $text;
    }

    ListingPanel > .empty {
        width: 100%;
        color: $text-muted;
        text-style: italic;
        padding: 0 1;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.listing_view: Optional[ListingView] = None
        self.can_focus = False

    def compose(self) -> ComposeResult:
        """Initial composition."""
        yield Static("Loading...", classes="empty")

    async def show(self, view: ListingView) -> None:
        """Display a listing snapshot."""
        previous = self.listing_view
        self.listing_view = view

        # Cursor-only moves keep the rows and just shift the highlight
        if (
            previous is not None
            and previous.path_text == view.path_text
            and previous.rows == view.rows
        ):
            self._move_highlight(previous.selected_index, view.selected_index)
            return

        await self.refresh_display()

    async def refresh_display(self) -> None:
        """Rebuild every row from the current snapshot."""
        await self.remove_children()

        if self.listing_view is None:
            return

        self.border_title = escape(self.listing_view.path_text)
        if self.listing_view.omitted:
            self.border_subtitle = f"{self.listing_view.omitted} unreadable hidden"
        else:
            self.border_subtitle = ""

        if not self.listing_view.rows:
            await self.mount(Static("(empty directory)", classes="empty"))
            return

        rows = []
        for i, entry in enumerate(self.listing_view.rows):
            classes = ["entry", "entry-dir" if entry.is_dir else "entry-file"]
            if i == self.listing_view.selected_index:
                classes.append("selected")
            rows.append(
                Static(entry.display_name(), classes=" ".join(classes), markup=False)
            )
        await self.mount_all(rows)

        self._scroll_to_selected()

    def _move_highlight(self, old_index: Optional[int], new_index: Optional[int]) -> None:
        items = self.query(".entry")
        for i, item in enumerate(items):
            if i == old_index:
                item.remove_class("selected")
            if i == new_index:
                item.add_class("selected")
        self._scroll_to_selected()

    def _scroll_to_selected(self) -> None:
        if self.listing_view is None or self.listing_view.selected_index is None:
            return
        items = self.query(".entry")
        if 0 <= self.listing_view.selected_index < len(items):
            self.scroll_to_widget(items[self.listing_view.selected_index], animate=False)
