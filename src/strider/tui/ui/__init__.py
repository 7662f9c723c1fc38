"""
UI components for Strider TUI.

Modified: 2026-10-19
"""

__all__ = [
    "listing_panel",
    "status_bar",
]
