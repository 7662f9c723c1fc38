"""
TUI (Terminal User Interface) for Strider.

Textual-based single-panel directory browser.

Modified: 2026-10-19
"""

__all__ = ["app", "keybindings", "messages"]
