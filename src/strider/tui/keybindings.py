"""Central keybinding registry for Strider.

Provides a single source of truth for which key triggers which command.

Modified: 2026-10-19
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.navigation import Command


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # Textual key name, e.g. "j", "down", "ctrl+r"
    command: Command  # Command the key triggers
    description: str  # Human-readable description
    category: str = "General"  # Category for grouping in help
    hidden: bool = False  # Whether to show in the legend


class KeybindingRegistry:
    """Central registry mapping keys to navigation commands."""

    def __init__(self):
        self.keybindings: Dict[str, Keybinding] = {}
        self._initialize_default_bindings()

    def _initialize_default_bindings(self):
        """Initialize default keybindings."""

        # Application
        self.register("q", Command.QUIT, "Quit", "Application")
        self.register("escape", Command.QUIT, "Quit", "Application", hidden=True)
        self.register("enter", Command.CONFIRM, "Choose directory", "Application")
        self.register("ctrl+r", Command.REFRESH, "Reload directory", "Application")

        # Navigation
        self.register("j", Command.MOVE_DOWN, "Move down", "Navigation")
        self.register("down", Command.MOVE_DOWN, "Move down", "Navigation", hidden=True)
        self.register("k", Command.MOVE_UP, "Move up", "Navigation")
        self.register("up", Command.MOVE_UP, "Move up", "Navigation", hidden=True)
        self.register("h", Command.ASCEND, "Parent directory", "Navigation")
        self.register("left", Command.ASCEND, "Parent directory", "Navigation", hidden=True)
        self.register("backspace", Command.ASCEND, "Parent directory", "Navigation", hidden=True)
        self.register("l", Command.DESCEND, "Open directory", "Navigation")
        self.register("right", Command.DESCEND, "Open directory", "Navigation", hidden=True)

    def register(self, key: str, command: Command, description: str,
                 category: str = "General",
                 hidden: bool = False) -> None:
        """Register a keybinding, replacing any existing binding for the key."""
        self.keybindings[key] = Keybinding(
            key=key,
            command=command,
            description=description,
            category=category,
            hidden=hidden
        )

    def command_for(self, key: str) -> Optional[Command]:
        """Get the command bound to a key, or None for unbound keys."""
        binding = self.keybindings.get(key)
        return binding.command if binding else None

    def keys_for(self, command: Command) -> List[str]:
        """Get every key bound to a command, in registration order."""
        return [b.key for b in self.keybindings.values() if b.command is command]

    def get_bindings_by_category(self) -> Dict[str, List[Keybinding]]:
        """Get keybindings organized by category."""
        result = {}
        for binding in self.keybindings.values():
            if not binding.hidden:
                if binding.category not in result:
                    result[binding.category] = []
                result[binding.category].append(binding)
        return result

    def format_legend(self) -> str:
        """One-line legend for the status bar, e.g. ``j:Move down k:Move up ...``.

        Built from the visible bindings in registration order.
        """
        return " ".join(
            f"{binding.key}:{binding.description}"
            for binding in self.keybindings.values()
            if not binding.hidden
        )

    def format_help_text(self) -> str:
        """Format help text for display."""
        lines = []
        lines.append("Strider - Terminal Directory Browser\n")
        lines.append("=" * 40 + "\n")

        categories = self.get_bindings_by_category()
        for category in sorted(categories.keys()):
            lines.append(f"\n{category}:")
            lines.append("-" * len(category) + "-")

            for binding in categories[category]:
                keys = "/".join(self.keys_for(binding.command))
                lines.append(f"  {keys.ljust(24)} {binding.description}")

        lines.append("\n" + "=" * 40)

        return "\n".join(lines)


# Global registry instance
registry = KeybindingRegistry()
