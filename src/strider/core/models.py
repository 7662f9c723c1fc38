"""
Core data models for Strider.

Entries and listings are immutable snapshots of one directory read. The
navigation state ties a path to the listing read from it.

Modified: 2026-10-19
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple


class EntryKind(Enum):
    """Classification of a directory child."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Entry:
    """One immediate child of a directory."""

    name: str  # final path component, never a full path
    kind: EntryKind

    def __post_init__(self):
        if not self.name:
            raise ValueError("Entry name must not be empty")

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def display_name(self) -> str:
        """Name as shown in the listing, with a trailing slash for directories."""
        return f"{self.name}/" if self.is_dir else self.name


@dataclass(frozen=True)
class Listing:
    """
    Sorted contents of one directory at one point in time.

    ``omitted`` counts children that were skipped because their type could
    not be determined.
    """

    path: Path
    entries: Tuple[Entry, ...] = ()
    omitted: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    def names(self) -> List[str]:
        """Entry names in display order."""
        return [entry.name for entry in self.entries]

    @property
    def directory_count(self) -> int:
        return sum(1 for entry in self.entries if entry.is_dir)

    @property
    def file_count(self) -> int:
        return len(self.entries) - self.directory_count


@dataclass(frozen=True)
class NavigationState:
    """
    Everything the navigation controller owns.

    Immutable; the controller swaps in a new state on every transition.

    ``selected_index`` is None exactly when the listing is empty.
    """

    current_path: Path
    listing: Listing
    selected_index: Optional[int] = None

    @classmethod
    def from_listing(cls, listing: Listing) -> "NavigationState":
        """Build a fresh state with the cursor on the first entry."""
        return cls(
            current_path=listing.path,
            listing=listing,
            selected_index=0 if len(listing) else None,
        )

    @property
    def selected_entry(self) -> Optional[Entry]:
        if self.selected_index is None:
            return None
        return self.listing[self.selected_index]

    def is_consistent(self) -> bool:
        """Check that the selection and listing agree with each other."""
        if self.listing.path != self.current_path:
            return False
        if self.selected_index is None:
            return len(self.listing) == 0
        return 0 <= self.selected_index < len(self.listing)


@dataclass(frozen=True)
class ListingView:
    """What the renderer receives for one redraw."""

    path_text: str
    rows: Tuple[Entry, ...] = field(default_factory=tuple)
    selected_index: Optional[int] = None
    omitted: int = 0

    @classmethod
    def from_state(cls, state: NavigationState) -> "ListingView":
        return cls(
            path_text=str(state.current_path),
            rows=state.listing.entries,
            selected_index=state.selected_index,
            omitted=state.listing.omitted,
        )
