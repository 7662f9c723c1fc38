"""
Directory listing for Strider.

Every call performs a fresh read; callers cache the result if they need to.

Modified: 2026-10-19
"""

import logging
import os
from pathlib import Path
from typing import List, Tuple, Union

from strider.core.exceptions import DirectoryUnreadableError
from strider.core.models import Entry, EntryKind, Listing


logger = logging.getLogger(__name__)


def sort_key(name: str) -> Tuple[bool, str]:
    """Dotfiles first, then by name; uppercase sorts before lowercase."""
    return (not name.startswith("."), name)


class DirectoryLister:
    """Reads the immediate children of a directory."""

    def list(self, path: Union[str, Path]) -> Listing:
        """
        List a directory.

        Children whose type cannot be determined are skipped and counted in
        ``Listing.omitted`` instead of failing the whole read.

        Args:
            path: Directory to read

        Returns:
            Listing sorted with dotfiles first, then by name

        Raises:
            DirectoryUnreadableError: If the directory itself cannot be read
        """
        path = Path(path)
        entries: List[Entry] = []
        omitted = 0

        try:
            with os.scandir(path) as it:
                for child in it:
                    if not child.name:
                        continue
                    try:
                        is_dir = child.is_dir()
                    except OSError as e:
                        logger.debug(f"Skipping {child.name!r} in {path}: {e}")
                        omitted += 1
                        continue

                    kind = EntryKind.DIRECTORY if is_dir else EntryKind.FILE
                    entries.append(Entry(name=child.name, kind=kind))
        except OSError as e:
            reason = e.strerror or str(e)
            logger.info(f"Failed to list {path}: {reason}")
            raise DirectoryUnreadableError(path, reason) from e

        entries.sort(key=lambda entry: sort_key(entry.name))

        if omitted:
            logger.warning(f"Omitted {omitted} unreadable entries from {path}")

        return Listing(path=path, entries=tuple(entries), omitted=omitted)
