"""Shared test fixtures for Strider tests.

Created: 2026-10-19
"""

import logging
from pathlib import Path
from typing import Union

import pytest

from strider.core.exceptions import DirectoryUnreadableError
from strider.core.lister import DirectoryLister
from strider.core.models import Listing


@pytest.fixture
def browse_root(tmp_path) -> Path:
    """Directory tree used by most navigation tests.

    browse/
        .config/
        .profile
        Beta/
        alpha.txt
        empty/
        sub/
            file.md
            nested/
    """
    root = tmp_path / "browse"
    root.mkdir()
    (root / ".config").mkdir()
    (root / ".profile").write_text("export PATH\n")
    (root / "Beta").mkdir()
    (root / "alpha.txt").write_text("alpha\n")
    (root / "empty").mkdir()
    sub = root / "sub"
    sub.mkdir()
    (sub / "file.md").write_text("# file\n")
    (sub / "nested").mkdir()
    return root


@pytest.fixture
def empty_dir(tmp_path) -> Path:
    """An empty directory."""
    path = tmp_path / "nothing-here"
    path.mkdir()
    return path


class FlakyLister(DirectoryLister):
    """Lister that refuses to read chosen paths, like a permission error would."""

    def __init__(self):
        self.blocked = set()
        self.calls = []

    def block(self, path: Union[str, Path]) -> None:
        self.blocked.add(Path(path))

    def list(self, path: Union[str, Path]) -> Listing:
        path = Path(path)
        self.calls.append(path)
        if path in self.blocked:
            raise DirectoryUnreadableError(path, "Permission denied")
        return super().list(path)


@pytest.fixture
def flaky_lister() -> FlakyLister:
    """Lister with a configurable set of unreadable directories."""
    return FlakyLister()


@pytest.fixture
def isolated_logging(tmp_path, monkeypatch):
    """Point log output at a temp file and drop handlers afterwards."""
    log_file = tmp_path / "logs" / "strider.log"
    monkeypatch.setenv("STRIDER_LOG_FILE", str(log_file))

    yield log_file

    logger = logging.getLogger("strider")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
