"""
Tests for the navigation controller.

Created: 2026-10-19
"""

import random
import shutil
from pathlib import Path

import pytest

from strider.core.exceptions import DirectoryUnreadableError, StartupUnresolvableError
from strider.core.lister import DirectoryLister
from strider.core.navigation import Command, NavigationController, resolve_start_path


def select(controller: NavigationController, name: str) -> None:
    """Move the cursor onto the entry called ``name``."""
    for _ in range(len(controller.listing)):
        if controller.selected_entry.name == name:
            return
        controller.apply(Command.MOVE_DOWN)
    raise AssertionError(f"{name} not in listing")


class TestInitialState:
    """Test controller construction."""

    def test_starts_on_first_entry(self, browse_root):
        controller = NavigationController(browse_root)

        assert controller.current_path == browse_root
        assert controller.selected_index == 0
        assert controller.selected_entry.name == ".config"
        assert controller.listing.path == browse_root

    def test_empty_directory_has_no_selection(self, empty_dir):
        controller = NavigationController(empty_dir)

        assert controller.selected_index is None
        assert controller.selected_entry is None

    def test_unreadable_start_directory(self, tmp_path):
        with pytest.raises(DirectoryUnreadableError):
            NavigationController(tmp_path / "missing")

    def test_view_snapshot(self, browse_root):
        controller = NavigationController(browse_root)

        view = controller.view()

        assert view.path_text == str(browse_root)
        assert [row.name for row in view.rows] == controller.listing.names()
        assert view.selected_index == 0
        assert view.omitted == 0


class TestSelectionMovement:
    """Test MOVE_DOWN / MOVE_UP."""

    def test_move_down(self, browse_root):
        controller = NavigationController(browse_root)

        assert controller.apply(Command.MOVE_DOWN) is True
        assert controller.selected_index == 1

    def test_move_down_wraps_at_end(self, browse_root):
        controller = NavigationController(browse_root)
        count = len(controller.listing)

        for _ in range(count):
            controller.apply(Command.MOVE_DOWN)

        assert controller.selected_index == 0

    def test_move_up_wraps_at_start(self, browse_root):
        controller = NavigationController(browse_root)

        controller.apply(Command.MOVE_UP)

        assert controller.selected_index == len(controller.listing) - 1

    def test_clamps_without_wrap(self, browse_root):
        controller = NavigationController(browse_root, wrap=False)

        assert controller.apply(Command.MOVE_UP) is False
        assert controller.selected_index == 0

        for _ in range(20):
            controller.apply(Command.MOVE_DOWN)
        assert controller.selected_index == len(controller.listing) - 1

    def test_single_entry_does_not_move(self, browse_root):
        controller = NavigationController(browse_root / "sub" / "nested")
        (browse_root / "sub" / "nested" / "only").write_text("")
        controller.refresh()

        assert controller.apply(Command.MOVE_DOWN) is False
        assert controller.selected_index == 0

    def test_empty_listing_moves_are_noops(self, empty_dir):
        controller = NavigationController(empty_dir)
        before = controller.state

        assert controller.apply(Command.MOVE_DOWN) is False
        assert controller.apply(Command.MOVE_UP) is False
        assert controller.state is before
        assert controller.selected_index is None


class TestDescend:
    """Test DESCEND."""

    def test_descend_into_directory(self, browse_root):
        controller = NavigationController(browse_root)
        select(controller, "sub")

        assert controller.apply(Command.DESCEND) is True

        assert controller.current_path == browse_root / "sub"
        assert controller.listing.names() == DirectoryLister().list(browse_root / "sub").names()
        assert controller.selected_index == 0

    def test_descend_into_empty_directory(self, browse_root):
        controller = NavigationController(browse_root)
        select(controller, "empty")

        controller.apply(Command.DESCEND)

        assert controller.current_path == browse_root / "empty"
        assert controller.selected_index is None

    def test_descend_on_file_is_noop(self, browse_root):
        controller = NavigationController(browse_root)
        select(controller, "alpha.txt")
        before = controller.state

        assert controller.apply(Command.DESCEND) is False

        assert controller.state is before
        assert controller.current_path == browse_root

    def test_descend_in_empty_directory_is_noop(self, empty_dir):
        controller = NavigationController(empty_dir)
        before = controller.state

        assert controller.apply(Command.DESCEND) is False
        assert controller.state is before

    def test_failed_descend_rolls_back(self, browse_root):
        """Removing the target after listing makes the read fail."""
        controller = NavigationController(browse_root)
        select(controller, "sub")
        before = controller.state
        shutil.rmtree(browse_root / "sub")

        with pytest.raises(DirectoryUnreadableError) as exc_info:
            controller.apply(Command.DESCEND)

        assert exc_info.value.path == browse_root / "sub"
        assert controller.state is before
        assert controller.current_path == browse_root
        assert controller.listing == before.listing
        assert controller.selected_entry.name == "sub"

    def test_failed_descend_on_permission_error(self, browse_root, flaky_lister):
        controller = NavigationController(browse_root, lister=flaky_lister)
        select(controller, "Beta")
        before = controller.state
        flaky_lister.block(browse_root / "Beta")

        with pytest.raises(DirectoryUnreadableError):
            controller.descend()

        assert controller.state == before


class TestAscend:
    """Test ASCEND."""

    def test_ascend_to_parent(self, browse_root):
        controller = NavigationController(browse_root / "sub")

        assert controller.apply(Command.ASCEND) is True

        assert controller.current_path == browse_root
        assert controller.selected_index == 0
        assert controller.listing.names()[0] == ".config"

    def test_ascend_at_root_is_noop(self):
        controller = NavigationController(Path("/"))
        before = controller.state

        assert controller.apply(Command.ASCEND) is False
        assert controller.state is before
        assert controller.current_path == Path("/")

    def test_failed_ascend_rolls_back(self, browse_root, flaky_lister):
        controller = NavigationController(browse_root / "sub", lister=flaky_lister)
        controller.apply(Command.MOVE_DOWN)
        before = controller.state
        flaky_lister.block(browse_root)

        with pytest.raises(DirectoryUnreadableError):
            controller.apply(Command.ASCEND)

        assert controller.state is before
        assert controller.selected_index == 1

    def test_ascend_from_parent_reference(self, browse_root, monkeypatch):
        monkeypatch.chdir(browse_root / "sub")
        start = resolve_start_path("..")
        controller = NavigationController(start)

        controller.apply(Command.ASCEND)

        assert controller.current_path == start.parent
        assert "browse" in controller.listing.names()

    def test_descend_then_ascend_round_trip(self, browse_root):
        controller = NavigationController(browse_root)
        original_path = controller.current_path
        original_entries = set(controller.listing.entries)
        select(controller, "sub")

        controller.apply(Command.DESCEND)
        controller.apply(Command.ASCEND)

        assert controller.current_path == original_path
        assert set(controller.listing.entries) == original_entries


class TestRefresh:
    """Test REFRESH."""

    def test_refresh_picks_up_new_entries(self, browse_root):
        controller = NavigationController(browse_root)
        (browse_root / "zebra").mkdir()

        assert controller.apply(Command.REFRESH) is True
        assert "zebra" in controller.listing.names()

    def test_refresh_keeps_cursor_on_same_entry(self, browse_root):
        controller = NavigationController(browse_root)
        select(controller, "empty")
        (browse_root / "aardvark").write_text("")

        controller.refresh()

        assert controller.selected_entry.name == "empty"

    def test_refresh_resets_when_selection_vanishes(self, browse_root):
        controller = NavigationController(browse_root)
        select(controller, "Beta")
        (browse_root / "Beta").rmdir()

        controller.refresh()

        assert controller.selected_index == 0

    def test_refresh_of_removed_directory_rolls_back(self, browse_root):
        controller = NavigationController(browse_root / "sub" / "nested")
        before = controller.state
        shutil.rmtree(browse_root / "sub")

        with pytest.raises(DirectoryUnreadableError):
            controller.apply(Command.REFRESH)

        assert controller.state is before


class TestSessionCommands:
    """Test CONFIRM and QUIT."""

    def test_confirm_returns_current_path(self, browse_root):
        controller = NavigationController(browse_root)
        select(controller, "sub")
        controller.apply(Command.DESCEND)

        assert controller.confirm() == browse_root / "sub"

    @pytest.mark.parametrize("command", [Command.CONFIRM, Command.QUIT])
    def test_session_commands_leave_state_alone(self, browse_root, command):
        controller = NavigationController(browse_root)
        before = controller.state

        assert controller.apply(command) is False
        assert controller.state is before


class TestInvariants:
    """Test that every reachable state is consistent."""

    def test_random_walk_stays_consistent(self, browse_root):
        rng = random.Random(1234)
        commands = [
            Command.MOVE_DOWN,
            Command.MOVE_UP,
            Command.DESCEND,
            Command.ASCEND,
            Command.REFRESH,
        ]
        controller = NavigationController(browse_root)

        for _ in range(300):
            command = rng.choice(commands)
            # Stay inside the fixture tree
            if command is Command.ASCEND and controller.current_path == browse_root:
                continue
            controller.apply(command)

            state = controller.state
            assert state.is_consistent()
            if state.selected_index is not None:
                assert state.selected_index < len(state.listing)
            else:
                assert len(state.listing) == 0


class TestResolveStartPath:
    """Test startup path resolution."""

    def test_defaults_to_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert resolve_start_path() == Path.cwd()
        assert resolve_start_path("") == Path.cwd()

    def test_relative_path_made_absolute(self, browse_root, monkeypatch):
        monkeypatch.chdir(browse_root)

        resolved = resolve_start_path("sub")

        assert resolved.is_absolute()
        assert resolved == Path.cwd() / "sub"

    def test_absolute_path_kept(self, browse_root):
        assert resolve_start_path(browse_root) == browse_root

    def test_parent_reference_collapsed(self, browse_root, monkeypatch):
        monkeypatch.chdir(browse_root / "sub")

        resolved = resolve_start_path("..")

        assert resolved == Path.cwd().parent
        assert ".." not in resolved.parts

    def test_absolute_path_normalized(self, browse_root):
        raw = f"{browse_root}/sub/./nested/../../Beta"

        assert resolve_start_path(raw) == browse_root / "Beta"

    def test_home_expanded(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        assert resolve_start_path("~") == tmp_path

    def test_deleted_working_directory(self, tmp_path, monkeypatch):
        doomed = tmp_path / "doomed"
        doomed.mkdir()
        monkeypatch.chdir(doomed)
        doomed.rmdir()

        with pytest.raises(StartupUnresolvableError):
            resolve_start_path()
