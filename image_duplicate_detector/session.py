"""
Interactive review of the duplicate groups.

The session is a two state machine: browsing the list of groups
(selected_group is None) or inspecting one group. Every command is parsed
into a typed Command for the current state, applied in full, and the
screen is redrawn before the next command is read.
"""

import os
from pathlib import Path
from typing import Callable, List, Optional

from .commands import (
    BROWSE_HELP,
    INSPECT_HELP,
    Command,
    CommandError,
    CommandType,
    parse_browse_command,
    parse_inspect_command,
)
from .config import BANNER, DEFAULT_LARGEST_DIMENSION, MIN_LARGEST_DIMENSION
from .display import DisplayError, ImageViewer
from .report import write_report


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


class ReviewSession:
    """Review, compare and delete the images of each duplicate group."""

    def __init__(self, duplicates: List[List[Path]], viewer=None,
                 remove_file: Callable[[Path], None] = os.remove,
                 largest_dimension: int = DEFAULT_LARGEST_DIMENSION,
                 clear_screen: Optional[Callable[[], None]] = None,
                 wait: Optional[Callable[[str], str]] = None):
        """
        Initialize the session.

        Args:
            duplicates: Duplicate groups; owned and mutated by the session
            viewer: Object with show(paths, largest_dimension)
            remove_file: Deletes a file from disk
            largest_dimension: Larger side of the compare windows
            clear_screen: Called before each screen is drawn
            wait: Prompts the user to continue after a display error
        """
        self.duplicates = duplicates
        self.viewer = viewer if viewer is not None else ImageViewer()
        self.remove_file = remove_file
        self.largest_dimension = max(largest_dimension, MIN_LARGEST_DIMENSION)
        self.clear_screen = clear_screen
        self.wait = wait if wait is not None else input
        self.selected_group: Optional[int] = None
        self.status = ""
        self.running = True

        self._browse_handlers = {
            CommandType.QUIT: self._quit,
            CommandType.SELECT: self._select,
            CommandType.EXPORT: self._export,
            CommandType.SET_DIMENSION: self._set_dimension,
        }
        self._inspect_handlers = {
            CommandType.QUIT: self._back,
            CommandType.DELETE: self._delete,
            CommandType.DELETE_ALL: self._delete_all,
            CommandType.EXCLUDE: self._exclude,
            CommandType.COMPARE: self._compare,
            CommandType.COMPARE_ALL: self._compare_all,
        }

    @property
    def browsing(self) -> bool:
        return self.selected_group is None

    @property
    def current_group(self) -> List[Path]:
        return self.duplicates[self.selected_group]

    def run(self, read: Optional[Callable[[str], str]] = None):
        """Read and apply commands until the user quits or no groups are left."""
        if read is None:
            read = input
        if not self.duplicates:
            self.running = False

        while self.running:
            if self.clear_screen is not None:
                self.clear_screen()
            self.render()
            self.status = ""
            self.handle(read("Enter command:"))

        if not self.duplicates:
            print("No duplicates left")

    def render(self):
        """Print the current screen."""
        print(BANNER)
        if self.status:
            print(f"{self.status}\n")

        if self.browsing:
            print(f"Found {_plural(len(self.duplicates), 'group')} of duplicates")
            print("[Group Number] Group Info")
            for i, group in enumerate(self.duplicates):
                print(f"[{i}] {_plural(len(group), 'item')}")
            print(f"\n{BROWSE_HELP}")
        else:
            group = self.current_group
            print(f"Group {self.selected_group} ({_plural(len(group), 'member')})")
            for i, path in enumerate(group):
                print(f"[{i}] {path}")
            print(f"\n{INSPECT_HELP}")

    def handle(self, line: str) -> bool:
        """
        Apply one line of user input.

        Returns:
            False once the session has ended
        """
        try:
            if self.browsing:
                command = parse_browse_command(line)
                self._browse_handlers[command.type](command)
            else:
                command = parse_inspect_command(line)
                self._inspect_handlers[command.type](command)
        except CommandError as e:
            self.status = str(e)

        if self.browsing and not self.duplicates:
            self.running = False
        return self.running

    # Browsing

    def _quit(self, command: Command):
        self.running = False

    def _select(self, command: Command):
        choice = command.indices[0]
        if not 0 <= choice < len(self.duplicates):
            self.status = "Invalid selection"
            return
        self.selected_group = choice

    def _export(self, command: Command):
        print("Writing file...")
        try:
            write_report(self.duplicates, command.path)
            self.status = "File written"
        except FileExistsError:
            self.status = "File already exists"
        except OSError as e:
            self.status = f"Failed to write {command.path}: {e}"

    def _set_dimension(self, command: Command):
        self.largest_dimension = max(command.value, MIN_LARGEST_DIMENSION)
        self.status = f"Largest dimension set to {self.largest_dimension}"

    # Inspecting

    def _back(self, command: Command):
        self.selected_group = None

    def _valid_item(self, index: int) -> bool:
        if 0 <= index < len(self.current_group):
            return True
        self.status = "Invalid selection"
        return False

    def _collapse_if_single(self):
        """Drop the current group once it no longer holds a duplicate."""
        if len(self.current_group) < 2:
            self.duplicates.pop(self.selected_group)
            self.selected_group = None

    def _delete(self, command: Command):
        index = command.indices[0]
        if not self._valid_item(index):
            return

        file_path = self.current_group[index]
        try:
            self.remove_file(file_path)
        except OSError as e:
            # File is still on disk, so it stays in the group
            self.status = f"Failed to delete {file_path}: {e}"
            return

        self.current_group.pop(index)
        self.status = f"Deleted {file_path}"
        self._collapse_if_single()

    def _delete_all(self, command: Command):
        group = self.current_group
        failed = []
        errors = []
        for file_path in group[1:]:
            try:
                self.remove_file(file_path)
            except OSError as e:
                failed.append(file_path)
                errors.append(f"Failed to delete {file_path}: {e}")

        deleted = len(group) - 1 - len(failed)
        group[1:] = failed
        self.status = "\n".join([f"Deleted {_plural(deleted, 'file')}"] + errors)

        self._collapse_if_single()
        self.selected_group = None

    def _exclude(self, command: Command):
        index = command.indices[0]
        if not self._valid_item(index):
            return

        self.current_group.pop(index)
        self._collapse_if_single()

    def _compare(self, command: Command):
        for index in command.indices:
            if not self._valid_item(index):
                return
        # Each item once, in path order
        self._show(sorted({self.current_group[i] for i in command.indices}))

    def _compare_all(self, command: Command):
        self._show(list(self.current_group))

    def _show(self, paths: List[Path]):
        try:
            self.viewer.show(paths, self.largest_dimension)
        except DisplayError as e:
            print(e)
            self.wait("Press ENTER to continue")
