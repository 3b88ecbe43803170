"""
Typed commands for the interactive review.

Each line typed by the user is parsed for the current screen: the group
list (browse) or a single group (inspect). Anything that does not fit the
grammar raises CommandError and never reaches the session state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class CommandError(ValueError):
    """Raised for input that is not a valid command."""


class CommandType(Enum):
    # Browsing
    SELECT = 'select'
    EXPORT = 'export'
    SET_DIMENSION = 'set_dimension'
    # Inspecting
    DELETE = 'delete'
    DELETE_ALL = 'delete_all'
    EXCLUDE = 'exclude'
    COMPARE = 'compare'
    COMPARE_ALL = 'compare_all'
    # Both
    QUIT = 'quit'


@dataclass
class Command:
    type: CommandType
    indices: List[int] = field(default_factory=list)
    value: Optional[int] = None
    path: Optional[str] = None


BROWSE_HELP = ("View group: [Group Number], Export to file: e [Path], "
               "Set compare window's largest dimension (min 250, default 1000): s [Largest Dimension], "
               "Quit: q")
INSPECT_HELP = ("Delete item: d [Item Number], Delete all duplicates (leaves first item in group): d a, "
                "Mark as non-duplicate: n [Item Number], "
                "Compare items: c [Item Numbers (space delimited)], Compare all items: c a, Go back: q")


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise CommandError("Invalid command") from None


def parse_browse_command(line: str) -> Command:
    """Parse a command typed while the group list is shown."""
    text = line.strip()
    if text == 'q':
        return Command(CommandType.QUIT)

    if text.startswith('e'):
        # The path runs to the end of the line and may contain spaces
        path = text[2:].strip() if text[1:2] == ' ' else ''
        if not path:
            raise CommandError("Invalid command")
        return Command(CommandType.EXPORT, path=path)

    if text.startswith('s'):
        parts = text.split()
        if len(parts) != 2 or parts[0] != 's':
            raise CommandError("Invalid arguments")
        return Command(CommandType.SET_DIMENSION, value=_to_int(parts[1]))

    return Command(CommandType.SELECT, indices=[_to_int(text)])


def parse_inspect_command(line: str) -> Command:
    """Parse a command typed while a single group is shown."""
    parts = line.split()
    if parts == ['q']:
        return Command(CommandType.QUIT)

    if len(parts) < 2 or parts[0] not in ('d', 'n', 'c'):
        raise CommandError("Invalid command")

    verb, args = parts[0], parts[1:]
    if verb == 'c':
        if args == ['a']:
            return Command(CommandType.COMPARE_ALL)
        return Command(CommandType.COMPARE, indices=[_to_int(arg) for arg in args])

    if len(args) != 1:
        raise CommandError("Invalid command")

    if verb == 'd':
        if args[0] == 'a':
            return Command(CommandType.DELETE_ALL)
        return Command(CommandType.DELETE, indices=[_to_int(args[0])])

    return Command(CommandType.EXCLUDE, indices=[_to_int(args[0])])
