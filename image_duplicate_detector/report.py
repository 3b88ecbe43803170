"""
Plain text export of the duplicate groups.

Format::

    === Image Duplicate Detector ===
    === GROUP 0 ===
    /photos/a.png
    /photos/a_copy.png
    === GROUP 1 ===
    ...
"""

import re
from pathlib import Path
from typing import List, Union

from .config import BANNER

GROUP_HEADER = re.compile(r'^=== GROUP (\d+) ===$')


def write_report(groups: List[List[Path]], file_path: Union[str, Path]) -> None:
    """
    Write the duplicate groups to a new text file.

    Raises:
        FileExistsError: if the file already exists; nothing is written
    """
    with open(file_path, 'x', encoding='utf-8') as f:
        f.write(f"{BANNER}\n")
        for i, group in enumerate(groups):
            f.write(f"=== GROUP {i} ===\n")
            for path in group:
                f.write(f"{path}\n")


def read_report(file_path: Union[str, Path]) -> List[List[Path]]:
    """Read the groups back from a report written by write_report."""
    groups: List[List[Path]] = []
    with open(file_path, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines()

    for line in lines[1:]:
        if GROUP_HEADER.match(line):
            groups.append([])
        elif line and groups:
            groups[-1].append(Path(line))

    return groups
