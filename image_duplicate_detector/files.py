"""
Collect candidate image files from a directory.
"""

from pathlib import Path
from typing import List

from .config import SUPPORTED_FORMATS


def is_image_file(file_path: Path) -> bool:
    """Check if file is a supported image format."""
    return file_path.suffix.lower() in SUPPORTED_FORMATS


def collect_images(directory: str, recurse: bool = False) -> List[Path]:
    """
    Collect the image files in a directory.

    Args:
        directory: Path to directory to scan
        recurse: Also scan every subdirectory

    Returns:
        Sorted list of image paths
    """
    directory_path = Path(directory)
    entries = directory_path.rglob('*') if recurse else directory_path.iterdir()

    image_files = []
    for file_path in entries:
        if file_path.is_file() and is_image_file(file_path):
            image_files.append(file_path)

    return sorted(image_files)
