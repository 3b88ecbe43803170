"""
Pixel level similarity between two image files.

Images are decoded with Pillow in their native mode, so every channel
(alpha included) takes part in the comparison. The score is the fraction of
bytes that are exactly equal, which means a recompressed copy of an image
scores lower than a byte-identical one even if both look the same.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

PathLike = Union[str, Path]


def load_image(file_path: PathLike) -> Optional[np.ndarray]:
    """Decode an image into a pixel grid, or None if it cannot be read."""
    try:
        with Image.open(file_path) as img:
            img.load()
            # Palette images hold indices; compare the colours they map to
            if img.mode in ('P', 'PA'):
                has_alpha = img.mode == 'PA' or 'transparency' in img.info
                return np.array(img.convert('RGBA' if has_alpha else 'RGB'))
            return np.array(img)
    except (IOError, OSError, ValueError, Image.DecompressionBombError):
        return None


def absolute_difference(grid_a: np.ndarray, grid_b: np.ndarray) -> np.ndarray:
    """Per-element absolute difference of two pixel grids of the same shape."""
    if np.issubdtype(grid_a.dtype, np.floating) or np.issubdtype(grid_b.dtype, np.floating):
        work_type = np.float64
    else:
        work_type = np.int64
    return np.abs(grid_a.astype(work_type) - grid_b.astype(work_type))


def compare_images(path_a: PathLike, path_b: PathLike) -> Optional[float]:
    """
    Score how similar two images are.

    Args:
        path_a: First image
        path_b: Second image

    Returns:
        Fraction (0.0-1.0) of identical bytes, 0.0 when the dimensions
        differ, or None when either image could not be decoded
    """
    grid_a = load_image(path_a)
    grid_b = load_image(path_b)
    if grid_a is None or grid_b is None:
        return None

    # Rows and columns first; no need to diff anything if they differ
    if grid_a.shape[:2] != grid_b.shape[:2]:
        return 0.0

    # Same size but a different channel layout (e.g. RGB vs RGBA)
    if grid_a.shape != grid_b.shape or grid_a.size == 0:
        return 0.0

    diff = absolute_difference(grid_a, grid_b)
    return np.count_nonzero(diff == 0) / diff.size
