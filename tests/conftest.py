import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def make_image(tmp_path):
    """Write a small lossless image and return its path."""

    def _make(name, size=(8, 6), color=(10, 20, 30), mode='RGB'):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color).save(path)
        return path

    return _make


@pytest.fixture
def make_image_from_array(tmp_path):
    """Write an image from a uint8 array and return its path."""

    def _make(name, array):
        path = tmp_path / name
        Image.fromarray(np.asarray(array, dtype=np.uint8)).save(path)
        return path

    return _make
