"""
Tests for the pixel level similarity score.
"""

import numpy as np
from PIL import Image

from image_duplicate_detector.scorer import absolute_difference, compare_images, load_image


class TestLoadImage:
    def test_keeps_alpha_channel(self, make_image):
        path = make_image('a.png', mode='RGBA', color=(1, 2, 3, 4))
        grid = load_image(path)
        assert grid.shape == (6, 8, 4)

    def test_not_an_image_returns_none(self, tmp_path):
        path = tmp_path / 'broken.png'
        path.write_text('not an image')
        assert load_image(path) is None

    def test_missing_file_returns_none(self, tmp_path):
        assert load_image(tmp_path / 'missing.png') is None


class TestAbsoluteDifference:
    def test_no_wraparound_for_uint8(self):
        a = np.array([0, 200], dtype=np.uint8)
        b = np.array([255, 100], dtype=np.uint8)
        assert absolute_difference(a, b).tolist() == [255, 100]


class TestCompareImages:
    def test_identical_images_score_one(self, make_image):
        a = make_image('a.png')
        b = make_image('b.png')
        assert compare_images(a, b) == 1.0

    def test_different_dimensions_score_zero(self, make_image):
        a = make_image('a.png', size=(8, 6))
        b = make_image('b.png', size=(6, 8))
        assert compare_images(a, b) == 0.0

    def test_different_dimensions_ignore_content(self, make_image):
        a = make_image('a.png', size=(8, 6))
        b = make_image('b.png', size=(8, 7))
        assert compare_images(a, b) == 0.0

    def test_fraction_of_identical_bytes(self, make_image_from_array):
        # 2 pixels x 3 channels, one byte differs
        a = make_image_from_array('a.png', [[[10, 20, 30], [40, 50, 60]]])
        b = make_image_from_array('b.png', [[[10, 20, 30], [40, 51, 60]]])
        assert compare_images(a, b) == 5 / 6

    def test_alpha_channel_is_compared(self, make_image):
        a = make_image('a.png', size=(2, 2), mode='RGBA', color=(1, 2, 3, 255))
        b = make_image('b.png', size=(2, 2), mode='RGBA', color=(1, 2, 3, 0))
        assert compare_images(a, b) == 0.75

    def test_different_channel_layout_scores_zero(self, make_image):
        a = make_image('a.png', mode='RGB', color=(1, 2, 3))
        b = make_image('b.png', mode='RGBA', color=(1, 2, 3, 255))
        assert compare_images(a, b) == 0.0

    def test_completely_different_images(self, make_image):
        a = make_image('a.png', color=(0, 0, 0))
        b = make_image('b.png', color=(255, 255, 255))
        assert compare_images(a, b) == 0.0

    def test_palette_images_compare_colours(self, tmp_path):
        """Same palette indices mapped to different colours are not duplicates."""
        paths = []
        for name, colour in (('red.png', [255, 0, 0]), ('blue.png', [0, 0, 255])):
            img = Image.new('P', (4, 4), 0)
            img.putpalette(colour + [0, 0, 0] * 255)
            img.save(tmp_path / name)
            paths.append(tmp_path / name)

        assert load_image(paths[0]).shape == (4, 4, 3)
        assert compare_images(*paths) == 0.0

    def test_identical_palette_images_score_one(self, tmp_path):
        for name in ('a.png', 'b.png'):
            img = Image.new('P', (4, 4), 0)
            img.putpalette([10, 20, 30] + [0, 0, 0] * 255)
            img.save(tmp_path / name)
        assert compare_images(tmp_path / 'a.png', tmp_path / 'b.png') == 1.0

    def test_undecodable_image_is_incomparable(self, make_image, tmp_path):
        a = make_image('a.png')
        broken = tmp_path / 'broken.jpg'
        broken.write_bytes(b'\x00\x01\x02')
        assert compare_images(a, broken) is None
        assert compare_images(broken, a) is None
