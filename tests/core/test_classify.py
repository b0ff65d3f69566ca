"""Tests for boundary classification."""

import unittest
import numpy as np
import torch

from sdfgen.core.distance_transform import sample_channel, background_mask, classify
from sdfgen.errors import InvalidDimensions
from sdfgen.grid import INSIDE, FAR


class TestSampleChannel(unittest.TestCase):

    def test_grayscale_passthrough(self):
        image = np.arange(6, dtype=np.uint8).reshape(2, 3)
        np.testing.assert_array_equal(sample_channel(image), image)

    def test_green_channel_of_rgba(self):
        image = np.zeros((2, 2, 4), dtype=np.uint8)
        image[..., 0] = 255
        image[..., 1] = 7
        np.testing.assert_array_equal(sample_channel(image), np.full((2, 2), 7))

    def test_single_channel_image(self):
        image = np.full((2, 2, 1), 9, dtype=np.uint8)
        np.testing.assert_array_equal(sample_channel(image), np.full((2, 2), 9))

    def test_torch_input(self):
        image = torch.full((2, 3, 3), 200, dtype=torch.uint8)
        np.testing.assert_array_equal(sample_channel(image, channel=2), np.full((2, 3), 200))

    def test_missing_channel(self):
        with self.assertRaises(ValueError):
            sample_channel(np.zeros((2, 2, 3), dtype=np.uint8), channel=3)

    def test_bad_rank(self):
        with self.assertRaises(InvalidDimensions):
            sample_channel(np.zeros((2, 2, 2, 2), dtype=np.uint8))


class TestClassify(unittest.TestCase):

    def test_threshold(self):
        image = np.array([[0, 127, 128, 255]], dtype=np.uint8)
        np.testing.assert_array_equal(background_mask(image), [[True, True, False, False]])
        np.testing.assert_array_equal(
            background_mask(image, threshold=200), [[True, True, True, False]]
        )

    def test_grids_are_complementary(self):
        image = np.array([[0, 255],
                          [255, 0]], dtype=np.uint8)
        outside, inside = classify(image)

        # Outside grid: background -> FAR, foreground -> INSIDE
        self.assertEqual(outside[0, 0], FAR)
        self.assertEqual(outside[0, 1], INSIDE)
        self.assertEqual(outside[1, 0], INSIDE)
        self.assertEqual(outside[1, 1], FAR)

        # Inside grid: background -> INSIDE, foreground -> FAR
        self.assertEqual(inside[0, 0], INSIDE)
        self.assertEqual(inside[0, 1], FAR)
        self.assertEqual(inside[1, 0], FAR)
        self.assertEqual(inside[1, 1], INSIDE)

    def test_grids_do_not_share_storage(self):
        outside, inside = classify(np.zeros((3, 3), dtype=np.uint8))
        self.assertFalse(np.shares_memory(outside.vectors, inside.vectors))

    def test_uses_green_channel(self):
        image = np.zeros((1, 2, 4), dtype=np.uint8)
        image[0, 0, 0] = 255   # red only -> background
        image[0, 1, 1] = 255   # green -> foreground
        outside, _ = classify(image)

        self.assertEqual(outside[0, 0], FAR)
        self.assertEqual(outside[0, 1], INSIDE)

    def test_far_component(self):
        outside, _ = classify(np.zeros((1, 1), dtype=np.uint8), far_component=42)
        self.assertEqual(outside[0, 0], (42, 42))

    def test_zero_sized_image(self):
        with self.assertRaises(InvalidDimensions):
            classify(np.zeros((0, 5), dtype=np.uint8))
        with self.assertRaises(InvalidDimensions):
            classify(np.zeros((5, 0, 4), dtype=np.uint8))


if __name__ == '__main__':
    unittest.main()
