"""Tests for composing transformed grids into a signed distance image."""

import unittest
import numpy as np
import torch

from sdfgen.core.distance_transform import (
    classify,
    distance_transform,
    signed_distance,
    normalize,
    composite,
)
from sdfgen.errors import InvalidDimensions
from sdfgen.field import SignedDistanceImage
from sdfgen.grid import OwnerGrid


class TestNormalize(unittest.TestCase):

    def test_zero_maps_to_boundary(self):
        self.assertEqual(normalize(torch.tensor([0.0], dtype=torch.float64), 10.0).item(), 128)

    def test_saturation(self):
        d = torch.tensor([-100.0, -10.0, 10.0, 100.0], dtype=torch.float64)
        self.assertEqual(normalize(d, 10.0).tolist(), [0, 0, 255, 255])

    def test_linear_mapping(self):
        # n = 0.5 -> 1.5 * 127.5 = 191.25
        self.assertEqual(normalize(torch.tensor([5.0], dtype=torch.float64), 10.0).item(), 191)
        # n = -0.5 -> 0.5 * 127.5 = 63.75
        self.assertEqual(normalize(torch.tensor([-5.0], dtype=torch.float64), 10.0).item(), 64)

    def test_dtype(self):
        self.assertEqual(normalize(torch.zeros(3, dtype=torch.float64), 1.0).dtype, torch.uint8)


class TestComposite(unittest.TestCase):

    def _transformed(self, image):
        outside, inside = classify(image)
        return distance_transform(outside), distance_transform(inside)

    def test_shape_mismatch(self):
        with self.assertRaises(InvalidDimensions):
            signed_distance(OwnerGrid(2, 3), OwnerGrid(3, 2))

    def test_sign_convention(self):
        image = np.zeros((12, 6), dtype=np.uint8)
        image[:, 3:] = 255
        outside, inside = self._transformed(image)
        d = signed_distance(outside, inside)

        # Background (below threshold) is positive, foreground negative
        self.assertTrue(torch.all(d[:, :3] > 0))
        self.assertTrue(torch.all(d[:, 3:] < 0))
        self.assertEqual(d[0].tolist(), [3.0, 2.0, 1.0, -1.0, -2.0, -3.0])

    def test_composite_returns_field(self):
        image = np.zeros((12, 6), dtype=np.uint8)
        image[:, 3:] = 255
        field = composite(*self._transformed(image))

        self.assertIsInstance(field, SignedDistanceImage)
        self.assertEqual(field.shape, (12, 6))
        # max distance = 12 / 6 = 2 pixels
        self.assertEqual(field.to_numpy()[0].tolist(), [255, 255, 191, 64, 0, 0])

    def test_saturation_divisor(self):
        image = np.zeros((12, 6), dtype=np.uint8)
        image[:, 3:] = 255
        field = composite(*self._transformed(image), saturation_divisor=2.0)
        # max distance = 6 pixels: d = 1 -> (1/6 + 1) * 127.5 = 148.75
        self.assertEqual(field[0, 2], 149)
        self.assertEqual(field[0, 3], 255 - 149)

    def test_all_background_saturates(self):
        field = composite(*self._transformed(np.zeros((4, 4), dtype=np.uint8)))
        self.assertTrue(torch.all(field.values == 255))

    def test_all_foreground_saturates(self):
        field = composite(*self._transformed(np.full((4, 4), 255, dtype=np.uint8)))
        self.assertTrue(torch.all(field.values == 0))


if __name__ == '__main__':
    unittest.main()
