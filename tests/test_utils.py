"""Mask and field builders shared by the test modules."""

import numpy as np
import torch

from sdfgen.field import SignedDistanceImage
from sdfgen.grid import OwnerGrid


def split_mask(width: int, height: int, split: int, left: int = 255, right: int = 0) -> np.ndarray:
    """RGBA mask with columns [0, split) set to `left` and the rest to `right`."""
    mask = np.zeros((height, width, 4), dtype=np.uint8)
    mask[:, :split, :3] = left
    mask[:, split:, :3] = right
    mask[..., 3] = 255
    return mask


def rectangle_seeds(width: int, height: int, x0: int, y0: int, x1: int, y1: int) -> np.ndarray:
    """Boolean seed mask with the inclusive rectangle [x0, x1] x [y0, y1] set."""
    seeds = np.zeros((height, width), dtype=bool)
    seeds[y0:y1 + 1, x0:x1 + 1] = True
    return seeds


def brute_force_dist_sq(seeds: np.ndarray) -> np.ndarray:
    """Exact squared distance from every cell to its nearest seed."""
    height, width = seeds.shape
    ys, xs = np.nonzero(seeds)
    gy, gx = np.mgrid[0:height, 0:width]
    d = (gx[..., None] - xs[None, None, :]) ** 2 + (gy[..., None] - ys[None, None, :]) ** 2
    return d.min(axis=-1)


def owners_are_seeds(grid: OwnerGrid, seeds: np.ndarray) -> bool:
    """True if every vector in the grid lands on a seed cell."""
    gy, gx = np.mgrid[0:grid.height, 0:grid.width]
    ox = gx + grid.vectors[..., 0]
    oy = gy + grid.vectors[..., 1]
    inside = (ox >= 0) & (ox < grid.width) & (oy >= 0) & (oy < grid.height)
    if not inside.all():
        return False
    return bool(seeds[oy, ox].all())


def constant_field(value: int, width: int = 4, height: int = 3) -> SignedDistanceImage:
    return SignedDistanceImage(torch.full((height, width), value, dtype=torch.uint8))
