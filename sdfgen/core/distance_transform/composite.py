"""
Composition of transformed grids into a signed distance image.
"""

import torch

from sdfgen.errors import InvalidDimensions
from sdfgen.field import SignedDistanceImage
from sdfgen.grid import OwnerGrid


def signed_distance(outside: OwnerGrid, inside: OwnerGrid) -> torch.Tensor:
    """
    Signed distance in pixels, d_out - d_in, as a float64 [height, width] tensor.

    Positive on background pixels (their outside vector points at the
    foreground), negative on foreground pixels.
    """
    if outside.shape != inside.shape:
        raise InvalidDimensions(
            f"Grid shapes differ: outside {outside.shape}, inside {inside.shape}"
        )
    d_out = torch.from_numpy(outside.dist_sq()).to(torch.float64).sqrt()
    d_in = torch.from_numpy(inside.dist_sq()).to(torch.float64).sqrt()
    return d_out - d_in


def normalize(distance: torch.Tensor, max_distance: float) -> torch.Tensor:
    """
    Map signed pixel distances to uint8 intensities.

    Distances are divided by max_distance and clamped to [-1, 1], then mapped
    linearly so that 0 lands on 127.5 and rounded.
    """
    n = torch.clamp(distance / max_distance, -1.0, 1.0)
    value = torch.round((n + 1.0) * 127.5)
    return torch.clamp(value, 0, 255).to(torch.uint8)


def composite(
    outside: OwnerGrid,
    inside: OwnerGrid,
    saturation_divisor: float = 6.0,
) -> SignedDistanceImage:
    """
    Combine transformed outside and inside grids into a SignedDistanceImage.

    Args:
        outside: Transformed grid seeded at foreground pixels
        inside: Transformed grid seeded at background pixels
        saturation_divisor: Distances saturate at height / saturation_divisor.
            6.0 is an empirical choice, not a universal constant.

    Returns:
        The normalized field
    """
    distance = signed_distance(outside, inside)
    max_distance = outside.height / saturation_divisor
    return SignedDistanceImage(normalize(distance, max_distance))
