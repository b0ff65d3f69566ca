"""
Blending of several signed distance images into one.

Fields are combined two at a time, in sequence order: each adjacent pair
(F[i], F[i+1]) produces a pairwise blend, and the output is the mean of all
pairwise blends. Only neighbours in the sequence interact, so reordering the
inputs changes the result.
"""

import logging
import time
from typing import Sequence

import torch

from sdfgen.errors import InsufficientInputs, InvalidDimensions
from sdfgen.field import SignedDistanceImage

logger = logging.getLogger(__name__)


def validate_fields(fields: Sequence[SignedDistanceImage]) -> None:
    """
    Check blend inputs before any pixel work.

    Raises:
        InsufficientInputs: If fewer than two fields are given
        InvalidDimensions: If the fields do not all share one shape
    """
    if len(fields) < 2:
        raise InsufficientInputs(f"At least two fields are required to blend, got {len(fields)}")

    expected = fields[0].shape
    for i, field in enumerate(fields[1:], start=1):
        if field.shape != expected:
            raise InvalidDimensions(
                f"Field {i} has shape {field.shape}, expected {expected} (shape of field 0)"
            )


def pair_weight(s_a: torch.Tensor, s_b: torch.Tensor) -> torch.Tensor:
    """
    Per-pixel attribution weight in [0, 1] for one adjacent pair.

    Rules, checked in order:
        s_a < 0             -> 1.0
        s_b > 0             -> 0.0
        s_a > 0 and s_b < 0 -> |s_b| / (|s_a| + |s_b|)
        otherwise           -> 0.0

    Args:
        s_a: Decoded signed distances of the first field, in [-1, 1]
        s_b: Decoded signed distances of the second field, in [-1, 1]
    """
    dist_a = s_a.abs()
    dist_b = s_b.abs()
    denom = dist_a + dist_b
    between = (s_a > 0) & (s_b < 0)
    # denom > 0 wherever `between` holds
    safe_denom = torch.where(between, denom, torch.ones_like(denom))
    result = torch.where(between, dist_b / safe_denom, torch.zeros_like(denom))

    result = torch.where(s_b > 0, torch.zeros_like(result), result)
    result = torch.where(s_a < 0, torch.ones_like(result), result)
    return result


def blend_pair(a: SignedDistanceImage, b: SignedDistanceImage) -> SignedDistanceImage:
    """
    Blend one adjacent pair of fields.

    The weight from pair_weight() is scaled to [0, 255] and stored as 8-bit,
    truncating the fraction.
    """
    if a.shape != b.shape:
        raise InvalidDimensions(f"Pair shapes differ: {a.shape} and {b.shape}")
    weight = pair_weight(a.signed(), b.signed())
    return SignedDistanceImage(torch.floor(weight * 255.0).to(torch.uint8))


def blend_fields(fields: Sequence[SignedDistanceImage]) -> SignedDistanceImage:
    """
    Blend an ordered sequence of fields.

    Args:
        fields: Two or more fields with identical dimensions

    Returns:
        Rounded mean of the n-1 pairwise blends

    Raises:
        InsufficientInputs: Fewer than two fields
        InvalidDimensions: Mismatched field dimensions
    """
    fields = list(fields)
    validate_fields(fields)

    total = torch.zeros(fields[0].shape, dtype=torch.float64)
    for i in range(len(fields) - 1):
        start_time = time.time()
        blended = blend_pair(fields[i], fields[i + 1])
        total += blended.values.to(torch.float64)
        logger.debug(f"Blended pair {i}-{i + 1} in {time.time() - start_time:.3f}s")

    count = len(fields) - 1
    mean = torch.clamp(total / count, 0, 255)
    return SignedDistanceImage(torch.round(mean).to(torch.uint8))
