"""
Distance transform for mask images.

This module provides the three stages that turn a mask into a signed
distance field: classification of pixels into seeded owner grids, the 8SSEDT
propagation on each grid, and composition of the two transformed grids into
a normalized SignedDistanceImage.
"""

from sdfgen.core.distance_transform.classify import (
    sample_channel,
    background_mask,
    classify,
)

from sdfgen.core.distance_transform.transform import (
    SweepPass,
    FORWARD_PASS,
    BACKWARD_PASS,
    PASSES,
    compare,
    sweep,
    distance_transform,
)

from sdfgen.core.distance_transform.composite import (
    signed_distance,
    normalize,
    composite,
)
