"""
Boundary classification.

Splits a decoded image into background and foreground by thresholding one
sample channel, and seeds the two owner grids the distance transform runs on.
"""

from typing import Tuple, Union

import numpy as np
import torch

from sdfgen.errors import InvalidDimensions
from sdfgen.grid import OwnerGrid, FAR_COMPONENT


def sample_channel(image: Union[np.ndarray, torch.Tensor], channel: int = 1) -> np.ndarray:
    """
    Extract the per-pixel sample the classifier thresholds.

    Args:
        image: [height, width] luminance or [height, width, channels] image
        channel: Channel index used for multi-channel images (1 = green)

    Returns:
        [height, width] array of samples
    """
    if isinstance(image, torch.Tensor):
        image = image.detach().cpu().numpy()
    image = np.asarray(image)

    if image.ndim == 2:
        return image
    if image.ndim == 3:
        if image.shape[2] == 1:
            return image[..., 0]
        if channel >= image.shape[2]:
            raise ValueError(f"Channel {channel} not available in image with {image.shape[2]} channels")
        return image[..., channel]
    raise InvalidDimensions(f"Expected a 2D or 3D image array, got shape {image.shape}")


def background_mask(
    image: Union[np.ndarray, torch.Tensor],
    threshold: float = 128,
    channel: int = 1,
) -> np.ndarray:
    """Boolean mask of background pixels (sample < threshold)."""
    samples = sample_channel(image, channel)
    if samples.shape[0] == 0 or samples.shape[1] == 0:
        raise InvalidDimensions(f"Image has zero size: {samples.shape[1]}x{samples.shape[0]}")
    return samples.astype(np.float64) < threshold


def classify(
    image: Union[np.ndarray, torch.Tensor],
    threshold: float = 128,
    channel: int = 1,
    far_component: int = FAR_COMPONENT,
) -> Tuple[OwnerGrid, OwnerGrid]:
    """
    Seed the outside and inside grids from an image.

    Outside grid: background -> FAR, foreground -> INSIDE.
    Inside grid: background -> INSIDE, foreground -> FAR.

    Args:
        image: Decoded image, see sample_channel()
        threshold: Samples below this are background
        channel: Sample channel for multi-channel images
        far_component: Component K of the FAR sentinel

    Returns:
        (outside_grid, inside_grid)

    Raises:
        InvalidDimensions: If the image has zero width or height
    """
    background = background_mask(image, threshold, channel)
    outside = OwnerGrid.from_seeds(~background, far_component)
    inside = OwnerGrid.from_seeds(background, far_component)
    return outside, inside
