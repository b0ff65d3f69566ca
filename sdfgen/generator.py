"""
Signed distance field generation and blending.

SDFGenerator ties the core stages together: an image is classified into an
outside grid and an inside grid, both grids are transformed concurrently
(each worker owns its grid until the join), and the results are composed
into one SignedDistanceImage. Blending delegates to the pairwise blender.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Sequence, Union, List

import numpy as np
import torch

from sdfgen.config import GeneratorConfig
from sdfgen.core.blend import blend_fields
from sdfgen.core.distance_transform import classify, distance_transform, composite
from sdfgen.field import SignedDistanceImage
from sdfgen.grid import OwnerGrid
from sdfgen.image_io import load_image, load_field

logger = logging.getLogger(__name__)


class SDFGenerator:
    """
    Generates signed distance fields from mask images.

    Example:
        >>> generator = SDFGenerator(GeneratorConfig(saturation_divisor=8.0))
        >>> field = generator.generate(mask)           # [H, W] or [H, W, C] array
        >>> merged = generator.blend([field_a, field_b, field_c])
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

    def transform_grids(self, outside: OwnerGrid, inside: OwnerGrid):
        """
        Transform the outside and inside grids concurrently.

        Both transforms are submitted to a thread pool and joined before
        returning. An exception in either worker is re-raised here.

        Returns:
            (outside, inside) after transformation
        """
        with ThreadPoolExecutor(max_workers=self.config.num_workers) as executor:
            outside_future = executor.submit(distance_transform, outside)
            inside_future = executor.submit(distance_transform, inside)
            return outside_future.result(), inside_future.result()

    def generate(self, image: Union[np.ndarray, torch.Tensor]) -> SignedDistanceImage:
        """
        Generate the signed distance field of a decoded image.

        Args:
            image: [height, width] luminance or [height, width, channels] image

        Returns:
            SignedDistanceImage of the same width and height

        Raises:
            InvalidDimensions: If the image has zero width or height
        """
        outside, inside = classify(
            image,
            threshold=self.config.threshold,
            channel=self.config.channel,
            far_component=self.config.far_component,
        )
        logger.debug(
            f"Classified {outside.width}x{outside.height} image, "
            f"saturation at {self.config.max_distance(outside.height):.1f}px"
        )
        if outside.is_far().all() or inside.is_far().all():
            logger.info(
                f"{outside.width}x{outside.height} image has a single class, "
                f"the field will be saturated"
            )

        outside, inside = self.transform_grids(outside, inside)
        return composite(outside, inside, self.config.saturation_divisor)

    def generate_from_path(self, path: Union[str, Path]) -> SignedDistanceImage:
        """Decode an image file and generate its signed distance field."""
        image = load_image(path)
        logger.info(f"Image size: {image.shape[1]}x{image.shape[0]}")

        start_time = time.time()
        field = self.generate(image)
        logger.info(f"Generated SDF for {path} in {time.time() - start_time:.3f}s")
        return field

    def blend(self, fields: Sequence[SignedDistanceImage]) -> SignedDistanceImage:
        """
        Blend an ordered sequence of fields (see sdfgen.core.blend).

        Raises:
            InsufficientInputs: Fewer than two fields
            InvalidDimensions: Mismatched field dimensions
        """
        return blend_fields(fields)

    def blend_paths(self, paths: Sequence[Union[str, Path]]) -> SignedDistanceImage:
        """Load fields from image files and blend them in the given order."""
        fields: List[SignedDistanceImage] = [load_field(p) for p in paths]
        start_time = time.time()
        result = self.blend(fields)
        logger.info(
            f"Blended {len(fields) - 1} adjacent pairs in {time.time() - start_time:.3f}s"
        )
        return result
