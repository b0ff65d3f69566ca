"""
Signed distance fields from mask images.

This package turns thresholded mask images into signed distance field images
with the eight-point sequential Euclidean distance transform (8SSEDT), and
blends sequences of such fields into one composite field.
"""

from .errors import SDFError, InvalidDimensions, InsufficientInputs
from .config import GeneratorConfig
from .grid import OwnerVector, OwnerGrid, OwnerRows, INSIDE, FAR, FAR_COMPONENT
from .field import SignedDistanceImage
from .generator import SDFGenerator


def generate(image, config=None):
    """Generate the signed distance field of a decoded image."""
    return SDFGenerator(config).generate(image)


def blend(fields):
    """Blend an ordered sequence of signed distance fields."""
    return SDFGenerator().blend(fields)
