"""
Example of generating and blending signed distance fields.

This example builds masks of a disc, a square and a ring, generates their
fields, blends them in sequence order and plots every stage.
"""

import numpy as np
import matplotlib.pyplot as plt

from sdfgen import SDFGenerator
from sdfgen.visualization import plot_field, plot_profile


def make_masks(size=128):
    """Dark shapes on a bright background."""
    yy, xx = np.mgrid[0:size, 0:size]
    center = size / 2
    radius = np.sqrt((xx - center) ** 2 + (yy - center) ** 2)

    disc = np.where(radius < size * 0.3, 0, 255).astype(np.uint8)
    square = np.full((size, size), 255, dtype=np.uint8)
    square[size // 4:3 * size // 4, size // 4:3 * size // 4] = 0
    ring = np.where((radius > size * 0.15) & (radius < size * 0.35), 0, 255).astype(np.uint8)
    return [disc, square, ring]


def blend_shapes():
    """Generate fields for three masks and blend them."""
    generator = SDFGenerator()
    masks = make_masks()
    fields = [generator.generate(mask) for mask in masks]
    blended = generator.blend(fields)

    fig, axes = plt.subplots(2, 4, figsize=(16, 8))
    for i, (mask, field) in enumerate(zip(masks, fields)):
        axes[0, i].imshow(mask, cmap="gray")
        axes[0, i].set_title(f"Mask {i}")
        axes[0, i].set_axis_off()
        plot_field(field, ax=axes[1, i], title=f"SDF {i}", colorbar=False)

    plot_field(blended, ax=axes[0, 3], title="Blended", colorbar=False)
    plot_profile(blended, blended.height // 2, ax=axes[1, 3])

    plt.tight_layout()
    plt.savefig("blend_shapes.png")
    print("Saved blend_shapes.png")


if __name__ == "__main__":
    blend_shapes()
