"""
Visualization utilities for signed distance fields.

This module provides matplotlib helpers to inspect a generated field next to
the mask it came from.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
import matplotlib.pyplot as plt

from sdfgen.field import SignedDistanceImage

BOUNDARY_LEVEL = 128


def plot_field(field: SignedDistanceImage, ax: Optional[plt.Axes] = None,
               title: Optional[str] = None, colorbar: bool = True) -> plt.Axes:
    """
    Show a field as a grayscale image.

    Args:
        field: Field to plot
        ax: Axes to draw on (created if None)
        title: Optional title
        colorbar: Whether to attach a colorbar

    Returns:
        The axes drawn on
    """
    if ax is None:
        fig = plt.figure(figsize=(6, 6))
        ax = fig.add_subplot(111)

    im = ax.imshow(field.to_numpy(), cmap="gray", vmin=0, vmax=255)
    if colorbar:
        ax.figure.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    if title:
        ax.set_title(title)
    ax.set_axis_off()
    return ax


def plot_profile(field: SignedDistanceImage, row: int, ax: Optional[plt.Axes] = None) -> plt.Axes:
    """
    Plot the intensities along one row, with the boundary level marked.
    """
    if not 0 <= row < field.height:
        raise ValueError(f"Row {row} outside field of height {field.height}")

    if ax is None:
        fig = plt.figure(figsize=(8, 4))
        ax = fig.add_subplot(111)

    values = field.to_numpy()[row]
    ax.plot(np.arange(field.width), values, color="b")
    ax.axhline(BOUNDARY_LEVEL, color="r", linestyle="--", linewidth=1)
    ax.set_xlim(0, max(field.width - 1, 1))
    ax.set_ylim(0, 255)
    ax.set_xlabel("x")
    ax.set_ylabel("intensity")
    ax.set_title(f"Row {row}")
    return ax


def save_preview(mask: np.ndarray, field: SignedDistanceImage, path: Union[str, Path]) -> Path:
    """
    Save a two-panel figure: the source mask and its field.

    Args:
        mask: Decoded source image ([H, W] or [H, W, C])
        field: Field generated from the mask
        path: Output image path

    Returns:
        The path written
    """
    path = Path(path)
    fig, (ax_mask, ax_field) = plt.subplots(1, 2, figsize=(10, 5))
    try:
        mask = np.asarray(mask)
        if mask.ndim == 2:
            ax_mask.imshow(mask, cmap="gray")
        else:
            ax_mask.imshow(mask)
        ax_mask.set_title("Mask")
        ax_mask.set_axis_off()

        plot_field(field, ax=ax_field, title="Signed distance field")
        fig.tight_layout()
        fig.savefig(path)
    finally:
        plt.close(fig)
    return path
