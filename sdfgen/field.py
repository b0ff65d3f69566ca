"""
Signed distance images.

A SignedDistanceImage stores one 8-bit intensity per pixel: 128 sits on the
boundary, values above it are positive distances and values below it are
negative distances, both saturating at 255 and 0.
"""

from typing import Tuple, Union

import numpy as np
import torch

from sdfgen.errors import InvalidDimensions


class SignedDistanceImage:
    """
    Immutable [height, width] field of uint8 intensities.

    The tensor passed in is cloned, and `values` hands out clones, so a field
    cannot be changed after it is produced.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Union[torch.Tensor, np.ndarray]):
        if isinstance(values, np.ndarray):
            values = torch.from_numpy(np.ascontiguousarray(values))
        if values.dim() != 2:
            raise InvalidDimensions(f"Expected a [height, width] field, got shape {tuple(values.shape)}")
        self._values = values.to(torch.uint8).clone()

    @property
    def values(self) -> torch.Tensor:
        return self._values.clone()

    @property
    def height(self) -> int:
        return self._values.shape[0]

    @property
    def width(self) -> int:
        return self._values.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def signed(self) -> torch.Tensor:
        """Decode intensities to signed distances in [-1, 1] (float64)."""
        return self._values.to(torch.float64) / 255.0 * 2.0 - 1.0

    def to_numpy(self) -> np.ndarray:
        return self._values.numpy().copy()

    def to_rgba(self) -> np.ndarray:
        """
        Expand to an RGBA array with the intensity on every color channel.

        Returns:
            uint8 array of shape [height, width, 4], alpha fully opaque
        """
        gray = self._values.numpy()
        rgba = np.empty((self.height, self.width, 4), dtype=np.uint8)
        rgba[..., 0] = gray
        rgba[..., 1] = gray
        rgba[..., 2] = gray
        rgba[..., 3] = 255
        return rgba

    @classmethod
    def from_rgba(cls, rgba: np.ndarray) -> "SignedDistanceImage":
        """Read a field back from an RGB(A) or grayscale array (red channel)."""
        rgba = np.asarray(rgba)
        if rgba.ndim == 3:
            return cls(rgba[..., 0].astype(np.uint8))
        return cls(rgba.astype(np.uint8))

    def __getitem__(self, index: Tuple[int, int]) -> int:
        y, x = index
        return int(self._values[y, x])

    def __eq__(self, other) -> bool:
        if not isinstance(other, SignedDistanceImage):
            return NotImplemented
        return self.shape == other.shape and torch.equal(self._values, other._values)

    def __repr__(self) -> str:
        return f"SignedDistanceImage(width={self.width}, height={self.height})"
