"""
Owner-vector grids for the sequential distance transform.

This module contains the vector type used during propagation and the grid
that stores one vector per pixel. Vectors point from a cell to the nearest
seed ("owner") discovered so far and are compared by squared length only.
"""

from typing import NamedTuple, Tuple, List

import numpy as np


# Default component of the FAR sentinel. Vectors derived from FAR keep both
# components at least K - max(width, height), so K >= 2 * max(width, height)
# keeps them longer than any in-grid distance.
FAR_COMPONENT = 9999


class OwnerVector(NamedTuple):
    """Displacement (dx, dy) from a cell to its nearest known seed."""
    dx: int
    dy: int

    @property
    def dist_sq(self) -> int:
        return self.dx * self.dx + self.dy * self.dy

    def shifted(self, offset_x: int, offset_y: int) -> "OwnerVector":
        """Re-express a neighbour's vector relative to the cell at -offset."""
        return OwnerVector(self.dx + offset_x, self.dy + offset_y)

    @classmethod
    def inside(cls) -> "OwnerVector":
        """The cell is itself a seed."""
        return cls(0, 0)

    @classmethod
    def far(cls, component: int = FAR_COMPONENT) -> "OwnerVector":
        """No seed has been discovered yet."""
        return cls(component, component)


INSIDE = OwnerVector.inside()
FAR = OwnerVector.far()


class OwnerGrid:
    """
    A 2D grid of owner vectors.

    Vectors are stored in a [height, width, 2] int64 array holding (dx, dy)
    per cell. Cells are addressed as grid[y, x]; the width and height are
    fixed for the lifetime of the grid.
    """

    def __init__(self, width: int, height: int, far_component: int = FAR_COMPONENT):
        """
        Initialize a grid with every cell set to the FAR sentinel.

        Args:
            width: Width of the grid
            height: Height of the grid
            far_component: Component K of the FAR sentinel (K, K)
        """
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        if far_component < 2 * max(width, height):
            raise ValueError(
                f"far_component {far_component} is too small for a {width}x{height} grid, "
                f"use at least {2 * max(width, height)}"
            )
        self.width = width
        self.height = height
        self.far = OwnerVector.far(far_component)
        self.vectors = np.full((height, width, 2), far_component, dtype=np.int64)

    @classmethod
    def from_seeds(cls, seeds: np.ndarray, far_component: int = FAR_COMPONENT) -> "OwnerGrid":
        """
        Build a grid from a boolean seed mask.

        Seed cells get INSIDE, every other cell gets FAR.

        Args:
            seeds: Boolean array of shape [height, width]

        Returns:
            New OwnerGrid
        """
        seeds = np.asarray(seeds, dtype=bool)
        if seeds.ndim != 2:
            raise ValueError(f"Expected a 2D seed mask, got shape {seeds.shape}")
        height, width = seeds.shape
        grid = cls(width, height, far_component)
        grid.vectors[seeds] = 0
        return grid

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def __getitem__(self, index: Tuple[int, int]) -> OwnerVector:
        y, x = index
        dx, dy = self.vectors[y, x]
        return OwnerVector(int(dx), int(dy))

    def __setitem__(self, index: Tuple[int, int], vector: Tuple[int, int]):
        y, x = index
        self.vectors[y, x] = vector

    def dist_sq(self) -> np.ndarray:
        """Squared length of every vector, shape [height, width]."""
        return (self.vectors * self.vectors).sum(axis=-1)

    def is_far(self) -> np.ndarray:
        """Mask of cells still holding exactly the FAR sentinel."""
        return np.all(self.vectors == np.array(self.far, dtype=np.int64), axis=-1)

    def to_rows(self) -> "OwnerRows":
        """Python-list copy of the grid for cell-by-cell sweeps."""
        rows = [
            [OwnerVector(int(dx), int(dy)) for dx, dy in row]
            for row in self.vectors.tolist()
        ]
        return OwnerRows(rows, self.width, self.height, self.far)

    def load_rows(self, rows: "OwnerRows"):
        """Write back vectors produced by to_rows()."""
        if (rows.width, rows.height) != (self.width, self.height):
            raise ValueError(
                f"Rows of size {rows.width}x{rows.height} do not fit a "
                f"{self.width}x{self.height} grid"
            )
        if self.width == 0 or self.height == 0:
            return
        self.vectors[...] = np.asarray(rows.rows, dtype=np.int64)

    def copy(self) -> "OwnerGrid":
        other = OwnerGrid(self.width, self.height, self.far.dx)
        other.vectors = self.vectors.copy()
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, OwnerGrid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.vectors, other.vectors)

    def __repr__(self) -> str:
        return f"OwnerGrid(width={self.width}, height={self.height})"


class OwnerRows:
    """
    Nested-list view of an OwnerGrid used by the sequential sweeps.

    Per-cell reads and writes on Python lists avoid numpy scalar overhead in
    the inner loop. Cells are addressed as rows[y, x]; get() returns the FAR
    sentinel outside the grid.
    """

    def __init__(self, rows: List[List[OwnerVector]], width: int, height: int, far: OwnerVector):
        self.rows = rows
        self.width = width
        self.height = height
        self.far = far

    def __getitem__(self, index: Tuple[int, int]) -> OwnerVector:
        y, x = index
        return self.rows[y][x]

    def __setitem__(self, index: Tuple[int, int], vector: OwnerVector):
        y, x = index
        self.rows[y][x] = vector

    def get(self, x: int, y: int) -> OwnerVector:
        """Vector at (x, y), or the FAR sentinel outside the grid."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.rows[y][x]
        return self.far
