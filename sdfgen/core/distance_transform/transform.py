"""
Eight-point sequential Euclidean distance transform (8SSEDT).

Each cell of an OwnerGrid holds a vector to the nearest seed found so far.
Two sweeps propagate those vectors across the grid: a forward sweep from the
top-left corner and a backward sweep from the bottom-right corner. Each sweep
scans every row with a fixed list of already-visited neighbour offsets and
then completes the row in the opposite direction with the one offset the
main scan could not see yet.

The result is an approximation of the exact Euclidean transform: it is exact
for a single seed, and close to exact otherwise, in linear time.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from sdfgen.grid import OwnerGrid, OwnerRows, OwnerVector

logger = logging.getLogger(__name__)

Offset = Tuple[int, int]


@dataclass(frozen=True)
class SweepPass:
    """
    One directional sweep of the transform.

    Attributes:
        name: Label used in logs
        rows_descending: Visit rows bottom-to-top instead of top-to-bottom
        scan_descending: Visit columns right-to-left in the main scan
        scan_offsets: Neighbour offsets compared, in order, during the main scan
        completion_offset: Offset compared while completing the row in the
            opposite column order
    """
    name: str
    rows_descending: bool
    scan_descending: bool
    scan_offsets: Tuple[Offset, ...]
    completion_offset: Offset


FORWARD_PASS = SweepPass(
    name="forward",
    rows_descending=False,
    scan_descending=False,
    scan_offsets=((-1, 0), (0, -1), (-1, -1), (1, -1)),
    completion_offset=(1, 0),
)

BACKWARD_PASS = SweepPass(
    name="backward",
    rows_descending=True,
    scan_descending=True,
    scan_offsets=((1, 0), (0, 1), (-1, 1), (1, 1)),
    completion_offset=(-1, 0),
)

PASSES = (FORWARD_PASS, BACKWARD_PASS)


def compare(rows: OwnerRows, vector: OwnerVector, x: int, y: int, offset: Offset) -> OwnerVector:
    """
    Compare a cell's vector against the candidate through one neighbour.

    The neighbour at (x + ox, y + oy) is read (FAR when outside the grid),
    the offset is added to it, and the candidate replaces the current vector
    only if its squared length is strictly smaller.

    Args:
        rows: Grid vectors being swept
        vector: Current vector of the cell
        x, y: Cell coordinates
        offset: Neighbour offset (ox, oy)

    Returns:
        The winning vector
    """
    ox, oy = offset
    candidate = rows.get(x + ox, y + oy).shifted(ox, oy)
    if candidate.dist_sq < vector.dist_sq:
        return candidate
    return vector


def sweep(rows: OwnerRows, sweep_pass: SweepPass) -> None:
    """
    Run one directional sweep over the grid in place.

    Args:
        rows: Grid vectors being swept
        sweep_pass: Sweep order and neighbour offsets
    """
    width, height = rows.width, rows.height
    ascending_cols = range(width)
    descending_cols = range(width - 1, -1, -1)
    scan_cols = descending_cols if sweep_pass.scan_descending else ascending_cols
    completion_cols = ascending_cols if sweep_pass.scan_descending else descending_cols
    row_order = range(height - 1, -1, -1) if sweep_pass.rows_descending else range(height)

    for y in row_order:
        for x in scan_cols:
            p = rows[y, x]
            for offset in sweep_pass.scan_offsets:
                p = compare(rows, p, x, y, offset)
            rows[y, x] = p

        for x in completion_cols:
            rows[y, x] = compare(rows, rows[y, x], x, y, sweep_pass.completion_offset)


def distance_transform(grid: OwnerGrid) -> OwnerGrid:
    """
    Compute the 8SSEDT of a grid in place.

    Every cell ends with the shortest vector to an INSIDE seed that the
    eight-neighbour propagation can discover. Grids without any seed keep
    vectors in the FAR sentinel range.

    Args:
        grid: Grid seeded with INSIDE and FAR vectors

    Returns:
        The same grid, for chaining
    """
    if grid.width == 0 or grid.height == 0:
        return grid

    rows = grid.to_rows()
    for sweep_pass in PASSES:
        sweep(rows, sweep_pass)
        logger.debug(f"Finished {sweep_pass.name} sweep on {grid.width}x{grid.height} grid")
    grid.load_rows(rows)
    return grid
