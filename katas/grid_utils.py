"""katas.grid_utils
===================

Helpers for square index tables: construction, shape checks, and the
anti-diagonal walk behind the zigzag scan order.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .types import Coord, Grid


def dims(grid: Grid) -> Tuple[int, int]:
    """Return ``(height, width)`` of ``grid``; empty grids give ``(0, 0)``."""

    if not grid or not isinstance(grid, list):
        return 0, 0
    if not grid[0]:
        return len(grid), 0
    return len(grid), len(grid[0])


def make_grid(height: int, width: int, fill: int = 0) -> Grid:
    """Construct a ``height`` x ``width`` grid filled with ``fill``."""

    if height <= 0 or width <= 0:
        return []
    return [[fill for _ in range(width)] for _ in range(height)]


def is_square(grid: Grid) -> bool:
    """Return ``True`` when every row of ``grid`` is as long as the grid is tall."""

    height, _ = dims(grid)
    return height > 0 and all(isinstance(row, list) and len(row) == height for row in grid)


def zigzag_path(n: int) -> Iterator[Coord]:
    """Yield the cells of an ``n`` x ``n`` grid in JPEG zigzag order.

    The walk visits the ``2n - 1`` anti-diagonals (constant ``row + col``) in
    increasing order. It runs in two phases:

    * growing: while the diagonal index is below ``n - 1`` the diagonal starts
      on row 0 and gains one cell per step;
    * shrinking: from the main anti-diagonal on, the bottom edge clips the
      diagonal, so its first row moves down by one after every diagonal.

    Even diagonals are walked bottom-to-top and odd ones top-to-bottom, which
    keeps consecutive cells adjacent.
    """

    first_row = 0
    for diagonal in range(2 * n - 1):
        last_row = min(diagonal, n - 1)
        cells: List[Coord] = [(row, diagonal - row) for row in range(first_row, last_row + 1)]
        if diagonal % 2 == 0:
            cells.reverse()
        yield from cells
        if diagonal >= n - 1:
            first_row += 1


def flatten_zigzag(grid: Grid) -> List[int]:
    """Read a square ``grid`` back in zigzag order."""

    height, _ = dims(grid)
    return [grid[row][col] for row, col in zigzag_path(height)]


__all__ = ["dims", "make_grid", "is_square", "zigzag_path", "flatten_zigzag"]
