"""katas.zigzag
===============

Zigzag index tables as used by the JPEG entropy coder: coefficients of an
``n`` x ``n`` block are numbered along alternating anti-diagonals so that
consecutive numbers always sit in neighbouring cells.

Example for ``n = 4``::

    [[ 0,  1,  5,  6],
     [ 2,  4,  7, 12],
     [ 3,  8, 11, 13],
     [ 9, 10, 14, 15]]
"""

from __future__ import annotations

import logging
from functools import wraps

import numpy as np

from .errors import InvalidInput
from .grid_utils import dims, zigzag_path
from .types import Grid

logger = logging.getLogger(__name__)


def enforce_permutation(fn):
    """Decorator checking that a returned square grid numbers every cell once.

    Parameters
    ----------
    fn:
        Callable producing an ``n`` x ``n`` index table.

    Returns
    -------
    callable
        Wrapped function raising :class:`AssertionError` when the table is not
        a list-of-lists permutation of ``0 .. n*n - 1``.
    """

    @wraps(fn)
    def wrapper(*args, **kwargs):
        out = fn(*args, **kwargs)
        if not isinstance(out, list):
            raise AssertionError(f"{fn.__name__}: expected list grid, got {type(out)!r}")
        height, width = dims(out)
        if height != width or any(len(row) != width for row in out):
            raise AssertionError(f"{fn.__name__}: grid is not square")
        values = np.sort(np.asarray(out).ravel())
        if not np.array_equal(values, np.arange(height * width)):
            raise AssertionError(f"{fn.__name__}: cells are not a permutation of 0..{height * width - 1}")
        return out

    return wrapper


@enforce_permutation
def get_zigzag_matrix(n: int) -> Grid:
    """Return the ``n`` x ``n`` zigzag index table.

    Parameters
    ----------
    n:
        Matrix dimension, an ``int`` of at least 1.

    Returns
    -------
    Grid
        Nested lists where cell ``(row, col)`` holds its position in the
        zigzag scan. Diagonal 0 is the top-left cell, diagonal 1 runs from
        ``(0, 1)`` down to ``(1, 0)``, diagonal 2 climbs back up, and so on.

    Raises
    ------
    InvalidInput
        If ``n`` is not an integer or is smaller than 1.
    """

    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidInput(f"get_zigzag_matrix: dimension must be an int, got {type(n).__name__}")
    if n < 1:
        raise InvalidInput(f"get_zigzag_matrix: dimension must be >= 1, got {n}")

    n = int(n)
    out = np.zeros((n, n), dtype=int)
    for index, (row, col) in enumerate(zigzag_path(n)):
        out[row, col] = index
    logger.debug("built %dx%d zigzag matrix", n, n, extra={"operation": "zigzag_matrix", "size": n})
    return out.tolist()


__all__ = ["enforce_permutation", "get_zigzag_matrix"]
