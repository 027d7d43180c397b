"""katas.dominoes
=================

Decide whether a set of domino tiles can be laid out in a single row where
touching ends show the same number. Any tile may be flipped, so ``[i, j]`` is
interchangeable with ``[j, i]``.

Pip values are vertices and tiles are edges of a multigraph (doubles are
self-loops). A row uses every tile exactly once, which is an Eulerian path:
it exists when all edges share one connected component and zero or two
vertices have odd degree.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict, deque
from typing import Dict, List, Sequence, Set, Tuple

from .errors import InvalidInput
from .types import Tile

logger = logging.getLogger(__name__)


def _normalise_tile(tile: Tile) -> Tuple[int, int]:
    if isinstance(tile, (str, bytes)) or not isinstance(tile, Sequence) or len(tile) != 2:
        raise InvalidInput(f"can_dominoes_make_row: tile must be a pair, got {tile!r}")
    left, right = tile
    for pips in (left, right):
        if isinstance(pips, bool) or not isinstance(pips, int) or pips < 0:
            raise InvalidInput(f"can_dominoes_make_row: pip values must be non-negative ints, got {tile!r}")
    return left, right


def _edges_connected(adjacency: Dict[int, Set[int]], start: int) -> bool:
    """Breadth-first search from ``start``; true when every vertex is reached."""

    seen = {start}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour in adjacency[vertex]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return len(seen) == len(adjacency)


def can_dominoes_make_row(dominoes: Sequence[Tile]) -> bool:
    """Return ``True`` if all ``dominoes`` fit in one row.

    Parameters
    ----------
    dominoes:
        Tiles as ``(x, y)`` pairs of non-negative ints. The same pair may
        appear more than once.

    Examples
    --------
    >>> can_dominoes_make_row([[0, 1], [1, 1]])
    True
    >>> can_dominoes_make_row([[1, 1], [2, 2], [1, 5], [5, 6], [6, 3]])
    False
    """

    tiles: List[Tuple[int, int]] = [_normalise_tile(tile) for tile in dominoes]
    if len(tiles) <= 1:
        return True

    degree: Counter = Counter()
    adjacency: Dict[int, Set[int]] = defaultdict(set)
    for left, right in tiles:
        degree[left] += 1
        degree[right] += 1
        adjacency[left].add(right)
        adjacency[right].add(left)

    odd = sum(1 for count in degree.values() if count % 2)
    # Only vertices touched by a tile are in ``adjacency``, so isolated pip
    # values never break connectivity.
    connected = _edges_connected(adjacency, tiles[0][0])
    logger.debug(
        "%d tiles, %d odd vertices, connected=%s",
        len(tiles),
        odd,
        connected,
        extra={"operation": "dominoes_make_row", "size": len(tiles)},
    )
    return connected and odd in (0, 2)


__all__ = ["can_dominoes_make_row"]
