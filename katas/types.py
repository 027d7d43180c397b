"""katas.types
==============

Type aliases and the small value objects returned by the routines. This module
is definitions-only so importing it never triggers runtime side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

Grid = List[List[int]]
Coord = Tuple[int, int]

# Dominoes arrive as ``(x, y)`` tuples or ``[x, y]`` lists straight from JSON.
Tile = Union[Tuple[int, int], Sequence[int]]


@dataclass(frozen=True)
class CompassPoint:
    """One of the 32 points of the compass rose.

    Parameters
    ----------
    abbreviation:
        Short name such as ``"N"``, ``"NbE"`` or ``"NNE"``.
    azimuth:
        Bearing in degrees clockwise from North, in ``[0, 360)``.
    """

    abbreviation: str
    azimuth: float


__all__ = ["Grid", "Coord", "Tile", "CompassPoint"]
