"""katas.compass
================

The 32-point compass rose. Names follow the traditional hierarchy:

* cardinal points every 90 degrees (``N``, ``E``, ``S``, ``W``);
* intercardinal points halfway between them (``NE``, ``SE``, ...);
* secondary intercardinals joining a cardinal and its neighbouring
  intercardinal (``NNE``, ``ENE``, ...);
* "by" points one step away from a cardinal or intercardinal towards a
  cardinal (``NbE`` reads "North by East", ``NEbN`` "Northeast by North").
"""

from __future__ import annotations

from typing import List

from .constants import CARDINALS, COMPASS_POINT_COUNT, COMPASS_STEP, INTERCARDINALS
from .types import CompassPoint

# Points between two neighbouring cardinals.
_QUADRANT = COMPASS_POINT_COUNT // 4


def _cardinal(index: int) -> str:
    return CARDINALS[(index // _QUADRANT) % 4]


def _intercardinal(index: int) -> str:
    return INTERCARDINALS[(index // _QUADRANT) % 4]


def _principal(index: int) -> str:
    """Name of the cardinal or intercardinal point at ``index``."""

    if index % _QUADRANT == 0:
        return _cardinal(index)
    return _intercardinal(index)


def compass_abbreviation(index: int) -> str:
    """Return the abbreviation of point ``index`` (0 = North, clockwise)."""

    index %= COMPASS_POINT_COUNT
    if index % _QUADRANT == 0:
        return _cardinal(index)
    if index % 4 == 0:
        return _intercardinal(index)
    if index % 2 == 0:
        nearest_cardinal = _cardinal(index + _QUADRANT // 2)
        return nearest_cardinal + _intercardinal(index)

    # "by" point: step back to the nearest principal point, then name the
    # cardinal lying further along the same direction.
    base = index - 1 if (index - 1) % 4 == 0 else index + 1
    step = index - base
    reach = _QUADRANT if base % _QUADRANT == 0 else _QUADRANT // 2
    return _principal(base) + "b" + _cardinal(base + step * reach)


def create_compass_points() -> List[CompassPoint]:
    """Return the 32 compass points ordered by azimuth.

    The first entry is ``CompassPoint("N", 0.0)``, then ``NbE`` at 11.25,
    ``NNE`` at 22.5 and so on up to ``NbW`` at 348.75.
    """

    return [
        CompassPoint(abbreviation=compass_abbreviation(index), azimuth=index * COMPASS_STEP)
        for index in range(COMPASS_POINT_COUNT)
    ]


__all__ = ["compass_abbreviation", "create_compass_points"]
