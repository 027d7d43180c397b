"""katas.constants
==================

Fixed tables and tunables shared by the routines. Keeping them in one place
avoids import cycles and makes the few knobs the package exposes easy to find.
"""

from __future__ import annotations

# Compass rose
COMPASS_POINT_COUNT = 32
COMPASS_STEP = 360.0 / COMPASS_POINT_COUNT
CARDINALS = ("N", "E", "S", "W")
# Indexed by quadrant: 0 = between N and E, 1 = E/S, 2 = S/W, 3 = W/N.
INTERCARDINALS = ("NE", "SE", "SW", "NW")

# Upper bound on rewriting passes performed by the brace expander. Every pass
# removes one group from each candidate, so a well-formed pattern needs at most
# as many passes as it has groups.
MAX_EXPANSION_PASSES = 1000

__all__ = [
    "COMPASS_POINT_COUNT",
    "COMPASS_STEP",
    "CARDINALS",
    "INTERCARDINALS",
    "MAX_EXPANSION_PASSES",
]
