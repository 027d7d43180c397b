"""katas.ranges
===============

Compress an ordered list of integers into range notation. Runs of three or
more consecutive values are written ``start-end``; shorter runs are listed
value by value::

    [0, 1, 2, 5, 7, 8, 9]  -> '0-2,5,7-9'
    [1, 2, 4, 5]           -> '1,2,4,5'
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import InvalidInput

logger = logging.getLogger(__name__)

# Shortest run written with a dash.
MIN_DASHED_RUN = 3


def _format_run(start: int, end: int) -> List[str]:
    if end - start + 1 >= MIN_DASHED_RUN:
        return [f"{start}-{end}"]
    return [str(value) for value in range(start, end + 1)]


def extract_ranges(nums: Sequence[int]) -> str:
    """Return the comma separated range expression for ``nums``.

    Parameters
    ----------
    nums:
        Strictly increasing integers. Negative values are printed as-is, so
        ``[-3, -2, -1]`` becomes ``'-3--1'``.

    Raises
    ------
    InvalidInput
        If a value is not an int or the sequence is not strictly increasing.
    """

    values = list(nums)
    if not values:
        return ""
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"extract_ranges: expected ints, got {value!r}")

    parts: List[str] = []
    start = previous = values[0]
    for value in values[1:]:
        if value <= previous:
            raise InvalidInput(f"extract_ranges: values must be strictly increasing, {value} follows {previous}")
        if value != previous + 1:
            parts.extend(_format_run(start, previous))
            start = value
        previous = value
    parts.extend(_format_run(start, previous))

    logger.debug("%d values in %d parts", len(values), len(parts), extra={"operation": "extract_ranges", "size": len(values)})
    return ",".join(parts)


__all__ = ["MIN_DASHED_RUN", "extract_ranges"]
