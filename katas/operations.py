"""katas.operations
===================

Central registry mapping operation names to callables, for harnesses that
pick a routine by name.
"""

from __future__ import annotations

from typing import Callable, Dict

from .braces import expand_braces
from .compass import create_compass_points
from .dominoes import can_dominoes_make_row
from .ranges import extract_ranges
from .zigzag import get_zigzag_matrix

FUNCTION_REGISTRY: Dict[str, Callable] = {
    "compass_points": create_compass_points,
    "expand_braces": expand_braces,
    "zigzag_matrix": get_zigzag_matrix,
    "dominoes_make_row": can_dominoes_make_row,
    "extract_ranges": extract_ranges,
}


def get_operation(name: str) -> Callable:
    """Lookup ``name`` in :data:`FUNCTION_REGISTRY` with a helpful error."""

    try:
        return FUNCTION_REGISTRY[name]
    except KeyError as exc:
        raise KeyError(f"Unknown operation {name!r}. Registry keys: {sorted(FUNCTION_REGISTRY)}") from exc


__all__ = ["FUNCTION_REGISTRY", "get_operation"]
