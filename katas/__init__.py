"""Public package interface for katas."""

from .braces import expand_braces
from .compass import create_compass_points
from .dominoes import can_dominoes_make_row
from .errors import InvalidInput, InvalidPattern
from .ranges import extract_ranges
from .types import CompassPoint
from .zigzag import get_zigzag_matrix

__all__ = [
    "create_compass_points",
    "expand_braces",
    "get_zigzag_matrix",
    "can_dominoes_make_row",
    "extract_ranges",
    "CompassPoint",
    "InvalidInput",
    "InvalidPattern",
]
