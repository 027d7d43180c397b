"""katas.errors
===============

Exception kinds raised when a caller breaks a documented precondition.
"""

from __future__ import annotations


class InvalidInput(ValueError):
    """Input outside the documented domain of an operation."""


class InvalidPattern(InvalidInput):
    """Brace pattern that is unbalanced or does not settle within the pass bound."""


__all__ = ["InvalidInput", "InvalidPattern"]
