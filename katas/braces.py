"""katas.braces
===============

Bash-style brace expansion. Balanced pairs of braces holding comma-separated
alternatives stand for every choice at that position::

    '~/{Downloads,Pictures}/*.{jpg,gif,png}'  -> '~/Downloads/*.jpg', ... (6 strings)
    'thumbnail.{png,jp{e,}g}'                 -> 'thumbnail.png', 'thumbnail.jpeg',
                                                 'thumbnail.jpg'

Groups are rewritten innermost first, so an outer group only becomes eligible
once everything nested inside it has been flattened into plain alternatives.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, List

from .constants import MAX_EXPANSION_PASSES
from .errors import InvalidInput, InvalidPattern

logger = logging.getLogger(__name__)

# ``{...}`` with at least one character and no nested braces. ``{}`` stays literal.
INNERMOST_GROUP = re.compile(r"\{([^{}]+)\}")


def _check_balanced(pattern: str) -> None:
    depth = 0
    for position, char in enumerate(pattern):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth < 0:
                raise InvalidPattern(f"expand_braces: unmatched '}}' at offset {position} in {pattern!r}")
    if depth:
        raise InvalidPattern(f"expand_braces: {depth} unclosed '{{' in {pattern!r}")


def _unique(items: Iterable[str]) -> List[str]:
    """Drop repeats while keeping the first occurrence of each string."""

    seen = set()
    out = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def _expand_first_group(candidate: str) -> List[str]:
    """Rewrite the first innermost group of ``candidate`` into its alternatives."""

    match = INNERMOST_GROUP.search(candidate)
    if match is None:
        return [candidate]
    head, tail = candidate[: match.start()], candidate[match.end():]
    return [head + alternative + tail for alternative in match.group(1).split(",")]


def expand_braces(pattern: str, max_passes: int = MAX_EXPANSION_PASSES) -> Iterator[str]:
    """Yield every expansion of ``pattern``.

    Parameters
    ----------
    pattern:
        Text with balanced ``{a,b,...}`` groups, possibly nested. Empty
        alternatives such as ``{d,}`` substitute the empty string.
    max_passes:
        Bound on rewriting passes. A pattern with ``k`` groups settles after
        at most ``k`` passes.

    Yields
    ------
    str
        Each distinct expansion once. Order follows the alternatives from
        left to right but callers should not depend on it.

    Raises
    ------
    InvalidInput
        If ``pattern`` is not a string.
    InvalidPattern
        If the braces are unbalanced or expansion needs more than
        ``max_passes`` passes. Both are raised before anything is yielded.

    Notes
    -----
    The function is a generator: nothing is computed until the first value is
    requested and every call starts again from ``pattern``.
    """

    if not isinstance(pattern, str):
        raise InvalidInput(f"expand_braces: pattern must be str, got {type(pattern).__name__}")
    _check_balanced(pattern)

    candidates = [pattern]
    passes = 0
    while any(INNERMOST_GROUP.search(candidate) for candidate in candidates):
        passes += 1
        if passes > max_passes:
            raise InvalidPattern(f"expand_braces: {pattern!r} did not settle after {max_passes} passes")
        candidates = _unique(
            expansion for candidate in candidates for expansion in _expand_first_group(candidate)
        )
        logger.debug("pass %d: %d candidates", passes, len(candidates), extra={"operation": "expand_braces"})

    logger.debug(
        "expanded %r into %d strings",
        pattern,
        len(candidates),
        extra={"operation": "expand_braces", "size": len(candidates)},
    )
    yield from candidates


__all__ = ["INNERMOST_GROUP", "expand_braces"]
