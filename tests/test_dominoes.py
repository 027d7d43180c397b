from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from katas.dominoes import can_dominoes_make_row
from katas.errors import InvalidInput


@pytest.mark.parametrize(
    "dominoes,expected",
    [
        ([[0, 1], [1, 1]], True),
        ([[1, 1], [2, 2], [1, 5], [5, 6], [6, 3]], False),
        ([[1, 3], [2, 3], [1, 4], [2, 4], [1, 5], [2, 5]], True),
        ([[0, 0], [0, 1], [1, 1], [0, 2], [1, 2], [2, 2], [0, 3], [1, 3], [2, 3], [3, 3]], False),
        ([[1, 1], [2, 2], [1, 2]], True),
        ([[1, 1], [0, 3], [1, 4]], False),
    ],
)
def test_documented_examples(dominoes, expected):
    assert can_dominoes_make_row(dominoes) is expected


def test_trivial_sets():
    assert can_dominoes_make_row([]) is True
    assert can_dominoes_make_row([(4, 6)]) is True
    assert can_dominoes_make_row([(3, 3)]) is True


def test_disconnected_doubles():
    assert can_dominoes_make_row([(1, 1), (2, 2)]) is False


def test_repeated_tiles_and_cycle():
    assert can_dominoes_make_row([(1, 2), (1, 2)]) is True
    assert can_dominoes_make_row([(1, 2), (2, 3), (3, 1)]) is True


def test_orientation_does_not_matter():
    assert can_dominoes_make_row([(2, 1), (3, 2)]) is True


@pytest.mark.parametrize("bad", [[(1, 2, 3)], [(1, -1)], [(1, "2")], ["12"], [5]])
def test_invalid_tiles(bad):
    with pytest.raises(InvalidInput):
        can_dominoes_make_row(bad)
