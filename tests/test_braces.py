from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from katas.braces import expand_braces
from katas.errors import InvalidInput, InvalidPattern


def test_plain_text_yields_itself():
    assert list(expand_braces("nothing to do")) == ["nothing to do"]


def test_two_groups_give_cartesian_product():
    result = list(expand_braces("~/{Downloads,Pictures}/*.{jpg,gif,png}"))
    assert len(result) == 6
    assert set(result) == {
        "~/Downloads/*.jpg",
        "~/Downloads/*.gif",
        "~/Downloads/*.png",
        "~/Pictures/*.jpg",
        "~/Pictures/*.gif",
        "~/Pictures/*.png",
    }


def test_nested_groups_and_empty_alternative():
    result = list(expand_braces("It{{em,alic}iz,erat}e{d,}, please."))
    assert len(result) == 6
    assert set(result) == {
        "Itemized, please.",
        "Itemize, please.",
        "Italicized, please.",
        "Italicize, please.",
        "Iterated, please.",
        "Iterate, please.",
    }


def test_nested_group_inside_alternative():
    assert set(expand_braces("thumbnail.{png,jp{e,}g}")) == {
        "thumbnail.png",
        "thumbnail.jpeg",
        "thumbnail.jpg",
    }


def test_repeated_alternatives_are_deduplicated():
    assert list(expand_braces("x{a,a}y")) == ["xay"]


def test_empty_group_is_literal():
    assert list(expand_braces("f{}")) == ["f{}"]


def test_each_call_starts_fresh():
    first = expand_braces("{a,b}")
    assert next(first) == "a"
    assert list(expand_braces("{a,b}")) == ["a", "b"]
    assert list(first) == ["b"]


@pytest.mark.parametrize("pattern", ["{a,b", "a,b}", "}{", "{{a}"])
def test_unbalanced_braces_rejected(pattern):
    with pytest.raises(InvalidPattern):
        list(expand_braces(pattern))


def test_pass_bound_enforced():
    with pytest.raises(InvalidPattern):
        list(expand_braces("{a,b}{c,d}{e,f}", max_passes=2))
    assert len(list(expand_braces("{a,b}{c,d}{e,f}", max_passes=3))) == 8


def test_non_string_rejected():
    with pytest.raises(InvalidInput):
        list(expand_braces(42))
