"""
Tests for sorted_by_path / sort_by_path.

What we check:
- Output matches the oracle (builtin sorted with key=, reverse=)
- Sortedness under the path, via the soft assert_sorted helper
- Permutation preservation and no input mutation for the copying variant
- Idempotence and stability
- Exceptions from path / predicate propagate, in-place input left intact
"""

from __future__ import annotations

import array
import operator
from collections import deque
from dataclasses import dataclass
from operator import attrgetter, itemgetter
from typing import List, Tuple

import pytest
from hypothesis import given, settings, strategies as st

from pathable import sort_by_path, sorted_by_path
from pathable.testing import assert_sorted
from pathable.validate import (
    assert_no_mutation,
    equals_oracle,
    is_permutation,
    is_sorted,
)


@dataclass
class Item:
    name: str


def _unsorted_items() -> List[Item]:
    return [Item("ABCD"), Item("BCDE"), Item("DEFG"), Item("CDEF")]


# ------------------------- sorted_by_path ------------------------- #

def test_sorted_by_path() -> None:
    out = sorted_by_path(_unsorted_items(), attrgetter("name"))
    assert [i.name for i in out] == ["ABCD", "BCDE", "CDEF", "DEFG"]
    assert_sorted(out, path=attrgetter("name"))


def test_sorted_by_path_using_predicate() -> None:
    out = sorted_by_path(_unsorted_items(), attrgetter("name"), by=operator.gt)
    assert [i.name for i in out] == ["DEFG", "CDEF", "BCDE", "ABCD"]
    assert_sorted(out, path=attrgetter("name"), by=operator.gt)


def test_sorted_by_path_accepts_any_iterable() -> None:
    out = sorted_by_path((Item(n) for n in "cab"), lambda i: i.name)
    assert [i.name for i in out] == ["a", "b", "c"]


def test_sorted_by_path_does_not_mutate_input() -> None:
    xs = _unsorted_items()
    before = list(xs)
    sorted_by_path(xs, attrgetter("name"))
    assert_no_mutation(before, xs)


@pytest.mark.parametrize("xs", [[], [Item("only")]])
def test_sorted_by_path_trivial_inputs(xs: List[Item]) -> None:
    assert sorted_by_path(xs, attrgetter("name")) == xs
    assert sorted_by_path(xs, attrgetter("name"), by=operator.gt) == xs


def test_sorted_by_path_is_stable() -> None:
    xs = [("b", 0), ("a", 1), ("b", 2), ("a", 3)]
    assert sorted_by_path(xs, itemgetter(0)) == [("a", 1), ("a", 3), ("b", 0), ("b", 2)]
    assert sorted_by_path(xs, itemgetter(0), by=operator.gt) == [
        ("b", 0), ("b", 2), ("a", 1), ("a", 3),
    ]


def test_sorted_by_path_evaluates_path_once_per_element() -> None:
    calls: List[str] = []

    def path(item: Item) -> str:
        calls.append(item.name)
        return item.name

    sorted_by_path(_unsorted_items(), path, by=operator.lt)
    assert sorted(calls) == ["ABCD", "BCDE", "CDEF", "DEFG"]


def test_sorted_by_path_propagates_path_errors() -> None:
    def path(item: Item) -> str:
        if item.name == "DEFG":
            raise KeyError(item.name)
        return item.name

    with pytest.raises(KeyError, match="DEFG"):
        sorted_by_path(_unsorted_items(), path)


def test_sorted_by_path_propagates_predicate_errors() -> None:
    class Boom(Exception):
        pass

    def by(lhs: str, rhs: str) -> bool:
        raise Boom()

    with pytest.raises(Boom):
        sorted_by_path(_unsorted_items(), attrgetter("name"), by=by)


# ------------------------- sort_by_path ------------------------- #

def test_sort_by_path() -> None:
    xs = _unsorted_items()
    assert sort_by_path(xs, attrgetter("name")) is None
    assert_sorted(xs, path=attrgetter("name"))


def test_sort_by_path_using_predicate() -> None:
    xs = _unsorted_items()
    sort_by_path(xs, attrgetter("name"), by=operator.gt)
    assert_sorted(xs, path=attrgetter("name"), by=operator.gt)


def test_sort_by_path_keeps_list_identity() -> None:
    xs = _unsorted_items()
    alias = xs
    sort_by_path(xs, attrgetter("name"))
    assert alias is xs
    assert [i.name for i in alias] == ["ABCD", "BCDE", "CDEF", "DEFG"]


def test_sort_by_path_leaves_input_intact_on_error() -> None:
    xs = _unsorted_items()
    before = list(xs)

    def by(lhs: str, rhs: str) -> bool:
        if "CDEF" in (lhs, rhs):
            raise RuntimeError("bad pair")
        return lhs < rhs

    with pytest.raises(RuntimeError):
        sort_by_path(xs, attrgetter("name"), by=by)
    assert xs == before


@pytest.mark.parametrize(
    "make",
    [list, deque, lambda values: array.array("i", values)],
    ids=["list", "deque", "array"],
)
def test_sort_by_path_on_mutable_sequences(make) -> None:
    xs = make([3, 1, 2])
    sort_by_path(xs, operator.neg)
    assert list(xs) == [3, 2, 1]
    sort_by_path(xs, lambda x: x, by=operator.lt)
    assert list(xs) == [1, 2, 3]


def test_sort_by_path_leaves_deque_intact_on_error() -> None:
    xs = deque([3, 1, 2])

    def path(x: int) -> int:
        if x == 2:
            raise LookupError(x)
        return x

    with pytest.raises(LookupError):
        sort_by_path(xs, path)
    assert list(xs) == [3, 1, 2]


# ------------------------- property-based tests ------------------------- #

pairs = st.lists(st.tuples(st.integers(-50, 50), st.integers()), max_size=200)


@settings(deadline=None, max_examples=100)
@given(pairs)
def test_property_matches_oracle(xs: List[Tuple[int, int]]) -> None:
    key = itemgetter(0)
    out = sorted_by_path(xs, key)
    assert equals_oracle(xs, out, key)
    assert is_permutation(xs, out)
    assert is_sorted(out, path=key)
    assert sorted_by_path(out, key) == out


@settings(deadline=None, max_examples=100)
@given(pairs)
def test_property_predicate_matches_reverse_oracle(xs: List[Tuple[int, int]]) -> None:
    key = itemgetter(0)
    out = sorted_by_path(xs, key, by=operator.gt)
    assert equals_oracle(xs, out, key, reverse=True)
    assert is_sorted(out, path=key, by=operator.ge)


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(), unique=True, max_size=100))
def test_property_strict_predicate_holds_for_distinct_keys(xs: List[int]) -> None:
    out = sorted_by_path(xs, operator.neg, by=operator.lt)
    assert is_sorted(out, path=operator.neg, by=operator.lt)
    assert out == sorted(xs, reverse=True)


@settings(deadline=None, max_examples=60)
@given(pairs)
def test_property_in_place_matches_copy(xs: List[Tuple[int, int]]) -> None:
    key = itemgetter(0)
    expected = sorted_by_path(xs, key, by=operator.gt)
    sort_by_path(xs, key, by=operator.gt)
    assert xs == expected
