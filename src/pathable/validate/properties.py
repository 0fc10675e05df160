"""
Property helpers for validating sorted sequences.

Pure boolean/structural checks, independent of any test framework. They
share the ordering rules of `pathable.testing.assert_sorted`:

- without `by`, a pair is in order when `lhs <= rhs` (equal neighbours pass);
- with `by`, a pair is in order when `by(lhs, rhs)` is truthy;
- with `path`, both sides go through `path` first.

Public API (stable):
    is_sorted(xs, path=None, by=None) -> bool
    violation_indices(xs, path=None, by=None) -> list[int]
    first_violation_index(xs, path=None, by=None) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict[Any, int]
    assert_no_mutation(before, after) -> None

Notes
-----
- Stability is *not* checked here because equal keys are indistinguishable
  by value alone. Tag elements with their input position (see
  `pathable.datasets.make_records`) and check that positions increase
  within each run of equal keys.
- The permutation helpers need hashable elements.
"""

from __future__ import annotations

from collections import Counter
from itertools import pairwise
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence

__all__ = [
    "is_sorted",
    "violation_indices",
    "first_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
]


def _in_order_flags(
    xs: Iterable[Any],
    path: Optional[Callable[[Any], Any]],
    by: Optional[Callable[[Any, Any], bool]],
) -> Iterator[bool]:
    values = xs if path is None else map(path, xs)
    for lhs, rhs in pairwise(values):
        yield bool(lhs <= rhs) if by is None else bool(by(lhs, rhs))


def is_sorted(
    xs: Iterable[Any],
    path: Optional[Callable[[Any], Any]] = None,
    by: Optional[Callable[[Any, Any], bool]] = None,
) -> bool:
    """Return True iff every adjacent pair of `xs` is in order."""
    return all(_in_order_flags(xs, path, by))


def violation_indices(
    xs: Iterable[Any],
    path: Optional[Callable[[Any], Any]] = None,
    by: Optional[Callable[[Any, Any], bool]] = None,
) -> List[int]:
    """Return every i where the pair (xs[i], xs[i+1]) is out of order."""
    return [i for i, ok in enumerate(_in_order_flags(xs, path, by)) if not ok]


def first_violation_index(
    xs: Iterable[Any],
    path: Optional[Callable[[Any], Any]] = None,
    by: Optional[Callable[[Any, Any], bool]] = None,
) -> int | None:
    """
    Return the first i where (xs[i], xs[i+1]) is out of order, or None.

    Useful for precise error messages:
        i = first_violation_index(out, path=key)
        assert i is None, f"not sorted at i={i}: {out[i]!r} then {out[i+1]!r}"
    """
    for i, ok in enumerate(_in_order_flags(xs, path, by)):
        if not ok:
            return i
    return None


def is_permutation(a: Iterable[Any], b: Iterable[Any]) -> bool:
    """
    Return True iff `a` and `b` contain exactly the same multiset of values.
    """
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Iterable[Any], b: Iterable[Any]) -> Dict[Any, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    Positive values indicate extra occurrences in `a`, negative in `b`.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are exactly equal (element-wise), used to ensure
    a copying sort did not mutate its input.

    Raises AssertionError with a concise message if they differ.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")
