"""
Sorting by a value derived from each element (a "path").

A path is any callable `element -> value`: a lambda, `operator.attrgetter`,
`operator.itemgetter`, or a plain function. The elements are ordered by
the derived values, either in their natural ascending order or by a
caller-supplied predicate `by(a, b) -> bool` meaning "a sorts before b".

Public API (stable):
    sorted_by_path(xs: Iterable[T], path, by=None) -> list[T]
    sort_by_path(xs: MutableSequence[T], path, by=None) -> None

Conventions:
- Both functions are stable: elements whose derived values are not ordered
  relative to each other keep their input order.
- `path` is evaluated exactly once per element.
- Exceptions raised by `path` or `by` propagate unchanged. `sort_by_path`
  leaves the caller's sequence untouched when that happens.
- `path` should be pure; this is not checked.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")

__all__ = ["sorted_by_path", "sort_by_path"]


class _PredicateKey:
    """Sort key whose `<` is the caller's ordering predicate."""

    __slots__ = ("value", "by")

    def __init__(self, value: Any, by: Callable[[Any, Any], bool]) -> None:
        self.value = value
        self.by = by

    def __lt__(self, other: "_PredicateKey") -> bool:
        # The builtin sort only ever asks `<`, so one predicate call per comparison.
        return bool(self.by(self.value, other.value))


def _sort_key(path: Callable[[Any], Any], by: Optional[Callable[[Any, Any], bool]]) -> Callable[[Any], Any]:
    if by is None:
        return path
    return lambda element: _PredicateKey(path(element), by)


def sorted_by_path(
    xs: Iterable[T],
    path: Callable[[T], Any],
    by: Optional[Callable[[Any, Any], bool]] = None,
) -> List[T]:
    """
    Return the elements of `xs` as a new list sorted by `path(element)`.

    Parameters
    ----------
    xs : Iterable[T]
        Elements to sort. Not mutated.
    path : Callable[[T], V]
        Derives the sort value from an element.
    by : Callable[[V, V], bool] | None
        Ordering predicate over derived values; returns True if its first
        argument should be ordered before its second. Defaults to the
        natural ascending order of the derived values.

    Returns
    -------
    list[T]
        A new list with the same elements as `xs`.

    Examples
    --------
    >>> people = [("Cait", 35), ("Alice", 30), ("Beatrice", 25)]
    >>> sorted_by_path(people, lambda p: p[1])
    [('Beatrice', 25), ('Alice', 30), ('Cait', 35)]
    >>> import operator
    >>> sorted_by_path(people, lambda p: p[0], by=operator.gt)
    [('Cait', 35), ('Beatrice', 25), ('Alice', 30)]
    """
    return sorted(xs, key=_sort_key(path, by))


def sort_by_path(
    xs: MutableSequence[T],
    path: Callable[[T], Any],
    by: Optional[Callable[[Any, Any], bool]] = None,
) -> None:
    """
    Sort `xs` in place by `path(element)`, optionally using predicate `by`.

    Same ordering rules as `sorted_by_path`. The sorted order is computed
    on a copy and assigned back, so a failing `path` or `by` leaves `xs`
    as it was.

    Only integer `__setitem__` is used, so `collections.deque` and
    `array.array` work as well as lists.
    """
    for i, x in enumerate(sorted_by_path(xs, path, by)):
        xs[i] = x
