"""
Oracle for derived-key sorting.

We use Python's built-in `sorted(key=...)` as the ground truth:
- Stable, including with `reverse=True` (ties keep input order)
- Evaluates the key once per element
- Independent of the predicate adapter used by `sorted_by_path`

Public API (stable):
    oracle_sorted_by_path(xs, path, reverse=False) -> list
    equals_oracle(xs, out, path, reverse=False) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- `sorted_by_path(xs, path)` must match `oracle_sorted_by_path(xs, path)`,
  and `sorted_by_path(xs, path, by=operator.gt)` must match
  `oracle_sorted_by_path(xs, path, reverse=True)`.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Sequence

ORACLE_NAME: str = "python_sorted_key"

__all__ = ["ORACLE_NAME", "oracle_sorted_by_path", "equals_oracle"]


def oracle_sorted_by_path(
    xs: Iterable[Any], path: Callable[[Any], Any], reverse: bool = False
) -> List[Any]:
    """
    Return the ground-truth ordering of `xs` by `path`.

    Parameters
    ----------
    xs : Iterable
        Input elements. The oracle does not mutate `xs`.
    path : Callable
        Key function deriving the sort value.
    reverse : bool
        Descending order when True; equal keys still keep input order.
    """
    return sorted(xs, key=path, reverse=reverse)


def equals_oracle(
    xs: Sequence[Any],
    out: Sequence[Any],
    path: Callable[[Any], Any],
    reverse: bool = False,
) -> bool:
    """Return True iff `out` is exactly `oracle_sorted_by_path(xs, path, reverse)`."""
    return list(out) == oracle_sorted_by_path(xs, path, reverse)
