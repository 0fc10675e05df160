"""
Mixins that derive equality and ordering from one designated path.

A subclass nominates a single callable (its *designated path*) as the
source of truth for how its instances compare:

    class Person(PathEquatable):
        equatable_path = operator.attrgetter("name")

    class Version(PathComparable):
        comparable_path = lambda self: (self.major, self.minor)

Two instances are equal iff their designated values are equal, even when
other fields differ. This is deliberate weak equality under the caller's
control, not structural equality.

Notes
-----
- Paths are always looked up on the class and called with the instance,
  so lambdas, plain functions, `staticmethod` objects and
  `operator.attrgetter`/`itemgetter` all work.
- Dataclass subclasses must use `@dataclass(eq=False)`; otherwise the
  generated `__eq__` replaces the path-derived one.
- Intermediate bases that do not declare a path yet pass `abstract=True`
  in the class statement.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, ClassVar

__all__ = ["PathEquatable", "PathComparable"]


class PathEquatable:
    """Equality and hashing by the value at `equatable_path`."""

    equatable_path: ClassVar[Callable[[Any], Any]]

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if abstract:
            return
        if not callable(getattr(cls, "equatable_path", None)):
            raise TypeError(f"{cls.__name__} must define a callable `equatable_path`")

    def _equatable_value(self) -> Any:
        return type(self).equatable_path(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._equatable_value() == other._equatable_value()

    def __hash__(self) -> int:
        return hash(self._equatable_value())


@functools.total_ordering
class PathComparable(PathEquatable, abstract=True):
    """
    Ordering, equality and hashing by the value at `comparable_path`.

    `equatable_path` is bound to the same callable when the subclass is
    created, so the two can never disagree. Declaring an `equatable_path`
    that differs from `comparable_path` raises TypeError.
    """

    comparable_path: ClassVar[Callable[[Any], Any]]

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        if not abstract:
            comparable = getattr(cls, "comparable_path", None)
            if not callable(comparable):
                raise TypeError(f"{cls.__name__} must define a callable `comparable_path`")
            declared = cls.__dict__.get("equatable_path", None)
            if declared is not None and declared is not cls.__dict__.get("comparable_path", comparable):
                raise TypeError(
                    f"{cls.__name__}: `equatable_path` must be the same as `comparable_path`"
                )
            cls.equatable_path = comparable
        super().__init_subclass__(abstract=abstract, **kwargs)

    def _comparable_value(self) -> Any:
        return type(self).comparable_path(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._comparable_value() < other._comparable_value()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._comparable_value() > other._comparable_value()
