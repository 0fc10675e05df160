"""
pathable: sort by derived keys and compare values by one designated path.

Public API:
    sorted_by_path, sort_by_path   # pathable.sorting
    PathEquatable, PathComparable  # pathable.compare

Test helpers live in `pathable.testing` (needs the `testing` extra) and
pure property checks in `pathable.validate`.
"""

from .compare import PathComparable, PathEquatable
from .sorting import sort_by_path, sorted_by_path

__version__ = "0.1.0"

__all__ = ["sorted_by_path", "sort_by_path", "PathEquatable", "PathComparable"]
