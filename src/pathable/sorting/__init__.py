"""
Derived-key sorting public API.

Re-export the path sorters so callers can write:
    from pathable.sorting import sorted_by_path, sort_by_path
"""

from .by_path import sort_by_path, sorted_by_path

__all__ = ["sorted_by_path", "sort_by_path"]
