"""
Path-based equality and ordering mixins.

Re-exports:
    PathEquatable   # == and hash from `equatable_path`
    PathComparable  # ==, hash, <, >, <=, >= from `comparable_path`
"""

from .mixins import PathComparable, PathEquatable

__all__ = ["PathEquatable", "PathComparable"]
