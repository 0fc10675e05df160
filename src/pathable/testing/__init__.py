"""
Test helpers public API.

Re-exports:
    assert_sorted     # soft, per-pair sortedness assertion (pytest-check)

Needs the `testing` extra. The rich violation report has no test-framework
dependency and lives in `pathable.validate.report`.
"""

from .assertions import assert_sorted

__all__ = ["assert_sorted"]
