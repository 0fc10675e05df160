"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sorted_by_path
        equals_oracle

    - Property checks:
        is_sorted
        violation_indices
        first_violation_index
        is_permutation
        permutation_counter_diff
        assert_no_mutation

    - Report (rich):
        violation_table
        print_violations
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sorted_by_path
from .properties import (
    assert_no_mutation,
    first_violation_index,
    is_permutation,
    is_sorted,
    permutation_counter_diff,
    violation_indices,
)
from .report import print_violations, violation_table

__all__ = [
    "ORACLE_NAME",
    "oracle_sorted_by_path",
    "equals_oracle",
    "is_sorted",
    "violation_indices",
    "first_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "violation_table",
    "print_violations",
]
