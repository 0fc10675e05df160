"""
Datasets package public API.

Re-export the keyed data generators so callers can write:
    from pathable.datasets import make_records, Record, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, Record, make_keys, make_records

__all__ = ["SUPPORTED_DISTS", "Record", "make_keys", "make_records"]
