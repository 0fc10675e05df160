"""
Seeded keyed datasets for exercising derived-key sorts.

Keys are integers drawn from one of these distributions:
- dist == "random":
    Uniform over an inclusive `range`.
- dist == "nearly_sorted":
    Start from [0, 1, ..., n-1] then perform ceil(swap_frac * n) random
    index swaps.
- dist == "few_uniques":
    At most k distinct values (uniform over an inclusive range), sampled
    with replacement. Produces many ties, which is what stability tests need.
- dist == "reversed":
    Deterministic [n-1, n-2, ..., 0].

Public API (stable):
    make_keys(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    make_records(n: int, spec: dict, rng: numpy.random.Generator) -> list[Record]

`spec` has the shape {"dist": str, "params": dict}. The caller owns the RNG,
so a fixed seed reproduces the same dataset.
"""

from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "reversed",
}
__all__ = ["SUPPORTED_DISTS", "Record", "make_keys", "make_records"]


class Record(NamedTuple):
    """A sort key tagged with the position it was generated at."""

    key: int
    position: int


def make_records(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Record]:
    """
    Generate `n` records whose keys follow `spec`.

    After a stable sort by `key`, positions increase within each run of
    equal keys.
    """
    return [Record(key, position) for position, key in enumerate(make_keys(n, spec, rng))]


def make_keys(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer key list according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of keys. Must be >= 0.
    spec : dict
        {"dist": "random", "params": {"range": [lo, hi]}}        # inclusive
        {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}  # in [0, 1]
        {"dist": "few_uniques", "params": {"k": 4, "range": [lo, hi]}}
        {"dist": "reversed"}
    rng : numpy.random.Generator
        Seeded upstream. Unused for "reversed".

    Raises
    ------
    ValueError
        If `n` or `spec` is invalid, or the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params", None) or {}

    if dist == "random":
        lo, hi = _parse_range(params, required=True)
        if n == 0:
            return []
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        keys = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if n == 0 or num_swaps <= 0:
            return keys
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i, j = int(idxs[2 * k]), int(idxs[2 * k + 1])
            keys[i], keys[j] = keys[j], keys[i]
        return keys

    if dist == "few_uniques":
        k = _parse_k(params)
        lo, hi = _parse_range(params, default=(0, 4294967295))
        if n == 0:
            return []
        # Cannot use more distinct values than the span or the array length allows.
        actual_k = int(min(k, n, hi - lo + 1))
        values = _distinct_draws(lo, hi, actual_k, rng)
        idxs = rng.integers(0, actual_k, size=n)
        return [int(values[int(t)]) for t in idxs]

    # "reversed"
    return list(range(n - 1, -1, -1))


# ------------------------- helpers ------------------------- #


def _distinct_draws(lo: int, hi: int, k: int, rng: np.random.Generator) -> List[int]:
    # Oversample until k distinct values are collected; k is small next to the span.
    chosen: List[int] = []
    seen = set()
    while len(chosen) < k:
        for v in map(int, rng.integers(lo, hi + 1, size=2 * (k - len(chosen)))):
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == k:
                    break
    return chosen


def _validate_n(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_range(
    params: Dict[str, Any], required: bool = False, default: Tuple[int, int] = (0, 0)
) -> Tuple[int, int]:
    """Parse an inclusive `params["range"] == [lo, hi]`, or return `default`."""
    if "range" not in params:
        if required:
            raise ValueError("params.range must be provided as [min, max] (inclusive)")
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    k = params.get("k", None)
    if not _is_int_like(k) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return int(k)


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types, but not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
