"""
Input generators for comb sort benchmarks and tests.

Distributions:
- "random":        uniform integers from params["range"] (inclusive, required).
- "nearly_sorted": [0, 1, ..., n-1] degraded by ceil(swap_frac * n) random swaps.
- "few_uniques":   at most k distinct values, drawn from an optional inclusive
                   params["range"] (default [-2**31, 2**31 - 1]).
- "sorted":        [0, 1, ..., n-1]. Comb sort's best case.
- "reversed":      [n-1, ..., 0]. Exercises the large-gap passes hardest.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

All generators return plain `list[int]`; the engine never sees NumPy types.
Deterministic distributions ignore `rng`.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Tuple

import numpy as np

_INT32_RANGE: Tuple[int, int] = (-(2**31), 2**31 - 1)

__all__ = ["SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate `n` integers according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements, >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}. See the module docstring for the
        parameters each distribution understands.
    rng : numpy.random.Generator
        Seeded upstream by the caller.

    Raises
    ------
    ValueError
        Unknown distribution, bad `n`, or malformed params.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    gen = _GENERATORS.get(dist)  # type: ignore[arg-type]
    if gen is None:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return gen(n, params, rng)


# ------------------------- generators ------------------------- #


def _random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _parse_range("random", params["range"])
    if n == 0:
        return []
    # integers() is half-open; +1 makes the upper bound inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    swap_frac = params.get("swap_frac", 0.05)
    if isinstance(swap_frac, bool) or not isinstance(swap_frac, (int, float)):
        raise ValueError(f"nearly_sorted.params.swap_frac must be a number; got {swap_frac!r}")
    if not 0.0 <= swap_frac <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {swap_frac}")

    out = list(range(n))
    swaps = math.ceil(swap_frac * n)
    if n < 2 or swaps == 0:
        return out
    pairs = rng.integers(0, n, size=(swaps, 2))
    for i, j in pairs.tolist():
        # i == j is a no-op, so the effective swap count may be lower.
        out[i], out[j] = out[j], out[i]
    return out


def _few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range("few_uniques", params.get("range", list(_INT32_RANGE)))
    if n == 0:
        return []

    k = min(k, n, hi - lo + 1)
    # Collect distinct values from the caller's RNG so runs stay reproducible.
    pool: Dict[int, None] = {}
    while len(pool) < k:
        for v in rng.integers(lo, hi + 1, size=2 * (k - len(pool)), dtype=np.int64).tolist():
            pool.setdefault(v)
            if len(pool) == k:
                break
    values = list(pool)
    return [values[i] for i in rng.integers(0, k, size=n).tolist()]


def _sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[int]]] = {
    "random": _random,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "sorted": _sorted,
    "reversed": _reversed,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _parse_range(dist: str, spec: Any) -> Tuple[int, int]:
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list [min, max]")
    lo, hi = spec
    if not _is_int_like(lo) or not _is_int_like(hi):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo), int(hi)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _is_int_like(x: Any) -> bool:
    # NumPy integers come through when callers build specs from arrays.
    return not isinstance(x, bool) and isinstance(x, (int, np.integer))
