"""
Ground-truth oracle for sort output.

Python's built-in `sorted()` is the reference: it is deterministic, portable
and never mutates its input. Every algorithm in `combsort.algorithms` must
reproduce its output exactly for integer input, in either direction.

Public API (stable):
    oracle_sort(a: list[int], ascending: bool = True) -> list[int]
    equals_oracle(a: list[int], out: list[int], ascending: bool = True) -> bool
"""

from __future__ import annotations

from typing import List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[int], ascending: bool = True) -> List[int]:
    """Return a new list with the values of `a` in the requested order."""
    return sorted(a, reverse=not ascending)


def equals_oracle(a: Sequence[int], out: Sequence[int], ascending: bool = True) -> bool:
    """
    True iff `out` is exactly `oracle_sort(a, ascending)`.

    For integers equal keys are indistinguishable, so exact equality holds even
    for unstable algorithms such as comb sort.
    """
    return list(out) == oracle_sort(a, ascending)
