"""
Property helpers for validating sort results.

Used by the test-suite and by the benchmark runner when `validate: true` is
set in an experiment config.

Public API (stable):
    is_ordered(xs, ascending=True) -> bool
    first_order_violation_index(xs, ascending=True) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict[int, int]
    assert_no_mutation(before, after) -> None

Notes
-----
Stability is not checked: comb sort is unstable, and with bare integers equal
keys cannot be told apart anyway.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence

__all__ = [
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
]


def first_order_violation_index(xs: Sequence[int], ascending: bool = True) -> Optional[int]:
    """
    Return the first index i where xs[i] and xs[i+1] are out of order, or None.

    Ascending order forbids xs[i] > xs[i+1]; descending forbids xs[i] < xs[i+1].
    Handy for assertion messages:
        i = first_order_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]}, {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        left, right = xs[i], xs[i + 1]
        if (left > right) if ascending else (left < right):
            return i
    return None


def is_ordered(xs: Sequence[int], ascending: bool = True) -> bool:
    """Non-decreasing when `ascending`, non-increasing otherwise."""
    if len(xs) < 2:
        return True
    return first_order_violation_index(xs, ascending) is None


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    """True iff `a` and `b` hold the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Map value -> (count in a) - (count in b), omitting values that balance out.

    An empty dict means `a` and `b` are permutations of each other.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_no_mutation(before: Sequence[int], after: Sequence[int]) -> None:
    """
    Raise AssertionError if `after` differs from the snapshot `before`.

    The message names the first differing index so a mutating algorithm is
    easy to pin down.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x}, after={y}")
