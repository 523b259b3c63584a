"""
Comb sort engine.

Comb sort generalizes bubble sort: instead of comparing neighbours it compares
elements `gap` positions apart, shrinking the gap by a constant factor after
every pass until it reaches 1. Passes at gap 1 repeat until one of them makes
no swap, at which point the buffer is sorted.

Public API (stable):
    SHRINK_FACTOR: float
    SortResult
    initial_gap(length: int, custom_gap: int | None = None) -> int
    sort(values: Sequence[int], ascending: bool = True) -> list[int]
    sort_with_metadata(values, ascending=True, custom_gap=None) -> SortResult
    sort_reversed(values: Sequence[int], ascending: bool = True) -> list[int]

Conventions:
- Every function works on a private copy; the caller's sequence is never
  mutated and each call owns its buffer, so the module is safe to use from
  many threads at once.
- Direction is applied inside the comparison (ascending swaps when
  left > right, descending when left < right). `sort_reversed` is the older
  sort-then-reverse behaviour, kept separately for comparison.
- Comb sort is not stable. For plain integers this is unobservable.
- The engine has no I/O and does not log; callers own persistence.
"""

from __future__ import annotations

import datetime as _dt
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

SHRINK_FACTOR: float = 1.3

__all__ = [
    "SHRINK_FACTOR",
    "SortResult",
    "initial_gap",
    "sort",
    "sort_with_metadata",
    "sort_reversed",
]


@dataclass(frozen=True)
class SortResult:
    """Outcome of one `sort_with_metadata` call."""

    sorted_values: Tuple[int, ...]
    initial_gap: int
    execution_time_micros: int
    completion_timestamp: _dt.datetime
    ascending: bool = field(default=True)

    @property
    def execution_time_ms(self) -> float:
        return self.execution_time_micros / 1000.0

    def as_list(self) -> List[int]:
        return list(self.sorted_values)


def _shrink(gap: int) -> int:
    return max(1, int(gap / SHRINK_FACTOR))


def _comb_pass(buf: List[int], gap: int, ascending: bool) -> bool:
    # Later comparisons in a pass may read values swapped earlier in the same pass.
    swapped = False
    n = len(buf)
    i = 0
    if ascending:
        while i + gap < n:
            if buf[i] > buf[i + gap]:
                buf[i], buf[i + gap] = buf[i + gap], buf[i]
                swapped = True
            i += 1
    else:
        while i + gap < n:
            if buf[i] < buf[i + gap]:
                buf[i], buf[i + gap] = buf[i + gap], buf[i]
                swapped = True
            i += 1
    return swapped


def initial_gap(length: int, custom_gap: Optional[int] = None) -> int:
    """
    Return the gap used by the first pass of `sort_with_metadata`.

    Parameters
    ----------
    length : int
        Number of elements to sort.
    custom_gap : int | None
        Requested first gap. Honoured only when 1 <= custom_gap <= length;
        anything else is ignored and the automatic gap is used.

    Returns
    -------
    int
        `length` itself for length <= 1, the custom gap when valid, otherwise
        floor(length / 1.3), or `length` if that floor is 0.
    """
    if length <= 1:
        return length
    if custom_gap is not None and 1 <= custom_gap <= length:
        return int(custom_gap)
    gap = int(length / SHRINK_FACTOR)
    return gap if gap > 0 else length


def sort(values: Sequence[int], ascending: bool = True) -> List[int]:
    """
    Comb sort `values` and return a new list.

    The gap starts at len(values) and is shrunk before every pass, so the
    first comparison distance is floor(len / 1.3).
    """
    buf = list(values)
    if len(buf) <= 1:
        return buf

    gap = len(buf)
    swapped = True
    while gap > 1 or swapped:
        gap = _shrink(gap)
        swapped = _comb_pass(buf, gap, ascending)
    return buf


def sort_with_metadata(
    values: Sequence[int],
    ascending: bool = True,
    custom_gap: Optional[int] = None,
) -> SortResult:
    """
    Comb sort `values` and report how the run went.

    Parameters
    ----------
    values : Sequence[int]
        Integers to sort. Any length, including 0. Not mutated.
    ascending : bool
        Sort direction; False gives non-increasing output.
    custom_gap : int | None
        Optional first gap (see `initial_gap`). Out-of-range values are
        silently ignored, never rejected.

    Returns
    -------
    SortResult
        Sorted values, the first gap used, the elapsed time of the sort loop
        in microseconds (copying the input is not timed) and a UTC timestamp
        taken once the loop has finished.
    """
    buf = list(values)
    n = len(buf)
    if n <= 1:
        return SortResult(
            sorted_values=tuple(buf),
            initial_gap=n,
            execution_time_micros=0,
            completion_timestamp=_dt.datetime.now(_dt.timezone.utc),
            ascending=ascending,
        )

    first_gap = initial_gap(n, custom_gap)

    t0 = time.perf_counter_ns()
    gap = first_gap
    while True:
        swapped = _comb_pass(buf, gap, ascending)
        if gap == 1 and not swapped:
            break
        gap = _shrink(gap)
    t1 = time.perf_counter_ns()

    return SortResult(
        sorted_values=tuple(buf),
        initial_gap=first_gap,
        execution_time_micros=(t1 - t0) // 1000,
        completion_timestamp=_dt.datetime.now(_dt.timezone.utc),
        ascending=ascending,
    )


def sort_reversed(values: Sequence[int], ascending: bool = True) -> List[int]:
    """Sort ascending, then reverse the result when a descending order is asked for."""
    out = sort(values, ascending=True)
    if not ascending:
        out.reverse()
    return out
