"""
Benchmarkable sorting entry points.

Each module here exposes the same callable:
    sort(a: list[int], *, config: dict | None = None) -> list[int]

and is looked up by module name (e.g. "comb") from experiment configs.
"""

ALGORITHMS = ("comb", "comb_reversed", "builtin_timsort")

__all__ = ["ALGORITHMS"]
