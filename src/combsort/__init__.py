"""
combsort: a comb sort engine with timing metadata, an HTTP API and a
benchmark harness.

    from combsort import sort, sort_with_metadata
"""

from .engine import SHRINK_FACTOR, SortResult, initial_gap, sort, sort_reversed, sort_with_metadata

__version__ = "0.1.0"

__all__ = [
    "SHRINK_FACTOR",
    "SortResult",
    "initial_gap",
    "sort",
    "sort_reversed",
    "sort_with_metadata",
    "__version__",
]
