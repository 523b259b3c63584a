"""
Sort-then-reverse comb sort variant.

Descending output is produced by reversing an ascending comb sort rather than
by flipping the comparison. Kept for side-by-side benchmarks against `comb`.

Config keys:
    ascending : bool  # default True
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from combsort.engine import sort_reversed

from ._config import parse_ascending


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    return sort_reversed(a, ascending=parse_ascending("comb_reversed", config or {}))
