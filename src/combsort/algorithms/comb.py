"""
Canonical comb sort (direction handled in the comparison predicate).

Config keys:
    ascending : bool      # default True
    gap       : int | None  # optional first gap; out-of-range values are ignored
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from combsort.engine import sort_with_metadata

from ._config import parse_ascending


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    config = config or {}
    gap = config.get("gap")
    if gap is not None and (isinstance(gap, bool) or not isinstance(gap, int)):
        raise ValueError(f"comb.config.gap must be an integer or null; got {gap!r}")
    result = sort_with_metadata(a, ascending=parse_ascending("comb", config), custom_gap=gap)
    return result.as_list()
