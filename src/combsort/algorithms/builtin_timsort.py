"""Reference baseline: Python's built-in `sorted` (Timsort)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._config import parse_ascending


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    return sorted(a, reverse=not parse_ascending("builtin_timsort", config or {}))
