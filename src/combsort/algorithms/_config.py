from __future__ import annotations

from typing import Any, Dict


def parse_ascending(algo: str, config: Dict[str, Any]) -> bool:
    val = config.get("ascending", True)
    if not isinstance(val, bool):
        raise ValueError(f"{algo}.config.ascending must be a bool; got {val!r}")
    return val
