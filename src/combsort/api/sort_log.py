"""
Sort-log sinks.

A sink is any callable `(message, input_array, output_array, user_id) -> None`.
The API calls it once per successful sort; durable storage is up to the sink.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

SortLog = Callable[[str, Sequence[int], Sequence[int], str], None]

__all__ = ["SortLog", "LoggingSortLog", "MemorySortLog"]


class LoggingSortLog:
    """Write each sort as one INFO record. Arrays longer than `preview` are elided."""

    def __init__(self, logger: Optional[logging.Logger] = None, preview: int = 50) -> None:
        self.logger = logger or logging.getLogger("combsort.sorts")
        self.preview = preview

    def _fmt(self, values: Sequence[int]) -> str:
        if len(values) <= self.preview:
            return str(list(values))
        head = ", ".join(str(v) for v in values[: self.preview])
        return f"[{head}, ... ({len(values)} items)]"

    def __call__(
        self, message: str, input_array: Sequence[int], output_array: Sequence[int], user_id: str
    ) -> None:
        self.logger.info(
            "%s | user=%s | input=%s | output=%s",
            message,
            user_id,
            self._fmt(input_array),
            self._fmt(output_array),
        )


class MemorySortLog:
    """Keep records in a list; handy in tests and for embedding."""

    def __init__(self) -> None:
        self.records: List[dict] = []

    def __call__(
        self, message: str, input_array: Sequence[int], output_array: Sequence[int], user_id: str
    ) -> None:
        self.records.append(
            {
                "message": message,
                "input": list(input_array),
                "output": list(output_array),
                "user_id": user_id,
            }
        )
