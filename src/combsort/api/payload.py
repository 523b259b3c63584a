"""
JSON wire format of POST /api/sort.

Request:
    {"array": [5, 2, 8], "ascending": true, "gap": null}

    - array      list of integers, required and non-empty
    - ascending  bool, optional (default true)
    - gap        integer or null, optional (null means automatic). Integers
                 outside [1, len(array)] are accepted and ignored by the engine.

Response:
    {
        "originalArray": [5, 2, 8],
        "sortedArray": [2, 5, 8],
        "ascending": true,
        "gap": 2,
        "executionTimeMs": 0.004,
        "completionTime": "2026-10-19T18:00:00.123456+00:00"
    }
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from combsort.engine import SortResult

__all__ = ["RequestValidationError", "SortRequest", "parse_sort_request", "sort_response"]


class RequestValidationError(ValueError):
    """A client error; `status_code` is the HTTP status to answer with."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass(frozen=True)
class SortRequest:
    values: List[int]
    ascending: bool = True
    gap: Optional[int] = None


def _is_int(x: Any) -> bool:
    # JSON true/false decode to bool, which is an int subclass.
    return isinstance(x, int) and not isinstance(x, bool)


def parse_sort_request(body: Any, max_length: int) -> SortRequest:
    if not isinstance(body, dict):
        raise RequestValidationError("Request body must be a JSON object")

    values = body.get("array")
    if values is None or values == []:
        raise RequestValidationError("Array cannot be empty")
    if not isinstance(values, list) or not all(_is_int(v) for v in values):
        raise RequestValidationError("'array' must be a list of integers")
    if len(values) > max_length:
        raise RequestValidationError(
            f"Array too large: {len(values)} elements (limit {max_length})", status_code=413
        )

    ascending = body.get("ascending")
    if ascending is None:
        ascending = True
    elif not isinstance(ascending, bool):
        raise RequestValidationError("'ascending' must be a boolean")

    gap = body.get("gap")
    if gap is not None and not _is_int(gap):
        raise RequestValidationError("'gap' must be an integer or null")

    return SortRequest(values=values, ascending=ascending, gap=gap)


def sort_response(req: SortRequest, result: SortResult) -> Dict[str, Any]:
    return {
        "originalArray": list(req.values),
        "sortedArray": result.as_list(),
        "ascending": result.ascending,
        "gap": result.initial_gap,
        "executionTimeMs": result.execution_time_ms,
        "completionTime": result.completion_timestamp.isoformat(),
    }
