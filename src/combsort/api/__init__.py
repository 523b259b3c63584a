"""
HTTP API public surface.

    from combsort.api import create_app
"""

from .app import ANONYMOUS, create_app
from .payload import RequestValidationError, SortRequest, parse_sort_request, sort_response
from .sort_log import LoggingSortLog, MemorySortLog, SortLog

__all__ = [
    "ANONYMOUS",
    "create_app",
    "RequestValidationError",
    "SortRequest",
    "parse_sort_request",
    "sort_response",
    "SortLog",
    "LoggingSortLog",
    "MemorySortLog",
]
