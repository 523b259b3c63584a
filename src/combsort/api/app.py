"""
Flask application exposing the comb sort engine.

Routes:
    GET  /            plain-text banner
    GET  /api/health  {"status": "ok"}
    POST /api/sort    see `combsort.api.payload` for the wire format

Collaborators are passed in, never looked up globally:
    identify_user(request) -> str | None
        Gate for /api/sort. None means the caller is not authenticated (401).
        Without a hook every caller is "anonymous".
    sort_log(message, input_array, output_array, user_id)
        Called after each successful sort. Defaults to `LoggingSortLog`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from flask import Flask, Request, Response, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from combsort.engine import sort_with_metadata
from combsort.settings import Settings

from .payload import RequestValidationError, parse_sort_request, sort_response
from .sort_log import LoggingSortLog, SortLog

logger = logging.getLogger(__name__)

ANONYMOUS = "anonymous"
BANNER = (
    "Sorting Service API - Comb Sort\n\n"
    "POST /api/sort with {\"array\": [...], \"ascending\": true, \"gap\": null}\n"
)

IdentifyUser = Callable[[Request], Optional[str]]

__all__ = ["create_app", "ANONYMOUS"]


def create_app(
    settings: Optional[Settings] = None,
    *,
    identify_user: Optional[IdentifyUser] = None,
    sort_log: Optional[SortLog] = None,
) -> Flask:
    app = Flask("combsort")
    app.config["COMBSORT_SETTINGS"] = settings or Settings()
    app.extensions["combsort"] = {
        "identify_user": identify_user,
        "sort_log": sort_log if sort_log is not None else LoggingSortLog(),
    }

    app.add_url_rule("/", "index", _index, methods=["GET"])
    app.add_url_rule("/api/health", "health", _health, methods=["GET"])
    app.add_url_rule("/api/sort", "sort", _sort, methods=["POST"])

    app.register_error_handler(RequestValidationError, _validation_error)
    app.register_error_handler(HTTPException, _http_error)
    app.register_error_handler(Exception, _unexpected_error)
    return app


def _ext(name: str) -> Any:
    return current_app.extensions["combsort"][name]


# ------------------------- routes ------------------------- #

def _index() -> Response:
    return Response(BANNER, mimetype="text/plain")


def _health() -> Response:
    return jsonify(status="ok")


def _sort():
    identify_user: Optional[IdentifyUser] = _ext("identify_user")
    user_id = ANONYMOUS
    if identify_user is not None:
        user_id = identify_user(request)
        if user_id is None:
            return jsonify(error="Unauthorized"), 401

    settings: Settings = current_app.config["COMBSORT_SETTINGS"]
    try:
        req = parse_sort_request(request.get_json(silent=True), settings.max_array_length)
    except RequestValidationError as e:
        logger.warning("Rejected sort request from %s: %s", user_id, e.message)
        raise

    logger.info("Sorting array of %d elements for %s", len(req.values), user_id)
    result = sort_with_metadata(req.values, ascending=req.ascending, custom_gap=req.gap)
    logger.debug(
        "Sorted %d elements in %d us (initial gap %d)",
        len(req.values),
        result.execution_time_micros,
        result.initial_gap,
    )

    _ext("sort_log")("Sorting completed successfully", req.values, result.sorted_values, user_id)
    return jsonify(sort_response(req, result))


# ------------------------- error handlers ------------------------- #

def _validation_error(e: RequestValidationError):
    return jsonify(error=e.message), e.status_code


def _http_error(e: HTTPException):
    return jsonify(error=e.name, detail=e.description), e.code


def _unexpected_error(e: Exception):
    logger.exception("Unhandled error while serving %s %s", request.method, request.path)
    return jsonify(error=f"Internal server error: {e}"), 500
