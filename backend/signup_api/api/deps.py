"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import json
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from signup_api.core.errors import JSON_CONTENT_TYPE, BadRequest
from signup_api.core.logger import ensure_request_id
from signup_api.services import Deadline, ServiceContext

F = TypeVar("F", bound=Callable[..., Any])

INVALID_BODY_MESSAGE = "invalid request body"
TRAILING_DATA_MESSAGE = "unexpected trailing data"

_decoder = json.JSONDecoder()


def read_json_body() -> Any:
    """Decode exactly one JSON value from the request body.

    The body is read through Werkzeug's ``MAX_CONTENT_LENGTH`` guard; anything
    after the first JSON value other than whitespace is rejected.

    :returns: Decoded JSON value.
    :raises BadRequest: For oversized, undecodable or malformed bodies, or
        trailing data.
    """
    try:
        raw = request.get_data(cache=False)
    except RequestEntityTooLarge:
        raise BadRequest(INVALID_BODY_MESSAGE) from None
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise BadRequest(INVALID_BODY_MESSAGE) from None

    start = _skip_whitespace(text, 0)
    # Deeply nested values exhaust the decoder's recursion limit
    try:
        value, end = _decoder.raw_decode(text, start)
    except (json.JSONDecodeError, RecursionError):
        raise BadRequest(INVALID_BODY_MESSAGE) from None
    if _skip_whitespace(text, end) != len(text):
        raise BadRequest(TRAILING_DATA_MESSAGE)
    return value


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in " \t\n\r":
        pos += 1
    return pos


def request_context() -> ServiceContext:
    """Build the service context for the current request.

    The deadline starts when the handler runs and uses
    ``REGISTRATION_TIMEOUT_SECONDS`` as the request budget.
    """
    budget = float(current_app.config.get("REGISTRATION_TIMEOUT_SECONDS", 5.0))
    return ServiceContext(request_id=ensure_request_id(), deadline=Deadline.after(budget))


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent content type."""

    response = jsonify(payload)
    response.status_code = status
    response.content_type = JSON_CONTENT_TYPE
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
