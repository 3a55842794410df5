"""Centralized JSON error handling for the API.

Every error leaves the application as ``{"error": "<message>"}`` with the
``application/json; charset=utf-8`` content type. Internal details are logged
with the request correlation id and never rendered to clients.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from signup_api.core.logger import ensure_request_id

log = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def _http_status_to_message(status_code: int) -> str:
    """Map common HTTP status codes to short, stable client messages."""
    mapping = {
        400: "bad request",
        404: "not found",
        405: "method not allowed",
        409: "conflict",
        413: "invalid request body",
        415: "unsupported media type",
        500: "internal server error",
        503: "service unavailable",
    }
    return mapping.get(status_code, HTTPStatus(status_code).phrase.lower())


def error_response(message: str, status: int) -> Response:
    """
    Build a JSON error response.

    :param message: Client-safe error text.
    :param status: HTTP status code.
    :returns: Flask response with an ``{"error": message}`` body.
    :rtype: flask.Response
    """
    resp = jsonify({"error": message})
    resp.status_code = int(status)
    resp.content_type = JSON_CONTENT_TYPE
    return resp


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    code : str, optional
        Machine-readable identifier used in logs. Defaults to
        ``"bad_request"``.
    details : dict[str, Any] | None, optional
        Structured context logged for operators; never sent to clients.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "bad_request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.details = details or {}

    def to_response(self) -> Response:
        """
        Serialize the error into a JSON response.

        :returns: Response carrying the client-safe message.
        :rtype: flask.Response
        """
        return error_response(self.message, self.status_code)


# Domain conveniences
class BadRequest(APIError):
    """400 for malformed bodies and failed field validation."""

    def __init__(self, message: str = "invalid request body") -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST, code="bad_request")


class Conflict(APIError):
    """409 for uniqueness/constraint collisions."""

    def __init__(self, message: str = "Conflict") -> None:
        super().__init__(message, status_code=HTTPStatus.CONFLICT, code="conflict")


class Unavailable(APIError):
    """500 for infrastructure failures; the message stays generic."""

    def __init__(self, message: str = "internal server error") -> None:
        super().__init__(
            message,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            code="internal_server_error",
        )


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Guarantees ``{"error": ...}`` JSON responses for all handled errors.
    - 5xx are logged with ``exc_info``; 4xx as warnings.
    """

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        request_id = ensure_request_id()
        if err.status_code >= 500:
            log.error(
                "APIError: code=%s status=%s msg=%s request_id=%s",
                err.code,
                err.status_code,
                err.message,
                request_id,
                exc_info=err.__cause__ or err,
            )
        else:
            log.warning(
                "APIError: code=%s status=%s msg=%s request_id=%s",
                err.code,
                err.status_code,
                err.message,
                request_id,
            )
        return err.to_response()

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        # Oversized bodies are a framing error for clients
        if status == HTTPStatus.REQUEST_ENTITY_TOO_LARGE:
            status = HTTPStatus.BAD_REQUEST
            message = _http_status_to_message(HTTPStatus.REQUEST_ENTITY_TOO_LARGE)
        else:
            message = _http_status_to_message(status)
        level = log.error if status >= 500 else log.warning
        level(
            "HTTPException: status=%s detail=%s path=%s request_id=%s",
            status,
            message,
            request.path if request else None,
            ensure_request_id(),
        )
        response = error_response(message, status)
        if status == HTTPStatus.METHOD_NOT_ALLOWED:
            allowed = getattr(err, "valid_methods", None)
            if allowed:
                response.headers["Allow"] = ", ".join(allowed)
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        # Unexpected server-side error; never leak internal details
        log.error(
            "Unhandled exception: request_id=%s",
            ensure_request_id(),
            exc_info=True,
        )
        return error_response(
            _http_status_to_message(HTTPStatus.INTERNAL_SERVER_ERROR),
            HTTPStatus.INTERNAL_SERVER_ERROR,
        )
