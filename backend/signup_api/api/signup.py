"""Account registration endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app, request
from marshmallow import ValidationError
from werkzeug.exceptions import MethodNotAllowed

from signup_api.api.deps import (
    INVALID_BODY_MESSAGE,
    json_response,
    read_json_body,
    request_context,
    timing,
)
from signup_api.core.errors import BadRequest
from signup_api.core.security import DEFAULT_HASH_METHOD
from signup_api.schemas import load_signup_request
from signup_api.services import RegistrationService, validate_signup_request
from signup_api.services._shared.errors import ServiceError

bp = Blueprint("signup", __name__)


@bp.post("/signup", provide_automatic_options=False)
@timing
def signup():
    """Register a new account from a JSON payload."""

    raw = read_json_body()
    try:
        payload = load_signup_request(raw)
    except ValidationError as exc:
        rejected = sorted(exc.messages) if isinstance(exc.messages, dict) else ["_schema"]
        current_app.logger.info("signup.invalid_body", extra={"status": 400, "fields": rejected})
        raise BadRequest(INVALID_BODY_MESSAGE) from exc

    payload.normalize()
    service = RegistrationService(
        ctx=request_context(),
        timeout=float(current_app.config.get("REGISTRATION_TIMEOUT_SECONDS", 5.0)),
        hash_method=current_app.config.get("PASSWORD_HASH_METHOD", DEFAULT_HASH_METHOD),
    )
    try:
        validate_signup_request(payload)
        service.register_user(payload)
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc

    return json_response({"message": "account created"}, status=201)


@bp.route("/signup", methods=["OPTIONS"])
def signup_preflight():
    """Answer CORS preflight requests; any other ``OPTIONS`` is a 405."""

    if request.headers.get("Origin") and request.headers.get("Access-Control-Request-Method"):
        return current_app.make_default_options_response()
    raise MethodNotAllowed(valid_methods=["POST"])
