"""Field rules for registration payloads.

:func:`validate_signup_request` is a pure function over an already
normalized :class:`SignUpRequest`; it performs no I/O and reports only the
first failing rule.
"""

from __future__ import annotations

import re
from typing import Final

from marshmallow import ValidationError, validate

from signup_api.services._shared.errors import InvalidRegistrationError
from signup_api.services.registration.dto import SignUpRequest

USERNAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_]{3,64}$")
MIN_PASSWORD_LENGTH: Final[int] = 12
MAX_EMAIL_LENGTH: Final[int] = 254
MAX_NAME_LENGTH: Final[int] = 128
FORBIDDEN_NAME_CHARS: Final[frozenset[str]] = frozenset("<>{}\n\r\t")

_email_validator = validate.Email()


def validate_signup_request(payload: SignUpRequest) -> None:
    """
    Validate a normalized registration payload.

    :param payload: Request already passed through :meth:`SignUpRequest.normalize`.
    :type payload: :class:`SignUpRequest`
    :raises InvalidRegistrationError: On the first rule that fails.
    """
    # fullmatch: ``$`` would also accept a trailing newline
    if not USERNAME_PATTERN.fullmatch(payload.username):
        raise InvalidRegistrationError(
            "username must be 3-64 characters and use letters, digits, or underscores"
        )

    if len(payload.password.reveal()) < MIN_PASSWORD_LENGTH:
        raise InvalidRegistrationError(
            f"password must be at least {MIN_PASSWORD_LENGTH} characters"
        )

    if payload.email:
        _validate_email(payload.email)

    _validate_name(payload.first_name)
    _validate_name(payload.last_name)


def _validate_email(email: str) -> None:
    if len(email) > MAX_EMAIL_LENGTH:
        raise InvalidRegistrationError("invalid email address")
    try:
        _email_validator(email)
    except ValidationError as exc:
        raise InvalidRegistrationError("invalid email address") from exc


def _validate_name(name: str) -> None:
    if not name:
        return
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidRegistrationError(
            f"names must be fewer than {MAX_NAME_LENGTH} characters"
        )
    if FORBIDDEN_NAME_CHARS.intersection(name):
        raise InvalidRegistrationError("names contain unsupported characters")
