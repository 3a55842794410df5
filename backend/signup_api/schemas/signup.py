"""Signup Marshmallow schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import RAISE, Schema, ValidationError, fields, post_load

from signup_api.core.secret import REDACTED_JSON, Secret
from signup_api.services.registration.dto import SignUpRequest

OPTIONAL_FIELDS = ("email", "first_name", "last_name")


class SecretField(fields.Field):
    """String field that loads into :class:`Secret` and dumps a placeholder.

    Loading fails for non-strings and for the empty string.
    """

    default_error_messages = {
        "invalid": "Not a valid string.",
        "empty": "Secret value must not be empty.",
    }

    def _serialize(self, value: Any, attr: str | None, obj: Any, **kwargs: Any) -> str | None:
        if value is None:
            return None
        return REDACTED_JSON

    def _deserialize(self, value: Any, attr: str | None, data: Any, **kwargs: Any) -> Secret:
        if not isinstance(value, str):
            raise self.make_error("invalid")
        if value == "":
            raise self.make_error("empty")
        return Secret(value)


class SignUpSchema(Schema):
    """Input payload for account registration.

    Only the structure is checked here (known keys, types, presence). Field
    rules run after normalization in
    :func:`signup_api.services.registration.validation.validate_signup_request`.
    """

    class Meta:
        unknown = RAISE

    username = fields.String(required=True)
    password = SecretField(required=True)
    # JSON null on an optional field counts as absent
    email = fields.String(load_default="", allow_none=True)
    first_name = fields.String(load_default="", allow_none=True)
    last_name = fields.String(load_default="", allow_none=True)

    @post_load
    def make_request(self, data: dict[str, Any], **_: Any) -> SignUpRequest:
        for name in OPTIONAL_FIELDS:
            data[name] = data.get(name) or ""
        return SignUpRequest(**data)


def load_signup_request(raw: Any) -> SignUpRequest:
    """Load ``raw`` (decoded JSON) into a :class:`SignUpRequest`.

    :raises marshmallow.ValidationError: For anything but a JSON object with
        the expected keys and types.
    """
    if not isinstance(raw, dict):
        raise ValidationError("Expected a JSON object.")
    return SignUpSchema().load(raw)
