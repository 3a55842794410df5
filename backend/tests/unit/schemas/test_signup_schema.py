"""Unit tests for the structural signup schema."""

from __future__ import annotations

import pytest
from marshmallow import ValidationError
from signup_api.core.secret import Secret
from signup_api.schemas import load_signup_request
from signup_api.services.registration.dto import SignUpRequest


def test_loads_required_fields_with_empty_optionals():
    payload = load_signup_request({"username": "Bob", "password": "supersecretpw"})

    assert isinstance(payload, SignUpRequest)
    assert payload.username == "Bob"  # normalization happens later
    assert isinstance(payload.password, Secret)
    assert payload.password.reveal() == "supersecretpw"
    assert (payload.email, payload.first_name, payload.last_name) == ("", "", "")


def test_loads_all_fields():
    payload = load_signup_request(
        {
            "username": "bob",
            "password": "supersecretpw",
            "email": "bob@example.com",
            "first_name": "Bob",
            "last_name": "Builder",
        }
    )
    assert payload.email == "bob@example.com"
    assert payload.first_name == "Bob"
    assert payload.last_name == "Builder"


@pytest.mark.parametrize(
    "raw",
    [
        {"username": "bob", "password": "xxxxxxxxxxxx", "admin": True},
        {"password": "xxxxxxxxxxxx"},
        {"username": "bob"},
        {"username": "bob", "password": ""},
        {"username": 42, "password": "xxxxxxxxxxxx"},
        {"username": "bob", "password": 123456789012},
        {"username": "bob", "password": "xxxxxxxxxxxx", "email": 42},
        ["username", "bob"],
        "bob",
        None,
    ],
)
def test_rejects_structurally_invalid_payloads(raw):
    with pytest.raises(ValidationError):
        load_signup_request(raw)


def test_null_optionals_load_as_empty():
    payload = load_signup_request(
        {
            "username": "bob",
            "password": "xxxxxxxxxxxx",
            "email": None,
            "first_name": None,
            "last_name": None,
        }
    )
    assert (payload.email, payload.first_name, payload.last_name) == ("", "", "")


def test_null_required_fields_are_rejected():
    with pytest.raises(ValidationError):
        load_signup_request({"username": None, "password": "xxxxxxxxxxxx"})
    with pytest.raises(ValidationError):
        load_signup_request({"username": "bob", "password": None})
