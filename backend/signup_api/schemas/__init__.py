"""Convenience exports for application schemas."""

from __future__ import annotations

from .signup import SecretField, SignUpSchema, load_signup_request

__all__ = [
    "SecretField",
    "SignUpSchema",
    "load_signup_request",
]
