"""Password hashing."""

from __future__ import annotations

from typing import Final

from werkzeug.security import generate_password_hash

from signup_api.core.secret import Secret

DEFAULT_HASH_METHOD: Final[str] = "scrypt:32768:8:1"


def hash_password(password: Secret, *, method: str = DEFAULT_HASH_METHOD) -> str:
    """
    Hash a credential with a salted, adaptive one-way function.

    The cost parameters are part of ``method`` and fixed per deployment; they
    are never chosen per request.

    :param password: Credential to hash; this is the only place it is revealed.
    :type password: :class:`Secret`
    :param method: Werkzeug method string, e.g. ``"scrypt:32768:8:1"``.
    :type method: str
    :returns: Self-describing hash (method, salt and digest).
    :rtype: str
    :raises ValueError: If the password is empty or ``method`` is unsupported.
    """
    raw = password.reveal()
    if not raw:
        raise ValueError("Password must be a non-empty string.")
    return generate_password_hash(raw, method=method)
