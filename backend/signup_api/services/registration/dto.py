"""
DTOs for RegistrationService.

Contracts for the self-registration flow: the request payload in its raw and
canonical form, and the set of columns written for a new account.
"""

from __future__ import annotations

from dataclasses import dataclass

from signup_api.core.secret import Secret

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class SignUpRequest:
    """
    Registration payload supplied by a client.

    Instances are mutable on purpose: :meth:`normalize` rewrites the text
    fields in place to their canonical form before validation.

    :param username: Login handle (canonical form: lowercase, trimmed).
    :type username: str
    :param password: Credential wrapped so it never renders in logs.
    :type password: :class:`Secret`
    :param email: Optional contact email (canonical form: lowercase, trimmed).
    :type email: str
    :param first_name: Optional given name (trimmed).
    :type first_name: str
    :param last_name: Optional family name (trimmed).
    :type last_name: str
    """

    username: str
    password: Secret
    email: str = ""
    first_name: str = ""
    last_name: str = ""

    def normalize(self) -> None:
        """Trim every text field and lowercase ``username`` and ``email``."""
        self.first_name = self.first_name.strip()
        self.last_name = self.last_name.strip()
        self.username = self.username.strip().lower()
        self.email = self.email.strip().lower()


# --------------------------------------------------------------------------- #
# Persistence
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class NewUserFields:
    """
    Columns written for a new account.

    Optional values are ``None`` when the client left them empty so they are
    stored as ``NULL`` rather than empty strings.
    """

    username: str
    password_hash: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @classmethod
    def from_request(cls, payload: SignUpRequest, password_hash: str) -> NewUserFields:
        """
        Assemble create parameters from a canonical payload.

        :param payload: Normalized and validated request.
        :type payload: :class:`SignUpRequest`
        :param password_hash: Output of the password hasher.
        :type password_hash: str
        :rtype: :class:`NewUserFields`
        """
        return cls(
            username=payload.username,
            password_hash=password_hash,
            email=payload.email or None,
            first_name=payload.first_name or None,
            last_name=payload.last_name or None,
        )

    def as_columns(self) -> dict[str, str]:
        """Return only the columns that carry a value."""
        columns = {"username": self.username, "password_hash": self.password_hash}
        for name in ("email", "first_name", "last_name"):
            value = getattr(self, name)
            if value:
                columns[name] = value
        return columns
