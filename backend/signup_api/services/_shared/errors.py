"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP directly. They serve as stable contracts between
repositories, validators, and application services.

The translation to HTTP responses is handled by ``core/errors.py`` via
``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    PostgreSQL includes the constraint name in the message. SQLite reports
    the offending ``table.column`` instead, so the column list encoded in the
    ``uq_<table>_<column>`` naming convention is accepted as a fallback.

    Parameters
    ----------
    exc : IntegrityError
        The exception raised by SQLAlchemy during flush/commit.
    constraint_name : str
        The name of the database constraint to match (e.g., 'uq_users_username').

    Returns
    -------
    bool
        True if the IntegrityError matches the given constraint.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    name = constraint_name.lower()
    if name in message:
        return True
    if name.startswith("uq_") and "unique" in message:
        _, table, *columns = name.split("_", 2)
        column = columns[0] if columns else ""
        return f"{table}.{column}" in message
    return False


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer or BaseService translates them to APIError.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"


class UserAlreadyExistsError(ConflictError):
    """Raised when the requested username is already registered."""

    def __init__(self, username: str) -> None:
        super().__init__("User", "username already registered")
        self.username = username


class InvalidRegistrationError(ServiceError):
    """
    Raised by request validation with a client-safe message.

    Only the first failing rule is reported.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InfrastructureError(ServiceError):
    """
    Opaque failure of a collaborator (database, hashing).

    The original exception is chained as ``__cause__``; ``operation`` names
    the failing step for logs only.

    :param operation: Short description such as ``"lookup existing user"``.
    :type operation: str
    """

    def __init__(self, operation: str) -> None:
        super().__init__(operation)
        self.operation = operation


class DeadlineExceededError(InfrastructureError):
    """Raised when the operation's time budget ran out or was cancelled."""
