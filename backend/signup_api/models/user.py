"""User model definition for registered accounts."""

from __future__ import annotations

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from signup_api.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

USERNAME_UNIQUE_CONSTRAINT = "uq_users_username"


class User(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Registered account.

    Rows are created once per distinct username and never updated or deleted
    by this service. The unique constraint on ``username`` is the source of
    truth for "no two accounts share a username"; the service-level lookup
    only produces a friendlier error in the common case.

    Fields
    ------
    username : str
        Login handle, stored lowercase and trimmed. Unique.
    password_hash : str
        One-way salted hash of the password.
    email : str | None
        Optional contact email, lowercase and trimmed. ``NULL`` when omitted.
    first_name : str | None
        Optional given name. ``NULL`` when omitted.
    last_name : str | None
        Optional family name. ``NULL`` when omitted.
    created_at : datetime
        Creation timestamp (from mixin).
    updated_at : datetime
        Update timestamp (from mixin).
    """

    __tablename__ = "users"
    __repr_attrs__ = ("id", "username")

    # Columns
    username: Mapped[str] = mapped_column(String(64), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(254), nullable=True)
    first_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(128), nullable=True)

    # Constraints (the unique constraint also backs username lookups)
    __table_args__ = (UniqueConstraint("username", name=USERNAME_UNIQUE_CONSTRAINT),)

