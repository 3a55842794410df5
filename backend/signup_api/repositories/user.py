"""User repository for account lookups and creation."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from signup_api.models.user import User
from signup_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    Lookups match the stored (already normalized) username exactly; callers
    are expected to pass canonical values.
    """

    model = User

    def _creatable_fields(self):
        return {"username", "password_hash", "email", "first_name", "last_name"}

    def get_by_username(self, username: str) -> User | None:
        """Fetch a user by exact username.

        :param username: Canonical (lowercase, trimmed) username.
        :type username: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = select(User).where(User.username == username)
        result = self.session.execute(stmt).scalars().first()
        return cast(User | None, result)

    def exists_by_username(self, username: str) -> bool:
        """Return ``True`` when a user with the provided username exists."""
        stmt = select(User.id).where(User.username == username)
        return self.session.execute(stmt).first() is not None
