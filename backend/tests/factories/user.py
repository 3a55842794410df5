"""Factory Boy definition for :class:`signup_api.models.user.User`."""

from __future__ import annotations

import factory
from signup_api.models.user import User
from werkzeug.security import generate_password_hash

from tests.factories import BaseFactory


class UserFactory(BaseFactory):
    """Build persisted :class:`User` rows with canonical usernames."""

    class Meta:
        model = User

    id = None  # let autoincrement handle it
    username = factory.Sequence(lambda n: f"user_{n}")
    password_hash = factory.LazyFunction(
        lambda: generate_password_hash("correct horse battery", method="pbkdf2:sha256:1000")
    )
    email = factory.LazyAttribute(lambda o: f"{o.username}@example.com")
    first_name = None
    last_name = None
