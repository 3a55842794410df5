"""
RegistrationService
===================

Process-level service that registers a new account:

- Bounds the whole operation by a deadline derived from the caller's.
- Rejects usernames that are already taken (friendly 409 path).
- Hashes the password at a fixed cost and stores only the hash.
- Maps a unique-constraint race on create to the same duplicate error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy.exc import IntegrityError

from signup_api.core.secret import Secret
from signup_api.core.security import DEFAULT_HASH_METHOD, hash_password
from signup_api.models.user import USERNAME_UNIQUE_CONSTRAINT
from signup_api.services._shared.base import BaseService, ServiceContext
from signup_api.services._shared.errors import (
    InfrastructureError,
    UserAlreadyExistsError,
    violates,
)
from signup_api.services.registration.dto import NewUserFields, SignUpRequest

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0

PasswordHasher = Callable[[Secret], str]


class RegistrationService(BaseService):
    """
    Orchestrates account creation for a normalized, validated payload.

    :param ctx: Request-scoped context carrying the caller's deadline.
    :type ctx: ServiceContext | None
    :param timeout: Budget for one registration, in seconds.
    :type timeout: float
    :param hash_method: Werkzeug hashing method with fixed cost parameters.
    :type hash_method: str
    :param hasher: Override for the password hasher (tests).
    :type hasher: Callable[[Secret], str] | None
    """

    def __init__(
        self,
        *,
        ctx: ServiceContext | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        hash_method: str = DEFAULT_HASH_METHOD,
        hasher: PasswordHasher | None = None,
    ) -> None:
        super().__init__(ctx=ctx)
        self.timeout = timeout
        self.hash_method = hash_method
        self._hasher = hasher

    def register_user(self, payload: SignUpRequest) -> None:
        """
        Create an account for ``payload``.

        The lookup and the create each run in their own short unit of work so
        no transaction is held open while hashing; both are bounded by the
        same deadline. The lookup is a fast path only; the unique constraint
        on ``users.username`` decides concurrent races.

        :param payload: Normalized and validated request.
        :type payload: :class:`SignUpRequest`
        :raises UserAlreadyExistsError: When the username is taken.
        :raises DeadlineExceededError: When the budget runs out between steps.
        :raises InfrastructureError: For any lookup, hashing or create failure.
        """
        deadline = self.derive_deadline(self.timeout)

        # 1) Fail fast on a taken username
        deadline.check("lookup existing user")
        try:
            with self.rw_uow(deadline=deadline) as uow:
                taken = uow.users.exists_by_username(payload.username)
        except Exception as exc:
            raise InfrastructureError("lookup existing user") from exc
        if taken:
            self._log_duplicate(payload.username)
            raise UserAlreadyExistsError(payload.username)

        # 2) Hash (CPU-bound, fixed cost)
        deadline.check("hash password")
        try:
            password_hash = self._hash(payload.password)
        except Exception as exc:
            raise InfrastructureError("hash password") from exc

        # 3) Create; only non-empty optional fields are written
        fields = NewUserFields.from_request(payload, password_hash)
        deadline.check("create user")
        try:
            with self.rw_uow(deadline=deadline) as uow:
                uow.users.create(fields.as_columns())
        except IntegrityError as exc:
            if violates(exc, USERNAME_UNIQUE_CONSTRAINT):
                self._log_duplicate(payload.username)
                raise UserAlreadyExistsError(payload.username) from exc
            raise InfrastructureError("create user") from exc
        except Exception as exc:
            raise InfrastructureError("create user") from exc

        log.info("signup.created", extra={"username": payload.username, "status": 201})

    def _hash(self, password: Secret) -> str:
        if self._hasher is not None:
            return self._hasher(password)
        return hash_password(password, method=self.hash_method)

    @staticmethod
    def _log_duplicate(username: str) -> None:
        log.info("signup.duplicate", extra={"username": username, "status": 409})
