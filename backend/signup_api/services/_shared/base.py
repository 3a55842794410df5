# signup_api/services/_shared/base.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from signup_api.core import errors as api_errors
from signup_api.services._shared.deadline import Deadline
from signup_api.services._shared.errors import (
    InfrastructureError,
    InvalidRegistrationError,
    ServiceError,
    UserAlreadyExistsError,
)
from signup_api.uow.sqlalchemy_uow import SQLAlchemyUnitOfWork

log = logging.getLogger(__name__)

DUPLICATE_ACCOUNT_MESSAGE = "account exists, please sign in"
UNAVAILABLE_MESSAGE = "signup unavailable"


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data (tracing, time budget).

    :param request_id: Correlation id for logging/tracing.
    :param deadline: Caller's deadline; services derive tighter ones from it.
    """

    request_id: str | None = None
    deadline: Deadline | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide a helper to run read-write units of work.
    * Centralize error translation and logging.
    * Keep services thin, orchestration-only, no web/ORM leakage.

    Notes
    -----
    - Services must never touch the global session; always use a Unit of Work.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (tracing, deadline).
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self, *, deadline: Deadline | None = None) -> SQLAlchemyUnitOfWork:
        """
        Create a read-write Unit of Work bounded by ``deadline``.

        :param deadline: Optional budget applied as a statement timeout.
        :type deadline: Deadline | None
        :returns: Read-write UoW instance.
        :rtype: SQLAlchemyUnitOfWork
        """
        timeout = deadline.remaining() if deadline is not None else None
        return SQLAlchemyUnitOfWork(statement_timeout=timeout)

    def derive_deadline(self, seconds: float) -> Deadline:
        """
        Bound an operation to ``seconds``, never outliving the caller's deadline.

        :param seconds: Budget for the operation.
        :type seconds: float
        :rtype: Deadline
        """
        parent = self.ctx.deadline
        if parent is None:
            return Deadline.after(seconds)
        return parent.child(seconds)

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, UserAlreadyExistsError):
            # → 409 with the fixed sign-in hint
            return api_errors.Conflict(DUPLICATE_ACCOUNT_MESSAGE)

        if isinstance(exc, InvalidRegistrationError):
            # → 400 with the validator message
            return api_errors.BadRequest(exc.message)

        if isinstance(exc, InfrastructureError):
            # → 500; the operation only goes to logs
            log.error(
                "service.infrastructure_error operation=%s request_id=%s",
                exc.operation,
                self.ctx.request_id,
                exc_info=exc,
                extra={"operation": exc.operation},
            )
            return api_errors.Unavailable(UNAVAILABLE_MESSAGE)

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.BadRequest(str(exc))

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
