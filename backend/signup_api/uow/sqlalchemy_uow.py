"""
SQLAlchemy implementation of UnitOfWork for Flask.
"""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from signup_api.core.extensions import db
from signup_api.repositories import UserRepository
from signup_api.uow.base import UnitOfWork

log = logging.getLogger(__name__)


class SQLAlchemyRepositoryContainer:
    """Provide repository instances that share a SQLAlchemy session."""

    def __init__(self, *, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session=self.session)


class SQLAlchemyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    SQLAlchemy-backed UoW using the Flask-scoped session.

    The same session is shared across all repositories for a consistent
    transaction.

    Parameters
    ----------
    statement_timeout:
        Optional per-statement budget in seconds. On PostgreSQL it is applied
        with ``SET LOCAL statement_timeout`` so the server cancels statements
        that outlive the caller's deadline. Other dialects ignore it.
    """

    def __init__(self, *, statement_timeout: float | None = None) -> None:
        super().__init__(session=db.session)
        self.statement_timeout = statement_timeout

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        if self.statement_timeout is not None:
            self._apply_statement_timeout(self.statement_timeout)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            try:
                self.commit()
            except Exception:
                self.rollback()
                raise
        else:
            self.rollback()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def _apply_statement_timeout(self, seconds: float) -> None:
        """Bound statements in the current transaction (PostgreSQL only)."""
        dialect = self.session.get_bind().dialect.name
        if dialect != "postgresql":
            return
        millis = max(int(seconds * 1000), 1)
        try:
            self.session.execute(text(f"SET LOCAL statement_timeout = {millis}"))
        except SQLAlchemyError:
            # A failed statement aborts the PostgreSQL transaction
            log.warning("SET LOCAL statement_timeout failed; rolling back.")
            self.rollback()
            raise
