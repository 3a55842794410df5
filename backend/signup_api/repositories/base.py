"""Generic repository base for SQLAlchemy 2.x.

This module centralizes persistence-only concerns shared by repositories:
- Session resolution (injected Unit of Work session or the Flask-scoped one).
- Staging new rows and flushing to surface constraint violations early.
- No business logic, no commit/rollback; services own transactions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar, cast

from sqlalchemy.orm import Session

from signup_api.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


class BaseRepository(Generic[E]):
    """Generic, persistence-only repository for a single aggregate.

    Subclasses MUST define:

    * ``model``: the SQLAlchemy mapped class.

    Subclasses MAY override:

    * ``_creatable_fields`` to whitelist keys accepted by :meth:`create`.

    This class NEVER opens, commits or rolls back transactions.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """Initialise the repository with an optional SQLAlchemy session.

        :param session: Session shared across the Unit of Work scope.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        """Return the injected session, or the Flask-scoped one as a fallback.

        :rtype: :class:`sqlalchemy.orm.Session`
        """
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    # ------------------------------ Extensibility ----------------------------

    def _creatable_fields(self) -> set[str]:
        """Whitelist of keys accepted by :meth:`create`."""
        return set()

    # --------------------------------- CRUD ----------------------------------

    def add(self, instance: E) -> E:
        """Stage a new entity for persistence and flush to materialize the PK.

        Flushing here surfaces unique-constraint violations at the call site
        instead of at commit time.

        :param instance: New entity instance.
        :type instance: E
        :returns: The same instance after ``flush()``.
        :rtype: E
        """
        self.session.add(instance)
        self.flush()
        return instance

    def create(self, fields: Mapping[str, Any]) -> E:
        """Build a new entity from whitelisted ``fields`` and :meth:`add` it.

        :param fields: Column values keyed by attribute name.
        :type fields: Mapping[str, Any]
        :returns: The flushed entity.
        :rtype: E
        :raises ValueError: If ``fields`` contains non-creatable keys.
        """
        unknown = sorted(set(fields) - self._creatable_fields())
        if unknown:
            raise ValueError(f"Unknown or non-creatable fields: {unknown}")
        return self.add(self.model(**fields))

    def flush(self) -> None:
        """Flush pending changes to the database without committing."""
        self.session.flush()
