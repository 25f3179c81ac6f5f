"""Base Unit of Work for student-orm.

A Unit of Work owns one session and therefore one transaction. Every
repository it hands out shares that session, so a group of changes is either
committed together or discarded together.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from typing_extensions import Self

from student_orm.exceptions import SessionNotSetError, TransactionFailureError
from student_orm.orm.util import register_validation

logger = logging.getLogger("StudentORM")


class BaseUnitOfWork(ABC):
    """Transaction boundary shared by a set of repositories.

    Use it as a context manager. Entering opens a session with flush-time
    validation, leaving closes it, and leaving through an exception rolls the
    transaction back first. Repositories are created on first access and
    dropped when the session closes.

    Concrete units of work expose one property per repository, built with
    `_get_repository()`, and clear their cache in `_reset_repositories()`.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        """
        Args:
            session_factory: Builds the session opened on `__enter__`.
        """
        self.session_factory = session_factory
        self.session: Session | None = None

    def __enter__(self) -> Self:
        self.session = self.session_factory()
        register_validation(self.session)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is not None:
            self.rollback()
        if self.session:
            self.session.close()
            self.session = None
        self._reset_repositories()

    @abstractmethod
    def _reset_repositories(self) -> None:
        """Forget every cached repository; they are bound to the closed session."""
        ...

    @classmethod
    def available_repositories(cls) -> list[str]:
        """Names of the repository properties this UoW exposes, sorted."""
        return sorted(
            name
            for name in dir(cls)
            if isinstance(getattr(cls, name, None), property) and name not in BaseUnitOfWork.__dict__
        )

    def _get_repository(
        self,
        repo_attr: str,
        repo_class: type,
        schema_class_getter: Callable[[], type],
    ) -> Any:
        """Return the repository cached under ``repo_attr``, building it on first use.

        Args:
            repo_attr: Private attribute holding the cached repository, e.g. "_student_repo".
            repo_class: Repository type to build.
            schema_class_getter: Returns the mapped class the repository manages.

        Raises:
            SessionNotSetError: If called outside the ``with`` block.
        """
        if self.session is None:
            raise SessionNotSetError

        cached_repo = getattr(self, repo_attr, None)
        if cached_repo is not None:
            return cached_repo

        repo = repo_class(self.session, schema_class_getter())
        setattr(self, repo_attr, repo)
        return repo

    def commit(self) -> None:
        """Write every pending change and end the transaction.

        Raises:
            TransactionFailureError: If the store rejects the commit. Nothing
                of the transaction is kept.
        """
        if self.session is None:
            return
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self._abort("Commit", e)

    def rollback(self) -> None:
        if self.session:
            self.session.rollback()

    def flush(self) -> None:
        """Send pending changes to the store inside the open transaction.

        Raises:
            TransactionFailureError: If the store rejects the pending changes.
        """
        if self.session is None:
            return
        try:
            self.session.flush()
        except SQLAlchemyError as e:
            self._abort("Flush", e)

    def _abort(self, operation: str, error: SQLAlchemyError) -> None:
        self.rollback()
        logger.exception(f"{operation} failed, transaction rolled back")
        reason = str(getattr(error, "orig", None) or error)
        raise TransactionFailureError(reason) from error

    def __repr__(self) -> str:
        state = "open" if self.session is not None else "closed"
        return f"{type(self).__name__}(session={state}, repositories={self.available_repositories()})"
