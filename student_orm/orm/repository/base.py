"""Repository layer for student-orm.

Each repository wraps the session of its Unit of Work and offers CRUD and
predicate queries for one mapped class. Committing is left to the Unit of Work.
"""

from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import MultipleResultsFound, NoResultFound
from sqlalchemy.orm import Session

from student_orm.exceptions import AmbiguousResultError, NoSessionError, NotFoundError
from student_orm.orm.util import load_relationships

T = TypeVar("T")


def describe_predicates(predicates: tuple[ColumnElement[bool], ...]) -> str:
    """Render predicates for error messages."""
    if not predicates:
        return "no criteria"
    return " AND ".join(str(predicate) for predicate in predicates)


class GenericRepository(Generic[T]):
    """CRUD and predicate queries for a single mapped class.

    Entity repositories subclass it and add their own queries.
    """

    def __init__(self, session: Session, model_cls: type[T]):
        """
        Args:
            session: Session of the owning Unit of Work.
            model_cls: Mapped class handled by this repository.
        """
        self.session = session
        self.model_cls = model_cls

    @property
    def model_name(self) -> str:
        return self.model_cls.__name__

    def add(self, entity: T) -> T:
        """Stage a new entity. It is inserted on the next flush."""
        self.session.add(entity)
        return entity

    def add_all(self, entities: list[T]) -> list[T]:
        self.session.add_all(entities)
        return entities

    def get_by_id(self, _id: Any) -> T | None:
        """Look an entity up by primary key; None when absent."""
        return self.session.get(self.model_cls, _id)

    def require_by_id(self, _id: Any) -> T:
        """Look an entity up by primary key.

        Raises:
            NotFoundError: If no entity has this primary key.
        """
        entity = self.get_by_id(_id)
        if entity is None:
            raise NotFoundError(self.model_name, f"id={_id}")
        return entity

    def get_all(self, limit: int | None = None, offset: int | None = None) -> list[T]:
        """Every entity of this type, ordered by primary key.

        Args:
            limit: Page size. No limit when None.
            offset: Rows to skip before the page starts.
        """
        stmt = select(self.model_cls).order_by(self.model_cls.id)
        if offset:
            stmt = stmt.offset(offset)
        if limit:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars().all())

    def find_one(self, *predicates: ColumnElement[bool]) -> T:
        """Return the only entity matching all predicates.

        Args:
            *predicates: Boolean column expressions, e.g. ``Student.dob == date(1999, 1, 1)``.

        Raises:
            NotFoundError: If nothing matches.
            AmbiguousResultError: If more than one entity matches.
        """
        stmt = select(self.model_cls).where(*predicates)
        try:
            return self.session.execute(stmt).scalars().one()
        except NoResultFound:
            raise NotFoundError(self.model_name, describe_predicates(predicates)) from None
        except MultipleResultsFound:
            raise AmbiguousResultError(self.model_name, describe_predicates(predicates)) from None

    def find_many(self, *predicates: ColumnElement[bool]) -> list[T]:
        """Return every entity matching all predicates, ordered by primary key. May be empty."""
        stmt = select(self.model_cls).where(*predicates).order_by(self.model_cls.id)
        return list(self.session.execute(stmt).scalars().all())

    def update(self, entity: T) -> T:
        """Copy the state of a previously loaded entity onto its stored row.

        Args:
            entity: A loaded entity, possibly detached from its original session.

        Returns:
            The copy bound to this repository's session.

        Raises:
            NotFoundError: If the entity was never stored or has been deleted since.
        """
        _id = getattr(entity, "id", None)
        if _id is None or self.get_by_id(_id) is None:
            raise NotFoundError(self.model_name, f"id={_id}")
        return self.session.merge(entity)

    def delete(self, entity: T) -> None:
        self.session.delete(entity)

    def delete_by_id(self, _id: Any) -> bool:
        """Stage deletion by primary key. Returns False when there is nothing to delete."""
        entity = self.get_by_id(_id)
        if entity:
            self.delete(entity)
            return True
        return False

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model_cls)
        return self.session.execute(stmt).scalar_one()

    def exists(self, _id: Any) -> bool:
        return self.get_by_id(_id) is not None

    def load_graph(self, entity: T) -> T:
        """Load the entity's relationships so they survive the session closing."""
        return load_relationships(entity)


@contextmanager
def repository_context(session_factory, model_cls: type[T]):
    """Open a Unit of Work and hand out the repository of one mapped class.

    Yields:
        ``(repository, unit_of_work)``. Call ``unit_of_work.commit()`` to keep changes.

    Example:
        >>> with repository_context(SessionFactory, Subject) as (repo, uow):
        ...     subject = repo.require_by_id(1)
        ...     subject.title = "Reading"
        ...     uow.commit()
    """
    from student_orm.orm.uow.student_uow import StudentUnitOfWork

    with StudentUnitOfWork(session_factory) as uow:
        if uow.session is None:
            raise NoSessionError
        yield uow.repository_for(model_cls), uow
