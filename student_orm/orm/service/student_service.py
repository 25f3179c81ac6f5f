"""Student service for student-orm.

Exposes the access operations over the student graph. Every call runs in its
own Unit of Work: writes commit atomically, and returned entities have their
relationships loaded so they remain usable after the session is closed.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import date
from typing import Any

from sqlalchemy import ColumnElement

from student_orm.exceptions import DependentRecordsError, SessionNotSetError
from student_orm.orm.schema import MODELS, Student, StudentGroup
from student_orm.orm.service.base import BaseService
from student_orm.orm.uow.student_uow import StudentUnitOfWork

logger = logging.getLogger("StudentORM")


class StudentService(BaseService):
    """Create, read, update, delete and query entities of the student graph.

    Example:
        >>> service = StudentService(DBConnection.from_config().get_session_factory())
        >>> ids = service.create_all([jack, lee])
        >>> service.find_by_id(Student, ids[0]).name
        'Jack'
    """

    def _create_uow(self) -> StudentUnitOfWork:
        return StudentUnitOfWork(self.session_factory)

    def _get_schema_classes(self) -> dict[str, Any]:
        return dict(MODELS)

    def create_all(self, entities: Sequence[Any]) -> list[int]:
        """Persist a batch of new entities, with their relationships, in one transaction.

        Related entities reachable from the batch are persisted too. Either
        the whole batch is committed or nothing is.

        Args:
            entities: New entities of any mapped type.

        Returns:
            The store-assigned ids, in the order of ``entities``.

        Raises:
            ValidationFailureError: If an entity misses a required field.
            TransactionFailureError: If the store rejects the batch.
        """
        with self._create_uow() as uow:
            if uow.session is None:
                raise SessionNotSetError
            uow.session.add_all(entities)
            uow.flush()
            ids = [entity.id for entity in entities]
            uow.commit()
        logger.info(f"Committed batch of {len(ids)} entities")
        return ids

    def find_by_id(self, model: type | str, _id: int) -> Any:
        """Retrieve an entity by identity.

        Raises:
            NotFoundError: If no entity of this type has the id.
        """
        model_cls = self._resolve_model(model)
        with self._create_uow() as uow:
            repo = uow.repository_for(model_cls)
            return repo.load_graph(repo.require_by_id(_id))

    def find_one(self, model: type | str, *predicates: ColumnElement[bool]) -> Any:
        """Retrieve exactly one entity matching the predicates.

        Raises:
            NotFoundError: If nothing matches.
            AmbiguousResultError: If more than one entity matches.
        """
        model_cls = self._resolve_model(model)
        with self._create_uow() as uow:
            repo = uow.repository_for(model_cls)
            return repo.load_graph(repo.find_one(*predicates))

    def find_many(self, model: type | str, *predicates: ColumnElement[bool]) -> list[Any]:
        """Retrieve all entities matching the predicates. May be empty."""
        model_cls = self._resolve_model(model)
        with self._create_uow() as uow:
            repo = uow.repository_for(model_cls)
            return [repo.load_graph(entity) for entity in repo.find_many(*predicates)]

    def update(self, entity: Any) -> Any:
        """Re-submit a loaded and mutated entity in a new transaction.

        Returns:
            The stored entity after the update.

        Raises:
            NotFoundError: If the entity's identity no longer exists.
            ValidationFailureError: If a required field was cleared.
            TransactionFailureError: If the store rejects the commit.
        """
        model_cls = self._resolve_model(type(entity))
        with self._create_uow() as uow:
            repo = uow.repository_for(model_cls)
            merged = repo.update(entity)
            uow.commit()
            repo.load_graph(merged)
        logger.info(f"Updated {model_cls.__name__} id={merged.id}")
        return merged

    def delete(self, model: type | str, _id: int, *, detach_projects: bool = False) -> None:
        """Delete an entity by identity.

        A student's subject links are removed with it and its card is left
        unowned. A student that still has projects is only deleted when
        ``detach_projects`` is set; the projects are then unassigned in the
        same transaction.

        Raises:
            NotFoundError: If no entity of this type has the id.
            DependentRecordsError: If the student still has projects.
            TransactionFailureError: If the store rejects the commit.
        """
        model_cls = self._resolve_model(model)
        with self._create_uow() as uow:
            repo = uow.repository_for(model_cls)
            entity = repo.require_by_id(_id)
            if isinstance(entity, Student) and entity.projects:
                if not detach_projects:
                    raise DependentRecordsError("Student", "projects", len(entity.projects))
                for project in list(entity.projects):
                    entity.remove_project(project)
                logger.info(f"Detached projects from Student id={_id}")
            repo.delete(entity)
            uow.commit()
        logger.info(f"Deleted {model_cls.__name__} id={_id}")

    def find_student_by_dob_literal(self, dob: str) -> Student:
        """Retrieve the student born on ``dob`` using an inline date literal."""
        with self._create_uow() as uow:
            return uow.students.load_graph(uow.students.get_by_dob_literal(dob))

    def find_student_by_dob(self, dob: date) -> Student:
        """Retrieve the student born on ``dob`` using a bound parameter."""
        with self._create_uow() as uow:
            return uow.students.load_graph(uow.students.get_by_dob(dob))

    def find_students_in_groups(self, groups: Iterable[StudentGroup | str]) -> list[Student]:
        """Retrieve every student belonging to one of ``groups``."""
        with self._create_uow() as uow:
            return [uow.students.load_graph(s) for s in uow.students.get_by_groups(groups)]

    def add_subjects(self, titles: list[str]) -> list[int]:
        """Create subjects from their titles."""
        return self._add([{"title": title} for title in titles], "Subject")
