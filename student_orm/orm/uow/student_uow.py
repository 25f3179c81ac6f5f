"""Student Unit of Work for student-orm.

Coordinates the Student, IdCard, Project and Subject repositories inside one
transaction.
"""

from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from student_orm.exceptions import UnknownModelError
from student_orm.orm.repository.base import GenericRepository
from student_orm.orm.repository.id_card import IdCardRepository
from student_orm.orm.repository.project import ProjectRepository
from student_orm.orm.repository.student import StudentRepository
from student_orm.orm.repository.subject import SubjectRepository
from student_orm.orm.schema import IdCard, Project, Student, Subject
from student_orm.orm.uow.base import BaseUnitOfWork


class StudentUnitOfWork(BaseUnitOfWork):
    """Unit of Work for managing the student graph transactions.

    Provides lazy-initialized repositories for efficient resource usage.

    Example:
        >>> with StudentUnitOfWork(session_factory) as uow:
        ...     student = uow.students.require_by_id(1)
        ...     student.student_group = StudentGroup.DAISY
        ...     uow.commit()
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        super().__init__(session_factory)
        self._student_repo: StudentRepository | None = None
        self._id_card_repo: IdCardRepository | None = None
        self._project_repo: ProjectRepository | None = None
        self._subject_repo: SubjectRepository | None = None

    def _reset_repositories(self) -> None:
        """Reset all repository references to None."""
        self._student_repo = None
        self._id_card_repo = None
        self._project_repo = None
        self._subject_repo = None

    @property
    def students(self) -> StudentRepository:
        """Get the Student repository.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        return self._get_repository("_student_repo", StudentRepository, lambda: Student)

    @property
    def id_cards(self) -> IdCardRepository:
        """Get the IdCard repository.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        return self._get_repository("_id_card_repo", IdCardRepository, lambda: IdCard)

    @property
    def projects(self) -> ProjectRepository:
        """Get the Project repository.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        return self._get_repository("_project_repo", ProjectRepository, lambda: Project)

    @property
    def subjects(self) -> SubjectRepository:
        """Get the Subject repository.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        return self._get_repository("_subject_repo", SubjectRepository, lambda: Subject)

    def repository_for(self, model_cls: type[Any]) -> GenericRepository[Any]:
        """Return the repository managing ``model_cls``.

        Raises:
            UnknownModelError: If no repository manages this class.
            SessionNotSetError: If session is not initialized.
        """
        by_model = {
            Student: "students",
            IdCard: "id_cards",
            Project: "projects",
            Subject: "subjects",
        }
        if model_cls not in by_model:
            raise UnknownModelError(getattr(model_cls, "__name__", str(model_cls)))
        return getattr(self, by_model[model_cls])
