"""Repository package for student-orm.

Provides the generic repository and one repository per entity.
Transactions are managed by ``student_orm.orm.uow``.
"""

from student_orm.orm.repository.base import GenericRepository, repository_context
from student_orm.orm.repository.id_card import IdCardRepository
from student_orm.orm.repository.project import ProjectRepository
from student_orm.orm.repository.student import StudentRepository
from student_orm.orm.repository.subject import SubjectRepository

__all__ = [
    "GenericRepository",
    "IdCardRepository",
    "ProjectRepository",
    "StudentRepository",
    "SubjectRepository",
    "repository_context",
]
