"""Unit of Work (UoW) pattern implementations for student-orm.

Provides transaction management and repository coordination:
- BaseUnitOfWork: Abstract base class with common patterns
- StudentUnitOfWork: Repositories for Student, IdCard, Project and Subject
"""

from student_orm.orm.uow.base import BaseUnitOfWork
from student_orm.orm.uow.student_uow import StudentUnitOfWork

__all__ = [
    "BaseUnitOfWork",
    "StudentUnitOfWork",
]
