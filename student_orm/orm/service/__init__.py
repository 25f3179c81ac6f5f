"""Service layer for student-orm."""

from student_orm.orm.service.base import BaseService
from student_orm.orm.service.student_service import StudentService

__all__ = ["BaseService", "StudentService"]
