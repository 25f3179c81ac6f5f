"""Project repository for student-orm."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from student_orm.orm.repository.base import GenericRepository
from student_orm.orm.schema import Project


class ProjectRepository(GenericRepository[Project]):
    """Repository for Project entity."""

    def __init__(self, session: Session, model_cls: type[Project] = Project):
        super().__init__(session, model_cls)

    def get_by_student(self, student_id: int) -> list[Project]:
        """Retrieve the projects submitted by a student, ordered by id.

        Args:
            student_id: The submitting student's ID.

        Returns:
            The student's projects. Empty if none.
        """
        return self.find_many(self.model_cls.student_id == student_id)

    def count_by_student(self, student_id: int) -> int:
        """Count the projects submitted by a student."""
        stmt = select(func.count()).select_from(self.model_cls).where(self.model_cls.student_id == student_id)
        return self.session.execute(stmt).scalar_one()

    def get_unassigned(self) -> list[Project]:
        """Retrieve projects that no student has submitted."""
        return self.find_many(self.model_cls.student_id.is_(None))
