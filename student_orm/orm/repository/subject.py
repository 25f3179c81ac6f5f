"""Subject repository for student-orm."""

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from student_orm.orm.repository.base import GenericRepository
from student_orm.orm.schema import Subject


class SubjectRepository(GenericRepository[Subject]):
    """Repository for Subject entity with student loading."""

    def __init__(self, session: Session, model_cls: type[Subject] = Subject):
        super().__init__(session, model_cls)

    def get_by_title(self, title: str) -> Subject:
        """Retrieve the single subject with this exact title.

        Raises:
            NotFoundError: If no subject has this title.
            AmbiguousResultError: If several subjects share it.
        """
        return self.find_one(self.model_cls.title == title)

    def get_with_students(self, subject_id: int) -> Subject | None:
        """Retrieve a subject with its students eagerly loaded.

        Args:
            subject_id: The subject ID.

        Returns:
            The subject with students loaded, None if not found.
        """
        stmt = (
            select(self.model_cls)
            .where(self.model_cls.id == subject_id)
            .options(selectinload(self.model_cls.students))
        )
        return self.session.execute(stmt).scalar_one_or_none()
