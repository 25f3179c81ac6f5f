"""IdCard repository for student-orm."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from student_orm.orm.repository.base import GenericRepository
from student_orm.orm.schema import IdCard, Student


class IdCardRepository(GenericRepository[IdCard]):
    """Repository for IdCard entity."""

    def __init__(self, session: Session, model_cls: type[IdCard] = IdCard):
        super().__init__(session, model_cls)

    def get_active(self) -> list[IdCard]:
        """Retrieve every active card ordered by id."""
        return self.find_many(self.model_cls.is_active.is_(True))

    def get_by_student_id(self, student_id: int) -> IdCard | None:
        """Retrieve the card held by a student.

        Args:
            student_id: The holder's ID.

        Returns:
            The card, None if the student holds none or does not exist.
        """
        stmt = select(self.model_cls).join(Student, Student.card_id == self.model_cls.id).where(Student.id == student_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def get_unassigned(self) -> list[IdCard]:
        """Retrieve cards that no student holds."""
        stmt = (
            select(self.model_cls)
            .outerjoin(Student, Student.card_id == self.model_cls.id)
            .where(Student.id.is_(None))
            .order_by(self.model_cls.id)
        )
        return list(self.session.execute(stmt).scalars().all())
