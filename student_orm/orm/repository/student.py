"""Student repository for student-orm.

Implements the student predicate queries: date of birth against an inline
literal or a bound parameter, and group membership.
"""

from collections.abc import Iterable
from datetime import date

from sqlalchemy import literal_column, select
from sqlalchemy.orm import Session, selectinload

from student_orm.exceptions import ValidationFailureError
from student_orm.orm.repository.base import GenericRepository
from student_orm.orm.schema import Project, Student, StudentGroup


class StudentRepository(GenericRepository[Student]):
    """Repository for Student entity with relationship loading."""

    def __init__(self, session: Session, model_cls: type[Student] = Student):
        super().__init__(session, model_cls)

    def get_by_dob(self, dob: date) -> Student:
        """Retrieve the single student born on ``dob``, passed as a bound parameter.

        Raises:
            NotFoundError: If no student has this date of birth.
            AmbiguousResultError: If several students share it.
        """
        return self.find_one(self.model_cls.dob == dob)

    def get_by_dob_literal(self, dob: str) -> Student:
        """Retrieve the single student whose date of birth equals an inline SQL literal.

        Args:
            dob: ISO date, e.g. ``"2000-01-01"``. It is parsed before being
                rendered into the statement.

        Raises:
            ValidationFailureError: If ``dob`` is not an ISO date.
            NotFoundError: If no student has this date of birth.
            AmbiguousResultError: If several students share it.
        """
        try:
            iso = date.fromisoformat(dob).isoformat()
        except ValueError:
            raise ValidationFailureError("Student", "dob", f"'{dob}' is not an ISO date") from None
        return self.find_one(self.model_cls.dob == literal_column(f"'{iso}'"))

    def get_by_groups(self, groups: Iterable[StudentGroup | str] | StudentGroup | str) -> list[Student]:
        """Retrieve every student whose group is one of ``groups``.

        Args:
            groups: Group members or their names. A single member or name is accepted too.

        Returns:
            Matching students ordered by id. Empty when ``groups`` is empty.
        """
        if isinstance(groups, (str, StudentGroup)):
            groups = [groups]
        members = [StudentGroup.parse(group) for group in groups]
        if not members:
            return []
        return self.find_many(self.model_cls.student_group.in_(members))

    def get_with_all_relations(self, student_id: int) -> Student | None:
        """Retrieve a student with card, projects and subjects eagerly loaded.

        Args:
            student_id: The student ID.

        Returns:
            The student with relations loaded, None if not found.
        """
        stmt = (
            select(self.model_cls)
            .where(self.model_cls.id == student_id)
            .options(
                selectinload(self.model_cls.card),
                selectinload(self.model_cls.projects).selectinload(Project.student),
                selectinload(self.model_cls.subjects),
            )
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def search_by_name(self, name: str, limit: int = 10) -> list[Student]:
        """Search students whose name contains ``name`` (case-insensitive)."""
        stmt = (
            select(self.model_cls)
            .where(self.model_cls.name.ilike(f"%{name}%"))
            .order_by(self.model_cls.id)
            .limit(limit)
        )
        return list(self.session.execute(stmt).scalars().all())
