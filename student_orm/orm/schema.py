"""ORM schema definitions for student-orm.

Four mapped entities form a small relational graph:

- Student: owns zero-or-one IdCard (one-to-one, lazily loaded),
  an ordered list of Project (one-to-many) and a set of Subject (many-to-many).
- IdCard: inverse side of ``Student.card``.
- Project: many-to-one reference to its submitting Student.
- Subject: inverse side of ``Student.subjects``.

Both sides of every relation are kept in sync by the relationship helpers on
``Student`` (``assign_card``, ``add_project``, ``add_subject`` and their removal
counterparts).

Example:
    >>> from student_orm.orm.schema import Student, StudentGroup
    >>> jack = Student(name="Jack", dob=date(2000, 1, 1), student_group=StudentGroup.ROSE)
    >>> jack.add_subject(Subject(title="Reading"))
"""

from datetime import date
from enum import Enum
from typing import Optional

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String, Table
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship, validates

from student_orm.exceptions import UnknownModelError, ValidationFailureError


class StudentGroup(Enum):
    """Closed set of groups a student can belong to."""

    ROSE = "ROSE"
    DAISY = "DAISY"
    LOTUS = "LOTUS"

    @classmethod
    def parse(cls, raw: "str | StudentGroup") -> "StudentGroup":
        """Resolve a member from itself or its name (case-insensitive)."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls[str(raw).strip().upper()]
        except KeyError:
            raise ValidationFailureError("Student", "student_group", f"'{raw}' is not one of ROSE, DAISY, LOTUS") from None


class Base(DeclarativeBase):
    pass


student_subject = Table(
    "student_subject",
    Base.metadata,
    Column("student_id", ForeignKey("student_data.id", ondelete="CASCADE"), primary_key=True),
    Column("subject_id", ForeignKey("subject.id", ondelete="CASCADE"), primary_key=True),
)


class Student(Base):
    """Student record. Owning side of the card and subject relations."""

    __tablename__ = "student_data"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    dob: Mapped[date] = mapped_column(Date, nullable=False)
    student_group: Mapped[StudentGroup] = mapped_column(
        SAEnum(StudentGroup, native_enum=False, length=16, validate_strings=True),
        nullable=False,
    )
    card_id: Mapped[int | None] = mapped_column(ForeignKey("id_card.id"), nullable=True)

    # Relationships
    card: Mapped[Optional["IdCard"]] = relationship(back_populates="student", lazy="select")
    projects: Mapped[list["Project"]] = relationship(back_populates="student", order_by="Project.id")
    subjects: Mapped[list["Subject"]] = relationship(
        secondary=student_subject, back_populates="students", order_by="Subject.id"
    )

    @validates("student_group")
    def _validate_student_group(self, _key: str, value: "str | StudentGroup | None") -> StudentGroup | None:
        if value is None:
            return None
        return StudentGroup.parse(value)

    def assign_card(self, card: "IdCard") -> None:
        """Give this student the card. A card held by another student is taken from it."""
        previous_holder = card.student
        if previous_holder is not None and previous_holder is not self:
            previous_holder.card = None
        self.card = card

    def revoke_card(self) -> Optional["IdCard"]:
        card = self.card
        self.card = None
        return card

    def add_project(self, project: "Project") -> None:
        """Attach the project to this student, detaching it from any previous submitter."""
        if project.student is not None and project.student is not self:
            project.student.projects.remove(project)
        if project not in self.projects:
            self.projects.append(project)
        project.student = self

    def remove_project(self, project: "Project") -> None:
        if project in self.projects:
            self.projects.remove(project)
        project.student = None

    def add_subject(self, subject: "Subject") -> None:
        if subject not in self.subjects:
            self.subjects.append(subject)
        if self not in subject.students:
            subject.students.append(self)

    def remove_subject(self, subject: "Subject") -> None:
        if subject in self.subjects:
            self.subjects.remove(subject)
        if self in subject.students:
            subject.students.remove(self)

    def __repr__(self) -> str:
        group = self.student_group.name if self.student_group is not None else None
        return f"Student{{id={self.id}, name='{self.name}', dob={self.dob}, studentGroup={group}}}"


class IdCard(Base):
    """Identity card. Its lifetime follows the assignment to a student."""

    __tablename__ = "id_card"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    student: Mapped[Optional["Student"]] = relationship(back_populates="card")

    def __repr__(self) -> str:
        return f"IdCard{{id={self.id}, isActive={bool(self.is_active)}}}"


class Project(Base):
    """Project submitted by a single student."""

    __tablename__ = "project"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    submission_date: Mapped[date] = mapped_column(Date, nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    student_id: Mapped[int | None] = mapped_column("submitted_by", ForeignKey("student_data.id"), nullable=True)

    # Relationships
    student: Mapped[Optional["Student"]] = relationship(back_populates="projects")

    def __repr__(self) -> str:
        return (
            f"Project{{id={self.id}, title='{self.title}', submissionDate={self.submission_date}, "
            f"score={self.score}, student={self.student!r}}}"
        )


class Subject(Base):
    """Subject taught to any number of students."""

    __tablename__ = "subject"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    students: Mapped[list["Student"]] = relationship(
        secondary=student_subject, back_populates="subjects", order_by="Student.id"
    )

    def __repr__(self) -> str:
        return f"Subject{{id={self.id}, title='{self.title}'}}"


MODELS: dict[str, type[Base]] = {
    "Student": Student,
    "IdCard": IdCard,
    "Project": Project,
    "Subject": Subject,
}


def get_model(name: str) -> type[Base]:
    """Look up a mapped class by its class name.

    Raises:
        UnknownModelError: If no entity with that name is mapped.
    """
    try:
        return MODELS[name]
    except KeyError:
        raise UnknownModelError(name) from None


__all__ = [
    "MODELS",
    "Base",
    "IdCard",
    "Project",
    "Student",
    "StudentGroup",
    "Subject",
    "get_model",
    "student_subject",
]
