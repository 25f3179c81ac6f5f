"""read command - Print a student and its related records."""

from typing import Annotated

import typer

from student_orm.cli.utils import open_connection
from student_orm.orm.uow import StudentUnitOfWork


def read(
    student_id: Annotated[int, typer.Option("--student-id", help="Student to read")] = 1,
    subject_id: Annotated[
        int | None,
        typer.Option("--subject-id", help="Subject whose students are listed (default: the 'Reading' subject)"),
    ] = None,
) -> None:
    """Print a student, its card, its projects, a subject's students and the student's subjects.

    Examples:
      student-orm read
      student-orm read --student-id 2 --subject-id 3
    """
    with open_connection() as db_conn, StudentUnitOfWork(db_conn.get_session_factory()) as uow:
        student = uow.students.require_by_id(student_id)
        typer.echo(repr(student))
        # The card is loaded on first access.
        typer.echo(repr(student.card))
        typer.echo(repr(student.projects))

        if subject_id is None:
            subject = uow.subjects.get_by_title("Reading")
        else:
            subject = uow.subjects.require_by_id(subject_id)
        typer.echo(repr(subject.students))
        typer.echo(repr(student.subjects))
