"""update command - Move a student to another group."""

from typing import Annotated

import typer

from student_orm.cli.utils import open_connection
from student_orm.orm.schema import Student, StudentGroup
from student_orm.orm.service import StudentService


def update(
    student_id: Annotated[int, typer.Option("--student-id", help="Student to update")] = 1,
    group: Annotated[
        StudentGroup,
        typer.Option("--group", help="New group", case_sensitive=False),
    ] = StudentGroup.DAISY,
) -> None:
    """Load a student, change its group and save it in a new transaction.

    Examples:
      student-orm update
      student-orm update --student-id 3 --group rose
    """
    with open_connection() as db_conn:
        service = StudentService(db_conn.get_session_factory())
        student = service.find_by_id(Student, student_id)
        student.student_group = group
        updated = service.update(student)

    typer.echo(repr(updated))
