"""delete command - Delete a student."""

from typing import Annotated

import typer

from student_orm.cli.utils import open_connection
from student_orm.orm.schema import Student
from student_orm.orm.service import StudentService


def delete(
    student_id: Annotated[int, typer.Option("--student-id", help="Student to delete")] = 1,
    detach_projects: Annotated[
        bool,
        typer.Option("--detach-projects", help="Unassign the student's projects instead of refusing the delete"),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompts"),
    ] = False,
) -> None:
    """Delete a student by id.

    A student that still has projects is not deleted unless --detach-projects
    is given. Its card is kept, unowned.

    Examples:
      student-orm delete --student-id 3 --yes
      student-orm delete --student-id 1 --detach-projects
    """
    if not yes:
        confirm = typer.confirm(f"This will permanently delete Student id={student_id}. Continue?")
        if not confirm:
            typer.echo("Aborted.")
            raise typer.Exit(0)

    with open_connection() as db_conn:
        service = StudentService(db_conn.get_session_factory())
        service.delete(Student, student_id, detach_projects=detach_projects)

    typer.echo(f"Student id={student_id} deleted.")
