"""query command - Run the student predicate queries."""

from datetime import datetime
from typing import Annotated

import typer

from student_orm.cli.utils import open_connection
from student_orm.orm.schema import StudentGroup
from student_orm.orm.service import StudentService

DEFAULT_GROUPS = [StudentGroup.DAISY, StudentGroup.ROSE]


def query(
    dob_literal: Annotated[
        str, typer.Option("--dob-literal", help="Date of birth compared as an inline SQL literal")
    ] = "2000-01-01",
    dob: Annotated[
        datetime,
        typer.Option("--dob", help="Date of birth compared as a bound parameter", formats=["%Y-%m-%d"]),
    ] = datetime(1999, 1, 1),
    groups: Annotated[
        list[StudentGroup] | None,
        typer.Option("--group", help="Group to match, repeatable (default: DAISY and ROSE)", case_sensitive=False),
    ] = None,
) -> None:
    """Print the student matching each date of birth, then the students in the given groups.

    Examples:
      student-orm query
      student-orm query --dob 1980-01-01 --group lotus
    """
    with open_connection() as db_conn:
        service = StudentService(db_conn.get_session_factory())
        typer.echo(repr(service.find_student_by_dob_literal(dob_literal)))
        typer.echo(repr(service.find_student_by_dob(dob.date())))
        typer.echo(repr(service.find_students_in_groups(groups or DEFAULT_GROUPS)))
