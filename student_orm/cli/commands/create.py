"""create command - Persist the sample student graph."""

import typer

from student_orm.cli.utils import open_connection
from student_orm.data.sample import build_sample_graph
from student_orm.orm.service import StudentService


def create() -> None:
    """Create three students with their cards, projects and subjects in one transaction.

    Examples:
      student-orm create
    """
    graph = build_sample_graph()

    with open_connection() as db_conn:
        db_conn.create_schema()
        service = StudentService(db_conn.get_session_factory())
        service.create_all(graph.entities)

    for student in graph.students:
        typer.echo(repr(student))
