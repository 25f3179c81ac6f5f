"""Typer application wiring the student-orm commands together."""

import logging
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Annotated

import typer

import student_orm.cli as cli
from student_orm.cli.commands.create import create
from student_orm.cli.commands.delete import delete
from student_orm.cli.commands.init import init
from student_orm.cli.commands.query import query
from student_orm.cli.commands.read import read
from student_orm.cli.commands.update import update

logging.basicConfig(level=logging.INFO, format="%(message)s")

app = typer.Typer(
    name="student-orm",
    help="Create, read, update, delete and query the student graph.",
    no_args_is_help=True,
    add_completion=False,
)


def show_version(value: bool) -> None:
    if value:
        typer.echo(f"student-orm {get_version('student-orm')}")
        raise typer.Exit()


@app.callback()
def main_callback(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config-path",
            "-cp",
            help="Directory holding db.yaml (default: ./configs)",
            envvar="STUDENT_ORM_CONFIG_PATH",
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", help="Print the installed version", callback=show_version, is_eager=True),
    ] = None,
) -> None:
    """Options shared by every command."""
    cli.CONFIG_PATH = (config_path or Path.cwd() / "configs").resolve()


for command in (init, create, read, update, delete, query):
    app.command(name=command.__name__)(command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
