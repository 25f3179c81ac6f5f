"""CLI utility functions."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer

from student_orm.exceptions import (
    AmbiguousResultError,
    MissingDBNameError,
    NotFoundError,
    TransactionFailureError,
    UnknownModelError,
    ValidationFailureError,
)
from student_orm.orm.connection import DBConnection

logger = logging.getLogger("StudentORM")

DOMAIN_ERRORS = (
    NotFoundError,
    AmbiguousResultError,
    ValidationFailureError,
    TransactionFailureError,
    UnknownModelError,
)


def get_config_dir() -> Path:
    """Get the configs directory.

    Returns CONFIG_PATH if set by CLI, otherwise falls back to CWD/configs.
    """
    import student_orm.cli as cli

    return cli.CONFIG_PATH or Path.cwd() / "configs"


def load_connection() -> DBConnection:
    """Load the connection from ``db.yaml`` in the config dir, or from environment variables."""
    config_dir = get_config_dir()
    if (config_dir / "db.yaml").exists():
        return DBConnection.from_config(config_dir)
    logger.info(f"No db.yaml in {config_dir}, reading connection from environment variables")
    return DBConnection.from_env()


@contextmanager
def open_connection() -> Iterator[DBConnection]:
    """Yield the configured connection and dispose its engine on every exit path.

    Configuration and domain errors are reported on stderr and end the command
    with exit code 1.
    """
    try:
        db_conn = load_connection()
    except (ValueError, TypeError, MissingDBNameError) as e:
        typer.echo(f"Invalid database configuration: {e}", err=True)
        raise typer.Exit(1) from None

    try:
        yield db_conn
    except DOMAIN_ERRORS as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    finally:
        db_conn.dispose()
