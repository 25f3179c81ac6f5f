"""init command - Write the default database config and create the tables."""

import logging

import typer
from omegaconf import OmegaConf

from student_orm.cli.utils import get_config_dir, open_connection
from student_orm.config import DatabaseConfig

logger = logging.getLogger("StudentORM")


def init() -> None:
    """Write a default db.yaml to the config directory and create the tables.

    An existing db.yaml is never overwritten. Tables that already exist are
    left untouched.

    Examples:
      student-orm init
      student-orm --config-path=/my/configs init
    """
    config_dir = get_config_dir()
    config_file = config_dir / "db.yaml"

    if config_file.exists():
        logger.info(f"  [skip] {config_file} (already exists)")
    else:
        config_dir.mkdir(parents=True, exist_ok=True)
        OmegaConf.save(OmegaConf.structured(DatabaseConfig), config_file)
        logger.info(f"  [ok] {config_file}")

    with open_connection() as db_conn:
        tables = db_conn.create_schema()

    typer.echo(f"Tables ready: {', '.join(sorted(tables))}")
