"""Configuration dataclasses for student-orm.

``DatabaseConfig`` describes the layout of ``db.yaml``. It is used as the
structured base that user config files are merged onto, so missing keys fall
back to these defaults.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Driver(Enum):
    """Supported store back ends."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


@dataclass
class DatabaseConfig:
    """Database connection configuration.

    Attributes:
        driver: ``sqlite`` (default) or ``postgresql``.
        path: SQLite database file. Relative paths resolve from the working directory.
            ``null`` selects an in-memory database.
        host: PostgreSQL host.
        port: PostgreSQL port.
        user: PostgreSQL user.
        password: PostgreSQL password. ``POSTGRES_PASSWORD`` overrides it.
        database: PostgreSQL database name.
        echo: Log every SQL statement through SQLAlchemy.
    """

    driver: str = Driver.SQLITE.value
    path: Optional[str] = "student_orm.db"
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: Optional[str] = None
    database: Optional[str] = None
    echo: bool = False
