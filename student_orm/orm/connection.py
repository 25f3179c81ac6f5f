import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from sqlalchemy import Engine, create_engine, event, inspect
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from student_orm.config import DatabaseConfig, Driver
from student_orm.exceptions import MissingDBNameError

logger = logging.getLogger("StudentORM")

DB_URL_ENV = "STUDENT_ORM_DB_URL"


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # SQLite checks foreign keys only when asked to, once per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@dataclass
class DBConnection:
    """Database connection configuration.

    A SQLite connection needs only ``path`` (``None`` means an in-memory database).
    A PostgreSQL connection needs host, port, username, password and database.
    An explicit ``url`` takes precedence over every other field.
    """

    driver: Driver = Driver.SQLITE
    path: str | None = None
    host: str = "localhost"
    port: int = 5432
    username: str | None = None
    password: str | None = None
    database: str | None = None
    url: str | None = None
    echo: bool = False
    _engine: Engine | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def db_url(self) -> str:
        """Construct the SQLAlchemy database URL."""
        if self.url is not None:
            return self.url
        if self.driver is Driver.SQLITE:
            if self.path is None:
                return "sqlite://"
            return f"sqlite:///{Path(self.path).as_posix()}"
        if self.database is None:
            raise MissingDBNameError
        return f"postgresql+psycopg://{self.username}:{self.password}@{self.host}:{self.port}/{self.database}"

    @property
    def is_in_memory(self) -> bool:
        return self.db_url in ("sqlite://", "sqlite:///:memory:")

    def get_engine(self) -> Engine:
        """Create (once) and return the SQLAlchemy engine for this configuration."""
        if self._engine is None:
            kwargs = {}
            if self.is_in_memory:
                # Every session must see the same in-memory database.
                kwargs = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
            self._engine = create_engine(self.db_url, echo=self.echo, **kwargs)
            if self._engine.dialect.name == "sqlite":
                event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)
            logger.info(f"Created engine for {self._engine.url.render_as_string(hide_password=True)}")
        return self._engine

    def get_session_factory(self) -> sessionmaker[Session]:
        """Create a SQLAlchemy session factory bound to this connection's engine.

        Committed entities are not expired, so they stay readable after their
        Unit of Work has closed the session.
        """
        return sessionmaker(bind=self.get_engine(), expire_on_commit=False)

    def create_schema(self) -> list[str]:
        """Create all mapped tables that do not exist yet.

        Returns:
            Names of the tables present after creation.
        """
        from student_orm.orm.schema import Base

        engine = self.get_engine()
        Base.metadata.create_all(engine)
        table_names = inspect(engine).get_table_names()
        logger.info(f"Schema ready with tables: {', '.join(sorted(table_names))}")
        return table_names

    def drop_schema(self) -> None:
        """Drop all mapped tables."""
        from student_orm.orm.schema import Base

        Base.metadata.drop_all(self.get_engine())
        logger.info("Schema dropped.")

    def dispose(self) -> None:
        """Release every pooled connection held by the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    @classmethod
    def from_db_config(cls, cfg: DatabaseConfig) -> "DBConnection":
        """Build a connection from a (structured) database config."""
        driver = Driver(cfg.driver)
        password = os.environ.get("POSTGRES_PASSWORD", cfg.password)
        if driver is Driver.POSTGRESQL and password is None:
            raise ValueError("Database password not found in config or POSTGRES_PASSWORD env variable.")  # noqa: TRY003

        return cls(
            driver=driver,
            path=cfg.path,
            host=cfg.host,
            port=cfg.port,
            username=cfg.user,
            password=password,
            database=cfg.database,
            echo=cfg.echo,
        )

    @classmethod
    def from_config(cls, config_path: Path | None = None) -> "DBConnection":
        """Load database connection configuration from a YAML file.

        Args:
            config_path: Directory holding ``db.yaml``. If None, uses the CLI config path.

        Returns:
            DBConnection instance with loaded configuration.

        Raises:
            FileNotFoundError: If ``db.yaml`` does not exist.
        """
        from omegaconf import DictConfig, OmegaConf

        from student_orm import cli

        resolved_path = config_path or cli.CONFIG_PATH
        if resolved_path is None:
            raise ValueError("Config path not provided and CONFIG_PATH is not set.")  # noqa: TRY003

        config_file = Path(resolved_path) / "db.yaml"
        if not config_file.exists():
            raise FileNotFoundError(config_file)

        loaded = OmegaConf.load(config_file)
        if not isinstance(loaded, DictConfig):
            raise TypeError("db.yaml must be a YAML mapping.")  # noqa: TRY003

        cfg = OmegaConf.merge(OmegaConf.structured(DatabaseConfig), loaded)
        return cls.from_db_config(OmegaConf.to_object(cfg))

    @classmethod
    def from_env(cls) -> "DBConnection":
        """Load database connection configuration from environment variables.

        ``STUDENT_ORM_DB_URL`` wins when set. Otherwise ``POSTGRES_USER``,
        ``POSTGRES_PASSWORD`` and ``POSTGRES_DB`` select a PostgreSQL store.

        Returns:
            DBConnection instance with loaded configuration.
        """
        url = os.getenv(DB_URL_ENV)
        if url:
            return cls(url=url)

        host = os.getenv("POSTGRES_HOST", "localhost")
        port = int(os.getenv("POSTGRES_PORT", "5432"))
        username = os.getenv("POSTGRES_USER")
        password = os.getenv("POSTGRES_PASSWORD")
        database = os.getenv("POSTGRES_DB", None)

        if not all([host, port, username, password, database]):
            raise ValueError("Missing required database environment variables.")  # noqa: TRY003

        return cls(
            driver=Driver.POSTGRESQL,
            host=host,
            port=port,
            username=str(username),
            password=str(password),
            database=database,
        )
