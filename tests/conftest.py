from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from sqlalchemy.orm import Session, sessionmaker

from student_orm.data.sample import SampleGraph, build_sample_graph
from student_orm.orm.connection import DBConnection
from student_orm.orm.service import StudentService


@pytest.fixture
def db_connection(tmp_path: Path) -> Generator[DBConnection, Any, None]:
    """Create a SQLite database file with all tables for one test.

    Each session gets its own connection, so reloading in a new Unit of Work
    really reads back what was committed. The engine is disposed after the test.
    """
    conn = DBConnection(path=str(tmp_path / "student_orm_test.db"))
    conn.create_schema()

    yield conn

    conn.dispose()


@pytest.fixture
def session_factory(db_connection: DBConnection) -> sessionmaker[Session]:
    return db_connection.get_session_factory()


@pytest.fixture
def db_session(session_factory) -> Generator[Session, Any, None]:
    """Create a new database session for each test.

    The session is rolled back after the test.
    """
    session = session_factory()

    yield session

    session.rollback()
    session.close()


@pytest.fixture
def service(session_factory) -> StudentService:
    return StudentService(session_factory)


@pytest.fixture
def sample_graph(service: StudentService) -> SampleGraph:
    """Persist the Jack / Lee / Amal sample graph and return its (now identified) entities."""
    graph = build_sample_graph()
    service.create_all(graph.entities)
    return graph
