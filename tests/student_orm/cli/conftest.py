"""Shared fixtures for CLI tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

import student_orm.cli as cli


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CliRunner for testing commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_config_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset cli.CONFIG_PATH to None before test."""
    monkeypatch.setattr(cli, "CONFIG_PATH", None)
    monkeypatch.delenv("STUDENT_ORM_CONFIG_PATH", raising=False)
    monkeypatch.delenv("STUDENT_ORM_DB_URL", raising=False)
    monkeypatch.delenv("POSTGRES_PASSWORD", raising=False)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Create a config directory whose db.yaml points at a SQLite file in tmp_path."""
    config_dir = tmp_path / "configs"
    config_dir.mkdir()
    db_file = (tmp_path / "cli_test.db").as_posix()
    (config_dir / "db.yaml").write_text(f"driver: sqlite\npath: {db_file}\n")
    return config_dir


@pytest.fixture
def cli_args(config_dir: Path) -> list[str]:
    """Global options selecting the temporary config directory."""
    return ["--config-path", str(config_dir)]


@pytest.fixture
def created(cli_runner: CliRunner, cli_args: list[str]) -> list[str]:
    """Run ``create`` once so the sample graph is stored."""
    from student_orm.cli.app import app

    result = cli_runner.invoke(app, [*cli_args, "create"])
    assert result.exit_code == 0, result.output
    return cli_args
