"""Shared pytest fixtures for gsdx tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from gsdx.domain.models import Story
from gsdx.infrastructure.database import create_db_engine, init_database
from gsdx.infrastructure.repositories import StoryRepository, TaskRepository
from gsdx.services import GsdxService
from gsdx.usecases import UseCaseContext


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'gsdx.db'}"


@pytest.fixture
def db_engine(db_url: str) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(create_db_engine(db_url))
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def story_repo(db_engine: Engine) -> StoryRepository:
    return StoryRepository(db_engine)


@pytest.fixture
def task_repo(db_engine: Engine) -> TaskRepository:
    return TaskRepository(db_engine)


@pytest.fixture
def usecases(story_repo: StoryRepository, task_repo: TaskRepository) -> UseCaseContext:
    return UseCaseContext.build(story_repo, task_repo)


@pytest.fixture
def service(db_engine: Engine) -> GsdxService:
    return GsdxService.from_engine(db_engine)


@pytest.fixture
def story(story_repo: StoryRepository) -> Story:
    """A freshly created story named ``Backlog``."""
    return story_repo.create_story("Backlog")


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.delenv("GSDX_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
