"""Task repository — the only code that reads or writes ``tasks`` rows."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, insert, select, update

from gsdx.domain.errors import NotFoundError
from gsdx.domain.ids import StoryId, TaskId
from gsdx.domain.models import Task
from gsdx.domain.types import Status
from gsdx.infrastructure.database.schema import tasks
from gsdx.infrastructure.repositories.base import SqlRepository, as_utc, translate_errors, utcnow

# Upper bound on tasks returned for one story.
MAX_TASKS = 100

_COLUMNS = (
    tasks.c.id,
    tasks.c.story_id,
    tasks.c.name,
    tasks.c.status,
    tasks.c.created_at,
    tasks.c.updated_at,
)


def _to_task(row: Any) -> Task:
    return Task(
        id=TaskId(row.id),
        story_id=StoryId(row.story_id),
        name=row.name,
        status=Status.parse(row.status),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class TaskRepository(SqlRepository):
    """SQL implementation of :class:`~gsdx.domain.stores.TaskStore`."""

    def fetch_task(self, task_id: TaskId) -> Task:
        """Select a task by id."""
        stmt = select(*_COLUMNS).where(tasks.c.id == task_id)
        with translate_errors(), self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        if row is None:
            raise NotFoundError(f"task not found: {task_id}")
        return _to_task(row)

    def list_tasks(self, story_id: StoryId) -> list[Task]:
        """Select up to :data:`MAX_TASKS` tasks of a story, oldest first."""
        stmt = (
            select(*_COLUMNS)
            .where(tasks.c.story_id == story_id)
            .order_by(tasks.c.created_at)
            .limit(MAX_TASKS)
        )
        with translate_errors(), self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [_to_task(row) for row in rows]

    def create_task(self, story_id: StoryId, name: str, status: Status) -> Task:
        """Insert a new task.

        The parent story is not checked here; a dangling ``story_id`` is
        rejected by the foreign key and surfaces as InvalidArgsError.
        """
        now = utcnow()
        stmt = (
            insert(tasks)
            .values(
                story_id=story_id,
                name=name,
                status=str(status),
                created_at=now,
                updated_at=now,
            )
            .returning(*_COLUMNS)
        )
        with translate_errors(), self._engine.begin() as conn:
            row = conn.execute(stmt).one()
        return _to_task(row)

    def update_task(self, task_id: TaskId, name: str, status: Status) -> Task:
        """Overwrite name and status and refresh ``updated_at``."""
        stmt = (
            update(tasks)
            .where(tasks.c.id == task_id)
            .values(name=name, status=str(status), updated_at=utcnow())
            .returning(*_COLUMNS)
        )
        with translate_errors(), self._engine.begin() as conn:
            row = conn.execute(stmt).first()
        if row is None:
            raise NotFoundError(f"task not found: {task_id}")
        return _to_task(row)

    def delete_task(self, task_id: TaskId) -> None:
        """Delete a single task."""
        with translate_errors(), self._engine.begin() as conn:
            result = conn.execute(delete(tasks).where(tasks.c.id == task_id))
        if result.rowcount == 0:
            raise NotFoundError(f"task not found: {task_id}")
