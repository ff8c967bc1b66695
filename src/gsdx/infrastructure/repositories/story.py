"""Story repository — the only code that reads or writes ``stories`` rows."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, insert, select, update

from gsdx.domain.errors import NotFoundError
from gsdx.domain.ids import StoryId
from gsdx.domain.models import Story
from gsdx.infrastructure.database.schema import stories, tasks
from gsdx.infrastructure.repositories.base import SqlRepository, as_utc, translate_errors, utcnow

_COLUMNS = (
    stories.c.id,
    stories.c.name,
    stories.c.seqno,
    stories.c.created_at,
    stories.c.updated_at,
)


def _to_story(row: Any) -> Story:
    return Story(
        id=StoryId(row.id),
        name=row.name,
        seqno=row.seqno,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class StoryRepository(SqlRepository):
    """SQL implementation of :class:`~gsdx.domain.stores.StoryStore`."""

    def fetch_story(self, story_id: StoryId) -> Story:
        """Select a story by id."""
        stmt = select(*_COLUMNS).where(stories.c.id == story_id)
        with translate_errors(), self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        if row is None:
            raise NotFoundError(f"story not found: {story_id}")
        return _to_story(row)

    def list_stories(self, cursor: int, limit: int) -> tuple[int, list[Story]]:
        """Select a page of stories starting at *cursor* (inclusive).

        Returns ``(next_cursor, stories)`` where ``next_cursor`` is one past
        the last returned ``seqno``, or ``0`` when the page is empty.
        """
        stmt = (
            select(*_COLUMNS)
            .where(stories.c.seqno >= cursor)
            .order_by(stories.c.seqno)
            .limit(limit)
        )
        with translate_errors(), self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        page = [_to_story(row) for row in rows]
        next_cursor = page[-1].seqno + 1 if page else 0
        return next_cursor, page

    def create_story(self, name: str) -> Story:
        """Insert a new story; the store assigns id, seqno, and timestamps."""
        now = utcnow()
        stmt = (
            insert(stories)
            .values(name=name, created_at=now, updated_at=now)
            .returning(*_COLUMNS)
        )
        with translate_errors(), self._engine.begin() as conn:
            row = conn.execute(stmt).one()
        return _to_story(row)

    def update_story(self, story_id: StoryId, name: str) -> Story:
        """Overwrite the story name and refresh ``updated_at``.

        Zero affected rows (the story vanished after an upstream check)
        raises NotFoundError.
        """
        stmt = (
            update(stories)
            .where(stories.c.id == story_id)
            .values(name=name, updated_at=utcnow())
            .returning(*_COLUMNS)
        )
        with translate_errors(), self._engine.begin() as conn:
            row = conn.execute(stmt).first()
        if row is None:
            raise NotFoundError(f"story not found: {story_id}")
        return _to_story(row)

    def delete_story(self, story_id: StoryId) -> None:
        """Delete a story and all of its tasks in one transaction.

        Tasks go first, then the story. Any failure (including a missing
        story row) rolls back both deletes.
        """
        with translate_errors(), self._engine.begin() as conn:
            conn.execute(delete(tasks).where(tasks.c.story_id == story_id))
            result = conn.execute(delete(stories).where(stories.c.id == story_id))
            if result.rowcount == 0:
                raise NotFoundError(f"story not found: {story_id}")
