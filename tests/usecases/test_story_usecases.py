"""Tests for the story use cases."""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy.engine import Engine

from gsdx.domain.errors import NotFoundError
from gsdx.domain.ids import StoryId
from gsdx.domain.models import Story
from gsdx.infrastructure.repositories import StoryRepository, TaskRepository
from gsdx.usecases import UseCaseContext
from gsdx.usecases.story import PageArgs, UpdateStoryArgs


class _CountingStories(StoryRepository):
    """Repository that records how often ``update_story`` writes."""

    writes = 0

    def update_story(self, story_id: StoryId, name: str) -> Story:
        self.writes += 1
        return super().update_story(story_id, name)


class TestCreateAndList:
    def test_create_then_list(self, usecases: UseCaseContext) -> None:
        created = usecases.stories.create_story.execute("Backlog")
        next_cursor, page = usecases.stories.list_stories.execute(PageArgs(1, 10))
        assert page == [created]
        assert next_cursor == created.seqno + 1


class TestUpdateStory:
    def test_same_name_is_noop(self, usecases: UseCaseContext, story: Story) -> None:
        result = usecases.stories.update_story.execute(UpdateStoryArgs(story.id, story.name))
        assert result == story
        assert result.updated_at == story.updated_at

    def test_same_name_skips_write(self, db_engine: Engine, story: Story) -> None:
        stories = _CountingStories(db_engine)
        ctx = UseCaseContext.build(stories, TaskRepository(db_engine))
        ctx.stories.update_story.execute(UpdateStoryArgs(story.id, story.name))
        assert stories.writes == 0
        ctx.stories.update_story.execute(UpdateStoryArgs(story.id, "Sprint 1"))
        assert stories.writes == 1

    def test_new_name_advances_updated_at(self, usecases: UseCaseContext, story: Story) -> None:
        result = usecases.stories.update_story.execute(UpdateStoryArgs(story.id, "Sprint 1"))
        assert result.name == "Sprint 1"
        assert result.updated_at > story.updated_at

    def test_unknown_id_is_not_found(self, usecases: UseCaseContext) -> None:
        with pytest.raises(NotFoundError):
            usecases.stories.update_story.execute(UpdateStoryArgs(StoryId(uuid.uuid4()), "x"))


class TestDeleteStory:
    def test_delete_removes_story_and_tasks(self, usecases: UseCaseContext, story: Story) -> None:
        from gsdx.usecases.task import CreateTaskArgs

        usecases.tasks.create_task.execute(CreateTaskArgs(story.id, "a"))
        usecases.tasks.create_task.execute(CreateTaskArgs(story.id, "b"))
        usecases.stories.delete_story.execute(story.id)
        with pytest.raises(NotFoundError):
            usecases.tasks.list_tasks.execute(story.id)

    def test_unknown_id_is_not_found(self, usecases: UseCaseContext) -> None:
        with pytest.raises(NotFoundError):
            usecases.stories.delete_story.execute(StoryId(uuid.uuid4()))

    def test_callable_alias(self, usecases: UseCaseContext, story: Story) -> None:
        usecases.stories.delete_story(story.id)
        with pytest.raises(NotFoundError):
            usecases.stories.delete_story(story.id)
