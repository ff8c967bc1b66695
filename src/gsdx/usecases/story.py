"""Story use cases: create, list, update, delete."""

from __future__ import annotations

from dataclasses import dataclass

from gsdx.domain.ids import StoryId
from gsdx.domain.models import Story
from gsdx.domain.stores import StoryStore
from gsdx.usecases.base import Rep, Req, UseCase


@dataclass(frozen=True)
class PageArgs:
    cursor: int
    limit: int


@dataclass(frozen=True)
class UpdateStoryArgs:
    story_id: StoryId
    name: str


class _StoryUseCase(UseCase[Req, Rep]):
    def __init__(self, stories: StoryStore) -> None:
        self._stories = stories


class CreateStory(_StoryUseCase[str, Story]):
    """Insert a story. Inserts cannot conflict, so no pre-check is needed."""

    def execute(self, request: str) -> Story:
        return self._stories.create_story(request)


class ListStories(_StoryUseCase[PageArgs, tuple[int, list[Story]]]):
    """Return one page of stories and the cursor of the next page."""

    def execute(self, request: PageArgs) -> tuple[int, list[Story]]:
        return self._stories.list_stories(request.cursor, request.limit)


class UpdateStory(_StoryUseCase[UpdateStoryArgs, Story]):
    """Rename a story, skipping the write when the name is unchanged.

    The storage write always bumps ``updated_at``, so an unchanged name
    returns the existing story as-is to keep the update idempotent.
    """

    def execute(self, request: UpdateStoryArgs) -> Story:
        story = self._stories.fetch_story(request.story_id)
        if story.name == request.name:
            return story
        return self._stories.update_story(request.story_id, request.name)


class DeleteStory(_StoryUseCase[StoryId, None]):
    """Delete a story and, transitively, its tasks."""

    def execute(self, request: StoryId) -> None:
        # Fetch first so a missing story is reported as NotFound.
        self._stories.fetch_story(request)
        self._stories.delete_story(request)
