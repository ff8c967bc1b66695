"""Capability interfaces consumed by the use-case layer.

One protocol per entity family. The SQL repositories in
:mod:`gsdx.infrastructure.repositories` are the concrete implementations;
tests may substitute anything that satisfies the same shape.
"""

from __future__ import annotations

from typing import Protocol

from gsdx.domain.ids import StoryId, TaskId
from gsdx.domain.models import Story, Task
from gsdx.domain.types import Status


class StoryStore(Protocol):
    """Persistent storage of stories."""

    def fetch_story(self, story_id: StoryId) -> Story: ...

    def list_stories(self, cursor: int, limit: int) -> tuple[int, list[Story]]: ...

    def create_story(self, name: str) -> Story: ...

    def update_story(self, story_id: StoryId, name: str) -> Story: ...

    def delete_story(self, story_id: StoryId) -> None: ...


class TaskStore(Protocol):
    """Persistent storage of tasks."""

    def fetch_task(self, task_id: TaskId) -> Task: ...

    def list_tasks(self, story_id: StoryId) -> list[Task]: ...

    def create_task(self, story_id: StoryId, name: str, status: Status) -> Task: ...

    def update_task(self, task_id: TaskId, name: str, status: Status) -> Task: ...

    def delete_task(self, task_id: TaskId) -> None: ...
