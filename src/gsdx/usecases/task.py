"""Task use cases: list, create, update, delete."""

from __future__ import annotations

from dataclasses import dataclass

from gsdx.domain.ids import StoryId, TaskId
from gsdx.domain.models import Task
from gsdx.domain.stores import StoryStore, TaskStore
from gsdx.domain.types import Status
from gsdx.usecases.base import UseCase


@dataclass(frozen=True)
class CreateTaskArgs:
    story_id: StoryId
    name: str
    status: Status = Status.INCOMPLETE


@dataclass(frozen=True)
class UpdateTaskArgs:
    task_id: TaskId
    name: str | None
    status: Status


class ListTasks(UseCase[StoryId, list[Task]]):
    """List the tasks of a story, failing with NotFound for unknown stories."""

    def __init__(self, stories: StoryStore, tasks: TaskStore) -> None:
        self._stories = stories
        self._tasks = tasks

    def execute(self, request: StoryId) -> list[Task]:
        # An empty list must never stand in for "story not found".
        self._stories.fetch_story(request)
        return self._tasks.list_tasks(request)


class CreateTask(UseCase[CreateTaskArgs, Task]):
    """Insert a task. A missing parent story is rejected by the store."""

    def __init__(self, tasks: TaskStore) -> None:
        self._tasks = tasks

    def execute(self, request: CreateTaskArgs) -> Task:
        return self._tasks.create_task(request.story_id, request.name, request.status)


class UpdateTask(UseCase[UpdateTaskArgs, Task]):
    """Update a task. An absent name keeps the current one; status always wins."""

    def __init__(self, tasks: TaskStore) -> None:
        self._tasks = tasks

    def execute(self, request: UpdateTaskArgs) -> Task:
        task = self._tasks.fetch_task(request.task_id)
        name = request.name if request.name is not None else task.name
        return self._tasks.update_task(request.task_id, name, request.status)


class DeleteTask(UseCase[TaskId, None]):
    """Delete one task."""

    def __init__(self, tasks: TaskStore) -> None:
        self._tasks = tasks

    def execute(self, request: TaskId) -> None:
        self._tasks.fetch_task(request)
        self._tasks.delete_task(request)
