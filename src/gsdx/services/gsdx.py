"""GsdxService — the eight story/task operations behind every transport.

Each method follows the same pipeline: VALIDATE → EXECUTE → RESPOND.
Validation runs before any storage access, so a malformed request never
reaches a use case. Any exception becomes a failed ServiceResult.
"""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from gsdx.domain.validation import (
    clamp_page_bounds,
    validate_name,
    validate_optional_name,
    validate_story_id,
    validate_task_id,
)
from gsdx.infrastructure.repositories import StoryRepository, TaskRepository
from gsdx.services.adapter import (
    CreateStoryRequest,
    CreateTaskRequest,
    DeleteStoryRequest,
    DeleteTaskRequest,
    ListStoriesRequest,
    ListTasksRequest,
    UpdateStoryRequest,
    UpdateTaskRequest,
    error_result,
    status_from_wire,
    story_to_wire,
    task_to_wire,
)
from gsdx.services.result import ServiceResult
from gsdx.usecases import UseCaseContext
from gsdx.usecases.story import PageArgs, UpdateStoryArgs
from gsdx.usecases.task import CreateTaskArgs, UpdateTaskArgs

logger = logging.getLogger(__name__)


class GsdxService:
    """Story and task operations returning :class:`ServiceResult`.

    Holds no per-request state; one instance serves every request.

    Usage::

        service = GsdxService.from_engine(engine)
        result = service.create_story(CreateStoryRequest(name="Backlog"))
    """

    def __init__(self, context: UseCaseContext) -> None:
        self._ctx = context

    @classmethod
    def from_engine(cls, engine: Engine) -> GsdxService:
        """Wire the SQL repositories and use cases onto *engine*."""
        stories = StoryRepository(engine)
        tasks = TaskRepository(engine)
        return cls(UseCaseContext.build(stories, tasks))

    # ── Stories ────────────────────────────────────────────────────

    def create_story(self, request: CreateStoryRequest) -> ServiceResult:
        op = "create_story"
        try:
            name = validate_name(request.name)
            story = self._ctx.stories.create_story.execute(name)
        except Exception as exc:
            return error_result(op, exc)
        logger.debug("Created story %s", story.id)
        return ServiceResult(ok=True, op=op, data={"story": story_to_wire(story).model_dump()})

    def list_stories(self, request: ListStoriesRequest) -> ServiceResult:
        op = "list_stories"
        cursor, limit = clamp_page_bounds(request.cursor, request.limit)
        try:
            next_cursor, page = self._ctx.stories.list_stories.execute(PageArgs(cursor, limit))
        except Exception as exc:
            return error_result(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "next_cursor": next_cursor,
                "stories": [story_to_wire(s).model_dump() for s in page],
            },
            meta={"cursor": cursor, "limit": limit, "count": len(page)},
        )

    def update_story(self, request: UpdateStoryRequest) -> ServiceResult:
        op = "update_story"
        try:
            story_id = validate_story_id(request.story_id)
            name = validate_name(request.name)
            story = self._ctx.stories.update_story.execute(UpdateStoryArgs(story_id, name))
        except Exception as exc:
            return error_result(op, exc)
        return ServiceResult(ok=True, op=op, data={"story": story_to_wire(story).model_dump()})

    def delete_story(self, request: DeleteStoryRequest) -> ServiceResult:
        op = "delete_story"
        try:
            story_id = validate_story_id(request.story_id)
            self._ctx.stories.delete_story.execute(story_id)
        except Exception as exc:
            return error_result(op, exc)
        logger.debug("Deleted story %s", story_id)
        return ServiceResult(ok=True, op=op, data={"story_id": str(story_id)})

    # ── Tasks ──────────────────────────────────────────────────────

    def list_tasks(self, request: ListTasksRequest) -> ServiceResult:
        op = "list_tasks"
        try:
            story_id = validate_story_id(request.story_id)
            page = self._ctx.tasks.list_tasks.execute(story_id)
        except Exception as exc:
            return error_result(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"tasks": [task_to_wire(t).model_dump() for t in page]},
            meta={"count": len(page)},
        )

    def create_task(self, request: CreateTaskRequest) -> ServiceResult:
        op = "create_task"
        try:
            story_id = validate_story_id(request.story_id)
            name = validate_name(request.name)
            args = CreateTaskArgs(story_id, name, status_from_wire(request.status))
            task = self._ctx.tasks.create_task.execute(args)
        except Exception as exc:
            return error_result(op, exc)
        logger.debug("Created task %s in story %s", task.id, story_id)
        return ServiceResult(ok=True, op=op, data={"task": task_to_wire(task).model_dump()})

    def update_task(self, request: UpdateTaskRequest) -> ServiceResult:
        op = "update_task"
        try:
            task_id = validate_task_id(request.task_id)
            name = validate_optional_name(request.name)
            args = UpdateTaskArgs(task_id, name, status_from_wire(request.status))
            task = self._ctx.tasks.update_task.execute(args)
        except Exception as exc:
            return error_result(op, exc)
        return ServiceResult(ok=True, op=op, data={"task": task_to_wire(task).model_dump()})

    def delete_task(self, request: DeleteTaskRequest) -> ServiceResult:
        op = "delete_task"
        try:
            task_id = validate_task_id(request.task_id)
            self._ctx.tasks.delete_task.execute(task_id)
        except Exception as exc:
            return error_result(op, exc)
        return ServiceResult(ok=True, op=op, data={"task_id": str(task_id)})
