"""HTTP routes for stories, tasks, and health.

Endpoints are plain ``def`` functions, so FastAPI runs each request on its
threadpool and the blocking repository calls never stall the event loop.
Every response body is a serialized :class:`ServiceResult`.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from gsdx.domain.types import Status
from gsdx.infrastructure.health import HealthMonitor, HealthStatus
from gsdx.services import GsdxService, ServiceResult
from gsdx.services.adapter import (
    CreateStoryRequest,
    CreateTaskRequest,
    DeleteStoryRequest,
    DeleteTaskRequest,
    ListStoriesRequest,
    ListTasksRequest,
    StatusCode,
    UpdateStoryRequest,
    UpdateTaskRequest,
)

_HTTP_STATUS = {
    StatusCode.INVALID_ARGUMENT: 400,
    StatusCode.NOT_FOUND: 404,
    StatusCode.INTERNAL: 500,
}


def http_status(result: ServiceResult, *, success: int = 200) -> int:
    if result.ok:
        return success
    if result.error is None:
        return 500
    return _HTTP_STATUS.get(result.error.code, 500)


def respond(result: ServiceResult, *, success: int = 200) -> JSONResponse:
    status_code = http_status(result, success=success)
    return JSONResponse(result.model_dump(mode="json"), status_code=status_code)


def get_service(request: Request) -> GsdxService:
    return request.app.state.service


def get_monitor(request: Request) -> HealthMonitor:
    return request.app.state.health


Service = Annotated[GsdxService, Depends(get_service)]
Monitor = Annotated[HealthMonitor, Depends(get_monitor)]


# ── Request bodies ─────────────────────────────────────────────────


class StoryBody(BaseModel):
    name: str


class TaskBody(BaseModel):
    name: str
    status: str = Status.INCOMPLETE.value


class TaskPatchBody(BaseModel):
    name: str | None = None
    status: str = Status.INCOMPLETE.value


# ── Stories ────────────────────────────────────────────────────────

router = APIRouter(prefix="/v1")


@router.post("/stories")
def create_story(body: StoryBody, service: Service) -> JSONResponse:
    result = service.create_story(CreateStoryRequest(name=body.name))
    return respond(result, success=201)


@router.get("/stories")
def list_stories(service: Service, cursor: int = 0, limit: int = 0) -> JSONResponse:
    return respond(service.list_stories(ListStoriesRequest(cursor=cursor, limit=limit)))


@router.patch("/stories/{story_id}")
def update_story(story_id: str, body: StoryBody, service: Service) -> JSONResponse:
    return respond(service.update_story(UpdateStoryRequest(story_id=story_id, name=body.name)))


@router.delete("/stories/{story_id}")
def delete_story(story_id: str, service: Service) -> JSONResponse:
    return respond(service.delete_story(DeleteStoryRequest(story_id=story_id)))


# ── Tasks ──────────────────────────────────────────────────────────


@router.get("/stories/{story_id}/tasks")
def list_tasks(story_id: str, service: Service) -> JSONResponse:
    return respond(service.list_tasks(ListTasksRequest(story_id=story_id)))


@router.post("/stories/{story_id}/tasks")
def create_task(story_id: str, body: TaskBody, service: Service) -> JSONResponse:
    request = CreateTaskRequest(story_id=story_id, name=body.name, status=body.status)
    return respond(service.create_task(request), success=201)


@router.patch("/tasks/{task_id}")
def update_task(task_id: str, body: TaskPatchBody, service: Service) -> JSONResponse:
    request = UpdateTaskRequest(task_id=task_id, name=body.name, status=body.status)
    return respond(service.update_task(request))


@router.delete("/tasks/{task_id}")
def delete_task(task_id: str, service: Service) -> JSONResponse:
    return respond(service.delete_task(DeleteTaskRequest(task_id=task_id)))


# ── Health ─────────────────────────────────────────────────────────

health_router = APIRouter()


@health_router.get("/health")
async def health(monitor: Monitor) -> JSONResponse:
    status = monitor.status
    code = 200 if status is HealthStatus.SERVING else 503
    return JSONResponse({"status": status.value}, status_code=code)
