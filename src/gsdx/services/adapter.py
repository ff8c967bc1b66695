"""Wire types and error classification.

Everything that crosses the service boundary is converted here: domain
entities become ``StoryData`` / ``TaskData`` dicts, timestamps become
``{seconds, nanos}`` since the Unix epoch, and every :class:`GsdxError`
becomes a :class:`ServiceError` with one of three status codes.

This is the only module that logs ``Internal`` errors.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel

from gsdx.domain.errors import InternalError, InvalidArgsError, NotFoundError
from gsdx.domain.models import Story, Task
from gsdx.domain.types import Status
from gsdx.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class StatusCode(StrEnum):
    """Protocol-visible error categories."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


# ── Wire payloads ──────────────────────────────────────────────────


class WireTimestamp(BaseModel):
    """Seconds and nanoseconds since the Unix epoch."""

    model_config = {"frozen": True}

    seconds: int
    nanos: int

    @classmethod
    def from_datetime(cls, value: datetime) -> WireTimestamp:
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        delta = value - _EPOCH
        return cls(
            seconds=delta.days * 86_400 + delta.seconds,
            nanos=delta.microseconds * 1000,
        )


class StoryData(BaseModel):
    model_config = {"frozen": True}

    story_id: str
    name: str
    created_at: WireTimestamp
    updated_at: WireTimestamp


class TaskData(BaseModel):
    model_config = {"frozen": True}

    task_id: str
    story_id: str
    name: str
    status: str
    created_at: WireTimestamp
    updated_at: WireTimestamp


# ── Requests ───────────────────────────────────────────────────────
# Identifiers and names arrive raw; validation happens in the service.


class CreateStoryRequest(BaseModel):
    name: str


class ListStoriesRequest(BaseModel):
    cursor: int = 0
    limit: int = 0


class UpdateStoryRequest(BaseModel):
    story_id: str
    name: str


class DeleteStoryRequest(BaseModel):
    story_id: str


class ListTasksRequest(BaseModel):
    story_id: str


class CreateTaskRequest(BaseModel):
    story_id: str
    name: str
    status: str = Status.INCOMPLETE.value


class UpdateTaskRequest(BaseModel):
    task_id: str
    name: str | None = None
    status: str = Status.INCOMPLETE.value


class DeleteTaskRequest(BaseModel):
    task_id: str


# ── Conversions ────────────────────────────────────────────────────


def status_to_wire(status: Status) -> str:
    return status.value


def status_from_wire(value: str | None) -> Status:
    """Parse a wire status token; anything unrecognised means incomplete."""
    return Status.parse(value)


def story_to_wire(story: Story) -> StoryData:
    return StoryData(
        story_id=str(story.id),
        name=story.name,
        created_at=WireTimestamp.from_datetime(story.created_at),
        updated_at=WireTimestamp.from_datetime(story.updated_at),
    )


def task_to_wire(task: Task) -> TaskData:
    return TaskData(
        task_id=str(task.id),
        story_id=str(task.story_id),
        name=task.name,
        status=status_to_wire(task.status),
        created_at=WireTimestamp.from_datetime(task.created_at),
        updated_at=WireTimestamp.from_datetime(task.updated_at),
    )


def classify_error(exc: Exception) -> ServiceError:
    """Map any exception onto exactly one :class:`StatusCode`.

    Unclassified exceptions are treated as ``INTERNAL``.
    """
    if isinstance(exc, InvalidArgsError):
        return ServiceError(
            code=StatusCode.INVALID_ARGUMENT.value,
            message=exc.message,
            detail={"messages": exc.messages},
        )
    if isinstance(exc, NotFoundError):
        return ServiceError(code=StatusCode.NOT_FOUND.value, message=exc.message)
    if isinstance(exc, InternalError):
        logger.error("Internal error in service: %s", exc.message)
        return ServiceError(code=StatusCode.INTERNAL.value, message=exc.message)
    logger.error("Unexpected error in service: %s", exc, exc_info=exc)
    return ServiceError(code=StatusCode.INTERNAL.value, message=str(exc) or type(exc).__name__)


def error_result(op: str, exc: Exception) -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=classify_error(exc))
