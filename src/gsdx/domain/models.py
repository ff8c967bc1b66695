"""Story and Task entities.

Frozen pydantic models with no behavior. The repository is the only
component that builds them from stored rows.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from gsdx.domain.ids import StoryId, TaskId
from gsdx.domain.types import Status


class Story(BaseModel):
    """A named container of tasks.

    Attributes:
        id: Permanent identifier.
        name: Trimmed, non-empty display name.
        seqno: Store-assigned insertion sequence; the pagination cursor source.
        created_at: Insertion time (UTC).
        updated_at: Time of the last successful rename (UTC).
    """

    model_config = {"frozen": True}

    id: StoryId
    name: str
    seqno: int
    created_at: datetime
    updated_at: datetime


class Task(BaseModel):
    """A unit of work belonging to exactly one story."""

    model_config = {"frozen": True}

    id: TaskId
    story_id: StoryId
    name: str
    status: Status = Status.INCOMPLETE
    created_at: datetime
    updated_at: datetime
