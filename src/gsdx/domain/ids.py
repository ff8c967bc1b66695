"""Identifier newtypes.

Stories and tasks are identified by random 128-bit UUIDs assigned at
insertion time. INVARIANT: IDs are permanent. Once assigned, an ID never
changes.
"""

from __future__ import annotations

from typing import NewType
from uuid import UUID

StoryId = NewType("StoryId", UUID)
TaskId = NewType("TaskId", UUID)
