"""SQL repositories — the exclusive storage-access layer."""

from gsdx.infrastructure.repositories.story import StoryRepository
from gsdx.infrastructure.repositories.task import MAX_TASKS, TaskRepository

__all__ = ["MAX_TASKS", "StoryRepository", "TaskRepository"]
