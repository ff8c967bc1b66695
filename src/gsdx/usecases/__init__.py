"""Use-case layer — one stateless unit per business operation.

Use cases may import from the domain layer only. They receive their
stores at construction time and never touch SQL, wire types, or status
codes. Errors propagate unchanged.
"""

from gsdx.usecases.base import UseCase
from gsdx.usecases.context import StoryUseCases, TaskUseCases, UseCaseContext

__all__ = ["StoryUseCases", "TaskUseCases", "UseCase", "UseCaseContext"]
