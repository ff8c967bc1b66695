"""UseCase — abstract foundation for all business operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

Req = TypeVar("Req")
Rep = TypeVar("Rep")


class UseCase(ABC, Generic[Req, Rep]):
    """A single unit of business logic: one request value in, one result out.

    Subclasses receive the stores they need in ``__init__`` and implement
    :meth:`execute`. Instances carry no per-request state, so one instance
    is safely shared by concurrent requests.

    Usage::

        class DeleteTask(UseCase[TaskId, None]):
            def execute(self, request: TaskId) -> None:
                ...
    """

    @abstractmethod
    def execute(self, request: Req) -> Rep:
        """Run the operation for *request*."""

    def __call__(self, request: Req) -> Rep:
        return self.execute(request)
