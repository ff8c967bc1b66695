"""Error taxonomy shared by every layer.

Three kinds only:

- :class:`InvalidArgsError` — caller input failed validation. Never retryable.
- :class:`NotFoundError` — the referenced entity does not exist.
- :class:`InternalError` — anything else (storage or driver failure).

Validation and the repository raise these; use cases let them propagate
unchanged. Only the service adapter turns them into status codes.
"""

from __future__ import annotations


class GsdxError(Exception):
    """Base class for all classified errors."""

    @property
    def message(self) -> str:
        return str(self)


class InvalidArgsError(GsdxError):
    """Caller-supplied input was rejected."""

    def __init__(self, *messages: str) -> None:
        self.messages = list(messages)
        super().__init__(",".join(self.messages))


class NotFoundError(GsdxError):
    """Referenced entity does not exist at the time of the operation."""


class InternalError(GsdxError):
    """System fault: storage failure, unexpected driver error."""
