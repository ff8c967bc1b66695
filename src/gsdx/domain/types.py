"""Task status enum.

Serialized as lowercase tokens both on the wire and in storage.
"""

from __future__ import annotations

from enum import StrEnum


class Status(StrEnum):
    """Completion status of a task."""

    INCOMPLETE = "incomplete"
    COMPLETE = "complete"

    @classmethod
    def parse(cls, value: object) -> Status:
        """Parse a stored or wire value, falling back to ``INCOMPLETE``.

        Examples:
            >>> Status.parse("complete")
            <Status.COMPLETE: 'complete'>
            >>> Status.parse(" Complete ")
            <Status.COMPLETE: 'complete'>
            >>> Status.parse("xomplete")
            <Status.INCOMPLETE: 'incomplete'>
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.INCOMPLETE
