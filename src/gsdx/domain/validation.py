"""Stateless input validation.

Every function here is pure: it either returns a sanitized value or raises
:class:`~gsdx.domain.errors.InvalidArgsError`. Nothing touches storage, so a
rejected request never causes a side effect.
"""

from __future__ import annotations

from uuid import UUID

from gsdx.domain.errors import InvalidArgsError
from gsdx.domain.ids import StoryId, TaskId

MAX_NAME_LEN = 1000
MIN_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100


def validate_name(raw: str, param: str = "name") -> str:
    """Trim *raw* and bound its length.

    Raises InvalidArgsError naming *param* when the trimmed value is empty
    or longer than :data:`MAX_NAME_LEN` characters.
    """
    value = raw.strip()
    if not value:
        raise InvalidArgsError(f"{param} cannot be empty")
    if len(value) > MAX_NAME_LEN:
        raise InvalidArgsError(f"{param} is too long")
    return value


def validate_optional_name(raw: str | None, param: str = "name") -> str | None:
    """Apply :func:`validate_name` only when a value is present."""
    if raw is None:
        return None
    return validate_name(raw, param)


def validate_identifier(raw: str) -> UUID:
    """Parse *raw* as a 128-bit identifier after trimming and lower-casing."""
    value = raw.strip().lower()
    try:
        return UUID(value)
    except ValueError as exc:
        raise InvalidArgsError(str(exc)) from exc


def validate_story_id(raw: str) -> StoryId:
    return StoryId(validate_identifier(raw))


def validate_task_id(raw: str) -> TaskId:
    return TaskId(validate_identifier(raw))


def clamp_page_bounds(cursor: int, limit: int) -> tuple[int, int]:
    """Silently correct paging parameters into their allowed ranges.

    Examples:
        >>> clamp_page_bounds(-5, 1000)
        (1, 100)
        >>> clamp_page_bounds(3, 0)
        (3, 10)
    """
    return max(cursor, 1), min(max(limit, MIN_PAGE_LIMIT), MAX_PAGE_LIMIT)
