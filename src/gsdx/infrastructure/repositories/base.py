"""Shared repository plumbing: engine handle, error translation, row helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import exc
from sqlalchemy.engine import Engine

from gsdx.domain.errors import GsdxError, InternalError, InvalidArgsError, NotFoundError

logger = logging.getLogger(__name__)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Map SQLAlchemy failures onto the gsdx error taxonomy.

    Row/column lookups that find nothing become ``NotFound``; constraint
    and driver data errors become ``InvalidArgs``; every other storage
    failure is ``Internal``. Already-classified errors pass through.
    """
    try:
        yield
    except GsdxError:
        raise
    except (exc.NoResultFound, exc.NoSuchColumnError) as err:
        raise NotFoundError(str(err)) from err
    except (exc.IntegrityError, exc.DataError) as err:
        raise InvalidArgsError(str(err.orig)) from err
    except exc.SQLAlchemyError as err:
        logger.debug("Storage failure", exc_info=True)
        raise InternalError(str(err)) from err


def utcnow() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps read back from backends without tz support."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class SqlRepository:
    """Base for repositories that share one engine (and its pool)."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
