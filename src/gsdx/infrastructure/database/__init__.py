"""Relational storage: engine, schema, and migrations via SQLAlchemy Core."""

from gsdx.infrastructure.database.engine import create_db_engine, init_database
from gsdx.infrastructure.database.schema import metadata, stories, tasks

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "stories",
    "tasks",
]
