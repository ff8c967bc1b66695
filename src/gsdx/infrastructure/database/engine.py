"""Database engine setup.

SQLite (the default) runs in WAL mode with foreign keys enforced, which the
task → story reference relies on. Server databases (PostgreSQL) get a sized
connection pool and have ``search_path`` pinned to the configured schema on
every new connection.

SQLAlchemy Core (not ORM) is used: every request is a short, explicit
statement or transaction with no need for an identity map.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from gsdx.infrastructure.database.schema import metadata


def is_sqlite(engine: Engine) -> bool:
    return engine.dialect.name == "sqlite"


def set_search_path(dbapi_conn: Any, schema: str) -> None:
    """Pin *schema* for the lifetime of a DBAPI connection.

    The ``SET`` runs in autocommit mode; inside a transaction it would be
    undone by the rollback the pool issues when the connection is returned.
    """
    autocommit = dbapi_conn.autocommit
    dbapi_conn.autocommit = True
    cursor = dbapi_conn.cursor()
    try:
        cursor.execute(f'SET SESSION search_path TO "{schema}"')
    finally:
        cursor.close()
        dbapi_conn.autocommit = autocommit


def install_connect_hooks(engine: Engine, *, schema: str | None = None) -> None:
    """Run per-connection setup on every new DBAPI connection of *engine*."""
    sqlite = is_sqlite(engine)

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_conn: Any, _: Any) -> None:
        if sqlite:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
        elif schema:
            set_search_path(dbapi_conn, schema)


def create_db_engine(
    url: str,
    *,
    max_connections: int = 5,
    acquire_timeout: float = 15.0,
    schema: str | None = None,
) -> Engine:
    """Create an engine for *url* with per-backend pool and connection setup."""
    if url.startswith("sqlite"):
        engine = create_engine(url, echo=False)
    else:
        engine = create_engine(
            url,
            echo=False,
            pool_size=max_connections,
            max_overflow=0,
            pool_timeout=acquire_timeout,
            pool_pre_ping=True,
        )
    install_connect_hooks(engine, schema=schema)
    return engine


def init_database(engine: Engine) -> Engine:
    """Create all tables from :data:`schema.metadata`.

    Idempotent — safe to call on an existing database. Returns *engine*.
    """
    metadata.create_all(engine)
    return engine
