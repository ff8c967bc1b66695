"""SQLAlchemy Core table definitions.

``stories.seqno`` is the integer primary key so every backend can
autoincrement it. On SQLite the table is declared ``AUTOINCREMENT`` so a
deleted seqno is never handed out again. The public identifier ``id`` is a
separate unique UUID column that tasks reference. Task rows are removed
explicitly by the repository before their story (no ``ON DELETE CASCADE``),
so the cascade stays inside one visible transaction.
"""

from __future__ import annotations

import uuid

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    Uuid,
)

metadata = MetaData()

stories = Table(
    "stories",
    metadata,
    Column("seqno", Integer, primary_key=True, autoincrement=True),
    Column("id", Uuid, nullable=False, unique=True, default=uuid.uuid4),
    Column("name", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    sqlite_autoincrement=True,
)

tasks = Table(
    "tasks",
    metadata,
    Column("id", Uuid, primary_key=True, default=uuid.uuid4),
    Column("story_id", Uuid, ForeignKey("stories.id"), nullable=False),
    Column("name", Text, nullable=False),
    Column("status", Text, nullable=False, server_default="incomplete"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

# ---------------------------------------------------------------------------
# Indexes for frequently filtered columns
# ---------------------------------------------------------------------------

Index("ix_tasks_story_id", tasks.c.story_id)
Index("ix_tasks_created_at", tasks.c.created_at)
