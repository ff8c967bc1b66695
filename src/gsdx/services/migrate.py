"""MigrateService — database schema migration with Alembic.

Pipeline: CHECK → MIGRATE (or STAMP) → REPORT
"""

from __future__ import annotations

import logging
from typing import Any

from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from gsdx.infrastructure.database.migrations import build_config
from gsdx.infrastructure.database.schema import stories
from gsdx.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class MigrateService:
    """Brings the store schema up to the newest shipped revision."""

    def __init__(self, engine: Engine, *, schema: str | None = None) -> None:
        self._engine = engine
        self._schema = schema

    def _db_url(self) -> str:
        return self._engine.url.render_as_string(hide_password=False)

    def _tables_exist(self) -> bool:
        """Detect a schema created by ``init_database`` without Alembic."""
        return inspect(self._engine).has_table(stories.name)

    def check_pending(self) -> ServiceResult:
        """List pending migrations without applying."""
        op = "migrate"

        try:
            cfg = build_config(self._db_url(), schema=self._schema)
            script = ScriptDirectory.from_config(cfg)
            head = script.get_current_head()

            with self._engine.connect() as conn:
                ctx = MigrationContext.configure(conn)
                current = ctx.get_current_revision()

            # Walk from head down to current
            pending: list[dict[str, Any]] = []
            if current != head and head is not None:
                rev_obj = script.get_revision(head)
                while rev_obj is not None and rev_obj.revision != current:
                    pending.append(
                        {
                            "revision": rev_obj.revision,
                            "description": rev_obj.doc or "",
                        }
                    )
                    down = rev_obj.down_revision
                    if down is None:
                        break
                    rev_obj = script.get_revision(str(down))

            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "pending_count": len(pending),
                    "pending": pending,
                    "current": current,
                    "head": head,
                },
            )
        except Exception as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="CHECK_FAILED",
                    message=f"Failed to check migrations: {exc}",
                ),
            )

    def apply(self) -> ServiceResult:
        """Upgrade to head, or stamp head when tables predate version tracking."""
        op = "migrate"

        check_result = self.check_pending()
        if not check_result.ok:
            return check_result

        pending_count = check_result.data["pending_count"]
        head = check_result.data["head"]
        if pending_count == 0:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "applied_count": 0,
                    "current": head,
                    "message": "Database is already up to date",
                },
            )

        stamped = False
        try:
            cfg = build_config(self._db_url(), schema=self._schema)
            if check_result.data["current"] is None and self._tables_exist():
                # Tables came from init_database: record head, skip CREATE TABLE.
                command.stamp(cfg, "head")
                stamped = True
            else:
                command.upgrade(cfg, "head")
        except Exception as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="MIGRATION_FAILED",
                    message=f"Migration failed: {exc}",
                ),
            )

        logger.info("Database migrated to %s (stamped=%s)", head, stamped)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "applied_count": 0 if stamped else pending_count,
                "current": head,
                "stamped": stamped,
            },
        )
