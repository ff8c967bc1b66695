"""Command: database schema migration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gsdx.commands._base import GsdxCommand

if TYPE_CHECKING:
    from gsdx.commands._context import AppContext


@click.command(
    cls=GsdxCommand,
    examples="""\
  gsdx migrate
  gsdx migrate --check
  gsdx --json migrate --check""",
)
@click.option(
    "--check", "check_only", is_flag=True, help="Show pending migrations without applying."
)
@click.pass_obj
def migrate(app: AppContext, check_only: bool) -> None:
    """Run pending database migrations."""
    from gsdx.services.migrate import MigrateService

    svc = MigrateService(app.engine, schema=app.settings.database.schema_name)
    app.emit(svc.check_pending() if check_only else svc.apply())
