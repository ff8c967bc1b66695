"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy engine and service initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gsdx.config.logging import configure_logging
from gsdx.output.formatters import format_result

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from gsdx.config.settings import GsdxSettings
    from gsdx.services.gsdx import GsdxService
    from gsdx.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The engine is created lazily on first use so ``--help`` and
    ``--version`` never touch the database.
    """

    def __init__(self, settings: GsdxSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._service: GsdxService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def engine(self) -> Engine:
        """The storage engine (created lazily on first access)."""
        if self._engine is None:
            from gsdx.infrastructure.database import create_db_engine

            db = self.settings.database
            self._engine = create_db_engine(
                self.settings.database_url,
                max_connections=db.max_connections,
                acquire_timeout=db.acquire_timeout,
                schema=db.schema_name,
            )
        return self._engine

    @property
    def service(self) -> GsdxService:
        """Story/task service bound to :attr:`engine`.

        Creates missing tables first when ``database.create_schema`` is set.
        """
        if self._service is None:
            from gsdx.infrastructure.database import init_database
            from gsdx.services.gsdx import GsdxService

            if self.settings.database.create_schema:
                init_database(self.engine)
            self._service = GsdxService.from_engine(self.engine)
        return self._service

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._service = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
