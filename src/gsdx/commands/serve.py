"""serve — run the HTTP service under uvicorn."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gsdx.commands._base import GsdxCommand

if TYPE_CHECKING:
    from gsdx.commands._context import AppContext


@click.command(
    cls=GsdxCommand,
    examples="""\
  # Listen on the configured [server] address (default 0.0.0.0:9090)
  gsdx serve

  # Override the bind address
  gsdx serve --host 127.0.0.1 --port 8080

  # JSON logs with request ids
  gsdx --log-json -v serve""",
)
@click.option("--host", default=None, help="Bind address (default: [server] host).")
@click.option("--port", default=None, type=int, help="Listen port (default: [server] port).")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None) -> None:
    """Start the HTTP service."""
    import uvicorn

    from gsdx.api import create_app

    settings = app.settings
    bind_host = host or settings.server.host
    bind_port = port or settings.server.port
    click.echo(f"Listening on {bind_host}:{bind_port}", err=True)
    # log_config=None keeps the structlog handlers installed by AppContext.
    uvicorn.run(create_app(settings), host=bind_host, port=bind_port, log_config=None)
