"""serve — run the HTTP image server."""

from __future__ import annotations

import click

from brandmark.commands._base import BrandCommand
from brandmark.commands._context import AppContext


@click.command(
    cls=BrandCommand,
    examples="""\
  # Serve on the configured address (default 127.0.0.1:3001)
  brandmark serve

  # Listen on all interfaces
  brandmark serve --host 0.0.0.0 --port 8080""",
)
@click.option("--host", default=None, help="Bind address (default from config).")
@click.option("--port", default=None, type=int, help="Listen port (default from config).")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None) -> None:
    """Start the HTTP server."""
    import uvicorn

    from brandmark.web.app import create_app

    server = app.settings.server
    web_app = create_app(app.settings, fonts=app.fonts)
    uvicorn.run(web_app, host=host or server.host, port=port or server.port, log_config=None)
