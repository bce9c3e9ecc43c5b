"""Root CLI group for brandmark with global flags and command registration."""

from __future__ import annotations

import click

from brandmark import __version__
from brandmark.commands import register_commands
from brandmark.commands._context import AppContext
from brandmark.config.settings import BrandmarkSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="brandmark")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and per-step timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """brandmark — banner, logo, and favicon images for any domain."""
    settings = BrandmarkSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
