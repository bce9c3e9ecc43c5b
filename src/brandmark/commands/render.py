"""banner / logo / icon — render an image to a file."""

from __future__ import annotations

from pathlib import Path

import click

from brandmark.commands._base import BrandCommand
from brandmark.commands._context import AppContext
from brandmark.domain.palettes import Brand

_STYLE = click.option(
    "--style",
    default=None,
    type=click.Choice([b.value for b in Brand], case_sensitive=False),
    help="Palette name (default from config).",
)
_FORMAT = click.option(
    "--format",
    "fmt",
    default=None,
    type=click.Choice(["png", "svg"]),
    help="Output format (default: from the file extension).",
)


def _output(default: str) -> click.Option:
    return click.option(
        "-o",
        "--output",
        type=click.Path(dir_okay=False, path_type=Path),
        default=default,
        show_default=True,
        help="Destination file.",
    )


@click.command(
    cls=BrandCommand,
    examples="""\
  # PNG banner for a domain
  brandmark banner netproxy.io

  # Dark SVG banner with the aurora palette
  brandmark banner shop.example.co.uk --theme dark --style aurora -o banner.svg""",
)
@click.argument("domain")
@_STYLE
@click.option("--theme", default="light", type=click.Choice(["light", "dark"]), help="Text theme.")
@_FORMAT
@_output("banner.png")
@click.pass_obj
def banner(
    app: AppContext,
    domain: str,
    style: str | None,
    theme: str,
    fmt: str | None,
    output: Path,
) -> None:
    """Render the 1466x371 banner for DOMAIN."""
    result = app.service().export("banner", domain, output, style=style, theme=theme, fmt=fmt)
    app.emit(result)


@click.command(
    cls=BrandCommand,
    examples="""\
  # 1024px letter logo
  brandmark logo netproxy.io

  # 256px SVG logo
  brandmark logo netproxy.io --size 256 -o logo.svg""",
)
@click.argument("domain")
@_STYLE
@click.option("--size", type=int, default=None, help="Square size in pixels (64-2048).")
@_FORMAT
@_output("logo.png")
@click.pass_obj
def logo(
    app: AppContext,
    domain: str,
    style: str | None,
    size: int | None,
    fmt: str | None,
    output: Path,
) -> None:
    """Render the square letter logo for DOMAIN."""
    result = app.service().export("logo", domain, output, style=style, size=size, fmt=fmt)
    app.emit(result)


@click.command(
    cls=BrandCommand,
    examples="""\
  # Multi-resolution favicon
  brandmark icon netproxy.io -o favicon.ico""",
)
@click.argument("domain")
@_STYLE
@_output("icon.ico")
@click.pass_obj
def icon(app: AppContext, domain: str, style: str | None, output: Path) -> None:
    """Render a multi-resolution .ico favicon for DOMAIN."""
    result = app.service().export("icon", domain, output, style=style, fmt="ico")
    app.emit(result)
