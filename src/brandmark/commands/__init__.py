"""Subcommand modules for brandmark.

Provides register_commands() which uses deferred imports so ``brandmark
--help`` does not pull in Pillow, numpy, or the web stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the render commands and ``serve`` on the root group."""
    from brandmark.commands.render import banner, icon, logo
    from brandmark.commands.serve import serve

    cli.add_command(banner)
    cli.add_command(logo)
    cli.add_command(icon)
    cli.add_command(serve)
