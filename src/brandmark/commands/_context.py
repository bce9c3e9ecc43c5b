"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``. Owns the process-wide FontRegistry (built lazily so
``--help`` never touches fonts) and centralizes result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from brandmark.output.formatters import format_result

if TYPE_CHECKING:
    from brandmark.config.settings import BrandmarkSettings
    from brandmark.services.generate import GenerateService
    from brandmark.services.result import ServiceResult
    from brandmark.typography.fonts import FontRegistry


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BrandmarkSettings) -> None:
        self.settings = settings
        self._fonts: FontRegistry | None = None

        from brandmark.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from brandmark.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def fonts(self) -> FontRegistry:
        """The font registry (created on first access)."""
        if self._fonts is None:
            from brandmark.typography.fonts import FontRegistry

            self._fonts = FontRegistry(self.settings.fonts)
        return self._fonts

    def service(self) -> GenerateService:
        from brandmark.services.generate import GenerateService

        return GenerateService(self.fonts, self.settings.render)

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult; failures go to stderr and exit with code 1."""
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
