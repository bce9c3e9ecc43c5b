"""Shared pytest fixtures for brandmark tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from brandmark.config.models import FontsConfig, RenderConfig
from brandmark.services.generate import GenerateService
from brandmark.services.telemetry import _current_span, disable_telemetry
from brandmark.typography.fonts import FontRegistry
from brandmark.typography.metrics import GlyphMetrics


class FixedMeasurer:
    """Deterministic metrics: every character is 0.6em wide, 0.7em up, 0.2em down.

    Counts calls so tests can bound the number of measurements.
    """

    def __init__(self, advance: float = 0.6, ascent: float = 0.7, descent: float = 0.2) -> None:
        self.advance = advance
        self.ascent = ascent
        self.descent = descent
        self.calls = 0

    def measure(self, text: str, size: float, weight: int) -> GlyphMetrics:
        self.calls += 1
        if not text:
            return GlyphMetrics(0.0, 0.0, 0.0)
        return GlyphMetrics(
            width=len(text) * size * self.advance,
            ascent=size * self.ascent,
            descent=size * self.descent,
        )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def measurer() -> FixedMeasurer:
    return FixedMeasurer()


@pytest.fixture(scope="session")
def fonts(tmp_path_factory: pytest.TempPathFactory) -> FontRegistry:
    """Registry over an empty font directory, so Pillow's bundled font is used.

    Session-scoped: the per-size cache is shared across tests the same way
    the server shares it across requests.
    """
    empty = tmp_path_factory.mktemp("fonts")
    return FontRegistry(FontsConfig(font_dirs=(str(empty),)))


@pytest.fixture
def service(fonts: FontRegistry) -> GenerateService:
    return GenerateService(fonts, RenderConfig())


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config discovery side effects."""
    monkeypatch.delenv("BRANDMARK_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo telemetry and logging changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    disable_telemetry()
    _current_span.set(None)
    root.handlers = handlers
    root.setLevel(level)
