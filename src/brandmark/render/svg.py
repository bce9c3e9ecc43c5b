"""SVG renderer — emits the placement records as markup.

Glyphs are written one ``<text>`` element each at the x offsets the run
plan computed, so the markup matches the raster output glyph for glyph.
Gradient fills use ``userSpaceOnUse`` coordinates spanning the same
off-screen box the raster renderer masks.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader, StrictUndefined

from brandmark.domain.types import SUBTITLE, Theme
from brandmark.layout.placement import BannerLayout, SquareLayout, banner_layout, square_layout
from brandmark.typography.metrics import FontMeasurer

if TYPE_CHECKING:
    from brandmark.domain.palettes import BrandStyle
    from brandmark.typography.fonts import FontRegistry


def _px(value: float) -> str:
    """Format a coordinate with at most two decimals and no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@lru_cache(maxsize=1)
def _environment() -> Environment:
    env = Environment(
        loader=PackageLoader("brandmark", "templates/svg"),
        autoescape=True,
        trim_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters["px"] = _px
    return env


def render_banner_svg(layout: BannerLayout, font_stack: str) -> str:
    return _environment().get_template("banner.svg.j2").render(layout=layout, font_stack=font_stack)


def render_square_svg(layout: SquareLayout, font_stack: str) -> str:
    return _environment().get_template("square.svg.j2").render(layout=layout, font_stack=font_stack)


def compose_banner_svg(
    domain: str,
    letter: str,
    brand: BrandStyle,
    theme: Theme,
    fonts: FontRegistry,
    *,
    subtitle: str = SUBTITLE,
) -> str:
    layout = banner_layout(domain, letter, brand, theme, FontMeasurer(fonts), subtitle=subtitle)
    return render_banner_svg(layout, fonts.font_stack)


def compose_logo_svg(letter: str, brand: BrandStyle, fonts: FontRegistry, size: int = 1024) -> str:
    layout = square_layout(letter, brand, size, FontMeasurer(fonts))
    return render_square_svg(layout, fonts.font_stack)
