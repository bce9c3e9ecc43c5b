"""Preview page — a small form that drives ``/gen`` from the browser."""

from __future__ import annotations

from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape

from brandmark.domain.palettes import BRAND_STYLES, linear_gradient_css, resolve_brand


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("brandmark", "templates/web"),
        autoescape=select_autoescape(["html"]),
    )


def render_preview(default_style: str) -> str:
    """Render the preview page with one swatch per palette."""
    swatches = [
        {"name": brand.value, "css": linear_gradient_css(style)}
        for brand, style in BRAND_STYLES.items()
    ]
    return (
        _environment()
        .get_template("preview.html")
        .render(swatches=swatches, default_style=resolve_brand(default_style).value)
    )
