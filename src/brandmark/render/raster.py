"""Pillow renderer — paints placements onto private RGBA canvases.

Every compose function allocates a fresh transparent image; nothing here
is shared between calls.

Gradient runs are two-pass: the run is drawn as an opaque mask in an
off-screen box, then a gradient spanning the whole box takes the mask as
its alpha (source-in) and is composited onto the target. A per-glyph fill
would restart the gradient on every character.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from brandmark.domain.types import SUBTITLE, Theme
from brandmark.layout.placement import (
    BannerLayout,
    GradientBox,
    LetterLayout,
    SquareLayout,
    banner_layout,
    gradient_box,
    letter_layout,
    square_layout,
)
from brandmark.render.gradients import composite, linear_gradient, radial_glow
from brandmark.typography.metrics import FontMeasurer
from brandmark.typography.runs import GlyphRun, TextStyle, layout_run

if TYPE_CHECKING:
    from collections.abc import Sequence

    from brandmark.domain.palettes import BrandStyle, GradientStop
    from brandmark.typography.fonts import FontRegistry


def new_canvas(width: int, height: int) -> Image.Image:
    return Image.new("RGBA", (width, height), (0, 0, 0, 0))


def _paint_run(
    draw: ImageDraw.ImageDraw,
    run: GlyphRun,
    x: float,
    baseline: float,
    fill: str | int,
    fonts: FontRegistry,
) -> None:
    # Pillow grows the outline by stroke_width per side; the stroke is centred on it.
    stroke = run.style.stroke_width / 2
    for g in run.glyphs:
        draw.text(
            (x + g.x, baseline),
            g.glyph,
            font=fonts.font(run.style.weight, g.size),
            fill=fill,
            anchor="ls",
            stroke_width=stroke,
            stroke_fill=fill if stroke > 0 else None,
        )


def _paint_gradient_box(
    surface: Image.Image,
    box: GradientBox,
    stops: Sequence[GradientStop],
    fonts: FontRegistry,
) -> None:
    mask = Image.new("L", (box.width, box.height), 0)
    _paint_run(ImageDraw.Draw(mask), box.run, box.pad_x, box.baseline, 255, fonts)
    layer = linear_gradient(box.width, box.height, stops)
    layer.putalpha(mask)
    composite(surface, layer, box.left, box.top)


def draw_styled_text(
    surface: Image.Image,
    text: str,
    x: float,
    baseline: float,
    style: TextStyle,
    color: str,
    fonts: FontRegistry,
) -> float:
    """Draw *text* in a flat *color*; return the cursor advance."""
    run = layout_run(text, style, FontMeasurer(fonts))
    _paint_run(ImageDraw.Draw(surface), run, x, baseline, color, fonts)
    return run.advance


def draw_gradient_text(
    surface: Image.Image,
    text: str,
    x: float,
    baseline: float,
    style: TextStyle,
    stops: Sequence[GradientStop],
    fonts: FontRegistry,
) -> float:
    """Draw *text* filled by one gradient across the whole run; return the box width."""
    box = gradient_box(layout_run(text, style, FontMeasurer(fonts)), x, baseline)
    _paint_gradient_box(surface, box, stops, fonts)
    return box.width


def paint_letter(
    surface: Image.Image, layout: LetterLayout, brand: BrandStyle, fonts: FontRegistry
) -> None:
    glow = radial_glow(surface.width, surface.height, layout.glow_center, layout.glow_radius)
    surface.alpha_composite(glow)
    _paint_gradient_box(surface, layout.glyph, brand.fill_stops, fonts)


def draw_letter_glyph(
    surface: Image.Image,
    box_x: float,
    box_y: float,
    box_w: float,
    box_h: float,
    letter: str,
    brand: BrandStyle,
    fonts: FontRegistry,
) -> LetterLayout:
    """Draw *letter* as large as fits the box, centered, over a soft highlight."""
    layout = letter_layout(box_x, box_y, box_w, box_h, letter, FontMeasurer(fonts))
    paint_letter(surface, layout, brand, fonts)
    return layout


def paint_banner(layout: BannerLayout, fonts: FontRegistry) -> Image.Image:
    image = new_canvas(layout.width, layout.height)
    paint_letter(image, layout.letter, layout.brand, fonts)

    draw = ImageDraw.Draw(image)
    main = layout.main
    _paint_run(draw, main.run, main.x, main.baseline, main.color, fonts)
    if layout.suffix is not None:
        _paint_gradient_box(image, layout.suffix, layout.brand.fill_stops, fonts)
    sub = layout.subtitle
    _paint_run(draw, sub.run, sub.x, sub.baseline, sub.color, fonts)
    return image


def paint_square(layout: SquareLayout, fonts: FontRegistry) -> Image.Image:
    image = new_canvas(layout.size, layout.size)
    paint_letter(image, layout.letter, layout.brand, fonts)
    return image


def compose_banner(
    domain: str,
    letter: str,
    brand: BrandStyle,
    theme: Theme,
    fonts: FontRegistry,
    *,
    subtitle: str = SUBTITLE,
) -> Image.Image:
    """Render the 1466x371 banner for *domain*."""
    layout = banner_layout(domain, letter, brand, theme, FontMeasurer(fonts), subtitle=subtitle)
    return paint_banner(layout, fonts)


def compose_logo_only(
    letter: str, brand: BrandStyle, fonts: FontRegistry, size: int = 1024
) -> Image.Image:
    """Square app-icon style image of the letter glyph."""
    return paint_square(square_layout(letter, brand, size, FontMeasurer(fonts)), fonts)


def compose_favicon(
    letter: str, brand: BrandStyle, fonts: FontRegistry, size: int = 64
) -> Image.Image:
    """Small square letter glyph, one image of a multi-resolution icon."""
    return compose_logo_only(letter, brand, fonts, size)


def to_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG", optimize=True)
    return buf.getvalue()
