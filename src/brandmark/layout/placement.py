"""Placement math for banners, logos, and favicons.

Everything here is backend-agnostic: functions take a :class:`TextMeasurer`
and return frozen placement records (sizes, baselines, positioned glyph
runs). :mod:`brandmark.render.raster` and :mod:`brandmark.render.svg`
paint the same records, so the two outputs cannot drift apart.

Banner geometry (1466x371):

    | 16 | letter 371x371 | 36 | domain line ............ | 24 |
                               | subtitle line .......... |
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from brandmark.domain.hosts import DomainParts, domain_layout, split_domain_for_gradient
from brandmark.domain.types import SUBTITLE, TextColors, Theme, text_colors
from brandmark.typography.fit import fit_letter_size, fit_to_width
from brandmark.typography.runs import GlyphRun, TextStyle, layout_run, measure_run_width

if TYPE_CHECKING:
    from brandmark.domain.palettes import BrandStyle
    from brandmark.typography.metrics import TextMeasurer

BANNER_WIDTH = 1466
BANNER_HEIGHT = 371
PAD_LEFT = 16
PAD_RIGHT = 24
LETTER_GAP = 36

LETTER_PAD = 2
GLOW_RADIUS_RATIO = 0.48
LETTER_ASCENT_FALLBACK = 0.78
LETTER_DESCENT_FALLBACK = 0.22

ASCENT_RATIO = 0.98
DESCENT_RATIO = 0.28
GRADIENT_PAD_X_EM = 0.12
GRADIENT_PAD_Y_EM = 0.18
GRADIENT_BOX_EM = 1.26

WIDTH_SAFETY = 0.998
MAX_DOMAIN_HEIGHT_RATIO = 0.44
DOMAIN_SMALL_CAPS_SCALE = 0.9
DOMAIN_STROKE = 3.0
BLOCK_LINE_GAP = 20

SUB_TRACKING_EM = 0.055
SUB_SIZE_RATIO = 0.92
SUB_MIN_SIZE = 52
SUB_MAX_SIZE = 260
SUB_FLOOR = 32
SUB_STEP = 2


@dataclass(frozen=True)
class GradientBox:
    """An off-screen box holding a gradient-filled run.

    ``left``/``top`` place the box on the target; ``pad_x`` and
    ``baseline`` locate the run inside the box.
    """

    run: GlyphRun
    left: float
    top: float
    width: int
    height: int
    pad_x: int
    baseline: float


@dataclass(frozen=True)
class LetterLayout:
    letter: str
    size: int
    glyph: GradientBox
    glow_center: tuple[float, float]
    glow_radius: float


@dataclass(frozen=True)
class TextPlacement:
    """A flat-colored run anchored at ``(x, baseline)``."""

    run: GlyphRun
    x: float
    baseline: float
    color: str


@dataclass(frozen=True)
class BannerLayout:
    """Everything needed to paint one banner.

    Attributes:
        main_width: Drawn width of the main label; the suffix starts there.
    """

    width: int
    height: int
    brand: BrandStyle
    theme: Theme
    colors: TextColors
    parts: DomainParts
    letter: LetterLayout
    text_x: float
    text_max_width: float
    domain_size: int
    domain_baseline: float
    main: TextPlacement
    main_width: float
    suffix: GradientBox | None
    subtitle: TextPlacement
    subtitle_size: int


@dataclass(frozen=True)
class SquareLayout:
    size: int
    brand: BrandStyle
    letter: LetterLayout


def gradient_box(run: GlyphRun, x: float, baseline: float) -> GradientBox:
    """Size the off-screen box for *run* drawn at ``(x, baseline)``."""
    size = run.style.size
    pad_x = math.ceil(size * GRADIENT_PAD_X_EM)
    pad_y = math.ceil(size * GRADIENT_PAD_Y_EM)
    return GradientBox(
        run=run,
        left=x,
        top=baseline - size * ASCENT_RATIO - pad_y,
        width=math.ceil(run.width + pad_x * 2),
        height=math.ceil(size * GRADIENT_BOX_EM),
        pad_x=pad_x,
        baseline=pad_y + size * ASCENT_RATIO,
    )


def letter_layout(
    box_x: float,
    box_y: float,
    box_w: float,
    box_h: float,
    letter: str,
    measurer: TextMeasurer,
) -> LetterLayout:
    """Center the largest fitting *letter* in the box."""
    max_w = box_w - LETTER_PAD * 2
    max_h = box_h - LETTER_PAD * 2
    size = fit_letter_size(letter, max_w, max_h, box_h, measurer)

    m = measurer.measure(letter, size, 900)
    ascent = m.ascent or size * LETTER_ASCENT_FALLBACK
    descent = m.descent or size * LETTER_DESCENT_FALLBACK
    baseline = box_y + LETTER_PAD + (max_h + ascent - descent) / 2

    style = TextStyle(
        size=size, weight=900, tracking_em=0.0, small_caps=False, small_caps_scale=1.0
    )
    run = layout_run(letter, style, measurer)
    pad_x = math.ceil(size * GRADIENT_PAD_X_EM)
    start_x = box_x + LETTER_PAD + (max_w - (m.width + pad_x * 2)) / 2

    return LetterLayout(
        letter=letter,
        size=size,
        glyph=gradient_box(run, start_x, baseline),
        glow_center=(box_x + box_w / 2, box_y + box_h / 2),
        glow_radius=min(box_w, box_h) * GLOW_RADIUS_RATIO,
    )


def square_layout(
    letter: str, brand: BrandStyle, size: int, measurer: TextMeasurer
) -> SquareLayout:
    """Letter glyph filling a ``size`` x ``size`` canvas (logo and favicon)."""
    return SquareLayout(
        size=size,
        brand=brand,
        letter=letter_layout(0, 0, size, size, letter, measurer),
    )


def _subtitle_size(text: str, domain_size: int, max_width: float, measurer: TextMeasurer) -> int:
    size = min(SUB_MAX_SIZE, max(SUB_MIN_SIZE, math.floor(domain_size * SUB_SIZE_RATIO)))
    style = _subtitle_style(size)
    while measure_run_width(text, style.at_size(size), measurer) > max_width:
        size -= SUB_STEP
        if size <= SUB_FLOOR:
            break
    return size


def _subtitle_style(size: float) -> TextStyle:
    return TextStyle(
        size=size,
        weight=400,
        tracking_em=SUB_TRACKING_EM,
        small_caps=True,
        small_caps_scale=DOMAIN_SMALL_CAPS_SCALE,
    )


def banner_layout(
    domain: str,
    letter: str,
    brand: BrandStyle,
    theme: Theme,
    measurer: TextMeasurer,
    *,
    subtitle: str = SUBTITLE,
) -> BannerLayout:
    """Lay out letter glyph, domain (main + suffix), and subtitle."""
    width, height = BANNER_WIDTH, BANNER_HEIGHT
    glyph = letter_layout(PAD_LEFT, 0, height, height, letter, measurer)

    parts = split_domain_for_gradient(domain)
    text_x = PAD_LEFT + height + LETTER_GAP
    text_max_width = width - text_x - PAD_RIGHT

    policy = domain_layout(domain)
    template = TextStyle(
        size=policy.min_size,
        weight=900,
        tracking_em=policy.tracking_em,
        small_caps=True,
        small_caps_scale=DOMAIN_SMALL_CAPS_SCALE,
        stroke_width=DOMAIN_STROKE,
    )
    domain_size = fit_to_width(
        parts.main + parts.suffix,
        template,
        math.floor(text_max_width * WIDTH_SAFETY),
        policy.min_size,
        policy.max_size,
        measurer,
    )
    domain_size = min(domain_size, math.floor(height * MAX_DOMAIN_HEIGHT_RATIO))

    ascent = domain_size * ASCENT_RATIO
    descent = domain_size * DESCENT_RATIO
    free = height - (ascent + descent) - BLOCK_LINE_GAP - domain_size * 0.5
    block_top = max(0, math.floor(free / 2))
    baseline = block_top + ascent

    colors = text_colors(theme)
    style = template.at_size(domain_size)
    main_run = layout_run(parts.main, style, measurer)
    suffix = None
    if parts.suffix:
        suffix_run = layout_run(parts.suffix, style, measurer)
        suffix = gradient_box(suffix_run, text_x + main_run.advance, baseline)

    sub_size = _subtitle_size(subtitle, domain_size, text_max_width, measurer)
    sub_baseline = baseline + descent + max(22, round(domain_size * 0.24)) + sub_size * 0.9
    sub_run = layout_run(subtitle, _subtitle_style(sub_size), measurer)

    return BannerLayout(
        width=width,
        height=height,
        brand=brand,
        theme=theme,
        colors=colors,
        parts=parts,
        letter=glyph,
        text_x=text_x,
        text_max_width=text_max_width,
        domain_size=domain_size,
        domain_baseline=baseline,
        main=TextPlacement(run=main_run, x=text_x, baseline=baseline, color=colors.main),
        main_width=main_run.advance,
        suffix=suffix,
        subtitle=TextPlacement(run=sub_run, x=text_x, baseline=sub_baseline, color=colors.sub),
        subtitle_size=sub_size,
    )
