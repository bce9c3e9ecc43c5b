"""Glyph run plans — the one place that decides per-glyph size and advance.

A run is planned once (:func:`plan_glyphs`), positioned once
(:func:`layout_run`), and both the fit engine and every renderer read the
resulting :class:`GlyphRun`. Measuring and drawing therefore can never
disagree on advance widths.

Synthetic small caps: with ``small_caps`` on, each ``[a-z]`` character is
drawn upper-cased at ``size * small_caps_scale``. Spaces are never
measured; they advance by a fixed fraction of the size.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brandmark.typography.metrics import TextMeasurer

SPACE_ADVANCE_EM = 0.36

_LOWERCASE_RE = re.compile(r"[a-z]")


@dataclass(frozen=True)
class TextStyle:
    """How one run of text is set."""

    size: float
    weight: int = 900
    tracking_em: float = 0.03
    small_caps: bool = True
    small_caps_scale: float = 0.92
    stroke_width: float = 0.0

    def at_size(self, size: float) -> TextStyle:
        return replace(self, size=size)

    @property
    def tracking_px(self) -> float:
        return self.tracking_em * self.size


@dataclass(frozen=True)
class PlannedGlyph:
    char: str
    glyph: str
    size: float
    is_space: bool = False


@dataclass(frozen=True)
class PlacedGlyph:
    """A drawable glyph with its x offset from the run origin."""

    glyph: str
    size: float
    x: float
    width: float


@dataclass(frozen=True)
class GlyphRun:
    """A positioned run.

    Attributes:
        width: Fitting width: glyph advances plus tracking *between* glyphs.
        advance: Cursor delta after drawing; tracking follows every glyph.
    """

    text: str
    style: TextStyle
    glyphs: tuple[PlacedGlyph, ...]
    width: float
    advance: float


def plan_glyphs(text: str, style: TextStyle) -> tuple[PlannedGlyph, ...]:
    """Decide glyph and effective size for every character of *text*."""
    planned: list[PlannedGlyph] = []
    for ch in text:
        if ch == " ":
            planned.append(PlannedGlyph(char=ch, glyph=ch, size=style.size, is_space=True))
            continue
        shrink = style.small_caps and _LOWERCASE_RE.match(ch) is not None
        planned.append(
            PlannedGlyph(
                char=ch,
                glyph=ch.upper() if style.small_caps else ch,
                size=style.size * style.small_caps_scale if shrink else style.size,
            )
        )
    return tuple(planned)


def layout_run(text: str, style: TextStyle, measurer: TextMeasurer) -> GlyphRun:
    """Position every glyph of *text* and total up its widths."""
    plan = plan_glyphs(text, style)
    glyphs: list[PlacedGlyph] = []
    cursor = 0.0
    width = 0.0
    last = len(plan) - 1
    for i, g in enumerate(plan):
        if g.is_space:
            cursor += style.size * SPACE_ADVANCE_EM
            width += style.size * SPACE_ADVANCE_EM
            continue
        w = measurer.measure(g.glyph, g.size, style.weight).width
        glyphs.append(PlacedGlyph(glyph=g.glyph, size=g.size, x=cursor, width=w))
        cursor += w + style.tracking_px
        width += w
        if i < last:
            width += style.tracking_px
    return GlyphRun(text=text, style=style, glyphs=tuple(glyphs), width=width, advance=cursor)


def measure_run_width(text: str, style: TextStyle, measurer: TextMeasurer) -> float:
    return layout_run(text, style, measurer).width
