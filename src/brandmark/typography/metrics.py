"""Text metrics adapter.

The fitting and layout code only needs "how wide / how tall is this text
at this size and weight". :class:`TextMeasurer` is that capability;
:class:`FontMeasurer` answers it from a :class:`FontRegistry`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from brandmark.typography.fonts import FontRegistry


@dataclass(frozen=True)
class GlyphMetrics:
    """Advance width plus ink ascent/descent relative to the baseline."""

    width: float
    ascent: float
    descent: float

    @property
    def height(self) -> float:
        return self.ascent + self.descent


class TextMeasurer(Protocol):
    def measure(self, text: str, size: float, weight: int) -> GlyphMetrics: ...


class FontMeasurer:
    """Measure text with Pillow fonts from a shared registry."""

    def __init__(self, fonts: FontRegistry) -> None:
        self._fonts = fonts

    def measure(self, text: str, size: float, weight: int) -> GlyphMetrics:
        if not text:
            return GlyphMetrics(0.0, 0.0, 0.0)
        font = self._fonts.font(weight, size)
        _left, top, _right, bottom = font.getbbox(text, anchor="ls")
        return GlyphMetrics(
            width=float(font.getlength(text)),
            ascent=float(max(0, -top)),
            descent=float(max(0, bottom)),
        )
