"""Brand palette registry — named gradient stop lists.

Palettes are defined at import time and shared read-only by every render.
Lookup is case-insensitive; unknown or absent names resolve to
:attr:`Brand.NETPROXY` through an explicit default branch.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, field_validator


class Brand(StrEnum):
    """Known palette identifiers."""

    NETPROXY = "netproxy"
    AURORA = "aurora"
    OCEAN = "ocean"
    CANDY = "candy"


DEFAULT_BRAND = Brand.NETPROXY

_BRANDS_BY_KEY: dict[str, Brand] = {b.value: b for b in Brand}


class GradientStop(BaseModel):
    """One color stop; *offset* is a fraction of the gradient length."""

    model_config = {"frozen": True}

    offset: float
    color: str

    @field_validator("offset")
    @classmethod
    def _offset_in_range(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            msg = f"gradient offset must be within [0, 1], got {value}"
            raise ValueError(msg)
        return value

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The color as an ``(r, g, b)`` tuple (``#RRGGBB`` input)."""
        h = self.color.lstrip("#")
        return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


class BrandStyle(BaseModel):
    """A named, ordered gradient. Offsets run from 0 to 1."""

    model_config = {"frozen": True}

    name: Brand
    fill_stops: tuple[GradientStop, ...]

    @field_validator("fill_stops")
    @classmethod
    def _at_least_two(cls, stops: tuple[GradientStop, ...]) -> tuple[GradientStop, ...]:
        if len(stops) < 2:
            raise ValueError("a brand style needs at least two gradient stops")
        return stops


def _style(name: Brand, *stops: tuple[float, str]) -> BrandStyle:
    return BrandStyle(
        name=name,
        fill_stops=tuple(GradientStop(offset=o, color=c) for o, c in stops),
    )


BRAND_STYLES: MappingProxyType[Brand, BrandStyle] = MappingProxyType(
    {
        Brand.NETPROXY: _style(
            Brand.NETPROXY,
            (0.0, "#FFF1A6"),
            (0.22, "#FFC458"),
            (0.55, "#FF781F"),
            (1.0, "#FF3A1F"),
        ),
        Brand.AURORA: _style(
            Brand.AURORA,
            (0.0, "#5CF1E2"),
            (0.30, "#59C8F9"),
            (0.60, "#7D86FF"),
            (1.0, "#9757F6"),
        ),
        Brand.OCEAN: _style(
            Brand.OCEAN,
            (0.0, "#4ED0FF"),
            (0.45, "#3AA0FF"),
            (1.0, "#2B66FF"),
        ),
        Brand.CANDY: _style(
            Brand.CANDY,
            (0.0, "#FF6FD8"),
            (0.50, "#FF8C6F"),
            (1.0, "#FFCA5C"),
        ),
    }
)


def resolve_brand(name: str | None) -> Brand:
    """Map a free-form style name onto a :class:`Brand`."""
    key = (name or "").strip().lower()
    return _BRANDS_BY_KEY.get(key, DEFAULT_BRAND)


def get_brand(name: str | None) -> BrandStyle:
    """Return the palette for *name*, falling back to ``netproxy``."""
    return BRAND_STYLES[resolve_brand(name)]


def linear_gradient_css(brand: BrandStyle, direction: str = "135deg") -> str:
    """Render *brand* as a CSS ``linear-gradient()`` for the preview page."""
    stops = ", ".join(f"{s.color} {round(s.offset * 100)}%" for s in brand.fill_stops)
    return f"linear-gradient({direction}, {stops})"
