"""Themes, output kinds, and image formats.

Free-form request values are resolved here; anything unrecognized falls
back to the first member of each enum.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

SUBTITLE = "PROXY RESIDENTIAL P2P"


class Theme(StrEnum):
    """Banner text theme."""

    LIGHT = "light"
    DARK = "dark"


class OutputType(StrEnum):
    """What ``/gen`` renders."""

    MAIN = "main"
    ONLY_LOGO = "only_logo"


class ImageFormat(StrEnum):
    """Serialization format of a rendered image."""

    PNG = "png"
    SVG = "svg"
    ICO = "ico"


MEDIA_TYPES: dict[ImageFormat, str] = {
    ImageFormat.PNG: "image/png",
    ImageFormat.SVG: "image/svg+xml; charset=utf-8",
    ImageFormat.ICO: "image/x-icon",
}


class TextColors(NamedTuple):
    main: str
    sub: str


_THEME_COLORS: dict[Theme, TextColors] = {
    Theme.LIGHT: TextColors(main="#111111", sub="#4B5563"),
    Theme.DARK: TextColors(main="#FFFFFF", sub="#E5E7FF"),
}


def resolve_theme(value: str | None) -> Theme:
    """``"dark"`` (any case) selects the dark theme; everything else is light."""
    if (value or "").strip().lower() == Theme.DARK:
        return Theme.DARK
    return Theme.LIGHT


def resolve_output_type(value: str | None) -> OutputType:
    if (value or "").strip().lower() == OutputType.ONLY_LOGO:
        return OutputType.ONLY_LOGO
    return OutputType.MAIN


def text_colors(theme: Theme) -> TextColors:
    """Main and muted text colors for *theme*."""
    return _THEME_COLORS.get(theme, _THEME_COLORS[Theme.LIGHT])
