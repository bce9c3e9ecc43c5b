"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, brandmark.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- brandmark.toml sections ---


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 3001


class FontFaceConfig(BaseModel):
    """One entry of [[fonts.faces]]."""

    model_config = {"frozen": True}

    file: str
    family: str
    weight: int = 400


def _default_faces() -> tuple[FontFaceConfig, ...]:
    table = [
        ("BodoniModa-Black.ttf", "Bodoni Moda", 900),
        ("BodoniModa-ExtraBold.ttf", "Bodoni Moda", 800),
        ("BodoniModa-Bold.ttf", "Bodoni Moda", 700),
        ("BodoniModa-SemiBold.ttf", "Bodoni Moda", 600),
        ("BodoniModa-Regular.ttf", "Bodoni Moda", 400),
        ("PlayfairDisplay-Black.ttf", "Playfair Display", 900),
        ("PlayfairDisplay-Bold.ttf", "Playfair Display", 700),
        ("PlayfairDisplay-Regular.ttf", "Playfair Display", 400),
        ("CormorantGaramond-Bold.ttf", "Cormorant Garamond", 700),
        ("CormorantGaramond-Regular.ttf", "Cormorant Garamond", 400),
        ("SpectralSC-Bold.ttf", "Spectral SC", 700),
        ("SpectralSC-Regular.ttf", "Spectral SC", 400),
    ]
    return tuple(FontFaceConfig(file=f, family=fam, weight=w) for f, fam, w in table)


class FontsConfig(BaseModel):
    """[fonts] section.

    ``families`` is the lookup order for raster output; ``font_stack`` is
    the CSS family list written into SVG output. ``cache_size`` caps how
    many sized fonts stay loaded.
    """

    model_config = {"frozen": True}

    font_dirs: tuple[str, ...] = ("fonts",)
    faces: tuple[FontFaceConfig, ...] = Field(default_factory=_default_faces)
    families: tuple[str, ...] = (
        "Bodoni Moda",
        "Playfair Display",
        "Cormorant Garamond",
        "Spectral SC",
    )
    font_stack: str = (
        '"Bodoni Moda","Playfair Display","Cormorant Garamond","Spectral SC",'
        '"Times New Roman",serif'
    )
    cache_size: int = Field(default=256, ge=1)


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    default_style: str = "netproxy"
    default_logo_size: int = 1024
    min_logo_size: int = 64
    max_logo_size: int = 2048
    favicon_size: int = 64
    favicon_sizes: tuple[int, ...] = (256, 128, 64, 48, 32, 16)
    subtitle: str = "PROXY RESIDENTIAL P2P"
