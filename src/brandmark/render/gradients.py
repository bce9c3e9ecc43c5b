"""Gradient rasters and clipped compositing for the Pillow renderer."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from PIL import Image

from brandmark.domain.palettes import GradientStop


def linear_gradient(width: int, height: int, stops: Sequence[GradientStop]) -> Image.Image:
    """Opaque RGBA gradient running from the top-left to the bottom-right corner.

    Pixels are sampled at their centers and projected onto the diagonal, so
    the first stop sits at ``(0, 0)`` and the last at ``(width, height)``.
    """
    xs = np.arange(width, dtype=np.float64) + 0.5
    ys = np.arange(height, dtype=np.float64) + 0.5
    length_sq = float(width * width + height * height) or 1.0
    t = (xs[np.newaxis, :] * width + ys[:, np.newaxis] * height) / length_sq
    t = np.clip(t, 0.0, 1.0)

    offsets = [s.offset for s in stops]
    channels = [np.interp(t, offsets, [s.rgb[i] for s in stops]) for i in range(3)]
    channels.append(np.full_like(t, 255.0))
    pixels = np.rint(np.stack(channels, axis=-1)).astype(np.uint8)
    return Image.fromarray(pixels)


def radial_glow(
    width: int,
    height: int,
    center: tuple[float, float],
    radius: float,
    *,
    max_alpha: float = 0.06,
) -> Image.Image:
    """White disc fading from *max_alpha* at *center* to transparent at *radius*."""
    xs = np.arange(width, dtype=np.float64) + 0.5
    ys = np.arange(height, dtype=np.float64) + 0.5
    dist = np.hypot(xs[np.newaxis, :] - center[0], ys[:, np.newaxis] - center[1])
    fade = np.clip(1.0 - dist / max(radius, 1e-6), 0.0, 1.0)

    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[..., :3] = 255
    pixels[..., 3] = np.rint(fade * max_alpha * 255).astype(np.uint8)
    return Image.fromarray(pixels)


def composite(target: Image.Image, layer: Image.Image, x: float, y: float) -> None:
    """Alpha-composite *layer* onto *target* at ``(x, y)``, clipping to the target."""
    left, top = math.floor(x), math.floor(y)
    src_left, src_top = max(0, -left), max(0, -top)
    src_right = min(layer.width, target.width - left)
    src_bottom = min(layer.height, target.height - top)
    if src_right <= src_left or src_bottom <= src_top:
        return
    target.alpha_composite(
        layer,
        dest=(max(0, left), max(0, top)),
        source=(src_left, src_top, src_right, src_bottom),
    )
