"""Multi-resolution ICO container.

Layout (all integers little-endian)::

    header   <HHH   reserved=0, type=1 (icon), count
    entry    <BBBBHHII  width, height (0 means 256), colors=0, reserved=0,
                        planes=1, bits=32, byte length, absolute offset
    ...      one entry per image, then the PNG payloads in the same order

Payloads are opaque PNG bytes; only their lengths matter here.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple

from brandmark.render.raster import compose_favicon, to_png

if TYPE_CHECKING:
    from brandmark.domain.palettes import BrandStyle
    from brandmark.typography.fonts import FontRegistry

HEADER_SIZE = 6
ENTRY_SIZE = 16
MAX_ICON_SIZE = 256

_HEADER = struct.Struct("<HHH")
_ENTRY = struct.Struct("<BBBBHHII")


class IconImage(NamedTuple):
    size: int
    data: bytes


def _dimension(size: int) -> int:
    if not 1 <= size <= MAX_ICON_SIZE:
        msg = f"icon size must be within 1..{MAX_ICON_SIZE}, got {size}"
        raise ValueError(msg)
    return 0 if size == MAX_ICON_SIZE else size


def build_icon_file(images: Sequence[IconImage]) -> bytes:
    """Pack square PNG images into one ``.ico`` file."""
    count = len(images)
    offset = HEADER_SIZE + ENTRY_SIZE * count
    entries: list[bytes] = []
    for image in images:
        dim = _dimension(image.size)
        entries.append(_ENTRY.pack(dim, dim, 0, 0, 1, 32, len(image.data), offset))
        offset += len(image.data)
    return b"".join([_HEADER.pack(0, 1, count), *entries, *(image.data for image in images)])


def render_icon_images(
    letter: str,
    brand: BrandStyle,
    fonts: FontRegistry,
    sizes: Sequence[int],
) -> list[IconImage]:
    return [IconImage(size, to_png(compose_favicon(letter, brand, fonts, size))) for size in sizes]


def generate_favicon_ico(
    letter: str,
    brand: BrandStyle,
    fonts: FontRegistry,
    sizes: Sequence[int] = (256, 128, 64, 48, 32, 16),
) -> bytes:
    return build_icon_file(render_icon_images(letter, brand, fonts, sizes))
