"""FontRegistry — one-time font discovery and a per-size font cache.

Constructed once per process and passed by reference to every render
call. ``load()`` is single-flight: concurrent first callers block on the
same lock and share one discovery pass. After loading, the face table is
never mutated; only the ``(weight, size)`` font cache changes, under the lock.
The cache is least-recently-used and holds at most ``cache_size`` fonts.

Missing font files are skipped. When no configured face exists at all,
Pillow's bundled scalable font is used so rendering still works on a bare
host.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path

from PIL import ImageFont, features

from brandmark.config.models import FontsConfig

logger = logging.getLogger(__name__)

_SIZE_PRECISION = 2

BUNDLED_FONT_WARNING = "No font files found; rendered with Pillow's bundled font"


class FontLoadError(RuntimeError):
    """A configured font exists but could not be loaded."""


@dataclass(frozen=True)
class FontFace:
    family: str
    weight: int
    path: Path


class FontRegistry:
    """Registered font faces plus a cache of sized Pillow fonts.

    Usage::

        fonts = FontRegistry(settings.fonts)
        font = fonts.font(900, 128)
    """

    def __init__(self, config: FontsConfig | None = None) -> None:
        self._config = config or FontsConfig()
        self._lock = threading.Lock()
        self._faces: tuple[FontFace, ...] | None = None
        self._cache: OrderedDict[tuple[int, float], ImageFont.FreeTypeFont] = OrderedDict()

    @property
    def font_stack(self) -> str:
        """CSS ``font-family`` value used by markup output."""
        return self._config.font_stack

    @property
    def cached_fonts(self) -> int:
        return len(self._cache)

    @property
    def loaded(self) -> bool:
        return self._faces is not None

    @property
    def faces(self) -> tuple[FontFace, ...]:
        return self.load()._faces or ()

    def load(self) -> FontRegistry:
        """Discover font faces once. Safe to call from many threads."""
        if self._faces is not None:
            return self
        with self._lock:
            if self._faces is None:
                self._faces = self._discover()
        return self

    def _discover(self) -> tuple[FontFace, ...]:
        if not features.check("freetype2"):
            raise FontLoadError("Pillow was built without FreeType support")

        faces: list[FontFace] = []
        for entry in self._config.faces:
            for directory in self._config.font_dirs:
                path = Path(directory) / entry.file
                if not path.is_file():
                    continue
                try:
                    ImageFont.truetype(str(path), 12)
                except OSError as exc:
                    msg = f"Cannot load font {path}: {exc}"
                    raise FontLoadError(msg) from exc
                faces.append(FontFace(family=entry.family, weight=entry.weight, path=path))
                break

        if faces:
            logger.debug("Registered %d font faces", len(faces))
        else:
            logger.warning("No font files found in %s; using bundled font", self._config.font_dirs)
        return tuple(faces)

    def face_for(self, weight: int) -> FontFace | None:
        """Pick a face the way CSS would: first family in the stack, nearest weight."""
        faces = self.faces
        for family in self._config.families:
            candidates = [f for f in faces if f.family == family]
            if candidates:
                return min(candidates, key=lambda f: (abs(f.weight - weight), -f.weight))
        return None

    def font(self, weight: int, size: float) -> ImageFont.FreeTypeFont:
        """Return a font for *weight* at *size* pixels (cached)."""
        key = (weight, round(size, _SIZE_PRECISION))
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._cache.move_to_end(key)
                return cached

        face = self.face_for(weight)
        px = max(key[1], 1.0)
        if face is None:
            font = ImageFont.load_default(size=px)
        else:
            font = ImageFont.truetype(str(face.path), px)
        if not isinstance(font, ImageFont.FreeTypeFont):
            raise FontLoadError("Bundled font is not scalable")

        with self._lock:
            font = self._cache.setdefault(key, font)
            self._cache.move_to_end(key)
            while len(self._cache) > self._config.cache_size:
                self._cache.popitem(last=False)
        return font
