"""GenerateService — resolve a request into a rendered image.

Resolution order for the subject domain: explicit value, then the request
host, then ``"localhost"``. Style and theme are free-form strings resolved
with fallbacks, so no request input can make generation fail; only
backend failures (fonts, drawing) propagate.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import BaseModel

from brandmark.config.models import RenderConfig
from brandmark.domain.hosts import first_letter_of_domain, normalize_host, root_domain
from brandmark.domain.palettes import BrandStyle, get_brand
from brandmark.domain.types import ImageFormat, OutputType, resolve_output_type, resolve_theme
from brandmark.layout.placement import banner_layout, square_layout
from brandmark.render import raster, svg
from brandmark.render.ico import generate_favicon_ico
from brandmark.services.result import RenderedImage, ServiceError, ServiceResult
from brandmark.services.telemetry import trace_span, traced
from brandmark.typography.fonts import BUNDLED_FONT_WARNING, FontLoadError
from brandmark.typography.metrics import FontMeasurer

if TYPE_CHECKING:
    from brandmark.typography.fonts import FontRegistry

log = structlog.get_logger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class Subject:
    """The resolved domain, its initial, and the palette to paint with."""

    domain: str
    letter: str
    brand: BrandStyle


class GenerateRequest(BaseModel):
    """Raw ``/gen`` parameters, as received."""

    model_config = {"frozen": True}

    logo: str | None = None
    host: str | None = None
    format: str | None = None
    type: str | None = None
    style: str | None = None
    size: str | None = None
    output: ImageFormat = ImageFormat.PNG


def resolve_subject(raw: str | None, host: str | None = None, style: str | None = None) -> Subject:
    source = raw or normalize_host(host)
    domain = root_domain(source)
    return Subject(domain=domain, letter=first_letter_of_domain(domain), brand=get_brand(style))


class GenerateService:
    """Render banners, logos, and icons with a shared font registry.

    Usage::

        service = GenerateService(FontRegistry(settings.fonts), settings.render)
        image = service.banner("netproxy.io", style="aurora", theme="dark")
    """

    def __init__(self, fonts: FontRegistry, config: RenderConfig | None = None) -> None:
        self._fonts = fonts
        self._config = config or RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def logo_size(self, raw: str | int | None) -> int:
        """Clamp a requested logo size; unparsable values use the default."""
        if isinstance(raw, int):
            value = raw
        else:
            match = _LEADING_INT_RE.match(raw or "")
            value = int(match.group(1)) if match else self._config.default_logo_size
        return max(self._config.min_logo_size, min(self._config.max_logo_size, value))

    def _subject(self, raw: str | None, host: str | None, style: str | None) -> Subject:
        return resolve_subject(raw, host, style or self._config.default_style)

    @traced
    def banner(
        self,
        raw_domain: str | None,
        *,
        host: str | None = None,
        style: str | None = None,
        theme: str | None = None,
        fmt: ImageFormat = ImageFormat.PNG,
    ) -> RenderedImage:
        subject = self._subject(raw_domain, host, style)
        with trace_span("layout") as span:
            layout = banner_layout(
                subject.domain,
                subject.letter,
                subject.brand,
                resolve_theme(theme),
                FontMeasurer(self._fonts),
                subtitle=self._config.subtitle,
            )
            if span:
                span.annotate("domain_size", layout.domain_size)
                span.annotate("subtitle_size", layout.subtitle_size)
        with trace_span("paint"):
            if fmt is ImageFormat.SVG:
                content = svg.render_banner_svg(layout, self._fonts.font_stack).encode("utf-8")
            else:
                content = raster.to_png(raster.paint_banner(layout, self._fonts))
        log.debug("render.banner", domain=subject.domain, brand=subject.brand.name.value)
        return RenderedImage(content=content, format=_raster_or_svg(fmt))

    @traced
    def logo(
        self,
        raw_domain: str | None,
        *,
        host: str | None = None,
        style: str | None = None,
        size: str | int | None = None,
        fmt: ImageFormat = ImageFormat.PNG,
    ) -> RenderedImage:
        subject = self._subject(raw_domain, host, style)
        px = self.logo_size(size)
        with trace_span("layout"):
            layout = square_layout(subject.letter, subject.brand, px, FontMeasurer(self._fonts))
        with trace_span("paint"):
            if fmt is ImageFormat.SVG:
                content = svg.render_square_svg(layout, self._fonts.font_stack).encode("utf-8")
            else:
                content = raster.to_png(raster.paint_square(layout, self._fonts))
        log.debug("render.logo", domain=subject.domain, letter=subject.letter, size=px)
        return RenderedImage(content=content, format=_raster_or_svg(fmt))

    @traced
    def icon(
        self,
        raw_domain: str | None,
        *,
        host: str | None = None,
        style: str | None = None,
    ) -> RenderedImage:
        subject = self._subject(raw_domain, host, style)
        sizes = self._config.favicon_sizes
        content = generate_favicon_ico(subject.letter, subject.brand, self._fonts, sizes)
        log.debug("render.icon", domain=subject.domain, sizes=list(sizes))
        return RenderedImage(content=content, format=ImageFormat.ICO)

    @traced
    def favicon_svg(
        self,
        raw_domain: str | None,
        *,
        host: str | None = None,
        style: str | None = None,
    ) -> RenderedImage:
        subject = self._subject(raw_domain, host, style)
        size = self._config.favicon_size
        layout = square_layout(subject.letter, subject.brand, size, FontMeasurer(self._fonts))
        content = svg.render_square_svg(layout, self._fonts.font_stack).encode("utf-8")
        return RenderedImage(content=content, format=ImageFormat.SVG)

    def generate(self, request: GenerateRequest) -> RenderedImage:
        """Dispatch a ``/gen`` request to :meth:`logo` or :meth:`banner`."""
        if resolve_output_type(request.type) is OutputType.ONLY_LOGO:
            return self.logo(
                request.logo,
                host=request.host,
                style=request.style,
                size=request.size,
                fmt=request.output,
            )
        return self.banner(
            request.logo,
            host=request.host,
            style=request.style,
            theme=request.format,
            fmt=request.output,
        )

    @traced
    def export(
        self, kind: str, raw_domain: str | None, output: Path, **options: Any
    ) -> ServiceResult:
        """Render *kind* (``banner``, ``logo``, ``icon``) and write it to *output*."""
        fmt = ImageFormat(options.pop("fmt", None) or _format_from_suffix(output))
        try:
            if kind == "banner":
                image = self.banner(raw_domain, fmt=fmt, **options)
            elif kind == "logo":
                image = self.logo(raw_domain, fmt=fmt, **options)
            elif kind == "icon":
                image = self.icon(raw_domain, **options)
            else:
                return ServiceResult(
                    ok=False,
                    op=kind,
                    error=ServiceError(code="UNKNOWN_KIND", message=f"Unknown image kind: {kind}"),
                )
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_bytes(image.content)
        except FontLoadError as exc:
            return ServiceResult(
                ok=False,
                op=kind,
                error=ServiceError(code="FONT_LOAD_FAILED", message=str(exc)),
            )
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=kind,
                error=ServiceError(
                    code="WRITE_FAILED", message=str(exc), detail={"path": str(output)}
                ),
            )

        subject = self._subject(raw_domain, None, options.get("style"))
        warnings = [] if self._fonts.faces else [BUNDLED_FONT_WARNING]
        return ServiceResult(
            ok=True,
            op=kind,
            warnings=warnings,
            data={
                "path": str(output),
                "domain": subject.domain,
                "letter": subject.letter,
                "style": subject.brand.name.value,
                "format": image.format.value,
                "bytes": len(image.content),
            },
        )


def _raster_or_svg(fmt: ImageFormat) -> ImageFormat:
    return ImageFormat.SVG if fmt is ImageFormat.SVG else ImageFormat.PNG


def _format_from_suffix(path: Path) -> ImageFormat:
    suffix = path.suffix.lower().lstrip(".")
    if suffix in {f.value for f in ImageFormat}:
        return ImageFormat(suffix)
    return ImageFormat.PNG
