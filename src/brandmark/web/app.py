"""FastAPI application — routes requests onto :class:`GenerateService`.

One :class:`FontRegistry` and one service are built per app and shared by
all requests; every render allocates its own canvas. Handlers are plain
``def`` so Starlette runs them in its worker threads.

Any failure while generating becomes a ``500`` with a plain-text body.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from brandmark import __version__
from brandmark.domain.types import ImageFormat
from brandmark.services.generate import GenerateRequest, GenerateService
from brandmark.typography.fonts import FontRegistry
from brandmark.web.preview import render_preview

if TYPE_CHECKING:
    from brandmark.config.settings import BrandmarkSettings
    from brandmark.services.result import RenderedImage

log = structlog.get_logger(__name__)


def _image_response(image: RenderedImage) -> Response:
    return Response(
        content=image.content,
        media_type=image.media_type,
        headers={"Cache-Control": image.cache_control},
    )


def _guarded(render: Callable[[], RenderedImage]) -> Response:
    try:
        return _image_response(render())
    except Exception as exc:
        log.exception("render.failed")
        return PlainTextResponse(f"Gen error: {exc}", status_code=500)


def create_app(
    settings: BrandmarkSettings | None = None,
    *,
    fonts: FontRegistry | None = None,
) -> FastAPI:
    """Build the HTTP application.

    *fonts* may be injected to share one registry across apps (tests).
    """
    if settings is None:
        from brandmark.config.settings import BrandmarkSettings

        settings = BrandmarkSettings.from_cli()

    registry = fonts or FontRegistry(settings.fonts)
    service = GenerateService(registry, settings.render)

    app = FastAPI(title="brandmark", version=__version__, docs_url=None, redoc_url=None)
    app.state.settings = settings
    app.state.fonts = registry
    app.state.service = service

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        return HTMLResponse(render_preview(settings.render.default_style))

    @app.get("/gen")
    def gen(
        request: Request,
        logo: str | None = None,
        format: str | None = None,  # noqa: A002
        type: str | None = None,  # noqa: A002
        style: str | None = None,
        size: str | None = None,
        output: str | None = None,
    ) -> Response:
        req = GenerateRequest(
            logo=logo,
            host=request.headers.get("host"),
            format=format,
            type=type,
            style=style,
            size=size,
            output=ImageFormat.SVG if (output or "").lower() == "svg" else ImageFormat.PNG,
        )
        return _guarded(lambda: service.generate(req))

    def banner(request: Request, fmt: ImageFormat) -> Response:
        q = request.query_params
        return _guarded(
            lambda: service.banner(
                q.get("domain"),
                host=request.headers.get("host"),
                style=q.get("style"),
                theme=q.get("theme"),
                fmt=fmt,
            )
        )

    def logo_image(request: Request, fmt: ImageFormat) -> Response:
        q = request.query_params
        return _guarded(
            lambda: service.logo(
                q.get("domain"),
                host=request.headers.get("host"),
                style=q.get("style"),
                size=q.get("size"),
                fmt=fmt,
            )
        )

    @app.get("/banner.png")
    def banner_png(request: Request) -> Response:
        return banner(request, ImageFormat.PNG)

    @app.get("/banner.svg")
    def banner_svg(request: Request) -> Response:
        return banner(request, ImageFormat.SVG)

    @app.get("/logo.png")
    def logo_png(request: Request) -> Response:
        return logo_image(request, ImageFormat.PNG)

    @app.get("/logo.svg")
    def logo_svg(request: Request) -> Response:
        return logo_image(request, ImageFormat.SVG)

    @app.get("/icon.ico")
    def icon_ico(request: Request) -> Response:
        q = request.query_params
        return _guarded(
            lambda: service.icon(
                q.get("domain"), host=request.headers.get("host"), style=q.get("style")
            )
        )

    @app.get("/icon.svg")
    def icon_svg(request: Request) -> Response:
        q = request.query_params
        return _guarded(
            lambda: service.favicon_svg(
                q.get("domain"), host=request.headers.get("host"), style=q.get("style")
            )
        )

    @app.get("/favicon.ico")
    def favicon() -> RedirectResponse:
        return RedirectResponse("/icon.ico", status_code=302)

    return app
