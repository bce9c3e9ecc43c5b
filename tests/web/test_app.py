"""Tests for the HTTP application."""

from __future__ import annotations

import io
import struct
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from brandmark.config.settings import BrandmarkSettings
from brandmark.typography.fonts import FontRegistry
from brandmark.web.app import create_app


@pytest.fixture
def client(fonts: FontRegistry, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.delenv("BRANDMARK_CONFIG", raising=False)
    settings = BrandmarkSettings.from_cli(search_from=tmp_path)
    return TestClient(create_app(settings, fonts=fonts))


def _size(data: bytes) -> tuple[int, int]:
    return Image.open(io.BytesIO(data)).size


class TestGen:
    def test_banner_png(self, client: TestClient) -> None:
        resp = client.get("/gen", params={"logo": "netproxy.io"})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "image/png"
        assert resp.headers["cache-control"] == "no-store"
        assert _size(resp.content) == (1466, 371)

    def test_only_logo(self, client: TestClient) -> None:
        params = {"logo": "netproxy.io", "type": "only_logo", "size": "128"}
        resp = client.get("/gen", params=params)
        assert resp.status_code == 200
        assert _size(resp.content) == (128, 128)

    def test_unknown_style_and_theme(self, client: TestClient) -> None:
        resp = client.get("/gen", params={"logo": "x.io", "style": "nope", "format": "sepia"})
        assert resp.status_code == 200

    def test_host_header_used_without_logo(self, client: TestClient) -> None:
        resp = client.get(
            "/gen",
            params={"output": "svg"},
            headers={"host": "www.netproxy.io:3001"},
        )
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("image/svg+xml")
        assert ">N</text>" in resp.text

    def test_svg_output(self, client: TestClient) -> None:
        resp = client.get("/gen", params={"logo": "netproxy.io", "output": "SVG"})
        assert resp.text.startswith("<svg")


class TestImageRoutes:
    def test_banner_svg(self, client: TestClient) -> None:
        resp = client.get("/banner.svg", params={"domain": "netproxy.io", "theme": "dark"})
        assert resp.status_code == 200
        assert "#FFFFFF" in resp.text

    def test_banner_png(self, client: TestClient) -> None:
        resp = client.get("/banner.png", params={"domain": "netproxy.io", "style": "ocean"})
        assert _size(resp.content) == (1466, 371)

    def test_logo_png(self, client: TestClient) -> None:
        resp = client.get("/logo.png", params={"domain": "netproxy.io", "size": "64"})
        assert resp.headers["cache-control"] == "no-store"
        assert _size(resp.content) == (64, 64)

    def test_logo_svg(self, client: TestClient) -> None:
        resp = client.get("/logo.svg", params={"domain": "netproxy.io", "size": "300"})
        assert 'width="300"' in resp.text

    def test_icon_ico(self, client: TestClient) -> None:
        resp = client.get("/icon.ico", params={"domain": "netproxy.io"})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "image/x-icon"
        assert struct.unpack_from("<HHH", resp.content, 0) == (0, 1, 6)

    def test_icon_svg(self, client: TestClient) -> None:
        resp = client.get("/icon.svg", params={"domain": "netproxy.io"})
        assert resp.headers["content-type"].startswith("image/svg+xml")

    def test_favicon_redirect(self, client: TestClient) -> None:
        resp = client.get("/favicon.ico", follow_redirects=False)
        assert resp.status_code == 302
        assert resp.headers["location"] == "/icon.ico"


class TestErrors:
    def test_render_failure_is_plain_500(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def boom(*args: object, **kwargs: object) -> None:
            raise RuntimeError("canvas exploded")

        monkeypatch.setattr(client.app.state.service, "banner", boom)  # type: ignore[attr-defined]
        resp = client.get("/gen", params={"logo": "netproxy.io"})
        assert resp.status_code == 500
        assert resp.text == "Gen error: canvas exploded"
        assert resp.headers["content-type"].startswith("text/plain")


class TestPreview:
    def test_index(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        for name in ("netproxy", "aurora", "ocean", "candy"):
            assert f'value="{name}"' in resp.text
        assert "/gen?logo=" in resp.text

    def test_default_style_selected(
        self, fonts: FontRegistry, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("BRANDMARK_CONFIG", raising=False)
        (tmp_path / "brandmark.toml").write_text('[render]\ndefault_style = "ocean"\n')
        settings = BrandmarkSettings.from_cli(search_from=tmp_path)
        client = TestClient(create_app(settings, fonts=fonts))
        assert 'value="ocean" selected' in client.get("/").text
