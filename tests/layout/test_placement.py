"""Tests for banner, logo, and favicon placement math."""

from __future__ import annotations

import math

import pytest

from brandmark.domain.palettes import get_brand
from brandmark.domain.types import Theme
from brandmark.layout.placement import (
    BANNER_HEIGHT,
    BANNER_WIDTH,
    LETTER_GAP,
    PAD_LEFT,
    PAD_RIGHT,
    banner_layout,
    gradient_box,
    letter_layout,
    square_layout,
)
from brandmark.typography.metrics import TextMeasurer
from brandmark.typography.runs import TextStyle, layout_run

NETPROXY = get_brand("netproxy")
TEXT_X = PAD_LEFT + BANNER_HEIGHT + LETTER_GAP


class TestGradientBox:
    def test_box_geometry(self, measurer: TextMeasurer) -> None:
        run = layout_run("io", TextStyle(size=100, tracking_em=0.0, small_caps=False), measurer)
        box = gradient_box(run, 50, 300)
        assert box.pad_x == 12
        assert box.width == math.ceil(run.width + 24)
        assert box.height == 126
        assert box.baseline == pytest.approx(18 + 98)
        # the run baseline lands on the requested baseline
        assert box.top + box.baseline == pytest.approx(300)
        assert box.left == 50


class TestLetterLayout:
    def test_fills_banner_box(self, measurer: TextMeasurer) -> None:
        letter = letter_layout(PAD_LEFT, 0, BANNER_HEIGHT, BANNER_HEIGHT, "N", measurer)
        assert letter.size == math.floor(407 * 1.04)
        assert letter.glow_center == (PAD_LEFT + BANNER_HEIGHT / 2, BANNER_HEIGHT / 2)
        assert letter.glow_radius == pytest.approx(BANNER_HEIGHT * 0.48)

    def test_glyph_is_centered(self, measurer: TextMeasurer) -> None:
        letter = letter_layout(0, 0, 200, 200, "N", measurer)
        glyph = letter.glyph
        ink_left = glyph.left + glyph.pad_x
        ink_right = ink_left + glyph.run.glyphs[0].width
        assert ink_left - 2 == pytest.approx(198 - ink_right)

    def test_square_layout(self, measurer: TextMeasurer) -> None:
        square = square_layout("Q", NETPROXY, 64, measurer)
        assert square.size == 64
        assert square.letter.letter == "Q"
        assert square.letter.glow_center == (32, 32)
        assert square.brand is NETPROXY


class TestBannerLayout:
    def test_canvas_and_columns(self, measurer: TextMeasurer) -> None:
        layout = banner_layout("netproxy.io", "N", NETPROXY, Theme.LIGHT, measurer)
        assert (layout.width, layout.height) == (BANNER_WIDTH, BANNER_HEIGHT)
        assert layout.text_x == TEXT_X
        assert layout.text_max_width == BANNER_WIDTH - TEXT_X - PAD_RIGHT

    def test_domain_size_capped_by_height(self, measurer: TextMeasurer) -> None:
        layout = banner_layout("netproxy.io", "N", NETPROXY, Theme.LIGHT, measurer)
        # width alone would allow 164
        assert layout.domain_size == math.floor(BANNER_HEIGHT * 0.44)

    def test_domain_line_fits(self, measurer: TextMeasurer) -> None:
        domain = "averyveryverylongbrandname.com"
        layout = banner_layout(domain, "A", NETPROXY, Theme.LIGHT, measurer)
        assert layout.suffix is not None
        right = layout.suffix.left + layout.suffix.run.width
        assert right - layout.text_x <= layout.text_max_width

    def test_suffix_follows_main(self, measurer: TextMeasurer) -> None:
        layout = banner_layout("netproxy.io", "N", NETPROXY, Theme.LIGHT, measurer)
        assert layout.parts.main == "netproxy."
        assert layout.suffix is not None
        assert layout.suffix.run.text == "io"
        assert layout.suffix.left == pytest.approx(layout.text_x + layout.main_width)
        assert layout.suffix.top + layout.suffix.baseline == pytest.approx(layout.domain_baseline)

    def test_no_suffix_for_unknown_tld(self, measurer: TextMeasurer) -> None:
        layout = banner_layout("brand.xyz", "B", NETPROXY, Theme.LIGHT, measurer)
        assert layout.suffix is None
        assert layout.main.run.text == "brand.xyz"

    def test_vertical_block(self, measurer: TextMeasurer) -> None:
        layout = banner_layout("netproxy.io", "N", NETPROXY, Theme.LIGHT, measurer)
        size = layout.domain_size
        free = BANNER_HEIGHT - size * (0.98 + 0.28) - 20 - size * 0.5
        assert layout.domain_baseline == pytest.approx(math.floor(free / 2) + size * 0.98)

    def test_subtitle_shrinks_to_fit(self, measurer: TextMeasurer) -> None:
        layout = banner_layout("netproxy.io", "N", NETPROXY, Theme.LIGHT, measurer)
        assert layout.subtitle_size == 77
        assert layout.subtitle.run.width <= layout.text_max_width
        assert layout.subtitle.run.style.weight == 400

    def test_subtitle_below_domain(self, measurer: TextMeasurer) -> None:
        layout = banner_layout("netproxy.io", "N", NETPROXY, Theme.LIGHT, measurer)
        d = layout.domain_size
        gap = max(22, round(d * 0.24))
        expected = layout.domain_baseline + d * 0.28 + gap + layout.subtitle_size * 0.9
        assert layout.subtitle.baseline == pytest.approx(expected)
        assert layout.subtitle.baseline < BANNER_HEIGHT

    def test_custom_subtitle(self, measurer: TextMeasurer) -> None:
        layout = banner_layout("netproxy.io", "N", NETPROXY, Theme.LIGHT, measurer, subtitle="FAST")
        assert layout.subtitle.run.text == "FAST"

    @pytest.mark.parametrize(
        ("theme", "main", "sub"),
        [(Theme.LIGHT, "#111111", "#4B5563"), (Theme.DARK, "#FFFFFF", "#E5E7FF")],
    )
    def test_theme_colors(self, theme: Theme, main: str, sub: str, measurer: TextMeasurer) -> None:
        layout = banner_layout("netproxy.io", "N", NETPROXY, theme, measurer)
        assert layout.main.color == main
        assert layout.subtitle.color == sub

    def test_small_caps_domain(self, measurer: TextMeasurer) -> None:
        layout = banner_layout("netproxy.io", "N", NETPROXY, Theme.LIGHT, measurer)
        glyphs = layout.main.run.glyphs
        assert "".join(g.glyph for g in glyphs) == "NETPROXY."
        assert glyphs[0].size == pytest.approx(layout.domain_size * 0.9)
        assert glyphs[-1].size == layout.domain_size
