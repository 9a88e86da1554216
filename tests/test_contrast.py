# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""Tests for WCAG luminance and contrast."""

import pytest

from chromakit.engine.contrast import (
    BLACK,
    WHITE,
    analyze,
    analyze_backgrounds,
    contrast,
    relative_luminance,
)
from chromakit.engine.parse import parse
from chromakit.schema import Threshold

PAIRS = [
    ("#000000", "#ffffff"),
    ("#3a7bd5", "#f1c40f"),
    ("#777777", "#ffffff"),
    ("oklch(0.7 0.4 180)", "#101010"),
    ("hsl(120, 50%, 50%)", "lab(30 20 -40)"),
]


class TestRelativeLuminance:

    def test_black_and_white(self):
        assert relative_luminance(BLACK) == pytest.approx(0.0)
        assert relative_luminance(WHITE) == pytest.approx(1.0)

    def test_primaries(self):
        assert relative_luminance("#ff0000") == pytest.approx(0.2126, abs=1e-4)
        assert relative_luminance("#00ff00") == pytest.approx(0.7152, abs=1e-4)
        assert relative_luminance("#0000ff") == pytest.approx(0.0722, abs=1e-4)

    def test_mid_gray(self):
        assert relative_luminance("#808080") == pytest.approx(0.2158605, abs=1e-6)

    def test_wide_gamut_clamped(self):
        """Out-of-sRGB channels are judged by the clamped display color."""
        assert 0.0 <= relative_luminance("color(display-p3 0 1 0)") <= 1.0
        assert relative_luminance("color(srgb 1.5 1.5 1.5)") == pytest.approx(1.0)


class TestContrast:

    def test_black_white(self):
        assert contrast("#000000", "#ffffff") == pytest.approx(21.0)

    def test_same_color(self):
        assert contrast("#3a7bd5", "#3a7bd5") == pytest.approx(1.0)

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_symmetric(self, a, b):
        assert contrast(a, b) == contrast(b, a)

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_range(self, a, b):
        assert 1.0 <= contrast(a, b) <= 21.0

    def test_rounded_to_two_decimals(self):
        ratio = contrast("#3a7bd5", "#ffffff")
        assert ratio == round(ratio, 2)

    def test_known_value(self):
        assert contrast("#777777", "#ffffff") == pytest.approx(4.48, abs=0.01)


class TestAnalyze:

    def test_scenario_light_gray_on_white(self):
        result = analyze(parse("#CCCCCC"), parse("#FFFFFF"))
        assert 1.0 < result.ratio < 2.0
        assert result.passes[Threshold.NORMAL_TEXT_AA] is False

    def test_black_on_white_passes_all(self):
        result = analyze("#000000", "#ffffff")
        assert all(result.passes.values())
        assert result.passes_aaa

    def test_every_threshold_reported(self):
        assert set(analyze("#123456", "#abcdef").passes) == set(Threshold)

    def test_thresholds_inclusive(self):
        result = analyze("#595959", "#ffffff")
        assert result.ratio >= 7.0
        assert result.passes[Threshold.NORMAL_TEXT_AAA]

    def test_large_text_only(self):
        result = analyze("#888888", "#ffffff")
        assert 3.0 <= result.ratio < 4.5
        assert result.passes[Threshold.LARGE_TEXT_AA]
        assert result.passes[Threshold.GRAPHICAL_OBJECT_AA]
        assert not result.passes[Threshold.NORMAL_TEXT_AA]
        assert not result.passes[Threshold.LARGE_TEXT_AAA]


class TestAnalyzeBackgrounds:

    def test_mid_gray_passes_aa(self):
        result = analyze_backgrounds("#777")
        assert result.passes_aa

    def test_both_sides_reported(self):
        result = analyze_backgrounds("#ff0000")
        assert result.white.ratio == pytest.approx(4.0, abs=0.01)
        assert result.black.ratio == pytest.approx(5.25, abs=0.01)

    def test_to_dict(self):
        d = analyze_backgrounds("#000000").to_dict()
        assert d["white"]["ratio"] == pytest.approx(21.0)
        assert d["passes_aaa"] is True
