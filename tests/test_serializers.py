# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""Tests for the runtime serializers (CSS gradient, color report)."""

import json
import re

import pytest

from chromakit.engine.gradient import generate
from chromakit.engine.naming import ColorNamer
from chromakit.runtime import (
    SerializerFormat,
    build_report,
    to_css_gradient,
    to_report,
)
from chromakit.schema import (
    ChannelId,
    ColorSpace,
    ColorValue,
    InvalidColorSyntax,
    NameEntry,
)

_STOP_RE = re.compile(r"(#[0-9a-f]{6}(?:4d)?|transparent) (\d+\.\d{2})%")


@pytest.fixture(scope="module")
def teal_gradient():
    return generate("oklch(70% 0.15 180)", ChannelId.of("oklch", "c"), (0.0, 0.4), 11)


@pytest.fixture(scope="module")
def hue_gradient():
    return generate("hsl(0 100% 50%)", ChannelId.of("hsl", "h"), (0.0, 360.0), 7)


def _stops(css):
    inner = css[len("linear-gradient("):-1]
    return [_STOP_RE.fullmatch(part) for part in inner.split(", ")[1:]]


# ---------------------------------------------------------------------------
# to_css_gradient
# ---------------------------------------------------------------------------

class TestCssGradient:

    def test_shape(self, hue_gradient):
        css = to_css_gradient(hue_gradient)
        assert css.startswith("linear-gradient(to right, ")
        assert css.endswith(")")
        assert all(m is not None for m in _stops(css))

    def test_one_entry_per_stop(self, teal_gradient):
        assert len(_stops(to_css_gradient(teal_gradient))) == len(teal_gradient.stops)

    def test_in_gamut_only_has_no_transparent(self, hue_gradient):
        assert "transparent" not in to_css_gradient(hue_gradient)

    def test_out_of_gamut_transparent(self, teal_gradient):
        css = to_css_gradient(teal_gradient)
        stops = _stops(css)
        assert stops[0].group(1).startswith("#")
        assert stops[-1].group(1) == "transparent"
        assert css.count("transparent") == sum(not s.in_gamut for s in teal_gradient.stops)

    def test_crisp_edge(self, teal_gradient):
        """The first transparent stop follows the last opaque one by a hair."""
        stops = _stops(to_css_gradient(teal_gradient))
        i = next(i for i, m in enumerate(stops) if m.group(1) == "transparent")
        gap = float(stops[i].group(2)) - float(stops[i - 1].group(2))
        assert 0.0 <= gap <= 0.02

    def test_dim_style(self, teal_gradient):
        css = to_css_gradient(teal_gradient, out_of_gamut="dim")
        assert "transparent" not in css
        dimmed = [m for m in _stops(css) if m.group(1).endswith("4d") and len(m.group(1)) == 9]
        assert len(dimmed) == sum(not s.in_gamut for s in teal_gradient.stops)

    def test_positions_percent(self, hue_gradient):
        stops = _stops(to_css_gradient(hue_gradient))
        assert stops[0].group(2) == "0.00"
        assert stops[-1].group(2) == "100.00"

    def test_red_endpoint(self, hue_gradient):
        stops = _stops(to_css_gradient(hue_gradient))
        assert stops[0].group(1) == "#ff0000"

    def test_direction(self, hue_gradient):
        assert to_css_gradient(hue_gradient, direction="90deg").startswith("linear-gradient(90deg, ")

    def test_unknown_style(self, hue_gradient):
        with pytest.raises(ValueError, match="out_of_gamut"):
            to_css_gradient(hue_gradient, out_of_gamut="hidden")


# ---------------------------------------------------------------------------
# to_report
# ---------------------------------------------------------------------------

class TestReportJson:

    def test_compact_json(self):
        output = to_report("#ff0000")
        assert "\n" not in output
        data = json.loads(output)
        assert data["formats"]["hex"] == "#ff0000"
        assert data["formats"]["rgb"] == "rgb(255, 0, 0)"

    def test_pretty_json(self):
        output = to_report("#ff0000", format=SerializerFormat.JSON_PRETTY)
        assert "\n" in output
        assert json.loads(output) == json.loads(to_report("#ff0000"))

    def test_every_format(self):
        data = json.loads(to_report("#3a7bd5"))
        assert set(data["formats"]) == {"hex", "rgb", "hsl", "lch", "oklch", "lab"}

    def test_contrast(self):
        contrast = json.loads(to_report("#ff0000"))["contrast"]
        assert contrast["white"] == pytest.approx(4.0, abs=0.01)
        assert contrast["black"] == pytest.approx(5.25, abs=0.01)
        assert contrast["passes_aa"] is True
        assert contrast["passes_aaa"] is True

    def test_name(self):
        name = json.loads(to_report("#ff0000"))["name"]
        assert name["name"] == "Pure Red"
        assert name["confidence"] > 0.5

    def test_no_name(self):
        namer = ColorNamer(entries=(NameEntry("Black", 0.0, 0.0, 0.0),))
        assert json.loads(to_report("#ffffff", namer=namer))["name"] is None

    @pytest.mark.parametrize("text, gamut", [
        ("#ff0000", "srgb"),
        ("color(display-p3 1 0 0)", "display-p3"),
        ("color(rec2020 0 1 0)", "rec2020"),
    ])
    def test_gamut(self, text, gamut):
        assert json.loads(to_report(text))["gamut"] == gamut

    def test_alpha(self):
        assert json.loads(to_report("#ff000080"))["alpha"] == pytest.approx(128 / 255)

    def test_gray_with_previous_hue(self):
        previous = ColorValue(ColorSpace.OKLCH, (0.5, 0.1, 200.0))
        data = build_report("#808080", previous=previous)
        assert data["formats"]["oklch"].endswith(" 200.00)")

    def test_invalid_input(self):
        with pytest.raises(InvalidColorSyntax):
            to_report("#ggg")


class TestReportNatural:

    def test_header(self):
        output = to_report("#ff0000", format=SerializerFormat.NATURAL)
        assert output.startswith("## Color Report")
        assert "**Color:** Pure Red (#ff0000)" in output

    def test_sections(self):
        output = to_report("#3a7bd5", format=SerializerFormat.NATURAL)
        for label in ["**Formats:**", "**Gamut:**", "**Contrast:**", "**Name:**"]:
            assert label in output
        assert "- oklch: oklch(" in output

    def test_contrast_line(self):
        output = to_report("#ff0000", format=SerializerFormat.NATURAL)
        assert "4.00:1 on white, 5.25:1 on black (AA: pass, AAA: pass)" in output

    def test_opacity_only_when_translucent(self):
        assert "**Opacity:**" not in to_report("#ff0000", format=SerializerFormat.NATURAL)
        assert "**Opacity:** 50%" in to_report(
            "rgb(255 0 0 / 0.5)", format=SerializerFormat.NATURAL
        )

    def test_wide_gamut_label(self):
        output = to_report("color(display-p3 1 0 0)", format=SerializerFormat.NATURAL)
        assert "**Gamut:** Display P3 (outside sRGB)" in output

    def test_unnamed(self):
        namer = ColorNamer(entries=(NameEntry("Black", 0.0, 0.0, 0.0),))
        output = to_report("#ffffff", format=SerializerFormat.NATURAL, namer=namer)
        assert "**Color:** Unnamed color (#ffffff)" in output
        assert "**Name:** no close match" in output
