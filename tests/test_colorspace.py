# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""Tests for raw color space transforms through XYZ-D65."""

import numpy as np
import pytest

from chromakit.engine.colorspace import (
    D65_WHITE,
    from_xyz,
    hsl_to_srgb,
    lab_to_lch,
    lch_to_lab,
    linear_to_srgb,
    oklch_to_lab,
    srgb_to_hsl,
    srgb_to_linear,
    to_linear_rgb,
    to_xyz,
)
from chromakit.schema import ColorSpace


def _srgb_to_oklch(rgb):
    return from_xyz(to_xyz(np.array(rgb, dtype=np.float64), ColorSpace.SRGB), ColorSpace.OKLCH)


def _oklch_to_srgb(lch):
    return from_xyz(to_xyz(np.array(lch, dtype=np.float64), ColorSpace.OKLCH), ColorSpace.SRGB)


class TestCompanding:

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use the linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-12)

    def test_negative_values_are_symmetric(self):
        pos = srgb_to_linear(np.array([0.6]))
        neg = srgb_to_linear(np.array([-0.6]))
        assert float(neg[0]) == pytest.approx(-float(pos[0]))

    def test_values_above_one_not_clipped(self):
        assert float(srgb_to_linear(np.array([1.2]))[0]) > 1.0

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)


class TestXYZ:

    def test_srgb_white_is_d65(self):
        xyz = to_xyz(np.array([1.0, 1.0, 1.0]), ColorSpace.SRGB)
        np.testing.assert_allclose(xyz, D65_WHITE, atol=1e-6)

    def test_p3_white_is_d65(self):
        xyz = to_xyz(np.array([1.0, 1.0, 1.0]), ColorSpace.DISPLAY_P3)
        np.testing.assert_allclose(xyz, D65_WHITE, atol=1e-6)

    def test_rec2020_white_is_d65(self):
        xyz = to_xyz(np.array([1.0, 1.0, 1.0]), ColorSpace.REC2020)
        np.testing.assert_allclose(xyz, D65_WHITE, atol=1e-6)

    def test_srgb_red_luminance(self):
        xyz = to_xyz(np.array([1.0, 0.0, 0.0]), ColorSpace.SRGB)
        assert float(xyz[1]) == pytest.approx(0.2126, abs=1e-4)

    @pytest.mark.parametrize("space", list(ColorSpace))
    def test_roundtrip_every_space(self, space):
        srgb = np.array([0.8, 0.3, 0.6])
        xyz = to_xyz(srgb, ColorSpace.SRGB)
        back = to_xyz(from_xyz(xyz, space), space)
        np.testing.assert_allclose(back, xyz, atol=1e-9)

    def test_batch_shape(self):
        batch = np.random.RandomState(7).random((4, 5, 3))
        assert to_xyz(batch, ColorSpace.SRGB).shape == (4, 5, 3)


class TestLab:

    def test_white_is_l100(self):
        lab = from_xyz(D65_WHITE, ColorSpace.LAB)
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-6)

    def test_srgb_red(self):
        lab = from_xyz(to_xyz(np.array([1.0, 0.0, 0.0]), ColorSpace.SRGB), ColorSpace.LAB)
        np.testing.assert_allclose(lab, [53.24, 80.09, 67.20], atol=0.05)

    def test_dark_values_use_linear_segment(self):
        xyz = to_xyz(np.array([0.01, 0.01, 0.01]), ColorSpace.SRGB)
        lab = from_xyz(xyz, ColorSpace.LAB)
        back = to_xyz(lab, ColorSpace.LAB)
        np.testing.assert_allclose(back, xyz, atol=1e-12)

    def test_polar_roundtrip(self):
        lab = np.array([60.0, -20.0, 35.0])
        np.testing.assert_allclose(lch_to_lab(lab_to_lch(lab)), lab, atol=1e-10)

    def test_polar_hue_in_range(self):
        lch = lab_to_lch(np.array([50.0, 0.0, -10.0]))
        assert float(lch[2]) == pytest.approx(270.0)


class TestOKLab:

    def test_white(self):
        np.testing.assert_allclose(_srgb_to_oklch([1.0, 1.0, 1.0])[:2], [1.0, 0.0], atol=1e-4)

    def test_black(self):
        np.testing.assert_allclose(_srgb_to_oklch([0.0, 0.0, 0.0])[:2], [0.0, 0.0], atol=1e-8)

    def test_srgb_red(self):
        lch = _srgb_to_oklch([1.0, 0.0, 0.0])
        assert float(lch[0]) == pytest.approx(0.62796, abs=1e-3)
        assert float(lch[1]) == pytest.approx(0.25768, abs=1e-3)
        assert float(lch[2]) == pytest.approx(29.234, abs=0.1)

    def test_srgb_blue(self):
        lch = _srgb_to_oklch([0.0, 0.0, 1.0])
        assert float(lch[0]) == pytest.approx(0.45201, abs=1e-3)
        assert float(lch[2]) == pytest.approx(264.05, abs=0.1)

    def test_gray_has_no_chroma(self):
        lch = _srgb_to_oklch([0.5, 0.5, 0.5])
        assert float(lch[1]) < 1e-4

    def test_out_of_gamut_survives(self):
        """High-chroma OKLCH decodes to RGB outside [0, 1] without NaN."""
        rgb = _oklch_to_srgb([0.7, 0.4, 180.0])
        assert np.all(np.isfinite(rgb))
        assert rgb.min() < 0.0 or rgb.max() > 1.0

    def test_oklch_to_lab_white(self):
        np.testing.assert_allclose(oklch_to_lab(np.array([1.0, 0.0, 0.0])), [100.0, 0.0, 0.0], atol=0.05)


class TestHSL:

    def test_orange(self):
        hsl = srgb_to_hsl(np.array([1.0, 0.5, 0.0]))
        np.testing.assert_allclose(hsl, [30.0, 1.0, 0.5], atol=1e-10)

    def test_gray_has_zero_hue(self):
        hsl = srgb_to_hsl(np.array([0.4, 0.4, 0.4]))
        np.testing.assert_allclose(hsl, [0.0, 0.0, 0.4], atol=1e-12)

    def test_black_and_white(self):
        np.testing.assert_allclose(srgb_to_hsl(np.array([0.0, 0.0, 0.0])), [0.0, 0.0, 0.0])
        np.testing.assert_allclose(srgb_to_hsl(np.array([1.0, 1.0, 1.0])), [0.0, 0.0, 1.0])

    @pytest.mark.parametrize("rgb", [
        (0.2, 0.7, 0.4),
        (0.9, 0.1, 0.8),
        (0.05, 0.05, 0.6),
        (1.0, 1.0, 0.0),
    ])
    def test_roundtrip(self, rgb):
        srgb = np.array(rgb)
        np.testing.assert_allclose(hsl_to_srgb(srgb_to_hsl(srgb)), srgb, atol=1e-10)

    def test_no_nan_out_of_gamut(self):
        hsl = srgb_to_hsl(np.array([1.2, -0.1, 0.3]))
        assert np.all(np.isfinite(hsl))


class TestLinearRGB:

    def test_p3_red_outside_srgb(self):
        linear = to_linear_rgb(np.array([1.0, 0.0, 0.0]), ColorSpace.DISPLAY_P3, ColorSpace.SRGB)
        assert float(linear[0]) > 1.0
        assert float(linear[1]) < 0.0

    def test_srgb_inside_p3(self):
        linear = to_linear_rgb(np.array([1.0, 0.0, 0.0]), ColorSpace.SRGB, ColorSpace.DISPLAY_P3)
        assert np.all(linear >= -1e-9)
        assert np.all(linear <= 1.0 + 1e-9)
