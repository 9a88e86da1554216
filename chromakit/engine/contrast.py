# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
WCAG 2.1 relative luminance and contrast ratio.

Luminance is computed on the sRGB display color: channels are clamped to
[0, 1] before decoding, so a wide-gamut color is judged by what an sRGB
screen actually shows.
"""

from __future__ import annotations

import numpy as np

from chromakit.engine.colorspace import srgb_to_linear
from chromakit.engine.convert import ColorLike, convert
from chromakit.schema import (
    BackgroundAnalysis,
    ColorSpace,
    ColorValue,
    ContrastResult,
    Threshold,
)

# Rec. 709 luminance coefficients
_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

WHITE = ColorValue(ColorSpace.SRGB, (1.0, 1.0, 1.0))
BLACK = ColorValue(ColorSpace.SRGB, (0.0, 0.0, 0.0))


def relative_luminance(value: ColorLike) -> float:
    """WCAG relative luminance, 0.0 (black) to 1.0 (white)."""
    srgb = np.clip(np.array(convert(value, ColorSpace.SRGB).coords), 0.0, 1.0)
    return float(np.dot(srgb_to_linear(srgb), _LUMINANCE_WEIGHTS))


def contrast(fg: ColorLike, bg: ColorLike) -> float:
    """
    Contrast ratio between two colors, 1.0-21.0, rounded to 2 decimals.

    Symmetric: the lighter color is always the numerator.
    """
    y1 = relative_luminance(fg)
    y2 = relative_luminance(bg)
    ratio = (max(y1, y2) + 0.05) / (min(y1, y2) + 0.05)
    return min(max(round(ratio, 2), 1.0), 21.0)


def analyze(fg: ColorLike, bg: ColorLike) -> ContrastResult:
    """
    Contrast ratio with a pass/fail verdict for every WCAG threshold.

    Example:
        >>> result = analyze("#cccccc", "#ffffff")
        >>> result.passes[Threshold.NORMAL_TEXT_AA]
        False
    """
    ratio = contrast(fg, bg)
    return ContrastResult(
        ratio=ratio,
        passes={t: ratio >= t.ratio for t in Threshold},
    )


def analyze_backgrounds(value: ColorLike) -> BackgroundAnalysis:
    """Contrast of a color against white and black backgrounds."""
    return BackgroundAnalysis(
        white=analyze(value, WHITE),
        black=analyze(value, BLACK),
    )
