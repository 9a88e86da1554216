# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Gamut membership and chroma clipping.

A color is in a profile's gamut when every channel of its linear RGB, in
that profile's primaries, lies in [0, 1] up to GAMUT_EPSILON. The tolerance
keeps values that round-tripped through floating point from flickering at
the boundary.

Clipping holds OKLCH lightness and hue fixed and bisects chroma. A
per-channel RGB clamp would be simpler but shifts hue, most visibly for
saturated blues.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from chromakit.engine.colorspace import to_linear_rgb
from chromakit.engine.convert import ColorLike, coerce, convert
from chromakit.schema import ColorSpace, ColorValue, GamutCheck, GamutProfile

logger = logging.getLogger(__name__)


GAMUT_EPSILON = 1e-4

# Chroma bisection: at most this many halvings of [0, C] ...
CLIP_MAX_ITERATIONS = 24
# ... stopping early once the interval is this narrow
CLIP_CHROMA_TOLERANCE = 1e-4

_PROFILE_SPACES = {
    GamutProfile.SRGB: ColorSpace.SRGB,
    GamutProfile.DISPLAY_P3: ColorSpace.DISPLAY_P3,
    GamutProfile.REC2020: ColorSpace.REC2020,
}

# Narrowest first
_CLASSIFY_ORDER = (GamutProfile.SRGB, GamutProfile.DISPLAY_P3, GamutProfile.REC2020)


def in_gamut(
    value: ColorLike,
    profile: GamutProfile = GamutProfile.SRGB,
    *,
    epsilon: float = GAMUT_EPSILON,
) -> bool:
    """True if `value` is inside `profile` within `epsilon`."""
    if profile is GamutProfile.UNLIMITED:
        return True
    value = coerce(value)
    return _fits(np.array(value.coords, dtype=np.float64), value.space, profile, epsilon)


def _fits(coords: np.ndarray, space: ColorSpace, profile: GamutProfile, epsilon: float) -> bool:
    linear = to_linear_rgb(coords, space, _PROFILE_SPACES[profile])
    return bool(np.all(linear >= -epsilon) and np.all(linear <= 1.0 + epsilon))


def check(value: ColorLike, profile: GamutProfile = GamutProfile.SRGB) -> GamutCheck:
    """
    Test a color against a gamut profile.

    Args:
        value: Color to test
        profile: Target gamut

    Returns:
        GamutCheck. Out-of-gamut results carry the clipped color, its
        OKLCH (L, C) distance from the input and a warning message.

    Example:
        >>> check("oklch(70% 0.4 180)").in_gamut
        False
    """
    value = coerce(value)
    if in_gamut(value, profile):
        return GamutCheck(in_gamut=True, distance=0.0, profile=profile)

    clipped = clip(value, profile)
    L1, C1, _ = convert(value, ColorSpace.OKLCH).coords
    L2, C2, _ = convert(clipped, ColorSpace.OKLCH).coords
    return GamutCheck(
        in_gamut=False,
        distance=math.hypot(L1 - L2, C1 - C2),
        profile=profile,
        clipped=clipped,
        warning=f"Color exceeds {profile.display_name} gamut limits",
    )


def clip(value: ColorLike, profile: GamutProfile = GamutProfile.SRGB) -> ColorValue:
    """
    Map a color into `profile` by reducing OKLCH chroma.

    In-gamut colors (and any color under UNLIMITED) are returned as is.
    Otherwise lightness and hue are kept and chroma is bisected over
    [0, C]. Lightness at or beyond the ends of the scale collapses to white
    or black. The result is expressed in the input's space.
    """
    value = coerce(value)
    if in_gamut(value, profile):
        return value

    L, C, H = convert(value, ColorSpace.OKLCH).coords

    if L >= 1.0:
        coords = (1.0, 0.0, H)
        iterations = 0
    elif L <= 0.0:
        coords = (0.0, 0.0, H)
        iterations = 0
    else:
        # lo always fits with zero tolerance, hi never fits
        lo, hi = 0.0, C
        iterations = 0
        while iterations < CLIP_MAX_ITERATIONS and hi - lo >= CLIP_CHROMA_TOLERANCE:
            mid = (lo + hi) / 2.0
            if _fits(np.array([L, mid, H]), ColorSpace.OKLCH, profile, 0.0):
                lo = mid
            else:
                hi = mid
            iterations += 1
        coords = (L, lo, H)

    logger.debug(
        "Clipped %s into %s: chroma %.4f -> %.4f after %d iterations",
        value.space.value, profile.value, C, coords[1], iterations,
    )
    clipped = ColorValue(ColorSpace.OKLCH, coords, value.alpha)
    return convert(clipped, value.space, previous=value)


def classify(value: ColorLike) -> GamutProfile:
    """
    Narrowest standard gamut containing the color.

    Example:
        >>> classify("#ff0000")
        <GamutProfile.SRGB: 'srgb'>
        >>> classify("color(display-p3 1 0 0)")
        <GamutProfile.DISPLAY_P3: 'display-p3'>
    """
    value = coerce(value)
    for profile in _CLASSIFY_ORDER:
        if in_gamut(value, profile):
            return profile
    return GamutProfile.UNLIMITED
