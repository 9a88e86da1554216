# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Every space converts to and from a common interchange space, CIE XYZ with
a D65 white point:

    sRGB / Display-P3 / Rec2020 -> (decode) -> linear RGB -> (matrix) -> XYZ
    Lab  <- (kappa/epsilon piecewise cube root) <- XYZ
    OKLab <- (matrix, cube root, matrix) <- XYZ
    LCH / OKLCH <- polar transform <- Lab / OKLab
    HSL <- piecewise formulas <- sRGB

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- CIE Lab: CIE 15:2004, with the exact kappa = 24389/27, epsilon = 216/24389
- Primaries matrices: CSS Color Module Level 4

All functions take and return arrays of shape (..., 3) and never clip:
out-of-gamut colors survive every transform so that gamut tests can see
them. Hue handling for achromatic colors is the caller's concern.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from chromakit.schema import ColorSpace, UnsupportedFormat


# =============================================================================
# Companding (sRGB transfer function)
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Decode gamma-encoded RGB values to linear light.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4

    Applied to |value| with the sign restored, so negative (out-of-gamut)
    channels decode symmetrically instead of producing NaN.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    mag = np.abs(srgb)
    linear = np.where(
        mag <= 0.04045,
        mag / 12.92,
        np.power((mag + 0.055) / 1.055, 2.4)
    )
    return np.copysign(linear, srgb)


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Encode linear RGB to gamma-encoded values.

    Inverse of srgb_to_linear, sign-symmetric, unclipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    mag = np.abs(linear)
    srgb = np.where(
        mag <= 0.0031308,
        mag * 12.92,
        1.055 * np.power(mag, 1.0 / 2.4) - 0.055
    )
    return np.copysign(srgb, linear)


# =============================================================================
# Linear RGB ↔ XYZ (D65)
# =============================================================================

# D65 reference white, from the chromaticity (0.3127, 0.3290)
D65_WHITE = np.array([0.3127 / 0.3290, 1.0, (1.0 - 0.3127 - 0.3290) / 0.3290], dtype=np.float64)

_SRGB_TO_XYZ = np.array([
    [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559182, 0.11919477979462598, 0.9505321522496607],
], dtype=np.float64)

_P3_TO_XYZ = np.array([
    [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
    [0.2289745640697488, 0.6917385218365064, 0.079286914093745],
    [0.0, 0.04511338185890264, 1.043944368900976],
], dtype=np.float64)

_REC2020_TO_XYZ = np.array([
    [0.6369580483012914, 0.14461690358620832, 0.1688809751641721],
    [0.2627002120112671, 0.6779980715188708, 0.05930171646986196],
    [0.0, 0.028072693049087428, 1.060985057710791],
], dtype=np.float64)

_RGB_TO_XYZ = {
    ColorSpace.SRGB: _SRGB_TO_XYZ,
    ColorSpace.SRGB_LINEAR: _SRGB_TO_XYZ,
    ColorSpace.DISPLAY_P3: _P3_TO_XYZ,
    ColorSpace.REC2020: _REC2020_TO_XYZ,
}

# Inverse matrices
_XYZ_TO_RGB = {space: np.linalg.inv(m) for space, m in _RGB_TO_XYZ.items()}


def linear_rgb_to_xyz(rgb: NDArray[np.float64], space: ColorSpace) -> NDArray[np.float64]:
    """
    Convert linear RGB in the given RGB space's primaries to XYZ-D65.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values
        space: One of the RGB-family spaces (selects the primaries)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ[space])


def xyz_to_linear_rgb(xyz: NDArray[np.float64], space: ColorSpace) -> NDArray[np.float64]:
    """
    Convert XYZ-D65 to linear RGB in the given RGB space's primaries.

    Args:
        xyz: Array of shape (..., 3) with XYZ values
        space: One of the RGB-family spaces (selects the primaries)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB[space])


# =============================================================================
# XYZ ↔ CIE Lab (D65)
# =============================================================================

_KAPPA = 24389.0 / 27.0
_EPSILON = 216.0 / 24389.0


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ-D65 to CIE Lab relative to the same D65 white.

    Returns:
        Array of shape (..., 3) with (L, a, b), L in 0-100 for real colors
    """
    xyz = np.asarray(xyz, dtype=np.float64) / D65_WHITE
    f = np.where(
        xyz > _EPSILON,
        np.cbrt(xyz),
        (_KAPPA * xyz + 16.0) / 116.0
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE Lab (D65) to XYZ-D65.

    Inverse of xyz_to_lab.
    """
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    x = np.where(fx ** 3 > _EPSILON, fx ** 3, (116.0 * fx - 16.0) / _KAPPA)
    y = np.where(L > _KAPPA * _EPSILON, fy ** 3, L / _KAPPA)
    z = np.where(fz ** 3 > _EPSILON, fz ** 3, (116.0 * fz - 16.0) / _KAPPA)

    return np.stack([x, y, z], axis=-1) * D65_WHITE


# =============================================================================
# XYZ ↔ OKLab
# =============================================================================

# XYZ-D65 to LMS (cone responses), Ottosson's matrix recomputed for the
# exact D65 white above so that white maps to a = b = 0
_M1 = np.array([
    [0.8190224379967030, 0.3619062600528904, -0.1288737815209879],
    [0.0329836539323885, 0.9292868615863434, 0.0361446663506424],
    [0.0481771893596242, 0.2642395317527308, 0.6335478284694309],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542683093140, 0.7936177747023054, -0.0040720430116193],
    [1.9779985324311684, -2.4285922420485799, 0.4505937096174110],
    [0.0259040424655478, 0.7827717124575296, -0.8086757549230774],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def xyz_to_oklab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ-D65 to OKLab.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    xyz = np.asarray(xyz, dtype=np.float64)

    # XYZ to LMS
    lms = np.einsum('...j,ij->...i', xyz, _M1)

    # Cube root (handle negative values for out-of-gamut colors)
    lms_cbrt = np.sign(lms) * np.abs(lms) ** (1.0 / 3.0)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to XYZ-D65.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS (cubed)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)

    # Cube
    lms = lms_cbrt ** 3

    # LMS to XYZ
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# Cartesian ↔ Polar (Lab ↔ LCH, OKLab ↔ OKLCH)
# =============================================================================


def lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert a Lab-like space to its cylindrical form.

    Works for both CIE Lab → LCH and OKLab → OKLCH.

    Returns:
        Array of shape (..., 3) with (L, C, H), H in degrees [0, 360).
        H is 0 where a = b = 0; callers apply their own achromatic policy.
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert a cylindrical LCH-like space back to Cartesian form.

    Works for both LCH → CIE Lab and OKLCH → OKLab.
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def srgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB to HSL.

    Returns:
        Array of shape (..., 3) with (H degrees, S 0-1, L 0-1).
        H is 0 for achromatic input. A negative saturation (possible for
        out-of-gamut input) is folded to positive by rotating hue 180°.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    r, g, b = srgb[..., 0], srgb[..., 1], srgb[..., 2]

    mx = np.max(srgb, axis=-1)
    mn = np.min(srgb, axis=-1)
    d = mx - mn
    light = (mx + mn) / 2.0

    denom = 1.0 - np.abs(2.0 * light - 1.0)
    has_chroma = d != 0.0
    safe_d = np.where(has_chroma, d, 1.0)
    sat = np.where(has_chroma & (denom != 0.0), d / np.where(denom != 0.0, denom, 1.0), 0.0)

    hue = np.where(
        mx == r,
        ((g - b) / safe_d) % 6.0,
        np.where(mx == g, (b - r) / safe_d + 2.0, (r - g) / safe_d + 4.0),
    ) * 60.0
    hue = np.where(has_chroma, hue, 0.0)

    flip = sat < 0.0
    hue = np.where(flip, hue + 180.0, hue) % 360.0
    sat = np.abs(sat)

    return np.stack([hue, sat, light], axis=-1)


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSL (H degrees, S 0-1, L 0-1) to gamma-encoded sRGB."""
    hsl = np.asarray(hsl, dtype=np.float64)
    h, s, light = hsl[..., 0] % 360.0, hsl[..., 1], hsl[..., 2]

    a = s * np.minimum(light, 1.0 - light)

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + h / 30.0) % 12.0
        return light - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))

    return np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1)


# =============================================================================
# Dispatch through XYZ
# =============================================================================


def to_xyz(coords: NDArray[np.float64], space: ColorSpace) -> NDArray[np.float64]:
    """
    Convert normalised coordinates in any space to XYZ-D65.

    Args:
        coords: Array of shape (..., 3)
        space: Space the coordinates are expressed in

    Raises:
        UnsupportedFormat: If no route from the space is known
    """
    coords = np.asarray(coords, dtype=np.float64)

    if space is ColorSpace.XYZ_D65:
        return coords
    if space is ColorSpace.SRGB_LINEAR:
        return linear_rgb_to_xyz(coords, space)
    if space.is_rgb:
        return linear_rgb_to_xyz(srgb_to_linear(coords), space)
    if space is ColorSpace.HSL:
        return linear_rgb_to_xyz(srgb_to_linear(hsl_to_srgb(coords)), ColorSpace.SRGB)
    if space is ColorSpace.LAB:
        return lab_to_xyz(coords)
    if space is ColorSpace.LCH:
        return lab_to_xyz(lch_to_lab(coords))
    if space is ColorSpace.OKLAB:
        return oklab_to_xyz(coords)
    if space is ColorSpace.OKLCH:
        return oklab_to_xyz(lch_to_lab(coords))
    raise UnsupportedFormat(space)


def from_xyz(xyz: NDArray[np.float64], space: ColorSpace) -> NDArray[np.float64]:
    """
    Convert XYZ-D65 to normalised coordinates in any space.

    Polar outputs carry whatever hue atan2 yields for a = b = 0 (zero);
    the conversion layer replaces it for achromatic colors.

    Raises:
        UnsupportedFormat: If no route to the space is known
    """
    xyz = np.asarray(xyz, dtype=np.float64)

    if space is ColorSpace.XYZ_D65:
        return xyz
    if space is ColorSpace.SRGB_LINEAR:
        return xyz_to_linear_rgb(xyz, space)
    if space.is_rgb:
        return linear_to_srgb(xyz_to_linear_rgb(xyz, space))
    if space is ColorSpace.HSL:
        return srgb_to_hsl(linear_to_srgb(xyz_to_linear_rgb(xyz, ColorSpace.SRGB)))
    if space is ColorSpace.LAB:
        return xyz_to_lab(xyz)
    if space is ColorSpace.LCH:
        return lab_to_lch(xyz_to_lab(xyz))
    if space is ColorSpace.OKLAB:
        return xyz_to_oklab(xyz)
    if space is ColorSpace.OKLCH:
        return lab_to_lch(xyz_to_oklab(xyz))
    raise UnsupportedFormat(space)


def to_linear_rgb(coords: NDArray[np.float64], source: ColorSpace, target: ColorSpace) -> NDArray[np.float64]:
    """
    Convert coordinates in `source` to linear light in `target`'s primaries.

    Shortcut used by gamut tests, which only care about linear channels.
    """
    return xyz_to_linear_rgb(to_xyz(coords, source), target)


def oklch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert OKLCH to CIE Lab (D65); used for CIEDE2000 comparisons."""
    return xyz_to_lab(oklab_to_xyz(lch_to_lab(lch)))
