# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Conversion engine: moving ColorValues between spaces and formats.

Every conversion goes through XYZ-D65 (see ``colorspace``). This module
adds what raw transforms cannot know about:

- Achromatic hues. When a polar result has (near) zero chroma its hue is
  0/0. The hue of a ``previous`` value is kept if one is given (slider drag
  continuity), otherwise it becomes 0. No NaN ever leaves this module.
- Display units. Sliders and text fields show RGB as 0-255, HSL S/L and
  OKLCH L as 0-100; ``get_channels``/``set_channel`` translate.
- String formats consumed by the UI layer.
"""

from __future__ import annotations

import numbers
from typing import Optional, Union

import numpy as np

from chromakit.engine.colorspace import from_xyz, srgb_to_hsl, to_xyz
from chromakit.engine.parse import parse
from chromakit.schema import (
    ChannelIndexOutOfRange,
    ColorSpace,
    ColorValue,
    Format,
    UnsupportedFormat,
)

# Chroma below this has no meaningful hue (OKLCH C, LCH C, HSL max-min)
ACHROMATIC_EPSILON = 1e-4

SpaceLike = Union[ColorSpace, Format, str]
ColorLike = Union[ColorValue, str]

_SPACE_ALIASES = {
    "hex": ColorSpace.SRGB,
    "rgb": ColorSpace.SRGB,
    "linear-srgb": ColorSpace.SRGB_LINEAR,
    "p3": ColorSpace.DISPLAY_P3,
    "xyz": ColorSpace.XYZ_D65,
}


def resolve_space(space: SpaceLike) -> ColorSpace:
    """
    Resolve a ColorSpace, Format or name ("oklch", "p3", "hex") to a space.

    Raises:
        UnsupportedFormat: For anything else
    """
    if isinstance(space, ColorSpace):
        return space
    if isinstance(space, Format):
        return space.space
    if isinstance(space, str):
        key = space.strip().lower()
        if key in _SPACE_ALIASES:
            return _SPACE_ALIASES[key]
        try:
            return ColorSpace(key)
        except ValueError:
            pass
    raise UnsupportedFormat(space)


def resolve_format(fmt: Union[Format, str]) -> Format:
    """
    Resolve a Format or its name.

    Raises:
        UnsupportedFormat: For unknown names
    """
    if isinstance(fmt, Format):
        return fmt
    if isinstance(fmt, str):
        try:
            return Format(fmt.strip().lower())
        except ValueError:
            pass
    raise UnsupportedFormat(fmt)


def coerce(value: ColorLike) -> ColorValue:
    """Accept a ColorValue or a color string."""
    if isinstance(value, ColorValue):
        return value
    return parse(value)


# =============================================================================
# Space conversion
# =============================================================================


def convert(
    value: ColorLike,
    target: SpaceLike,
    *,
    previous: Optional[ColorValue] = None,
) -> ColorValue:
    """
    Convert a color to another space.

    Args:
        value: Color to convert (strings are parsed)
        target: Destination space
        previous: Earlier value of the same control; its hue is kept when
            the result is achromatic

    Returns:
        New ColorValue in `target`; `value` itself if already there
    """
    value = coerce(value)
    target = resolve_space(target)
    if value.space is target:
        return value

    xyz = to_xyz(np.array(value.coords, dtype=np.float64), value.space)
    coords = tuple(float(c) for c in from_xyz(xyz, target))

    if target.is_polar and _is_achromatic(coords, target):
        coords = _with_hue(coords, target, _fallback_hue(target, previous))

    return ColorValue(target, coords, value.alpha)


def _is_achromatic(coords: tuple[float, ...], space: ColorSpace) -> bool:
    if space is ColorSpace.HSL:
        _, s, light = coords
        return s * (1.0 - abs(2.0 * light - 1.0)) < ACHROMATIC_EPSILON
    return coords[1] < ACHROMATIC_EPSILON


def _with_hue(coords: tuple[float, ...], space: ColorSpace, hue: float) -> tuple[float, ...]:
    if space is ColorSpace.HSL:
        # Saturation of a gray is numerical noise near black and white
        return (hue, 0.0, coords[2])
    idx = space.hue_index
    return coords[:idx] + (hue,) + coords[idx + 1:]


def _fallback_hue(target: ColorSpace, previous: Optional[ColorValue]) -> float:
    if previous is None:
        return 0.0
    if previous.space is not target:
        previous = convert(previous, target)
    return previous.hue


# =============================================================================
# Channels
# =============================================================================


def get_channels(
    value: ColorLike,
    space: SpaceLike,
    *,
    previous: Optional[ColorValue] = None,
) -> tuple[float, float, float]:
    """Channel values of `value` in `space`, in display units (RGB 0-255, percentages 0-100)."""
    converted = convert(value, space, previous=previous)
    scale = converted.space.display_scale
    return tuple(c * s for c, s in zip(converted.coords, scale))


def set_channel(
    value: ColorLike,
    space: SpaceLike,
    index: int,
    new_value: float,
    *,
    previous: Optional[ColorValue] = None,
) -> ColorValue:
    """
    Replace one channel and rebuild the color in `space`.

    Args:
        value: Starting color
        space: Space whose channel is edited
        index: Channel index 0-2
        new_value: New channel value in display units

    Raises:
        ChannelIndexOutOfRange: If index is not 0, 1 or 2
    """
    target = resolve_space(space)
    if isinstance(index, bool) or not isinstance(index, numbers.Integral) or not 0 <= index <= 2:
        raise ChannelIndexOutOfRange(index, target.value)
    index = int(index)

    base = convert(value, target, previous=previous)
    coords = list(base.coords)
    coords[index] = float(new_value) / target.display_scale[index]
    return base.with_coords(tuple(coords))


def clamp(value: ColorLike, space: SpaceLike) -> ColorValue:
    """
    Clamp every channel to the space's declared range. Never raises for a
    valid color; the result is expressed in `space`.

    This is a per-channel clamp and may shift hue; use ``gamut.clip`` to
    bring a color into a device gamut.
    """
    converted = convert(value, space)
    coords = tuple(
        min(max(c, lo), hi)
        for c, (lo, hi) in zip(converted.coords, converted.space.ranges)
    )
    return converted.with_coords(coords)


# =============================================================================
# String formats
# =============================================================================


def format_color(
    value: ColorLike,
    fmt: Union[Format, str],
    *,
    previous: Optional[ColorValue] = None,
) -> str:
    """
    Render a color in one of the UI string formats.

    Formats:
        hex    #rrggbb
        rgb    rgb(r, g, b)            integers 0-255
        hsl    hsl(h, s%, l%)          integers
        lch    lch(L% C H)             2 decimals
        oklch  oklch(L% C H)           L x100 2 decimals, C 4, H 2
        lab    lab(L% A B)             2 decimals

    hex, rgb and hsl describe the sRGB display color, so out-of-gamut
    channels are clamped to 0-255 first.

    Raises:
        UnsupportedFormat: For unknown format names
    """
    fmt = resolve_format(fmt)
    value = coerce(value)

    if fmt in (Format.HEX, Format.RGB, Format.HSL):
        r, g, b = _display_srgb(value)
        if fmt is Format.HEX:
            return "#" + "".join(f"{round(c * 255):02x}" for c in (r, g, b))
        if fmt is Format.RGB:
            return f"rgb({round(r * 255)}, {round(g * 255)}, {round(b * 255)})"
        h, s, light = _display_hsl(value, (r, g, b), previous)
        return f"hsl({round(h) % 360}, {round(s * 100)}%, {round(light * 100)}%)"

    converted = convert(value, fmt.space, previous=previous)
    c0, c1, c2 = converted.coords
    if fmt is Format.LCH:
        return f"lch({_fixed(c0, 2)}% {_fixed(c1, 2)} {_fixed_hue(c2, 2)})"
    if fmt is Format.OKLCH:
        return f"oklch({_fixed(c0 * 100, 2)}% {_fixed(c1, 4)} {_fixed_hue(c2, 2)})"
    return f"lab({_fixed(c0, 2)}% {_fixed(c1, 2)} {_fixed(c2, 2)})"


def to_all_formats(
    value: ColorLike,
    *,
    previous: Optional[ColorValue] = None,
) -> dict[Format, str]:
    """Render a color in every UI format."""
    value = coerce(value)
    return {fmt: format_color(value, fmt, previous=previous) for fmt in Format}


def _display_srgb(value: ColorValue) -> tuple[float, float, float]:
    srgb = convert(value, ColorSpace.SRGB)
    return tuple(min(max(c, 0.0), 1.0) for c in srgb.coords)


def _display_hsl(
    value: ColorValue,
    srgb: tuple[float, float, float],
    previous: Optional[ColorValue],
) -> tuple[float, float, float]:
    if value.space is ColorSpace.HSL and srgb == tuple(convert(value, ColorSpace.SRGB).coords):
        return value.coords
    coords = tuple(float(c) for c in srgb_to_hsl(np.array(srgb, dtype=np.float64)))
    if _is_achromatic(coords, ColorSpace.HSL):
        context = previous if previous is not None else _hue_context(value)
        coords = _with_hue(coords, ColorSpace.HSL, _fallback_hue(ColorSpace.HSL, context))
    return coords


def _hue_context(value: ColorValue) -> Optional[ColorValue]:
    """Chromatic stand-in for a gray (OK)LCH color, carrying its own hue."""
    space = value.space
    if not space.is_polar or space is ColorSpace.HSL:
        return None
    coords = list(value.coords)
    # A tenth of the chroma range is enough for a well-defined hue
    coords[1] = space.ranges[1][1] * 0.1
    return value.with_coords(tuple(coords))


def _fixed(x: float, places: int) -> str:
    # "+ 0.0" turns -0.0 into 0.0 so nothing prints as "-0.00"
    return f"{round(x, places) + 0.0:.{places}f}"


def _fixed_hue(h: float, places: int) -> str:
    r = round(h, places)
    if r >= 360.0:
        r -= 360.0
    return _fixed(r, places)
