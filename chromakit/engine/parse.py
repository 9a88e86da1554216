# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Color string parsing.

Accepted syntax (case-insensitive, surrounding whitespace ignored):
- Hex: #rgb, #rgba, #rrggbb, #rrggbbaa
- rgb()/rgba(): 0-255 numbers or percentages, comma or space separated
- hsl()/hsla(): hue in degrees, saturation/lightness in percent
- lab(), lch(), oklab(), oklch(): CSS Color 4 notation, numbers or percentages
- color(<space> c1 c2 c3): srgb, srgb-linear, display-p3, rec2020, xyz-d65
- CSS named colors and ``transparent``

Alpha may follow a ``/`` or, in legacy comma syntax, come as a 4th argument.

Ranges are enforced only where a clamp would be ambiguous: hues wrap,
alpha clamps, but an rgb channel of 300 or a negative chroma is rejected.
The ``color()`` function accepts any finite values since it is the way to
express colors beyond a space's gamut.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from chromakit.engine.named_colors import CSS_NAMED_COLORS
from chromakit.schema import ColorSpace, ColorValue, InvalidColorSyntax

logger = logging.getLogger(__name__)


_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_HEX_RE = re.compile(r"#([0-9a-f]+)", re.IGNORECASE)
_FUNC_RE = re.compile(r"([a-z][a-z0-9-]*)\((.*)\)", re.IGNORECASE | re.DOTALL)
_TOKEN_RE = re.compile(rf"({_NUMBER})(%|deg)?", re.IGNORECASE)

# Allow float noise at range edges, e.g. "100.0000001%"
_RANGE_TOLERANCE = 1e-9

# What 100% means for each percentage-capable channel
_PERCENT_REF = {
    "lab": (100.0, 125.0, 125.0),
    "lch": (100.0, 150.0, None),
    "oklab": (1.0, 0.4, 0.4),
    "oklch": (1.0, 0.4, None),
}

_COLOR_FUNCTION_SPACES = {
    "srgb": ColorSpace.SRGB,
    "srgb-linear": ColorSpace.SRGB_LINEAR,
    "display-p3": ColorSpace.DISPLAY_P3,
    "rec2020": ColorSpace.REC2020,
    "xyz": ColorSpace.XYZ_D65,
    "xyz-d65": ColorSpace.XYZ_D65,
}

_Token = tuple[float, Optional[str], str]


def parse(text: str) -> ColorValue:
    """
    Parse a color string into a ColorValue.

    Args:
        text: Color in any supported syntax

    Returns:
        ColorValue in the space the syntax names (hex/rgb/named → srgb,
        hsl → hsl, oklch → oklch, ...)

    Raises:
        InvalidColorSyntax: For empty, malformed or out-of-range input

    Example:
        >>> parse("#ff0000").coords
        (1.0, 0.0, 0.0)
        >>> parse("oklch(70% 0.1 180)").space
        <ColorSpace.OKLCH: 'oklch'>
    """
    if not isinstance(text, str):
        raise InvalidColorSyntax(repr(text), reason="expected a string")

    trimmed = text.strip()
    if not trimmed:
        raise InvalidColorSyntax(text, reason="color input is empty")

    if trimmed.startswith("#"):
        return _parse_hex(text, trimmed)

    m = _FUNC_RE.fullmatch(trimmed)
    if m:
        return _parse_function(text, m.group(1).lower(), m.group(2))

    name = trimmed.lower()
    if name == "transparent":
        return ColorValue(ColorSpace.SRGB, (0.0, 0.0, 0.0), alpha=0.0)
    if name in CSS_NAMED_COLORS:
        return _parse_hex(text, CSS_NAMED_COLORS[name])

    logger.debug("Rejected color input %r: unknown syntax", text)
    raise InvalidColorSyntax(text, trimmed, "unrecognized color")


def is_valid(text: str) -> bool:
    """True if `text` parses as a color."""
    try:
        parse(text)
    except InvalidColorSyntax:
        return False
    return True


# =============================================================================
# Hex
# =============================================================================


def _parse_hex(text: str, hex_str: str) -> ColorValue:
    m = _HEX_RE.fullmatch(hex_str)
    if not m or len(m.group(1)) not in (3, 4, 6, 8):
        raise InvalidColorSyntax(text, hex_str, "hex colors need 3, 4, 6 or 8 digits")

    digits = m.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    channels = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
    alpha = channels[3] if len(channels) == 4 else 1.0
    return ColorValue(ColorSpace.SRGB, tuple(channels[:3]), alpha=alpha)


# =============================================================================
# Functional notation
# =============================================================================


def _parse_function(text: str, name: str, body: str) -> ColorValue:
    if name == "color":
        return _parse_color_function(text, body)

    channels, alpha_token = _split_arguments(text, body)
    if len(channels) != 3:
        raise InvalidColorSyntax(text, body, f"{name}() takes 3 channels, got {len(channels)}")

    tokens = [_read_token(text, tok) for tok in channels]
    alpha = _read_alpha(text, alpha_token)

    if name in ("rgb", "rgba"):
        coords = _rgb_channels(text, tokens)
        return ColorValue(ColorSpace.SRGB, coords, alpha=alpha)
    if name in ("hsl", "hsla"):
        coords = _hsl_channels(text, tokens)
        return ColorValue(ColorSpace.HSL, coords, alpha=alpha)
    if name in ("lab", "oklab"):
        space = ColorSpace.LAB if name == "lab" else ColorSpace.OKLAB
        coords = _lab_channels(text, name, space, tokens)
        return ColorValue(space, coords, alpha=alpha)
    if name in ("lch", "oklch"):
        space = ColorSpace.LCH if name == "lch" else ColorSpace.OKLCH
        coords = _lch_channels(text, name, space, tokens)
        return ColorValue(space, coords, alpha=alpha)

    logger.debug("Rejected color input %r: unknown function %s()", text, name)
    raise InvalidColorSyntax(text, f"{name}(", "unknown color function")


def _split_arguments(text: str, body: str) -> tuple[list[str], Optional[str]]:
    """Split a function body into channel tokens and an optional alpha token."""
    body = body.strip()
    if "," in body:
        if "/" in body:
            raise InvalidColorSyntax(text, body, "cannot mix commas and '/'")
        parts = [p.strip() for p in body.split(",")]
        if any(not p or len(p.split()) != 1 for p in parts):
            raise InvalidColorSyntax(text, body, "malformed argument list")
        if len(parts) == 4:
            return parts[:3], parts[3]
        return parts, None

    alpha_token = None
    if "/" in body:
        main, _, alpha_part = body.partition("/")
        alpha_parts = alpha_part.split()
        if len(alpha_parts) != 1:
            raise InvalidColorSyntax(text, alpha_part.strip() or "/", "malformed alpha")
        alpha_token = alpha_parts[0]
        body = main
    return body.split(), alpha_token


def _read_token(text: str, token: str) -> _Token:
    """Read one numeric argument as (value, unit, raw)."""
    if token.lower() == "none":
        return 0.0, None, token
    m = _TOKEN_RE.fullmatch(token)
    if not m:
        raise InvalidColorSyntax(text, token, "expected a number")
    unit = m.group(2).lower() if m.group(2) else None
    value = float(m.group(1))
    if not math.isfinite(value):
        raise InvalidColorSyntax(text, token, "number out of range")
    return value, unit, token


def _read_alpha(text: str, token: Optional[str]) -> float:
    if token is None:
        return 1.0
    value, unit, raw = _read_token(text, token)
    if unit == "deg":
        raise InvalidColorSyntax(text, raw, "alpha cannot be an angle")
    if unit == "%":
        value /= 100.0
    return min(max(value, 0.0), 1.0)


def _check_range(text: str, token: _Token, value: float, lo: float, hi: float, what: str) -> float:
    if value < lo - _RANGE_TOLERANCE or value > hi + _RANGE_TOLERANCE:
        raise InvalidColorSyntax(text, token[2], f"{what} out of range")
    return min(max(value, lo), hi)


def _no_angle(text: str, token: _Token) -> None:
    if token[1] == "deg":
        raise InvalidColorSyntax(text, token[2], "only hue accepts an angle")


def _hue(text: str, token: _Token) -> float:
    if token[1] == "%":
        raise InvalidColorSyntax(text, token[2], "hue cannot be a percentage")
    return token[0] % 360.0


def _rgb_channels(text: str, tokens: list[_Token]) -> tuple[float, float, float]:
    coords = []
    for tok in tokens:
        _no_angle(text, tok)
        value = tok[0] / 100.0 if tok[1] == "%" else tok[0] / 255.0
        coords.append(_check_range(text, tok, value, 0.0, 1.0, "rgb channel"))
    return tuple(coords)


def _hsl_channels(text: str, tokens: list[_Token]) -> tuple[float, float, float]:
    h_tok, s_tok, l_tok = tokens
    coords = [_hue(text, h_tok)]
    for tok, what in ((s_tok, "saturation"), (l_tok, "lightness")):
        _no_angle(text, tok)
        coords.append(_check_range(text, tok, tok[0] / 100.0, 0.0, 1.0, what))
    return tuple(coords)


def _scaled(tok: _Token, percent_ref: Optional[float]) -> float:
    if tok[1] == "%" and percent_ref is not None:
        return tok[0] / 100.0 * percent_ref
    return tok[0]


def _lightness(text: str, name: str, space: ColorSpace, tok: _Token) -> float:
    _no_angle(text, tok)
    lo, hi = space.ranges[0]
    value = _scaled(tok, _PERCENT_REF[name][0])
    return _check_range(text, tok, value, lo, hi, "lightness")


def _lab_channels(text: str, name: str, space: ColorSpace, tokens: list[_Token]) -> tuple[float, float, float]:
    l_tok, a_tok, b_tok = tokens
    refs = _PERCENT_REF[name]
    _no_angle(text, a_tok)
    _no_angle(text, b_tok)
    return (
        _lightness(text, name, space, l_tok),
        _scaled(a_tok, refs[1]),
        _scaled(b_tok, refs[2]),
    )


def _lch_channels(text: str, name: str, space: ColorSpace, tokens: list[_Token]) -> tuple[float, float, float]:
    l_tok, c_tok, h_tok = tokens
    _no_angle(text, c_tok)
    chroma = _scaled(c_tok, _PERCENT_REF[name][1])
    if chroma < 0.0:
        raise InvalidColorSyntax(text, c_tok[2], "chroma cannot be negative")
    return (_lightness(text, name, space, l_tok), chroma, _hue(text, h_tok))


def _parse_color_function(text: str, body: str) -> ColorValue:
    parts = body.strip().split(None, 1)
    if len(parts) != 2:
        raise InvalidColorSyntax(text, body, "color() needs a space and 3 channels")

    space_name, rest = parts[0].lower(), parts[1]
    space = _COLOR_FUNCTION_SPACES.get(space_name)
    if space is None:
        raise InvalidColorSyntax(text, parts[0], "unsupported color() space")
    if "," in rest:
        raise InvalidColorSyntax(text, rest, "color() does not take commas")

    channels, alpha_token = _split_arguments(text, rest)
    if len(channels) != 3:
        raise InvalidColorSyntax(text, rest, f"color() takes 3 channels, got {len(channels)}")

    coords = []
    for raw in channels:
        tok = _read_token(text, raw)
        _no_angle(text, tok)
        coords.append(tok[0] / 100.0 if tok[1] == "%" else tok[0])
    return ColorValue(space, tuple(coords), alpha=_read_alpha(text, alpha_token))
