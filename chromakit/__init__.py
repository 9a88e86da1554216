# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Chromakit -- Color conversion and analysis engine for color pickers.

Takes color values in and returns color values, gamut verdicts, slider
gradients, contrast ratios and names out. No UI, no documents, no I/O.

Quick start::

    from chromakit import parse, check, format_color, nearest_name

    c = parse("oklch(70% 0.4 180)")
    check(c).in_gamut                       # False
    clipped = check(c).clipped              # same L and H, less chroma
    format_color(clipped, "hex")
    nearest_name(clipped)                   # NameMatch or None
"""

from __future__ import annotations

__version__ = "1.0.0"

from chromakit.engine import (
    ColorNamer,
    NamerConfig,
    analyze,
    analyze_backgrounds,
    check,
    clamp,
    classify,
    clip,
    contrast,
    convert,
    format_color,
    generate,
    get_channels,
    in_gamut,
    is_valid,
    nearest_name,
    parse,
    relative_luminance,
    resolve_space,
    set_channel,
    snap_to_valid,
    thin,
    to_all_formats,
)
from chromakit.schema import (
    BackgroundAnalysis,
    ChannelId,
    ChannelIndexOutOfRange,
    ColorError,
    ColorSpace,
    ColorValue,
    ContrastResult,
    Format,
    GamutCheck,
    GamutProfile,
    Gradient,
    GradientStop,
    InvalidColorSyntax,
    NameEntry,
    NameMatch,
    Threshold,
    UnsupportedFormat,
)

__all__ = [
    # Conversion
    "parse",
    "is_valid",
    "convert",
    "resolve_space",
    "format_color",
    "to_all_formats",
    "get_channels",
    "set_channel",
    "clamp",
    # Gamut
    "check",
    "clip",
    "classify",
    "in_gamut",
    # Gradients
    "generate",
    "snap_to_valid",
    "thin",
    # Contrast
    "relative_luminance",
    "contrast",
    "analyze",
    "analyze_backgrounds",
    # Naming
    "nearest_name",
    "ColorNamer",
    "NamerConfig",
    # Types
    "ColorValue",
    "ColorSpace",
    "Format",
    "GamutProfile",
    "GamutCheck",
    "ChannelId",
    "GradientStop",
    "Gradient",
    "Threshold",
    "ContrastResult",
    "BackgroundAnalysis",
    "NameEntry",
    "NameMatch",
    # Errors
    "ColorError",
    "InvalidColorSyntax",
    "ChannelIndexOutOfRange",
    "UnsupportedFormat",
    # Version
    "__version__",
]
