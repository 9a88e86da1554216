# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Color engine for Chromakit.

Conversion, gamut mapping, gradient sampling, contrast analysis and naming.
Every function is pure except ColorNamer, whose lookup cache is locked.
"""

from chromakit.engine.contrast import (
    analyze,
    analyze_backgrounds,
    contrast,
    relative_luminance,
)
from chromakit.engine.convert import (
    clamp,
    convert,
    format_color,
    get_channels,
    resolve_space,
    set_channel,
    to_all_formats,
)
from chromakit.engine.gamut import check, classify, clip, in_gamut
from chromakit.engine.gradient import generate, snap_to_valid, thin
from chromakit.engine.naming import ColorNamer, NamerConfig, nearest_name
from chromakit.engine.parse import is_valid, parse

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
    "ColorNamer",
    "NamerConfig",
    "nearest_name",
]
