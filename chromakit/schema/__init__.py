# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values and analysis results.

All types in this module are immutable (frozen dataclasses).
Every engine operation returns a new value instead of mutating one.
"""

from chromakit.schema.color_value import (
    BackgroundAnalysis,
    ChannelId,
    ColorSpace,
    ColorValue,
    ContrastResult,
    Format,
    GamutCheck,
    GamutProfile,
    Gradient,
    GradientStop,
    NameEntry,
    NameMatch,
    Threshold,
)
from chromakit.schema.errors import (
    ChannelIndexOutOfRange,
    ColorError,
    InvalidColorSyntax,
    UnsupportedFormat,
)

__all__ = [
    # Spaces and formats
    "ColorSpace",
    "Format",
    "GamutProfile",
    # Core value
    "ColorValue",
    # Gamut
    "GamutCheck",
    # Gradients
    "ChannelId",
    "GradientStop",
    "Gradient",
    # Contrast
    "Threshold",
    "ContrastResult",
    "BackgroundAnalysis",
    # Naming
    "NameEntry",
    "NameMatch",
    # Errors
    "ColorError",
    "InvalidColorSyntax",
    "ChannelIndexOutOfRange",
    "UnsupportedFormat",
]
