# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Chromakit.

Serialization of engine results for the UI layer:

1. CSS Gradient -- slider tracks with crisp gamut boundaries
2. Color Report -- formats, gamut, contrast and name as JSON or Markdown
"""

from chromakit.runtime.serializers import (
    SerializerFormat,
    build_report,
    to_css_gradient,
    to_report,
)

__all__ = [
    "to_css_gradient",
    "to_report",
    "build_report",
    "SerializerFormat",
]
