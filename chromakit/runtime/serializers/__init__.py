# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Serializers for engine results.

Each serializer renders engine values for a specific consumer. None of them
change the values they render.
"""

from chromakit.runtime.serializers.base import SerializerFormat
from chromakit.runtime.serializers.css import to_css_gradient
from chromakit.runtime.serializers.report import build_report, to_report

__all__ = [
    "SerializerFormat",
    "to_css_gradient",
    "to_report",
    "build_report",
]
