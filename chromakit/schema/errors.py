# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Error taxonomy for the color engine.

Every error is local and recoverable: the caller is expected to catch it,
e.g. to revert a text field to its last valid value. All derive from
ValueError so generic input handling keeps working.
"""

from __future__ import annotations


class ColorError(ValueError):
    """Base class for engine errors."""


class InvalidColorSyntax(ColorError):
    """
    Input text is not a color the engine can parse.

    Attributes:
        text: Full input as received
        fragment: Offending substring
    """

    def __init__(self, text: str, fragment: str | None = None, reason: str = "") -> None:
        self.text = text
        self.fragment = text if fragment is None else fragment
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid color syntax {self.fragment!r}{detail}")


class ChannelIndexOutOfRange(ColorError):
    """Channel index outside 0-2 for the requested space."""

    def __init__(self, index: int, space: str) -> None:
        self.index = index
        self.space = space
        super().__init__(f"Channel index {index} out of range for {space}")


class UnsupportedFormat(ColorError):
    """Requested space or format is not implemented."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unsupported color format: {name!r}")
