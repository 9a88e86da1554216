# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
CSS serializer for slider gradients.

Turns a Gradient into a ``linear-gradient(...)`` value a slider track can
use directly. Out-of-gamut stops are drawn transparent (or dimmed), and the
gradient's transition stops sit a hair from the in-gamut side so the edge
renders crisp rather than as a fade.
"""

from __future__ import annotations

from chromakit.engine.convert import format_color
from chromakit.schema import Format, Gradient, GradientStop

# Alpha suffix for dimmed out-of-gamut stops (0x4d = 30%)
_DIM_ALPHA = "4d"

_OUT_OF_GAMUT_STYLES = ("transparent", "dim")


def to_css_gradient(
    gradient: Gradient,
    *,
    direction: str = "to right",
    out_of_gamut: str = "transparent",
) -> str:
    """Serialize a Gradient as a CSS linear-gradient.

    Args:
        gradient: Gradient from ``engine.gradient.generate``.
        direction: CSS direction or angle (``"to right"``, ``"90deg"``).
        out_of_gamut: ``"transparent"`` hides out-of-gamut stops,
            ``"dim"`` shows their clipped color at 30% opacity.

    Returns:
        CSS ``linear-gradient(...)`` string.

    Raises:
        ValueError: For an unknown out_of_gamut style.

    Example::

        linear-gradient(to right, #7a7a7a 0.00%, #8d7f63 50.00%,
                        transparent 50.01%, transparent 100.00%)
    """
    if out_of_gamut not in _OUT_OF_GAMUT_STYLES:
        raise ValueError(
            f"out_of_gamut must be one of {_OUT_OF_GAMUT_STYLES}, got {out_of_gamut!r}"
        )

    parts = [direction]
    parts.extend(_stop_css(stop, out_of_gamut) for stop in gradient.stops)
    return f"linear-gradient({', '.join(parts)})"


def _stop_css(stop: GradientStop, out_of_gamut: str) -> str:
    position = f"{stop.position * 100:.2f}%"
    if stop.in_gamut:
        return f"{format_color(stop.color, Format.HEX)} {position}"
    if out_of_gamut == "transparent":
        return f"transparent {position}"
    return f"{format_color(stop.color, Format.HEX)}{_DIM_ALPHA} {position}"
