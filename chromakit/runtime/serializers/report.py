# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Color report serializer.

Collects everything the engine knows about one color (its string formats,
the narrowest gamut containing it, contrast against white and black, and
its nearest name) into a single JSON document or a short Markdown block
for an inspector panel.
"""

from __future__ import annotations

from typing import Optional

from chromakit.engine.contrast import analyze_backgrounds
from chromakit.engine.convert import ColorLike, coerce, to_all_formats
from chromakit.engine.gamut import classify
from chromakit.engine.naming import ColorNamer, default_namer
from chromakit.runtime.serializers.base import SerializerFormat, dump_json
from chromakit.schema import ColorValue, Format


def to_report(
    value: ColorLike,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    namer: Optional[ColorNamer] = None,
    previous: Optional[ColorValue] = None,
) -> str:
    """Serialize a color's analysis.

    Args:
        value: Color to describe (strings are parsed).
        format: JSON, JSON_PRETTY or NATURAL.
        namer: Namer to use; the shared default namer if omitted.
        previous: Hue context for achromatic colors.

    Returns:
        Report string.

    Raises:
        InvalidColorSyntax: If `value` is a string that does not parse.

    Example (JSON_PRETTY)::

        {
          "formats": {
            "hex": "#ff0000",
            "rgb": "rgb(255, 0, 0)",
            ...
          },
          "alpha": 1.0,
          "gamut": "srgb",
          "contrast": {
            "white": 4.0,
            "black": 5.25,
            "passes_aa": true,
            "passes_aaa": true
          },
          "name": { "name": "Pure Red", "delta_e": 0.0, "confidence": 1.0 }
        }
    """
    data = build_report(value, namer=namer, previous=previous)
    if format == SerializerFormat.NATURAL:
        return _to_natural(data)
    return dump_json(data, format)


def build_report(
    value: ColorLike,
    *,
    namer: Optional[ColorNamer] = None,
    previous: Optional[ColorValue] = None,
) -> dict:
    """Report contents as a plain dictionary."""
    value = coerce(value)
    namer = namer or default_namer()

    backgrounds = analyze_backgrounds(value)
    match = namer.nearest_name(value)

    return {
        "formats": {
            fmt.value: text
            for fmt, text in to_all_formats(value, previous=previous).items()
        },
        "alpha": value.alpha,
        "gamut": classify(value).value,
        "contrast": {
            "white": backgrounds.white.ratio,
            "black": backgrounds.black.ratio,
            "passes_aa": backgrounds.passes_aa,
            "passes_aaa": backgrounds.passes_aaa,
        },
        "name": match.to_dict() if match is not None else None,
    }


def _to_natural(data: dict) -> str:
    """Generate natural language representation."""
    formats = data["formats"]
    name = data["name"]
    title = name["name"] if name else "Unnamed color"

    lines = [
        "## Color Report",
        "",
        f"**Color:** {title} ({formats[Format.HEX.value]})",
        "",
        "**Formats:**",
    ]
    for fmt, text in formats.items():
        lines.append(f"- {fmt}: {text}")
    lines.append("")

    if data["alpha"] < 1.0:
        lines.append(f"**Opacity:** {data['alpha'] * 100:.0f}%")

    lines.append(f"**Gamut:** {_GAMUT_LABELS[data['gamut']]}")

    contrast = data["contrast"]
    aa = "pass" if contrast["passes_aa"] else "fail"
    aaa = "pass" if contrast["passes_aaa"] else "fail"
    lines.append(
        f"**Contrast:** {contrast['white']:.2f}:1 on white, "
        f"{contrast['black']:.2f}:1 on black (AA: {aa}, AAA: {aaa})"
    )

    if name:
        lines.append(
            f"**Name:** {name['name']} "
            f"(ΔE {name['delta_e']:.2f}, confidence {name['confidence'] * 100:.0f}%)"
        )
    else:
        lines.append("**Name:** no close match")

    return "\n".join(lines)


_GAMUT_LABELS = {
    "srgb": "sRGB",
    "display-p3": "Display P3 (outside sRGB)",
    "rec2020": "Rec2020 (outside Display P3)",
    "unlimited": "Outside Rec2020",
}
