# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Gamut-aware slider gradients.

A gradient samples one channel of a base color at evenly spaced positions
and records, per stop, whether the resulting color is inside the checked
profile. Renderers draw out-of-gamut stops as transparent or dimmed; to
keep that edge crisp instead of a fade, a transition stop is synthesized
next to every in/out boundary.

Gamut membership is only known at the sampled positions, so
``snap_to_valid`` is an approximation of the true boundary: it returns the
nearest sampled in-gamut value, not the exact edge.
"""

from __future__ import annotations

import logging
from typing import Optional

from chromakit.engine.convert import ColorLike, clamp, coerce, convert, set_channel
from chromakit.engine.gamut import check, clip
from chromakit.schema import (
    ChannelId,
    ColorSpace,
    ColorValue,
    GamutProfile,
    Gradient,
    GradientStop,
)

logger = logging.getLogger(__name__)


# Distance of a transition stop from its in-gamut neighbour, as a fraction
# of the slider (0.01%). Capped at a quarter of the stop spacing.
TRANSITION_OFFSET = 1e-4


def generate(
    base: ColorLike,
    channel: ChannelId,
    value_range: tuple[float, float],
    steps: int,
    profile: GamutProfile = GamutProfile.SRGB,
    *,
    previous: Optional[ColorValue] = None,
) -> Gradient:
    """
    Sample `channel` of `base` across `value_range`.

    Args:
        base: Color whose other channels stay fixed
        channel: Channel that varies
        value_range: (start, end) in display units, e.g. (0, 100) for
            OKLCH lightness or (0, 360) for a hue
        steps: Number of sampled stops, at least 2
        profile: Gamut the stops are checked against
        previous: Hue context for achromatic bases

    Returns:
        Gradient with `steps` sampled stops plus transition stops at every
        in/out boundary. Stop colors are sRGB, clipped for display.

    Raises:
        ValueError: If steps < 2

    Example:
        >>> g = generate("oklch(70% 0.15 180)", ChannelId.of("oklch", "c"), (0, 0.4), 11)
        >>> g.has_out_of_gamut
        True
    """
    if steps < 2:
        raise ValueError(f"A gradient needs at least 2 steps, got {steps}")

    start_value, end_value = value_range
    start = convert(coerce(base), channel.space, previous=previous)

    stops = []
    for i in range(steps):
        position = i / (steps - 1)
        channel_value = start_value + (end_value - start_value) * position
        color = set_channel(start, channel.space, channel.index, channel_value)
        stops.append(GradientStop(
            position=position,
            channel_value=channel_value,
            color=_display_color(color),
            in_gamut=check(color, profile).in_gamut,
        ))

    return Gradient(
        stops=_with_transitions(stops),
        channel=channel,
        profile=profile,
    )


def _display_color(color: ColorValue) -> ColorValue:
    # Chroma-clip first so the hue survives, then clamp away float noise
    return clamp(clip(color, GamutProfile.SRGB), ColorSpace.SRGB)


def _with_transitions(stops: list[GradientStop]) -> tuple[GradientStop, ...]:
    """Insert a transition stop at every in/out boundary between sampled stops."""
    result = []
    for current, following in zip(stops, stops[1:]):
        result.append(current)
        if current.in_gamut != following.in_gamut:
            result.append(_transition(current, following))
    if stops:
        result.append(stops[-1])
    return tuple(result)


def _transition(a: GradientStop, b: GradientStop) -> GradientStop:
    spacing = b.position - a.position
    offset = min(TRANSITION_OFFSET, spacing / 4.0)

    if a.in_gamut:
        position = a.position + offset
        outside = b
    else:
        position = b.position - offset
        outside = a

    fraction = (position - a.position) / spacing if spacing else 0.0
    return GradientStop(
        position=position,
        channel_value=a.channel_value + (b.channel_value - a.channel_value) * fraction,
        color=outside.color,
        in_gamut=False,
        transition=True,
    )


def snap_to_valid(value: float, gradient: Gradient) -> float:
    """
    Channel value of the sampled in-gamut stop nearest to `value`.

    Nearest by absolute difference of channel values; ties go to the stop
    at the lower position. Returns `value` unchanged if no sampled stop is
    in gamut.
    """
    best = None
    best_distance = 0.0
    for stop in gradient.sampled:
        if not stop.in_gamut:
            continue
        distance = abs(stop.channel_value - value)
        if best is None or distance < best_distance:
            best, best_distance = stop, distance

    if best is None:
        logger.debug("No in-gamut stop to snap %.4f to", value)
        return value

    logger.debug("Snapped %.4f to %.4f (position %.4f)", value, best.channel_value, best.position)
    return best.channel_value


def thin(gradient: Gradient, target_stops: int = 20) -> Gradient:
    """
    Reduce a gradient to roughly `target_stops` sampled stops.

    Keeps every k-th stop, the last stop and both stops of each in/out
    boundary, then rebuilds transition stops. Gradients already small
    enough are returned as is.
    """
    sampled = list(gradient.sampled)
    if target_stops < 2 or len(sampled) <= target_stops:
        return gradient

    step = len(sampled) // target_stops
    keep = set(range(0, len(sampled), step))
    keep.add(len(sampled) - 1)
    for i in range(len(sampled) - 1):
        if sampled[i].in_gamut != sampled[i + 1].in_gamut:
            keep.update((i, i + 1))

    kept = [sampled[i] for i in sorted(keep)]
    logger.debug("Thinned gradient from %d to %d stops", len(sampled), len(kept))
    return Gradient(
        stops=_with_transitions(kept),
        channel=gradient.channel,
        profile=gradient.profile,
    )
