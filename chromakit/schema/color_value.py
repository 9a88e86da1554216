# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Canonical value types for the color engine.

Design principles:
- Immutable: All types are frozen dataclasses
- Defined: No coordinate is ever NaN or infinite
- Space-tagged: A ColorValue always knows which space its coords live in

Coordinate conventions (normalised, as stored in ColorValue.coords):
- srgb / srgb-linear / display-p3 / rec2020: channels 0-1
- hsl: H degrees, S 0-1, L 0-1
- lch / lab: CIE L 0-100 (D65 white)
- oklch / oklab: L 0-1
- xyz-d65: Y 0-1 for the white point

Display units (what sliders and text fields show) are derived per space
through ``ColorSpace.display_scale``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


# =============================================================================
# Color Spaces
# =============================================================================


class ColorSpace(Enum):
    """Color spaces understood by the engine."""
    SRGB = "srgb"
    SRGB_LINEAR = "srgb-linear"
    DISPLAY_P3 = "display-p3"
    REC2020 = "rec2020"
    HSL = "hsl"
    LCH = "lch"
    OKLCH = "oklch"
    LAB = "lab"
    OKLAB = "oklab"
    XYZ_D65 = "xyz-d65"

    @property
    def channels(self) -> tuple[str, str, str]:
        """Single-letter channel names, lowercase."""
        return _SPACE_INFO[self].channels

    @property
    def ranges(self) -> tuple[tuple[float, float], ...]:
        """Declared (min, max) per channel in normalised units."""
        return _SPACE_INFO[self].ranges

    @property
    def display_scale(self) -> tuple[float, float, float]:
        """Multipliers from normalised to display units."""
        return _SPACE_INFO[self].display_scale

    @property
    def hue_index(self) -> Optional[int]:
        """Index of the hue channel, or None for Cartesian spaces."""
        return _SPACE_INFO[self].hue_index

    @property
    def is_polar(self) -> bool:
        return _SPACE_INFO[self].hue_index is not None

    @property
    def is_rgb(self) -> bool:
        """True for the RGB family (encoded or linear)."""
        return self in (
            ColorSpace.SRGB,
            ColorSpace.SRGB_LINEAR,
            ColorSpace.DISPLAY_P3,
            ColorSpace.REC2020,
        )


@dataclass(frozen=True, slots=True)
class _SpaceInfo:
    channels: tuple[str, str, str]
    ranges: tuple[tuple[float, float], ...]
    display_scale: tuple[float, float, float]
    hue_index: Optional[int] = None


_UNIT = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0))

_SPACE_INFO = {
    ColorSpace.SRGB: _SpaceInfo(("r", "g", "b"), _UNIT, (255.0, 255.0, 255.0)),
    ColorSpace.SRGB_LINEAR: _SpaceInfo(("r", "g", "b"), _UNIT, (1.0, 1.0, 1.0)),
    ColorSpace.DISPLAY_P3: _SpaceInfo(("r", "g", "b"), _UNIT, (1.0, 1.0, 1.0)),
    ColorSpace.REC2020: _SpaceInfo(("r", "g", "b"), _UNIT, (1.0, 1.0, 1.0)),
    ColorSpace.HSL: _SpaceInfo(
        ("h", "s", "l"),
        ((0.0, 360.0), (0.0, 1.0), (0.0, 1.0)),
        (1.0, 100.0, 100.0),
        hue_index=0,
    ),
    ColorSpace.LCH: _SpaceInfo(
        ("l", "c", "h"),
        ((0.0, 100.0), (0.0, 150.0), (0.0, 360.0)),
        (1.0, 1.0, 1.0),
        hue_index=2,
    ),
    ColorSpace.OKLCH: _SpaceInfo(
        ("l", "c", "h"),
        ((0.0, 1.0), (0.0, 0.4), (0.0, 360.0)),
        (100.0, 1.0, 1.0),
        hue_index=2,
    ),
    ColorSpace.LAB: _SpaceInfo(
        ("l", "a", "b"),
        ((0.0, 100.0), (-128.0, 128.0), (-128.0, 128.0)),
        (1.0, 1.0, 1.0),
    ),
    ColorSpace.OKLAB: _SpaceInfo(
        ("l", "a", "b"),
        ((0.0, 1.0), (-0.4, 0.4), (-0.4, 0.4)),
        (100.0, 1.0, 1.0),
    ),
    # D65 white is (0.9505, 1.0, 1.0891)
    ColorSpace.XYZ_D65: _SpaceInfo(
        ("x", "y", "z"),
        ((0.0, 0.9505), (0.0, 1.0), (0.0, 1.0891)),
        (1.0, 1.0, 1.0),
    ),
}


class Format(Enum):
    """
    String formats exchanged with the UI layer.

    Each format reads its numbers from one color space.
    """
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    LCH = "lch"
    OKLCH = "oklch"
    LAB = "lab"

    @property
    def space(self) -> ColorSpace:
        return {
            Format.HEX: ColorSpace.SRGB,
            Format.RGB: ColorSpace.SRGB,
            Format.HSL: ColorSpace.HSL,
            Format.LCH: ColorSpace.LCH,
            Format.OKLCH: ColorSpace.OKLCH,
            Format.LAB: ColorSpace.LAB,
        }[self]


class GamutProfile(Enum):
    """Device gamuts a color can be checked or clipped against."""
    SRGB = "srgb"
    DISPLAY_P3 = "display-p3"
    REC2020 = "rec2020"
    UNLIMITED = "unlimited"

    @property
    def display_name(self) -> str:
        return {
            GamutProfile.SRGB: "sRGB",
            GamutProfile.DISPLAY_P3: "Display P3",
            GamutProfile.REC2020: "Rec2020",
            GamutProfile.UNLIMITED: "Unlimited",
        }[self]


# =============================================================================
# ColorValue
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorValue:
    """
    A single color in a specific color space.

    Attributes:
        space: Space the coordinates are expressed in
        coords: Three normalised coordinates (see module docstring)
        alpha: Opacity 0-1

    Polar hues are wrapped into [0, 360) on construction. Coordinates may
    lie outside the space's declared ranges (out-of-gamut colors), but never
    NaN or infinity.
    """
    space: ColorSpace
    coords: tuple[float, float, float]
    alpha: float = 1.0

    def __post_init__(self) -> None:
        """Validate and normalise coordinates."""
        coords = tuple(float(c) for c in self.coords)
        if len(coords) != 3:
            raise ValueError(f"ColorValue needs 3 coordinates, got {len(coords)}")
        if not all(math.isfinite(c) for c in coords):
            raise ValueError(f"Coordinates must be finite, got {coords}")
        if not math.isfinite(self.alpha) or not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.alpha}")

        hue_index = self.space.hue_index
        if hue_index is not None:
            hue = coords[hue_index] % 360.0
            # -1e-17 % 360 rounds up to exactly 360.0
            if hue >= 360.0:
                hue = 0.0
            coords = coords[:hue_index] + (hue,) + coords[hue_index + 1:]

        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "alpha", float(self.alpha))

    @property
    def hue(self) -> Optional[float]:
        """Hue in degrees for polar spaces, None otherwise."""
        if self.space.hue_index is None:
            return None
        return self.coords[self.space.hue_index]

    def with_coords(self, coords: tuple[float, float, float]) -> ColorValue:
        """Same space and alpha, new coordinates."""
        return ColorValue(self.space, coords, self.alpha)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "space": self.space.value,
            "coords": list(self.coords),
            "alpha": self.alpha,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorValue:
        """Deserialize from dictionary."""
        return cls(
            space=ColorSpace(data["space"]),
            coords=tuple(data["coords"]),
            alpha=data.get("alpha", 1.0),
        )


# =============================================================================
# Gamut Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class GamutCheck:
    """
    Result of testing a color against a gamut profile.

    Attributes:
        in_gamut: True if every linear channel is within tolerance of [0, 1]
        distance: OKLCH (L, C) distance to the clipped color; 0 when in gamut
        profile: Profile that was checked
        clipped: Nearest in-gamut color, only set when out of gamut
        warning: Human-readable message, only set when out of gamut
    """
    in_gamut: bool
    distance: float
    profile: GamutProfile
    clipped: Optional[ColorValue] = None
    warning: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {
            "in_gamut": self.in_gamut,
            "distance": self.distance,
            "profile": self.profile.value,
        }
        if self.clipped is not None:
            d["clipped"] = self.clipped.to_dict()
        if self.warning is not None:
            d["warning"] = self.warning
        return d


# =============================================================================
# Gradient Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ChannelId:
    """
    One adjustable channel of a color space.

    Attributes:
        space: Space the channel belongs to
        index: Channel position (0, 1 or 2)
    """
    space: ColorSpace
    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 2:
            raise ValueError(f"Channel index must be 0-2, got {self.index}")

    @property
    def name(self) -> str:
        return self.space.channels[self.index]

    @classmethod
    def of(cls, space: ColorSpace | str, channel: str) -> ChannelId:
        """
        Build from a channel letter, e.g. ``ChannelId.of("oklch", "c")``.

        Raises:
            ValueError: If the space has no channel with that letter
        """
        space = ColorSpace(space) if isinstance(space, str) else space
        letter = channel.strip().lower()
        if letter not in space.channels:
            raise ValueError(
                f"Space {space.value} has no channel '{channel}', "
                f"expected one of {space.channels}"
            )
        return cls(space, space.channels.index(letter))


@dataclass(frozen=True, slots=True)
class GradientStop:
    """
    A single sampled stop along a slider gradient.

    Attributes:
        position: Normalised position along the slider (0.0-1.0)
        channel_value: Channel value at this position, display units
        color: sRGB display color (clipped for rasterization)
        in_gamut: Whether the unclipped color is in the checked profile
        transition: True for synthetic stops that mark a gamut boundary
    """
    position: float
    channel_value: float
    color: ColorValue
    in_gamut: bool
    transition: bool = False

    def __post_init__(self) -> None:
        """Validate position is in range."""
        if not 0.0 <= self.position <= 1.0:
            raise ValueError(f"Position must be 0-1, got {self.position}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "position": self.position,
            "channel_value": self.channel_value,
            "color": self.color.to_dict(),
            "in_gamut": self.in_gamut,
            "transition": self.transition,
        }


@dataclass(frozen=True, slots=True)
class Gradient:
    """
    Ordered, gamut-annotated samples of one channel.

    Attributes:
        stops: Stops ordered by position
        channel: Channel that varies along the gradient
        profile: Gamut profile the stops were checked against
    """
    stops: tuple[GradientStop, ...]
    channel: ChannelId
    profile: GamutProfile

    def __post_init__(self) -> None:
        """Verify stops are ordered by position."""
        positions = [s.position for s in self.stops]
        if positions != sorted(positions):
            raise ValueError("Gradient stops must be ordered by position")

    @property
    def has_out_of_gamut(self) -> bool:
        return any(not s.in_gamut for s in self.stops)

    @property
    def sampled(self) -> tuple[GradientStop, ...]:
        """Stops that were actually sampled (no boundary markers)."""
        return tuple(s for s in self.stops if not s.transition)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "channel": {"space": self.channel.space.value, "index": self.channel.index},
            "profile": self.profile.value,
            "has_out_of_gamut": self.has_out_of_gamut,
            "stops": [s.to_dict() for s in self.stops],
        }


# =============================================================================
# Contrast Types
# =============================================================================


class Threshold(Enum):
    """WCAG 2.1 contrast thresholds (minimum ratio for a pass)."""
    NORMAL_TEXT_AA = "normal_text_aa"
    NORMAL_TEXT_AAA = "normal_text_aaa"
    LARGE_TEXT_AA = "large_text_aa"
    LARGE_TEXT_AAA = "large_text_aaa"
    GRAPHICAL_OBJECT_AA = "graphical_object_aa"
    GRAPHICAL_OBJECT_AAA = "graphical_object_aaa"

    @property
    def ratio(self) -> float:
        return _THRESHOLD_RATIOS[self]

    @property
    def level(self) -> str:
        """Conformance level, AA or AAA."""
        return "AAA" if self.value.endswith("aaa") else "AA"


_THRESHOLD_RATIOS = {
    Threshold.NORMAL_TEXT_AA: 4.5,
    Threshold.NORMAL_TEXT_AAA: 7.0,
    Threshold.LARGE_TEXT_AA: 3.0,
    Threshold.LARGE_TEXT_AAA: 4.5,
    Threshold.GRAPHICAL_OBJECT_AA: 3.0,
    Threshold.GRAPHICAL_OBJECT_AAA: 4.5,
}


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """
    Contrast ratio between two colors and its WCAG verdicts.

    Attributes:
        ratio: Contrast ratio, 1.0-21.0, rounded to 2 decimals
        passes: Pass/fail per threshold
    """
    ratio: float
    passes: Mapping[Threshold, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 1.0 <= self.ratio <= 21.0:
            raise ValueError(f"Contrast ratio must be 1-21, got {self.ratio}")

    @property
    def passes_aa(self) -> bool:
        """True if any AA threshold passes."""
        return any(ok for t, ok in self.passes.items() if t.level == "AA")

    @property
    def passes_aaa(self) -> bool:
        """True if any AAA threshold passes."""
        return any(ok for t, ok in self.passes.items() if t.level == "AAA")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "ratio": self.ratio,
            "passes": {t.value: ok for t, ok in self.passes.items()},
        }


@dataclass(frozen=True, slots=True)
class BackgroundAnalysis:
    """
    Contrast of one color against the two standard backgrounds.

    Attributes:
        white: Result against #ffffff
        black: Result against #000000
    """
    white: ContrastResult
    black: ContrastResult

    @property
    def passes_aa(self) -> bool:
        return self.white.passes_aa or self.black.passes_aa

    @property
    def passes_aaa(self) -> bool:
        return self.white.passes_aaa or self.black.passes_aaa

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "white": self.white.to_dict(),
            "black": self.black.to_dict(),
            "passes_aa": self.passes_aa,
            "passes_aaa": self.passes_aaa,
        }


# =============================================================================
# Naming Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class NameEntry:
    """
    A row of the color-name reference table.

    Attributes:
        name: Human-readable name ("Sky Blue")
        L: OKLCH lightness 0-1
        C: OKLCH chroma
        H: OKLCH hue in degrees
        tags: Category tags ("blue", "pastel", ...)
    """
    name: str
    L: float
    C: float
    H: float
    tags: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class NameMatch:
    """
    Closest reference name for a color.

    Attributes:
        name: Matched name
        delta_e: CIEDE2000 distance to the named color
        confidence: 1.0 for an exact match, 0.0 at the max distance
    """
    name: str
    delta_e: float
    confidence: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be 0-1, got {self.confidence}")
        if self.delta_e < 0.0:
            raise ValueError(f"Delta E must be >= 0, got {self.delta_e}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "delta_e": self.delta_e,
            "confidence": self.confidence,
        }
