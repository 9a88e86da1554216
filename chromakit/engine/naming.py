# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Nearest-name lookup.

A color is named after the reference entry with the smallest CIEDE2000
distance, computed against the whole table at once. Matches farther than
``max_delta_e`` are rejected.

Lookups are memoised in a small LRU cache keyed by the color's rounded
OKLCH coordinates, so dragging a slider across one named region does not
recompute 150 distances per frame. The cache is the only mutable state in
the engine and is guarded by a lock.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from chromakit.engine.colorspace import oklch_to_lab
from chromakit.engine.convert import ColorLike, coerce, convert
from chromakit.engine.difference import delta_e_2000
from chromakit.engine.names_data import COLOR_NAMES
from chromakit.schema import ColorSpace, NameEntry, NameMatch

logger = logging.getLogger(__name__)

CacheKey = tuple[float, float, int]


@dataclass(frozen=True)
class NamerConfig:
    """Configuration for color naming."""

    # CIEDE2000 distance beyond which no name is returned
    # 10 = clearly a different color
    max_delta_e: float = 10.0

    # Matches with lower confidence are dropped (0.0 = keep all)
    min_confidence: float = 0.0

    # Maximum cached lookups (0 disables caching)
    cache_size: int = 50

    def __post_init__(self) -> None:
        if self.max_delta_e <= 0.0:
            raise ValueError(f"max_delta_e must be positive, got {self.max_delta_e}")
        if not 0.0 <= self.min_confidence <= 1.0:
            raise ValueError(f"min_confidence must be 0-1, got {self.min_confidence}")
        if self.cache_size < 0:
            raise ValueError(f"cache_size must be >= 0, got {self.cache_size}")


class ColorNamer:
    """
    Names colors against a reference table.

    Args:
        config: Thresholds and cache capacity (defaults to NamerConfig())
        entries: Reference table (defaults to the built-in COLOR_NAMES)

    Example:
        >>> namer = ColorNamer()
        >>> namer.nearest_name("#ff0000").name
        'Pure Red'
    """

    def __init__(
        self,
        config: Optional[NamerConfig] = None,
        entries: Sequence[NameEntry] = COLOR_NAMES,
    ) -> None:
        if not entries:
            raise ValueError("ColorNamer needs at least one reference entry")

        self._config = config or NamerConfig()
        self._entries = tuple(entries)
        self._names = [e.name for e in self._entries]
        self._labs = oklch_to_lab(
            np.array([[e.L, e.C, e.H] for e in self._entries], dtype=np.float64)
        )

        self._cache: OrderedDict[CacheKey, NameMatch] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def config(self) -> NamerConfig:
        return self._config

    @property
    def entries(self) -> tuple[NameEntry, ...]:
        return self._entries

    def configure(self, **overrides) -> NamerConfig:
        """
        Replace individual config fields, e.g. ``configure(max_delta_e=5)``.

        Cached matches were computed under the old thresholds, so the cache
        is cleared when a threshold changes or the capacity shrinks.

        Returns:
            The new config
        """
        with self._lock:
            old = self._config
            new = dataclasses.replace(old, **overrides)
            self._config = new
            if (
                new.max_delta_e != old.max_delta_e
                or new.min_confidence != old.min_confidence
                or new.cache_size < old.cache_size
            ):
                self._cache.clear()
        return new

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def find_closest(self, value: ColorLike) -> Optional[NameMatch]:
        """
        Closest reference entry within ``max_delta_e``, bypassing the cache.

        Ties go to the entry listed first in the table.
        """
        lab = np.array(convert(value, ColorSpace.LAB).coords, dtype=np.float64)
        distances = delta_e_2000(lab, self._labs)
        best = int(np.argmin(distances))
        delta_e = float(distances[best])

        max_delta_e = self._config.max_delta_e
        if delta_e > max_delta_e:
            return None
        return NameMatch(
            name=self._names[best],
            delta_e=delta_e,
            confidence=max(0.0, 1.0 - delta_e / max_delta_e),
        )

    def nearest_name(self, value: ColorLike) -> Optional[NameMatch]:
        """
        Name a color, using the cache.

        Returns:
            NameMatch, or None if nothing is within ``max_delta_e`` or the
            confidence is below ``min_confidence``
        """
        value = coerce(value)
        key = self.cache_key(value)

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._cache.move_to_end(key)
                self._hits += 1
                logger.debug("Name cache hit for %s", key)
                return cached

            self._misses += 1
            logger.debug("Name cache miss for %s", key)
            match = self.find_closest(value)
            if match is None or match.confidence < self._config.min_confidence:
                return None
            self._insert(key, match)
            return match

    def _insert(self, key: CacheKey, match: NameMatch) -> None:
        """Caller must hold ``self._lock``."""
        capacity = self._config.cache_size
        if capacity == 0:
            return
        while len(self._cache) >= capacity:
            evicted, _ = self._cache.popitem(last=False)
            self._evictions += 1
            logger.debug("Name cache evicted %s", evicted)
        self._cache[key] = match

    @staticmethod
    def cache_key(value: ColorLike) -> CacheKey:
        """OKLCH rounded to 2 decimals (L, C) and whole degrees (H)."""
        L, C, H = convert(value, ColorSpace.OKLCH).coords
        return (round(L, 2), round(C, 2), round(H) % 360)

    # -------------------------------------------------------------------------
    # Cache management
    # -------------------------------------------------------------------------

    @property
    def cache_size(self) -> int:
        """Number of cached lookups (capacity is ``config.cache_size``)."""
        with self._lock:
            return len(self._cache)

    def is_cached(self, value: ColorLike) -> bool:
        """True if a lookup for `value` would hit. Does not refresh recency."""
        key = self.cache_key(value)
        with self._lock:
            return key in self._cache

    def clear_cache(self) -> None:
        """Drop all cached lookups and reset the counters."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def cache_stats(self) -> dict:
        """Size, capacity and hit/miss/eviction counts."""
        with self._lock:
            return {
                "size": len(self._cache),
                "capacity": self._config.cache_size,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
            }


# Process-wide namer behind the module-level helper
_default_namer = ColorNamer()


def default_namer() -> ColorNamer:
    return _default_namer


def nearest_name(value: ColorLike) -> Optional[NameMatch]:
    """Name a color with the shared default namer."""
    return _default_namer.nearest_name(value)
