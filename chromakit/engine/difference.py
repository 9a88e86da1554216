# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Perceptual color difference (ΔE).

CIEDE2000 on CIE Lab, used for name matching. Reference thresholds:
- ΔE00 ≈ 1: barely perceptible
- ΔE00 ≈ 2-3: noticeable side by side
- ΔE00 > 10: clearly different colors
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

_25_POW_7 = 25.0 ** 7


def delta_e_2000(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
    kL: float = 1.0,
    kC: float = 1.0,
    kH: float = 1.0,
) -> NDArray[np.float64]:
    """
    CIEDE2000 color difference.

    Args:
        lab1: CIE Lab values, shape (..., 3)
        lab2: CIE Lab values, broadcastable against lab1
        kL, kC, kH: Parametric weighting factors (1.0 for reference conditions)

    Returns:
        ΔE00 with the broadcast shape of the inputs minus the last axis

    Reference:
        Sharma, Wu, Dalal (2005), "The CIEDE2000 Color-Difference Formula:
        Implementation Notes, Supplementary Test Data, and Mathematical
        Observations"
    """
    lab1 = np.asarray(lab1, dtype=np.float64)
    lab2 = np.asarray(lab2, dtype=np.float64)

    L1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    L2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    # Rescale a* so that near-neutral colors are not over-weighted
    C_bar = (np.hypot(a1, b1) + np.hypot(a2, b2)) / 2.0
    C_bar7 = C_bar ** 7
    G = 0.5 * (1.0 - np.sqrt(C_bar7 / (C_bar7 + _25_POW_7)))

    a1p = (1.0 + G) * a1
    a2p = (1.0 + G) * a2
    C1p = np.hypot(a1p, b1)
    C2p = np.hypot(a2p, b2)

    h1p = np.degrees(np.arctan2(b1, a1p)) % 360.0
    h2p = np.degrees(np.arctan2(b2, a2p)) % 360.0

    chroma_product = C1p * C2p
    neutral = chroma_product == 0.0

    # Differences
    dLp = L2 - L1
    dCp = C2p - C1p

    dh = h2p - h1p
    dh = np.where(dh > 180.0, dh - 360.0, np.where(dh < -180.0, dh + 360.0, dh))
    dh = np.where(neutral, 0.0, dh)
    dHp = 2.0 * np.sqrt(chroma_product) * np.sin(np.radians(dh) / 2.0)

    # Means
    Lp_bar = (L1 + L2) / 2.0
    Cp_bar = (C1p + C2p) / 2.0

    h_sum = h1p + h2p
    hp_bar = np.where(
        np.abs(h1p - h2p) <= 180.0,
        h_sum / 2.0,
        np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
    )
    hp_bar = np.where(neutral, h_sum, hp_bar)

    # Weighting functions
    T = (
        1.0
        - 0.17 * np.cos(np.radians(hp_bar - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * hp_bar))
        + 0.32 * np.cos(np.radians(3.0 * hp_bar + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * hp_bar - 63.0))
    )

    Lp_offset = (Lp_bar - 50.0) ** 2
    S_L = 1.0 + 0.015 * Lp_offset / np.sqrt(20.0 + Lp_offset)
    S_C = 1.0 + 0.045 * Cp_bar
    S_H = 1.0 + 0.015 * Cp_bar * T

    # Hue rotation term, significant only in the blue region
    d_theta = 30.0 * np.exp(-(((hp_bar - 275.0) / 25.0) ** 2))
    Cp_bar7 = Cp_bar ** 7
    R_C = 2.0 * np.sqrt(Cp_bar7 / (Cp_bar7 + _25_POW_7))
    R_T = -np.sin(np.radians(2.0 * d_theta)) * R_C

    tL = dLp / (kL * S_L)
    tC = dCp / (kC * S_C)
    tH = dHp / (kH * S_H)

    return np.sqrt(tL ** 2 + tC ** 2 + tH ** 2 + R_T * tC * tH)

