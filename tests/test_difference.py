# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""Tests for CIEDE2000 against the Sharma, Wu, Dalal reference data."""

import numpy as np
import pytest

from chromakit.engine.difference import delta_e_2000

# (Lab 1, Lab 2, expected ΔE00), pairs from the published test set
SHARMA_PAIRS = [
    ((50.0, 2.6772, -79.7751), (50.0, 0.0, -82.7485), 2.0425),
    ((50.0, 3.1571, -77.2803), (50.0, 0.0, -82.7485), 2.8615),
    ((50.0, 2.8361, -74.0200), (50.0, 0.0, -82.7485), 3.4412),
    ((50.0, 0.0, 0.0), (50.0, -1.0, 2.0), 2.3669),
    ((50.0, -1.0, 2.0), (50.0, 0.0, 0.0), 2.3669),
    ((50.0, 2.4900, -0.0010), (50.0, -2.4900, 0.0009), 7.1792),
    ((50.0, 2.5, 0.0), (73.0, 25.0, -18.0), 27.1492),
    ((50.0, 2.5, 0.0), (50.0, 3.1736, 0.5854), 1.0000),
    ((60.2574, -34.0099, 36.2677), (60.4626, -34.1751, 39.4387), 1.2644),
    ((2.0776, 0.0795, -1.1350), (0.9033, -0.0636, -0.5514), 0.9082),
]


class TestDeltaE2000:

    @pytest.mark.parametrize("lab1, lab2, expected", SHARMA_PAIRS)
    def test_reference_pairs(self, lab1, lab2, expected):
        assert float(delta_e_2000(np.array(lab1), np.array(lab2))) == pytest.approx(expected, abs=1e-4)

    def test_identical_is_zero(self):
        lab = np.array([40.0, 20.0, -30.0])
        assert float(delta_e_2000(lab, lab)) == pytest.approx(0.0, abs=1e-12)

    def test_symmetric(self):
        a = np.array([30.0, 10.0, 50.0])
        b = np.array([35.0, -20.0, 40.0])
        assert float(delta_e_2000(a, b)) == pytest.approx(float(delta_e_2000(b, a)))

    def test_achromatic_pair(self):
        """Neutral colors differ only in lightness; no NaN from undefined hue."""
        result = float(delta_e_2000(np.array([50.0, 0.0, 0.0]), np.array([60.0, 0.0, 0.0])))
        assert np.isfinite(result)
        assert result > 0.0

    def test_vectorised_against_table(self):
        lab1 = np.array([p[0] for p in SHARMA_PAIRS])
        lab2 = np.array([p[1] for p in SHARMA_PAIRS])
        expected = np.array([p[2] for p in SHARMA_PAIRS])
        np.testing.assert_allclose(delta_e_2000(lab1, lab2), expected, atol=1e-4)

    def test_broadcast_one_to_many(self):
        table = np.array([[50.0, 0.0, 0.0], [60.0, 10.0, 10.0], [70.0, -5.0, 20.0]])
        result = delta_e_2000(np.array([50.0, 0.0, 0.0]), table)
        assert result.shape == (3,)
        assert float(result[0]) == pytest.approx(0.0, abs=1e-12)

    def test_weighting_factors(self):
        a = np.array([50.0, 0.0, 0.0])
        b = np.array([60.0, 0.0, 0.0])
        assert float(delta_e_2000(a, b, kL=2.0)) < float(delta_e_2000(a, b))
