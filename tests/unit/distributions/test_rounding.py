from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_sampling.distributions.rounding import round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, precision, expected",
        [
            (2.345, 2, 2.35),
            (-2.345, 2, -2.35),
            (1.005, 2, 1.01),
            (2.5, 0, 3.0),
            (-2.5, 0, -3.0),
            (0.5, 0, 1.0),
            (-0.5, 0, -1.0),
            (0.123456, 4, 0.1235),
            (0.12344, 4, 0.1234),
            (7.0, 3, 7.0),
        ],
    )
    def test_ties_round_away_from_zero(self, value: float, precision: int, expected: float) -> None:
        assert round_half_up(value, precision) == expected

    def test_differs_from_bankers_rounding(self) -> None:
        assert round(2.5) == 2
        assert round_half_up(2.5, 0) == 3.0

    def test_large_values(self) -> None:
        assert round_half_up(123456789.123456, 3) == 123456789.123
        assert round_half_up(1e20, 4) == 1e20
        assert round_half_up(1e300, 2) == 1e300

    def test_tiny_values_collapse_to_zero(self) -> None:
        assert round_half_up(1e-10, 4) == 0.0
        assert round_half_up(0.00005, 4) == 0.0001

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinities_pass_through(self, value: float) -> None:
        assert round_half_up(value, 2) == value

    def test_nan_passes_through(self) -> None:
        assert math.isnan(round_half_up(math.nan, 2))

    def test_numpy_scalar_input(self) -> None:
        result = round_half_up(np.float64(3.14159), 2)
        assert isinstance(result, float)
        assert result == 3.14

    def test_idempotent(self) -> None:
        once = round_half_up(9.87654321, 5)
        assert round_half_up(once, 5) == once
