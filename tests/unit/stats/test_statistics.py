from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy import stats as scipy_stats

from pysatl_sampling.distributions.sampling import ArraySample
from pysatl_sampling.stats.statistics import EMPTY_STATISTICS, compute_statistics


class TestComputeStatistics:
    def test_simple_sequence(self) -> None:
        stats = compute_statistics([1.0, 2.0, 3.0, 4.0, 5.0])

        assert stats.count == 5
        assert stats.mean == 3.0
        assert stats.median == 3.0
        assert stats.min == 1.0
        assert stats.max == 5.0
        assert stats.variance == pytest.approx(2.5)
        assert stats.stddev == pytest.approx(np.sqrt(2.5))
        assert stats.skewness == pytest.approx(0.0, abs=1e-12)

    def test_constant_sample(self) -> None:
        stats = compute_statistics([5.0, 5.0, 5.0, 5.0])

        assert stats.variance == 0.0
        assert stats.stddev == 0.0
        assert stats.skewness == 0.0
        assert stats.kurtosis == 0.0

    def test_empty_sample(self) -> None:
        assert compute_statistics([]) == EMPTY_STATISTICS
        assert EMPTY_STATISTICS.count == 0

    def test_single_value(self) -> None:
        stats = compute_statistics([7.25])

        assert stats.count == 1
        assert stats.mean == stats.median == stats.min == stats.max == 7.25
        assert stats.variance == 0.0
        assert stats.skewness == 0.0
        assert stats.kurtosis == 0.0

    def test_even_count_median_averages_middle_values(self) -> None:
        assert compute_statistics([4.0, 1.0, 3.0, 2.0]).median == 2.5

    def test_input_not_modified(self) -> None:
        data = np.array([3.0, 1.0, 2.0])
        compute_statistics(data)
        np.testing.assert_array_equal(data, [3.0, 1.0, 2.0])

    def test_accepts_sample(self) -> None:
        stats = compute_statistics(ArraySample([1.0, 3.0]))
        assert stats.count == 2
        assert stats.mean == 2.0

    def test_shape_statistics_match_scipy(self, rng: np.random.Generator) -> None:
        data = rng.gamma(2.0, 1.0, size=500)
        n = data.size
        stats = compute_statistics(data)

        # scipy standardizes by the population deviation; ours uses the corrected one.
        expected_skew = scipy_stats.skew(data) * ((n - 1) / n) ** 1.5
        expected_kurt = (scipy_stats.kurtosis(data) + 3.0) * ((n - 1) / n) ** 2 - 3.0

        assert stats.variance == pytest.approx(np.var(data, ddof=1))
        assert stats.skewness == pytest.approx(expected_skew)
        assert stats.kurtosis == pytest.approx(expected_kurt)

    def test_str_layout(self) -> None:
        text = str(compute_statistics([1.0, 2.0, 3.0, 4.0, 5.0]))
        lines = text.splitlines()

        assert lines[0] == "Sample statistics:"
        assert lines[1] == "Sample size: 5"
        assert "Mean: 3.0000" in lines
        assert "Variance: 2.5000" in lines
        assert "Median: 3.0000" in lines
        assert lines[-1].startswith("Kurtosis: ")
