"""
Sample Statistics
=================

Descriptive statistics of a finite sample of drawn values.

Notes
-----
- Variance uses Bessel's correction (divides by ``n - 1``).
- Skewness and kurtosis standardize by that corrected standard deviation and
  average over ``n``; kurtosis is reported as excess kurtosis.
- Degenerate inputs never raise: an empty sample yields all zeros, and a
  single value or a constant sample yields zero spread and zero shape
  statistics.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_sampling.distributions.sampling import Sample
    from pysatl_sampling.types import NumericArray


@dataclass(frozen=True, slots=True)
class SampleStatistics:
    """
    Read-only descriptive statistics of a sample.

    Parameters
    ----------
    count : int
        Number of values.
    mean : float
        Arithmetic mean.
    variance : float
        Bessel-corrected sample variance.
    stddev : float
        Square root of ``variance``.
    min, max : float
        Extreme values.
    median : float
        Middle value, or the average of the two middle values for even counts.
    skewness : float
        Standardized third central moment.
    kurtosis : float
        Standardized fourth central moment minus 3.
    """

    count: int
    mean: float
    variance: float
    stddev: float
    min: float
    max: float
    median: float
    skewness: float
    kurtosis: float

    def __str__(self) -> str:
        return "\n".join(
            [
                "Sample statistics:",
                f"Sample size: {self.count}",
                f"Mean: {self.mean:.4f}",
                f"Variance: {self.variance:.4f}",
                f"Standard deviation: {self.stddev:.4f}",
                f"Minimum: {self.min:.4f}",
                f"Maximum: {self.max:.4f}",
                f"Median: {self.median:.4f}",
                f"Skewness: {self.skewness:.4f}",
                f"Kurtosis: {self.kurtosis:.4f}",
            ]
        )


EMPTY_STATISTICS = SampleStatistics(0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


def compute_statistics(sample: Sample | NumericArray | Iterable[float]) -> SampleStatistics:
    """
    Compute descriptive statistics of a sample.

    Parameters
    ----------
    sample : Sample, numpy.ndarray or iterable of float
        Values to summarize. The input is never modified.

    Returns
    -------
    SampleStatistics
        Freshly computed statistics.
    """
    values = getattr(sample, "array", sample)
    arr = np.asarray(values if isinstance(values, np.ndarray) else list(values), dtype=np.float64)
    arr = arr.reshape(-1)
    n = int(arr.size)
    if n == 0:
        return EMPTY_STATISTICS

    mean = float(arr.sum() / n)
    deviations = arr - mean
    variance = float(np.sum(deviations**2) / (n - 1)) if n > 1 else 0.0
    stddev = math.sqrt(variance)

    if stddev > 0.0:
        z = deviations / stddev
        skewness = float(np.sum(z**3) / n)
        kurtosis = float(np.sum(z**4) / n) - 3.0
    else:
        skewness = 0.0
        kurtosis = 0.0

    return SampleStatistics(
        count=n,
        mean=mean,
        variance=variance,
        stddev=stddev,
        min=float(arr.min()),
        max=float(arr.max()),
        median=float(np.median(arr)),
        skewness=skewness,
        kurtosis=kurtosis,
    )


__all__ = [
    "SampleStatistics",
    "EMPTY_STATISTICS",
    "compute_statistics",
]
