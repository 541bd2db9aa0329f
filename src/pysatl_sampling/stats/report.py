"""
Distribution Reports
====================

Theoretical-versus-empirical summaries of a distribution specification.

A report draws a sample, rounds every value to the specification's precision,
computes :class:`~pysatl_sampling.stats.statistics.SampleStatistics` and, for
Normal, Uniform, Exponential and Poisson, the closed-form mean and variance.
Other distributions report their supplied parameters instead.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_sampling.distributions.sampler import DistributionSampler
from pysatl_sampling.distributions.sampling import generate_sample
from pysatl_sampling.stats.statistics import compute_statistics

if TYPE_CHECKING:
    from pysatl_sampling.distributions.sampling import ArraySample
    from pysatl_sampling.distributions.spec import DistributionSpec
    from pysatl_sampling.random_source import RandomSource
    from pysatl_sampling.stats.statistics import SampleStatistics
    from pysatl_sampling.types import CancellationCheck

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DistributionReport:
    """
    Result of :func:`build_report`.

    Parameters
    ----------
    spec : DistributionSpec
        Specification the sample was drawn from.
    sample : ArraySample
        Drawn values, rounded to ``spec.precision``.
    statistics : SampleStatistics
        Empirical statistics of ``sample``.
    theoretical_mean : float or None
        Closed-form mean, when reported for this distribution.
    theoretical_variance : float or None
        Closed-form variance, when reported for this distribution.
    """

    spec: DistributionSpec
    sample: ArraySample
    statistics: SampleStatistics
    theoretical_mean: float | None
    theoretical_variance: float | None

    @property
    def has_closed_form(self) -> bool:
        """Whether theoretical moments are available."""
        return self.theoretical_mean is not None

    def theoretical_summary(self) -> str:
        """Theoretical moments, or the supplied parameters when none are reported."""
        return theoretical_summary(self.spec)

    def render(self) -> str:
        """Full textual report: distribution, parameters, theory and sample statistics."""
        lines = [
            f"Distribution: {self.spec.kind.name}",
            f"Parameter 1: {self.spec.parameter1}",
            f"Parameter 2: {self.spec.parameter2}",
            "",
            self.theoretical_summary().rstrip("\n"),
            "",
            str(self.statistics),
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


def theoretical_summary(spec: DistributionSpec) -> str:
    """
    Text block with the theoretical moments of ``spec``.

    Distributions without a reported closed form list their parameters by
    name instead.
    """
    parameters = spec.parametrization
    mean, variance = parameters.mean(), parameters.variance()

    lines = [f"Distribution: {spec.kind.name}"]
    if mean is not None and variance is not None:
        lines.append(f"Theoretical mean: {mean}")
        lines.append(f"Theoretical variance: {variance}")
    else:
        lines.extend(f"Parameter {name}: {value}" for name, value in parameters.parameters.items())
    return "\n".join(lines) + "\n"


def build_report(
    spec: DistributionSpec,
    sample_size: int,
    rng: RandomSource,
    sampler: DistributionSampler | None = None,
    should_cancel: CancellationCheck | None = None,
) -> DistributionReport:
    """
    Draw a sample and summarize it against the distribution's theory.

    Parameters
    ----------
    spec : DistributionSpec
        Distribution to report on.
    sample_size : int
        Number of values to draw.
    rng : RandomSource
        Caller-owned source; the only state the report consumes.
    sampler : DistributionSampler, optional
        Sampler to use; a default one is created when omitted.
    should_cancel : Callable[[], bool], optional
        Polled once before every draw.

    Returns
    -------
    DistributionReport
        Rounded sample, its statistics and theoretical moments.

    Raises
    ------
    ValueError
        If ``sample_size`` is negative.
    """
    if sampler is None:
        sampler = DistributionSampler()

    logger.debug("Building %s report over %d draws", spec.kind, sample_size)
    raw = generate_sample(spec, sample_size, rng, sampler=sampler, should_cancel=should_cancel)
    sample = raw.rounded(spec.precision)
    parameters = spec.parametrization

    return DistributionReport(
        spec=spec,
        sample=sample,
        statistics=compute_statistics(sample),
        theoretical_mean=parameters.mean(),
        theoretical_variance=parameters.variance(),
    )


__all__ = [
    "DistributionReport",
    "build_report",
    "theoretical_summary",
]
