"""
Built-in continuous distribution parametrizations.

Each parametrization names the positional parameters of its distribution and
declares the domain constraints checked when a specification is built.
Closed-form moments are provided for the distributions whose theoretical
summary is reported (Normal, Uniform, Exponential).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

from pysatl_sampling.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_sampling.families.registry import ParametrizationRegister
from pysatl_sampling.types import DistributionKind

logger = logging.getLogger(__name__)


def configure_continuous_parametrizations() -> None:
    """
    Configure and register parametrizations of all continuous distributions.
    """

    if ParametrizationRegister.contains(DistributionKind.NORMAL):
        return

    @parametrization(kind=DistributionKind.NORMAL, name="meanStd")
    class _NormalMeanStd(Parametrization):
        """
        Normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation; zero yields a degenerate distribution at ``mu``
        """

        mu: float
        sigma: float

        @constraint(description="sigma >= 0")
        def check_sigma_non_negative(self) -> bool:
            """Check that standard deviation is non-negative."""
            return self.sigma >= 0

        def mean(self) -> float:
            return float(self.mu)

        def variance(self) -> float:
            sigma = float(self.sigma)
            return sigma * sigma

    @parametrization(kind=DistributionKind.LOGNORMAL, name="logMeanStd")
    class _LogNormal(Parametrization):
        """
        Log-normal distribution, parametrized by the underlying normal.

        Parameters
        ----------
        mu : float
            Mean of ``log(X)``
        sigma : float
            Standard deviation of ``log(X)``
        """

        mu: float
        sigma: float

        @constraint(description="sigma >= 0")
        def check_sigma_non_negative(self) -> bool:
            return self.sigma >= 0

    @parametrization(kind=DistributionKind.UNIFORM, name="bounds")
    class _UniformBounds(Parametrization):
        """
        Continuous uniform distribution on ``[low, high]``.

        Parameters
        ----------
        low : float
            Lower bound
        high : float
            Upper bound
        """

        low: float
        high: float

        @constraint(description="low <= high")
        def check_bounds_ordered(self) -> bool:
            """Check that lower bound does not exceed upper bound."""
            return self.low <= self.high

        def mean(self) -> float:
            return (self.low + self.high) / 2.0

        def variance(self) -> float:
            width = float(self.high) - float(self.low)
            return width * width / 12.0

    @parametrization(kind=DistributionKind.EXPONENTIAL, name="rate")
    class _ExponentialRate(Parametrization):
        """
        Exponential distribution.

        Parameters
        ----------
        rate : float
            Rate parameter λ; the mean is ``1 / rate``
        """

        rate: float

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.rate > 0

        def mean(self) -> float:
            return 1.0 / self.rate

        def variance(self) -> float:
            mean = 1.0 / self.rate
            return mean * mean

    @parametrization(kind=DistributionKind.GAMMA, name="shapeScale")
    class _GammaShapeScale(Parametrization):
        """
        Gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter α
        scale : float
            Scale parameter β
        """

        shape: float
        scale: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    @parametrization(kind=DistributionKind.BETA, name="alphaBeta")
    class _Beta(Parametrization):
        alpha: float
        beta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

    @parametrization(kind=DistributionKind.WEIBULL, name="shapeScale")
    class _WeibullShapeScale(Parametrization):
        """
        Weibull distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        scale : float
            Scale parameter λ
        """

        shape: float
        scale: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    @parametrization(kind=DistributionKind.CHI_SQUARE, name="degreesOfFreedom")
    class _ChiSquare(Parametrization):
        df: float

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            return self.df > 0

    @parametrization(kind=DistributionKind.STUDENT_T, name="degreesOfFreedom")
    class _StudentT(Parametrization):
        df: float

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            return self.df > 0

    @parametrization(kind=DistributionKind.F_DISTRIBUTION, name="degreesOfFreedom")
    class _F(Parametrization):
        """
        Fisher–Snedecor F distribution.

        Parameters
        ----------
        df1 : float
            Numerator degrees of freedom
        df2 : float
            Denominator degrees of freedom
        """

        df1: float
        df2: float

        @constraint(description="df1 > 0")
        def check_df1_positive(self) -> bool:
            return self.df1 > 0

        @constraint(description="df2 > 0")
        def check_df2_positive(self) -> bool:
            return self.df2 > 0

    @parametrization(kind=DistributionKind.PARETO, name="scaleShape")
    class _Pareto(Parametrization):
        """
        Pareto (type I) distribution.

        Parameters
        ----------
        scale : float
            Minimum value x_m
        shape : float
            Tail index α
        """

        scale: float
        shape: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    @parametrization(kind=DistributionKind.CAUCHY, name="locationScale")
    class _Cauchy(Parametrization):
        location: float
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    @parametrization(kind=DistributionKind.LAPLACE, name="locationScale")
    class _Laplace(Parametrization):
        location: float
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    logger.debug("Registered continuous parametrizations")
