"""
Built-in discrete distribution parametrizations.

Discrete draws are still returned as floats by the sampler; the
parametrizations here only name and validate the parameters.
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


def configure_discrete_parametrizations() -> None:
    """
    Configure and register parametrizations of all discrete distributions.
    """

    if ParametrizationRegister.contains(DistributionKind.POISSON):
        return

    @parametrization(kind=DistributionKind.POISSON, name="rate")
    class _PoissonRate(Parametrization):
        """
        Poisson distribution.

        Parameters
        ----------
        lam : float
            Expected number of events λ
        """

        lam: float

        @constraint(description="lam > 0")
        def check_lam_positive(self) -> bool:
            """Check that the rate is positive."""
            return self.lam > 0

        def mean(self) -> float:
            return float(self.lam)

        def variance(self) -> float:
            return float(self.lam)

    @parametrization(kind=DistributionKind.BINOMIAL, name="trialsProbability")
    class _Binomial(Parametrization):
        """
        Binomial distribution.

        Parameters
        ----------
        n : float
            Number of trials; must hold a non-negative integer value
        p : float
            Success probability of a single trial
        """

        n: float
        p: float

        @constraint(description="n is a non-negative integer")
        def check_n_non_negative_integer(self) -> bool:
            return self.n >= 0 and float(self.n).is_integer()

        @constraint(description="0 < p <= 1")
        def check_p_in_unit_interval(self) -> bool:
            return 0 < self.p <= 1

    @parametrization(kind=DistributionKind.GEOMETRIC, name="probability")
    class _Geometric(Parametrization):
        """
        Geometric distribution on ``{1, 2, ...}`` (trials until first success).

        Parameters
        ----------
        p : float
            Success probability of a single trial
        """

        p: float

        @constraint(description="0 < p <= 1")
        def check_p_in_unit_interval(self) -> bool:
            return 0 < self.p <= 1

    @parametrization(kind=DistributionKind.NEGATIVE_BINOMIAL, name="successesProbability")
    class _NegativeBinomial(Parametrization):
        """
        Negative binomial distribution (failures before the r-th success).

        Parameters
        ----------
        r : float
            Number of successes; non-integer values give the Pólya generalization
        p : float
            Success probability of a single trial
        """

        r: float
        p: float

        @constraint(description="r > 0")
        def check_r_positive(self) -> bool:
            return self.r > 0

        @constraint(description="0 < p <= 1")
        def check_p_in_unit_interval(self) -> bool:
            return 0 < self.p <= 1

    logger.debug("Registered discrete parametrizations")
