"""
Core Type Definitions
=====================

Fundamental types and aliases used throughout the sampling engine.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from enum import StrEnum

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution (integer-valued draws).
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionKind(StrEnum):
    """
    Named distributions supported by the sampler.

    The value of each member is the canonical lower-case name used when a
    distribution is selected from textual options.
    """

    NORMAL = "normal"
    UNIFORM = "uniform"
    EXPONENTIAL = "exponential"
    POISSON = "poisson"
    GAMMA = "gamma"
    BETA = "beta"
    WEIBULL = "weibull"
    LOGNORMAL = "lognormal"
    CHI_SQUARE = "chi_square"
    STUDENT_T = "student_t"
    F_DISTRIBUTION = "f_distribution"
    BINOMIAL = "binomial"
    GEOMETRIC = "geometric"
    NEGATIVE_BINOMIAL = "negative_binomial"
    PARETO = "pareto"
    CAUCHY = "cauchy"
    LAPLACE = "laplace"

    @property
    def kind(self) -> Kind:
        """Whether draws of this distribution are discrete or continuous."""
        if self in _DISCRETE_KINDS:
            return Kind.DISCRETE
        return Kind.CONTINUOUS


_DISCRETE_KINDS = frozenset(
    {
        DistributionKind.POISSON,
        DistributionKind.BINOMIAL,
        DistributionKind.GEOMETRIC,
        DistributionKind.NEGATIVE_BINOMIAL,
    }
)

NumericArray = NDArray[np.float64]
"""Type alias for float arrays holding drawn values."""

ParametrizationName = str
"""Type alias for parametrization names."""

CancellationCheck = Callable[[], bool]
"""Caller-supplied predicate polled inside long-running loops."""


__all__ = [
    "Kind",
    "DistributionKind",
    "NumericArray",
    "ParametrizationName",
    "CancellationCheck",
]
