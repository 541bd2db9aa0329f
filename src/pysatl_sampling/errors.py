"""
Sampling Errors
===============

Exception hierarchy raised by the sampling engine.

The concrete errors also derive from the built-in exception a caller would
expect (``ValueError`` for bad parameters, ``RuntimeError`` for failed
computations), so existing ``except ValueError`` handlers keep working.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class SamplingError(Exception):
    """Base class for all errors raised by the sampling engine."""


class InvalidParameterError(SamplingError, ValueError):
    """
    A distribution parameter lies outside its domain.

    Raised once, when a :class:`~pysatl_sampling.distributions.spec.DistributionSpec`
    is constructed, so no invalid specification can reach the sampler.
    """


class IterationLimitExceededError(SamplingError, RuntimeError):
    """
    A rejection or counting loop exceeded its retry cap.

    Parameters
    ----------
    message : str
        Human-readable description.
    limit : int or None
        The cap that was exceeded, or ``None`` when the rate is too large
        for any finite cap.
    """

    def __init__(self, message: str, limit: int | None) -> None:
        super().__init__(message)
        self.limit = limit


class SamplingCancelledError(SamplingError, RuntimeError):
    """The caller-supplied cancellation check requested a stop."""


__all__ = [
    "SamplingError",
    "InvalidParameterError",
    "IterationLimitExceededError",
    "SamplingCancelledError",
]
