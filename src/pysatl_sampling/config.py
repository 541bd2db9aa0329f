"""
Sampler Configuration
=====================

Tunables for the rejection and counting loops and the default rounding
precision. A single frozen :class:`SamplerConfig` is shared by every draw
of a :class:`~pysatl_sampling.distributions.sampler.DistributionSampler`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


@dataclass(frozen=True, slots=True)
class SamplerConfig:
    """
    Configuration for a distribution sampler.

    Parameters
    ----------
    poisson_iteration_factor : float, default 10.0
        Multiplier of ``lambda`` in the Poisson iteration cap.
    poisson_iteration_offset : int, default 1000
        Constant term of the Poisson iteration cap. The cap for rate
        ``lambda`` is ``factor * lambda + offset``.
    gamma_max_retries : int, default 10000
        Maximum number of Marsaglia–Tsang proposals per Gamma draw.
    default_precision : int, default 4
        Decimal digits used by callers that do not supply a precision.

    Raises
    ------
    ValueError
        If a cap is not positive or the precision is negative.
    """

    poisson_iteration_factor: float = 10.0
    poisson_iteration_offset: int = 1000
    gamma_max_retries: int = 10_000
    default_precision: int = 4

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not math.isfinite(self.poisson_iteration_factor) or self.poisson_iteration_factor <= 0:
            raise ValueError(
                f"poisson_iteration_factor must be positive, got {self.poisson_iteration_factor}"
            )
        if self.poisson_iteration_offset <= 0:
            raise ValueError(
                f"poisson_iteration_offset must be positive, got {self.poisson_iteration_offset}"
            )
        if self.gamma_max_retries <= 0:
            raise ValueError(f"gamma_max_retries must be positive, got {self.gamma_max_retries}")
        if self.default_precision < 0:
            raise ValueError(
                f"default_precision must be non-negative, got {self.default_precision}"
            )

    def poisson_iteration_limit(self, lam: float) -> int:
        """Iteration cap for a Poisson draw with rate ``lam``."""
        return int(self.poisson_iteration_factor * lam) + self.poisson_iteration_offset

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> SamplerConfig:
        """
        Build a configuration from a plain mapping.

        Parameters
        ----------
        options : Mapping[str, Any]
            Field names to values; missing fields keep their defaults.

        Raises
        ------
        ValueError
            If the mapping contains unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown sampler option(s): {', '.join(unknown)}")
        return cls(**dict(options))


DEFAULT_CONFIG = SamplerConfig()
"""Configuration used when a sampler is created without one."""


__all__ = [
    "SamplerConfig",
    "DEFAULT_CONFIG",
]
