"""
Distributions subpackage

Specifications and sampling for the supported probability distributions:

- validated distribution specifications (:mod:`.spec`);
- single-value dispatch sampler (:mod:`.sampler`);
- sample container and bulk generation (:mod:`.sampling`);
- half-up precision rounding (:mod:`.rounding`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .rounding import round_half_up
from .sampler import DistributionSampler
from .sampling import ArraySample, Sample, generate_sample, generate_sample_parallel
from .spec import DEFAULT_PRECISION, DistributionSpec

__all__ = [
    # specification
    "DistributionSpec",
    "DEFAULT_PRECISION",
    # sampling
    "DistributionSampler",
    "Sample",
    "ArraySample",
    "generate_sample",
    "generate_sample_parallel",
    # rounding
    "round_half_up",
]
