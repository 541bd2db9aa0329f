"""
Random Sources
==============

The sampler never owns randomness: every draw borrows a caller-owned source.
Any object with ``random()`` and ``standard_normal()`` methods qualifies;
:class:`numpy.random.Generator` is the default implementation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """
    Protocol for seedable uniform/normal generators.

    Methods
    -------
    random()
        Next uniform variate in ``[0, 1)``.
    standard_normal()
        Next standard normal variate.
    """

    def random(self) -> float: ...

    def standard_normal(self) -> float: ...


def default_random_source(seed: int | None = None) -> np.random.Generator:
    """
    Create the default random source.

    Parameters
    ----------
    seed : int or None
        Seed for reproducible streams. ``None`` draws fresh OS entropy.

    Returns
    -------
    numpy.random.Generator
        PCG64-backed generator.
    """
    return np.random.default_rng(seed)


def derive_random_source(base_seed: int, index: int) -> np.random.Generator:
    """Independently seeded source for worker ``index``, seeded with ``base_seed + index``."""
    if index < 0:
        raise ValueError(f"Worker index must be non-negative, got {index}")
    return np.random.default_rng(base_seed + index)


__all__ = [
    "RandomSource",
    "default_random_source",
    "derive_random_source",
]
