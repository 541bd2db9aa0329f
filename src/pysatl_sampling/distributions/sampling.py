"""
Sampling Interfaces
===================

This module defines the sample container returned by bulk generation and
the sequential and chunk-parallel bulk generators.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_sampling.distributions.rounding import round_half_up
from pysatl_sampling.distributions.sampler import DistributionSampler
from pysatl_sampling.errors import SamplingCancelledError
from pysatl_sampling.random_source import derive_random_source

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pysatl_sampling.distributions.spec import DistributionSpec
    from pysatl_sampling.random_source import RandomSource
    from pysatl_sampling.types import CancellationCheck, NumericArray

logger = logging.getLogger(__name__)


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Read-only 1D array of drawn values.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> NumericArray: ...


class ArraySample:
    """
    Immutable array-backed sample.

    Parameters
    ----------
    data : array_like
        1D sequence of drawn values. It is copied into a float64 array whose
        write flag is cleared.

    Raises
    ------
    ValueError
        If data is not 1D.
    """

    __slots__ = ("_data",)

    def __init__(self, data: NumericArray | Iterable[float]) -> None:
        arr = np.array(data, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError("ArraySample expects a 1D array of shape (n,).")
        arr.setflags(write=False)
        self._data = arr

    def __len__(self) -> int:
        """Return the number of drawn values."""
        return int(self._data.shape[0])

    def __iter__(self) -> Iterator[float]:
        """Iterate over drawn values as Python floats."""
        return iter(self._data.tolist())

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArraySample):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data, equal_nan=True))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ArraySample(n={len(self)})"

    @property
    def array(self) -> NumericArray:
        """Return the read-only backing array."""
        return self._data

    def rounded(self, precision: int) -> ArraySample:
        """Copy of this sample with every value rounded half-up to ``precision`` digits."""
        return ArraySample([round_half_up(v, precision) for v in self._data.tolist()])


def generate_sample(
    spec: DistributionSpec,
    n: int,
    rng: RandomSource,
    sampler: DistributionSampler | None = None,
    should_cancel: CancellationCheck | None = None,
) -> ArraySample:
    """
    Draw ``n`` independent raw values in order from one random source.

    Parameters
    ----------
    spec : DistributionSpec
        Distribution to draw from.
    n : int
        Number of draws.
    rng : RandomSource
        Caller-owned source; identical seeds reproduce identical samples.
    sampler : DistributionSampler, optional
        Sampler to use; a default one is created when omitted.
    should_cancel : Callable[[], bool], optional
        Polled once before every draw.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    SamplingCancelledError
        If the cancellation check fires.
    """
    if n < 0:
        raise ValueError(f"Number of samples must be non-negative, got {n}")
    if sampler is None:
        sampler = DistributionSampler()

    values = np.empty(n, dtype=np.float64)
    for i in range(n):
        if should_cancel is not None and should_cancel():
            raise SamplingCancelledError(f"Sampling cancelled after {i} of {n} draws")
        values[i] = sampler.sample(spec, rng)
    return ArraySample(values)


def generate_sample_parallel(
    spec: DistributionSpec,
    n: int,
    base_seed: int,
    *,
    chunk_size: int = 1024,
    max_workers: int | None = None,
    sampler: DistributionSampler | None = None,
) -> ArraySample:
    """
    Draw ``n`` raw values across worker threads.

    The sample is split into chunks of ``chunk_size`` draws; chunk ``k`` is
    drawn from its own source seeded with ``base_seed + k`` and chunks are
    concatenated in order. The result therefore depends only on
    ``(base_seed, n, chunk_size)``, never on scheduling or ``max_workers``.

    Parameters
    ----------
    spec : DistributionSpec
        Distribution to draw from.
    n : int
        Number of draws.
    base_seed : int
        Seed from which per-chunk seeds are derived.
    chunk_size : int, default 1024
        Draws per chunk.
    max_workers : int, optional
        Thread pool size; ``None`` lets the executor decide.
    sampler : DistributionSampler, optional
        Shared sampler; it holds no mutable state.

    Raises
    ------
    ValueError
        If ``n`` is negative or ``chunk_size`` is not positive.
    """
    if n < 0:
        raise ValueError(f"Number of samples must be non-negative, got {n}")
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if sampler is None:
        sampler = DistributionSampler()

    sizes = [min(chunk_size, n - start) for start in range(0, n, chunk_size)]
    logger.debug("Drawing %d values of %s in %d chunks", n, spec.kind, len(sizes))

    def _draw_chunk(index: int) -> NumericArray:
        rng = derive_random_source(base_seed, index)
        return generate_sample(spec, sizes[index], rng, sampler=sampler).array

    if not sizes:
        return ArraySample(np.empty(0, dtype=np.float64))

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        chunks = list(executor.map(_draw_chunk, range(len(sizes))))
    return ArraySample(np.concatenate(chunks))


__all__ = [
    "Sample",
    "ArraySample",
    "generate_sample",
    "generate_sample_parallel",
]
