"""
Generator Adapter
=================

Exposes the sampling engine through the uniform generator interface used by
the data-generation pipeline: a generator receives a
:class:`GenerationContext` and returns one value per call.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, ClassVar

from pysatl_sampling.config import DEFAULT_CONFIG
from pysatl_sampling.distributions.sampler import DistributionSampler
from pysatl_sampling.distributions.sampling import generate_sample
from pysatl_sampling.distributions.spec import DistributionSpec
from pysatl_sampling.errors import InvalidParameterError
from pysatl_sampling.random_source import default_random_source
from pysatl_sampling.stats.report import build_report, theoretical_summary
from pysatl_sampling.types import DistributionKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    import numpy as np

    from pysatl_sampling.config import SamplerConfig
    from pysatl_sampling.distributions.sampling import ArraySample
    from pysatl_sampling.stats.report import DistributionReport


class GenerationContext:
    """
    Per-run generation state owned by the pipeline.

    Parameters
    ----------
    count : int
        Number of records the run will produce.
    seed : int, optional
        Seed of the context's random source; ``None`` uses fresh entropy.
    """

    def __init__(self, count: int, seed: int | None = None) -> None:
        self._count = count
        self._seed = seed
        self._rng = default_random_source(seed)
        self._parameters: dict[str, Any] = {}

    @property
    def rng(self) -> np.random.Generator:
        """Random source borrowed by generators."""
        return self._rng

    @property
    def count(self) -> int:
        return self._count

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None) -> None:
        """Replace the random source with one seeded by ``seed``."""
        self._seed = seed
        self._rng = default_random_source(seed)

    def get_parameter(self, key: str, default: Any = None) -> Any:
        value = self._parameters.get(key)
        return default if value is None else value

    def set_parameter(self, key: str, value: Any) -> None:
        self._parameters[key] = value

    @property
    def parameters(self) -> dict[str, Any]:
        """Copy of all parameters."""
        return dict(self._parameters)


class StatisticalDistributionGenerator:
    """
    Generator of values following a statistical distribution.

    Parameters
    ----------
    spec : DistributionSpec, optional
        Distribution to draw from. Defaults to a standard normal rounded to
        four decimal digits.
    config : SamplerConfig, optional
        Sampler configuration.
    """

    name: ClassVar[str] = "statistical_distribution"
    supported_parameters: ClassVar[tuple[str, ...]] = (
        "distribution",
        "parameter1",
        "parameter2",
        "precision",
    )

    def __init__(
        self,
        spec: DistributionSpec | None = None,
        config: SamplerConfig | None = None,
    ) -> None:
        self._spec = DistributionSpec(DistributionKind.NORMAL, 0.0, 1.0) if spec is None else spec
        self._sampler = DistributionSampler(config)

    @classmethod
    def from_parameters(
        cls, options: Mapping[str, Any], config: SamplerConfig | None = None
    ) -> StatisticalDistributionGenerator:
        """
        Build a generator from string-keyed options.

        Missing options fall back to the standard normal defaults, with the
        precision taken from ``config.default_precision``. Values may
        be strings, as read from configuration files.

        Raises
        ------
        InvalidParameterError
            On unknown options, unknown distributions or out-of-domain values.
        """
        unknown = sorted(set(options) - set(cls.supported_parameters))
        if unknown:
            raise InvalidParameterError(f"Unsupported option(s): {', '.join(unknown)}")

        kind = options.get("distribution", DistributionKind.NORMAL)
        try:
            parameter1 = float(options.get("parameter1", 0.0))
            parameter2 = float(options.get("parameter2", 1.0))
            precision = int(options.get("precision", (config or DEFAULT_CONFIG).default_precision))
        except (TypeError, ValueError) as exc:
            raise InvalidParameterError(f"Invalid generator option: {exc}") from exc

        return cls(DistributionSpec(kind, parameter1, parameter2, precision), config)

    @property
    def spec(self) -> DistributionSpec:
        return self._spec

    def generate(self, context: GenerationContext) -> float:
        """Draw one value rounded to the specification's precision."""
        return self._sampler.sample_rounded(self._spec, context.rng)

    def generate_sample(self, size: int, context: GenerationContext) -> ArraySample:
        """Draw ``size`` raw, unrounded values."""
        return generate_sample(self._spec, size, context.rng, sampler=self._sampler)

    def statistical_report(self, size: int, context: GenerationContext) -> DistributionReport:
        """Draw ``size`` values and summarize them."""
        return build_report(self._spec, size, context.rng, sampler=self._sampler)

    def theoretical_statistics(self) -> str:
        """Theoretical moments of the configured distribution as text."""
        return theoretical_summary(self._spec)


__all__ = [
    "GenerationContext",
    "StatisticalDistributionGenerator",
]
