"""
Distribution Specifications
===========================

A :class:`DistributionSpec` selects one distribution, its two positional
parameters and the decimal precision of generated values. Specifications are
validated once, at construction, so the sampler only ever sees parameters
inside their distribution's domain.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from numbers import Integral
from typing import TYPE_CHECKING

from pysatl_sampling.errors import InvalidParameterError
from pysatl_sampling.families.configuration import configure_parametrizations_register
from pysatl_sampling.types import DistributionKind

if TYPE_CHECKING:
    from typing import Any

    from pysatl_sampling.families.parametrizations import Parametrization

DEFAULT_PRECISION = 4


@dataclass(frozen=True, slots=True)
class DistributionSpec:
    """
    Validated description of a distribution to sample from.

    Parameters
    ----------
    kind : DistributionKind
        Distribution to draw from. Plain strings are accepted and converted.
    parameter1 : float
        First distribution parameter (mean, lower bound, rate, shape, ...).
    parameter2 : float, default 0.0
        Second distribution parameter; ignored by one-parameter distributions.
    precision : int, default 4
        Number of decimal digits generated values are rounded to.

    Raises
    ------
    InvalidParameterError
        If ``kind`` is unknown, ``precision`` is negative, or a parameter
        lies outside the distribution's domain.
    """

    kind: DistributionKind
    parameter1: float
    parameter2: float = 0.0
    precision: int = DEFAULT_PRECISION
    _parametrization: Parametrization = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        kind = _coerce_kind(self.kind)
        object.__setattr__(self, "kind", kind)

        if isinstance(self.precision, bool) or not isinstance(self.precision, Integral):
            raise InvalidParameterError(f"precision must be an integer, got {self.precision!r}")
        if self.precision < 0:
            raise InvalidParameterError(f"precision must be non-negative, got {self.precision}")

        register = configure_parametrizations_register()
        parameters = register.get(kind).from_positional(self.parameter1, self.parameter2)
        parameters.validate()
        object.__setattr__(self, "_parametrization", parameters)

    @classmethod
    def from_parameters(
        cls,
        kind: DistributionKind | str,
        precision: int = DEFAULT_PRECISION,
        **parameters: float,
    ) -> DistributionSpec:
        """
        Build a specification from named parameters.

        Parameters
        ----------
        kind : DistributionKind or str
            Distribution to draw from.
        precision : int, default 4
            Number of decimal digits generated values are rounded to.
        **parameters
            Parameter values by name, e.g. ``mu=0.0, sigma=1.0`` for Normal.

        Raises
        ------
        InvalidParameterError
            If names don't match the distribution's parameters or values are
            out of domain.
        """
        kind = _coerce_kind(kind)
        names = configure_parametrizations_register().get(kind).parameter_names()
        if set(parameters) != set(names):
            raise InvalidParameterError(
                f"{kind} expects parameters {', '.join(names)}; got {', '.join(sorted(parameters))}"
            )
        values = [parameters[n] for n in names] + [0.0] * (2 - len(names))
        return cls(kind, values[0], values[1], precision)

    @property
    def parametrization(self) -> Parametrization:
        """Validated named parameters of this specification."""
        return self._parametrization

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameters of the distribution by name."""
        return self._parametrization.parameters


def _coerce_kind(kind: DistributionKind | str) -> DistributionKind:
    if isinstance(kind, DistributionKind):
        return kind
    try:
        return DistributionKind(str(kind).strip().lower())
    except ValueError as exc:
        raise InvalidParameterError(f"Unknown distribution: {kind!r}") from exc


__all__ = [
    "DistributionSpec",
    "DEFAULT_PRECISION",
]
