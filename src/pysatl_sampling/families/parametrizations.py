"""
Parameterization classes for the supported distributions.

This module provides the abstractions used to name and validate the two raw
parameters of a distribution specification: every distribution kind has one
registered :class:`Parametrization` whose dataclass fields give the
parameters their names (``mu``/``sigma``, ``shape``/``scale``, ...) and whose
``@constraint`` methods describe the valid domain.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from numbers import Real
from typing import TYPE_CHECKING, ParamSpec

from pysatl_sampling.errors import InvalidParameterError
from pysatl_sampling.families.registry import ParametrizationRegister
from pysatl_sampling.types import DistributionKind, ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Subclasses are dataclasses whose fields, in declaration order, map to the
    positional ``parameter1``/``parameter2`` slots of a distribution
    specification. Distributions with a single parameter declare one field
    and ignore the second slot.
    """

    # These attributes are set by the @parametrization decorator
    __kind__: ClassVar[DistributionKind]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def kind(self) -> DistributionKind:
        """Get the distribution this parametrization belongs to."""
        return self.__class__.__kind__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    @classmethod
    def parameter_names(cls) -> tuple[str, ...]:
        """Names of the parameters in positional order."""
        return tuple(f.name for f in fields(cls))  # type: ignore[arg-type]

    @classmethod
    def from_positional(cls, parameter1: float, parameter2: float) -> Parametrization:
        """
        Build parameters from the positional slots of a specification.

        Slots beyond the number of declared fields are ignored.
        """
        values = (parameter1, parameter2)[: len(cls.parameter_names())]
        return cls(*values)

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        InvalidParameterError
            If a parameter is not a finite number or any constraint is not
            satisfied.
        """
        for pname, value in self.parameters.items():
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidParameterError(
                    f"Parameter {pname} of {self.kind} must be a number, got {value!r}"
                )
            if not math.isfinite(value):
                raise InvalidParameterError(
                    f"Parameter {pname} of {self.kind} must be finite, got {value!r}"
                )
        for constraint in self._constraints:
            if not constraint.check(self):
                raise InvalidParameterError(
                    f'Constraint "{constraint.description}" does not hold for {self.kind}'
                )

    def mean(self) -> float | None:
        """Theoretical mean, or ``None`` when no closed form is reported."""
        return None

    def variance(self) -> float | None:
        """Theoretical variance, or ``None`` when no closed form is reported."""
        return None


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method as a domain check of a parametrization.

    Parameters
    ----------
    description : str
        Domain condition as shown to users, e.g. ``"sigma >= 0"``. It is
        quoted verbatim in the :class:`InvalidParameterError` message.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that tags the predicate for collection by
        :func:`parametrization`.

    Notes
    -----
    The predicate receives the parametrization instance and returns whether
    the condition holds. Tagging uses the ``__is_constraint`` and
    ``__constraint_description`` function attributes.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization(
    *,
    kind: DistributionKind,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as the parametrization of a distribution.

    Parameters
    ----------
    kind : DistributionKind
        Distribution the parametrization describes.
    name : str
        Name of the parametrization.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator that registers the parametrization.

    Notes
    -----
    Automatically converts the class to a dataclass if not already one.
    Collects and registers constraint methods marked with @constraint.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        """Collect constraint methods from the class."""
        constraints: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(
                        f"@constraint '{attr_name}' must be an instance method, not @staticmethod"
                    )
                continue
            if isinstance(attr, classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(
                        f"@constraint '{attr_name}' must be an instance method, not @classmethod"
                    )
                continue

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=func))
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        # Attach metadata
        cls.__kind__ = kind
        cls.__param_name__ = name

        # Discover and store constraints
        cls._constraints = _collect_constraints(cls)

        ParametrizationRegister.register(kind, cls)
        return cls

    return decorator


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
