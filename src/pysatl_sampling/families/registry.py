"""
Global registry of distribution parametrizations using singleton pattern.

This module implements a centralized registry mapping every
:class:`~pysatl_sampling.types.DistributionKind` to the parametrization class
that names and validates its parameters.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_sampling.errors import InvalidParameterError

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_sampling.families.parametrizations import Parametrization
    from pysatl_sampling.types import DistributionKind


class ParametrizationRegister:
    """
    Singleton registry for distribution parametrizations.

    Maintains a global registry of parametrization classes, allowing them to
    be accessed by distribution kind.
    """

    _instance: ClassVar[ParametrizationRegister | None] = None
    _registered: dict[DistributionKind, type[Parametrization]]

    def __new__(cls) -> ParametrizationRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered = {}
        return cls._instance

    @classmethod
    def get(cls, kind: DistributionKind) -> type[Parametrization]:
        """
        Retrieve the parametrization class of a distribution.

        Parameters
        ----------
        kind : DistributionKind
            Distribution to look up.

        Returns
        -------
        type[Parametrization]
            The registered parametrization class.

        Raises
        ------
        InvalidParameterError
            If no parametrization is registered for ``kind``.
        """
        self = cls()
        if kind not in self._registered:
            raise InvalidParameterError(f"No parametrization for {kind} found in register")
        return self._registered[kind]

    @classmethod
    def contains(cls, kind: DistributionKind) -> bool:
        """Check whether ``kind`` already has a registered parametrization."""
        return kind in cls()._registered

    @classmethod
    def register(cls, kind: DistributionKind, parametrization_class: type[Parametrization]) -> None:
        """
        Register the parametrization class of a distribution.

        Raises
        ------
        ValueError
            If ``kind`` is already registered.
        """
        self = cls()
        if kind in self._registered:
            raise ValueError(f"Parametrization for {kind} already found in register")
        self._registered[kind] = parametrization_class

    @classmethod
    def kinds(cls) -> list[DistributionKind]:
        """Registered distribution kinds in registration order."""
        return list(cls()._registered)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (test helper)."""
        cls._instance = None
