"""
Parametrizations of the supported distributions.

This package names the raw parameters of every distribution kind and
validates them against the distribution's domain.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .configuration import configure_parametrizations_register, reset_parametrizations_register
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametrizationRegister

__all__ = [
    "ParametrizationRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
    "configure_parametrizations_register",
    "reset_parametrizations_register",
]
