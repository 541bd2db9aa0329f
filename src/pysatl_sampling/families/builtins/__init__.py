"""
Built-in distribution parametrizations.

This package contains the parametrizations of the standard distributions
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_sampling.families.builtins.continuous import configure_continuous_parametrizations
from pysatl_sampling.families.builtins.discrete import configure_discrete_parametrizations

__all__ = [
    "configure_continuous_parametrizations",
    "configure_discrete_parametrizations",
]
