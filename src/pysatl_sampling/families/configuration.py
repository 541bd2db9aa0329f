"""
Parametrizations Configuration
==============================

This module wires the built-in parametrizations into the global
:class:`~pysatl_sampling.families.registry.ParametrizationRegister`.

Notes
-----
- Configuration is lazy and happens once per process (or per reset).
- Specifications call :func:`configure_parametrizations_register` themselves,
  so callers never have to configure anything explicitly.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_sampling.families.builtins import (
    configure_continuous_parametrizations,
    configure_discrete_parametrizations,
)
from pysatl_sampling.families.registry import ParametrizationRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_parametrizations_register() -> ParametrizationRegister:
    """
    Configure and register all distribution parametrizations.

    Returns
    -------
    ParametrizationRegister
        The global registry of parametrizations.
    """
    configure_continuous_parametrizations()
    configure_discrete_parametrizations()
    register = ParametrizationRegister()
    logger.debug("Parametrization register configured with %d kinds", len(register.kinds()))
    return register


def reset_parametrizations_register() -> None:
    """
    Reset the cached parametrizations registry.
    """
    configure_parametrizations_register.cache_clear()
    ParametrizationRegister._reset()
