"""
PySATL Sampling
===============

Statistical distribution sampling engine for synthetic test data: validated
distribution specifications, a dispatch sampler over seventeen named
distributions, half-up precision rounding, descriptive sample statistics and
theoretical-versus-empirical reports.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import DEFAULT_CONFIG, SamplerConfig
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .generator import GenerationContext, StatisticalDistributionGenerator
from .random_source import RandomSource, default_random_source, derive_random_source
from .stats import *
from .stats import __all__ as _stats_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-sampling")
__all__ = [
    "__version__",
    "SamplerConfig",
    "DEFAULT_CONFIG",
    "GenerationContext",
    "StatisticalDistributionGenerator",
    "RandomSource",
    "default_random_source",
    "derive_random_source",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_stats_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _stats_all
del _types_all
