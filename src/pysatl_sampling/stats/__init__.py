"""
Statistics subpackage

Descriptive statistics of drawn samples (:mod:`.statistics`) and
theoretical-versus-empirical distribution reports (:mod:`.report`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .report import DistributionReport, build_report, theoretical_summary
from .statistics import EMPTY_STATISTICS, SampleStatistics, compute_statistics

__all__ = [
    "SampleStatistics",
    "EMPTY_STATISTICS",
    "compute_statistics",
    "DistributionReport",
    "build_report",
    "theoretical_summary",
]
