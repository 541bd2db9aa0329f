from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import numpy as np
import pytest

from pysatl_sampling.families.configuration import reset_parametrizations_register

SEED = 20250101


@pytest.fixture(autouse=True)
def _fresh_registries() -> Generator[None, Any, None]:
    reset_parametrizations_register()
    yield


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(SEED)
