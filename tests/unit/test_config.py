from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_sampling.config import DEFAULT_CONFIG, SamplerConfig


class TestSamplerConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG == SamplerConfig(
            poisson_iteration_factor=10.0,
            poisson_iteration_offset=1000,
            gamma_max_retries=10_000,
            default_precision=4,
        )

    @pytest.mark.parametrize("lam, expected", [(2.5, 1025), (0.01, 1000), (100.0, 2000)])
    def test_poisson_iteration_limit(self, lam: float, expected: int) -> None:
        assert DEFAULT_CONFIG.poisson_iteration_limit(lam) == expected

    def test_custom_poisson_limit(self) -> None:
        config = SamplerConfig(poisson_iteration_factor=2.0, poisson_iteration_offset=5)
        assert config.poisson_iteration_limit(3.0) == 11

    @pytest.mark.parametrize(
        "options, message",
        [
            ({"poisson_iteration_factor": 0.0}, "poisson_iteration_factor"),
            ({"poisson_iteration_factor": math.inf}, "poisson_iteration_factor"),
            ({"poisson_iteration_offset": 0}, "poisson_iteration_offset"),
            ({"gamma_max_retries": -1}, "gamma_max_retries"),
            ({"default_precision": -2}, "default_precision"),
        ],
    )
    def test_invalid_values(self, options, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            SamplerConfig(**options)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.gamma_max_retries = 1  # type: ignore[misc]

    def test_from_mapping(self) -> None:
        config = SamplerConfig.from_mapping({"gamma_max_retries": 50})
        assert config.gamma_max_retries == 50
        assert config.poisson_iteration_offset == 1000

    def test_from_mapping_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValueError, match="Unknown sampler option"):
            SamplerConfig.from_mapping({"gamma_retries": 50, "seed": 1})
