from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_sampling.distributions.spec import DistributionSpec
from pysatl_sampling.errors import InvalidParameterError
from pysatl_sampling.types import DistributionKind as K


class TestDistributionSpecValidation:
    @pytest.mark.parametrize(
        "kind, p1, p2, message",
        [
            (K.NORMAL, 0.0, -1.0, "sigma >= 0"),
            (K.LOGNORMAL, 0.0, -0.5, "sigma >= 0"),
            (K.UNIFORM, 2.0, 1.0, "low <= high"),
            (K.EXPONENTIAL, 0.0, 0.0, "rate > 0"),
            (K.POISSON, -1.0, 0.0, "lam > 0"),
            (K.GAMMA, 0.0, 1.0, "shape > 0"),
            (K.GAMMA, 1.0, -2.0, "scale > 0"),
            (K.BETA, -1.0, 1.0, "alpha > 0"),
            (K.BETA, 1.0, 0.0, "beta > 0"),
            (K.WEIBULL, 1.0, 0.0, "scale > 0"),
            (K.CHI_SQUARE, 0.0, 0.0, "df > 0"),
            (K.STUDENT_T, -3.0, 0.0, "df > 0"),
            (K.F_DISTRIBUTION, 1.0, 0.0, "df2 > 0"),
            (K.BINOMIAL, 2.5, 0.5, "n is a non-negative integer"),
            (K.BINOMIAL, -1, 0.5, "n is a non-negative integer"),
            (K.BINOMIAL, 10, 1.5, "0 < p <= 1"),
            (K.GEOMETRIC, 0.0, 0.0, "0 < p <= 1"),
            (K.NEGATIVE_BINOMIAL, 0.0, 0.5, "r > 0"),
            (K.NEGATIVE_BINOMIAL, 2.0, 0.0, "0 < p <= 1"),
            (K.PARETO, 0.0, 1.0, "scale > 0"),
            (K.CAUCHY, 0.0, -1.0, "scale > 0"),
            (K.LAPLACE, 0.0, 0.0, "scale > 0"),
        ],
    )
    def test_out_of_domain_parameters_rejected(self, kind, p1, p2, message) -> None:
        with pytest.raises(InvalidParameterError, match=message):
            DistributionSpec(kind, p1, p2)

    def test_invalid_parameter_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            DistributionSpec(K.NORMAL, 0.0, -1.0)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_parameters_rejected(self, value: float) -> None:
        with pytest.raises(InvalidParameterError, match="finite"):
            DistributionSpec(K.NORMAL, value, 1.0)

    def test_non_numeric_parameter_rejected(self) -> None:
        with pytest.raises(InvalidParameterError, match="number"):
            DistributionSpec(K.NORMAL, "0", 1.0)  # type: ignore[arg-type]

    @pytest.mark.parametrize("precision", [-1, 2.5, True])
    def test_invalid_precision_rejected(self, precision) -> None:
        with pytest.raises(InvalidParameterError, match="precision"):
            DistributionSpec(K.NORMAL, 0.0, 1.0, precision)

    def test_unused_second_parameter_is_not_validated(self) -> None:
        spec = DistributionSpec(K.EXPONENTIAL, 2.0, -5.0)
        assert spec.parameters == {"rate": 2.0}

    def test_boundary_values_accepted(self) -> None:
        DistributionSpec(K.NORMAL, 0.0, 0.0)
        DistributionSpec(K.UNIFORM, 1.0, 1.0)
        DistributionSpec(K.GEOMETRIC, 1.0)
        DistributionSpec(K.BINOMIAL, 0, 1.0)
        DistributionSpec(K.NEGATIVE_BINOMIAL, 0.5, 1.0)

    def test_numpy_scalars_accepted(self) -> None:
        spec = DistributionSpec(K.BINOMIAL, np.int64(5), np.float64(0.25))
        assert spec.parameters == {"n": 5, "p": 0.25}


class TestDistributionSpecConstruction:
    def test_defaults(self) -> None:
        spec = DistributionSpec(K.POISSON, 3.0)
        assert spec.parameter2 == 0.0
        assert spec.precision == 4

    @pytest.mark.parametrize("name", ["normal", "NORMAL", " Normal "])
    def test_kind_from_string(self, name: str) -> None:
        spec = DistributionSpec(name, 0.0, 1.0)  # type: ignore[arg-type]
        assert spec.kind is K.NORMAL

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidParameterError, match="Unknown distribution"):
            DistributionSpec("zipf", 1.0, 1.0)  # type: ignore[arg-type]

    def test_named_parameters(self) -> None:
        spec = DistributionSpec(K.GAMMA, 2.0, 3.0)
        assert spec.parameters == {"shape": 2.0, "scale": 3.0}
        assert spec.parametrization.name == "shapeScale"
        assert spec.parametrization.kind is K.GAMMA

    def test_from_parameters(self) -> None:
        spec = DistributionSpec.from_parameters(K.NORMAL, mu=1.0, sigma=2.0)
        assert spec == DistributionSpec(K.NORMAL, 1.0, 2.0)

    def test_from_parameters_single_parameter(self) -> None:
        spec = DistributionSpec.from_parameters("poisson", precision=0, lam=4.0)
        assert (spec.kind, spec.parameter1, spec.parameter2, spec.precision) == (
            K.POISSON,
            4.0,
            0.0,
            0,
        )

    def test_from_parameters_wrong_names(self) -> None:
        with pytest.raises(InvalidParameterError, match="expects parameters mu, sigma"):
            DistributionSpec.from_parameters(K.NORMAL, mean=1.0, sigma=2.0)

    def test_from_parameters_validates(self) -> None:
        with pytest.raises(InvalidParameterError, match="0 < p <= 1"):
            DistributionSpec.from_parameters(K.GEOMETRIC, p=0.0)

    def test_spec_is_frozen_and_hashable(self) -> None:
        spec = DistributionSpec(K.CAUCHY, 0.0, 1.0)
        with pytest.raises(AttributeError):
            spec.parameter1 = 3.0  # type: ignore[misc]
        assert {spec, DistributionSpec(K.CAUCHY, 0.0, 1.0)} == {spec}
