"""
Distribution Sampler
====================

Pure dispatch from a validated :class:`~pysatl_sampling.distributions.spec.DistributionSpec`
to one drawn value, given a caller-owned random source.

Algorithms by technique (``U`` is a uniform draw in ``[0, 1)``, ``Z`` a
standard normal draw):

- inverse CDF: Uniform, Exponential, Weibull, Pareto, Laplace, Cauchy,
  Geometric;
- direct transform: Normal, LogNormal;
- rejection / counting: Poisson (Knuth), Gamma (Marsaglia–Tsang), Binomial
  (sum of Bernoulli trials);
- composition: Beta, Chi-square, Student-t, F and Negative-binomial are built
  from the Gamma, Normal and Poisson samplers.

Notes
-----
- The sampler holds configuration only; it never retains a random source
  between calls, so one instance may be shared by threads as long as each
  thread brings its own source.
- Binomial is O(n) per draw and is intended for moderate trial counts.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from pysatl_sampling.config import DEFAULT_CONFIG
from pysatl_sampling.distributions.rounding import round_half_up
from pysatl_sampling.errors import IterationLimitExceededError, SamplingCancelledError
from pysatl_sampling.types import DistributionKind

if TYPE_CHECKING:
    from pysatl_sampling.config import SamplerConfig
    from pysatl_sampling.distributions.spec import DistributionSpec
    from pysatl_sampling.random_source import RandomSource
    from pysatl_sampling.types import CancellationCheck

logger = logging.getLogger(__name__)


class DistributionSampler:
    """
    Draws single values from validated distribution specifications.

    Parameters
    ----------
    config : SamplerConfig, optional
        Loop caps and defaults. Uses :data:`~pysatl_sampling.config.DEFAULT_CONFIG`
        when omitted.
    should_cancel : Callable[[], bool], optional
        Polled once per iteration of the Poisson and Gamma loops; when it
        returns ``True`` the draw is abandoned with
        :class:`~pysatl_sampling.errors.SamplingCancelledError`.
    """

    def __init__(
        self,
        config: SamplerConfig | None = None,
        should_cancel: CancellationCheck | None = None,
    ) -> None:
        self._config = DEFAULT_CONFIG if config is None else config
        self._should_cancel = should_cancel

    @property
    def config(self) -> SamplerConfig:
        """Configuration of this sampler."""
        return self._config

    def sample(self, spec: DistributionSpec, rng: RandomSource) -> float:
        """
        Draw one raw (unrounded) value.

        Parameters
        ----------
        spec : DistributionSpec
            Validated distribution specification.
        rng : RandomSource
            Caller-owned source, borrowed for the duration of the call.

        Returns
        -------
        float
            Drawn value. Discrete distributions return integral floats.

        Raises
        ------
        IterationLimitExceededError
            If a Poisson or Gamma loop exceeds its cap.
        SamplingCancelledError
            If the cancellation check fires.
        """
        p1, p2 = float(spec.parameter1), float(spec.parameter2)

        match spec.kind:
            case DistributionKind.NORMAL:
                return self._normal(rng, p1, p2)
            case DistributionKind.UNIFORM:
                return p1 + (p2 - p1) * rng.random()
            case DistributionKind.EXPONENTIAL:
                return -math.log(1.0 - rng.random()) / p1
            case DistributionKind.POISSON:
                return float(self._poisson(rng, p1))
            case DistributionKind.GAMMA:
                return self._gamma(rng, p1, p2)
            case DistributionKind.BETA:
                return self._beta(rng, p1, p2)
            case DistributionKind.WEIBULL:
                return p2 * _power(-math.log(1.0 - rng.random()), 1.0 / p1)
            case DistributionKind.LOGNORMAL:
                return _exp(self._normal(rng, p1, p2))
            case DistributionKind.CHI_SQUARE:
                return self._chi_square(rng, p1)
            case DistributionKind.STUDENT_T:
                return self._student_t(rng, p1)
            case DistributionKind.F_DISTRIBUTION:
                return self._f(rng, p1, p2)
            case DistributionKind.BINOMIAL:
                return float(self._binomial(rng, int(p1), p2))
            case DistributionKind.GEOMETRIC:
                return self._geometric(rng, p1)
            case DistributionKind.NEGATIVE_BINOMIAL:
                return float(self._poisson(rng, self._gamma(rng, p1, (1.0 - p2) / p2)))
            case DistributionKind.PARETO:
                return p1 * _power(1.0 - rng.random(), -1.0 / p2)
            case DistributionKind.CAUCHY:
                return p1 + p2 * math.tan(math.pi * (rng.random() - 0.5))
            case DistributionKind.LAPLACE:
                return self._laplace(rng, p1, p2)

        raise AssertionError(f"Unhandled distribution kind: {spec.kind!r}")

    def sample_rounded(self, spec: DistributionSpec, rng: RandomSource) -> float:
        """Draw one value and round it to ``spec.precision`` decimal digits."""
        return round_half_up(self.sample(spec, rng), spec.precision)

    # ---------- direct transforms ----------

    @staticmethod
    def _normal(rng: RandomSource, mu: float, sigma: float) -> float:
        z = float(rng.standard_normal())
        if sigma == 0.0:
            return mu
        return mu + sigma * z

    @staticmethod
    def _laplace(rng: RandomSource, mu: float, b: float) -> float:
        u = rng.random() - 0.5
        tail = 1.0 - 2.0 * abs(u)
        # u == -0.5 only when U == 0; the limit of the inverse CDF there is -inf
        log_tail = math.log(tail) if tail > 0.0 else -math.inf
        return mu - b * math.copysign(1.0, u) * log_tail

    @staticmethod
    def _geometric(rng: RandomSource, p: float) -> float:
        u = rng.random()
        if p >= 1.0:
            return 1.0
        # log1p keeps the denominator non-zero for p below machine epsilon.
        trials = math.log1p(-u) / math.log1p(-p)
        if not math.isfinite(trials):
            return math.inf
        # Support starts at 1; ceil(0) only happens for U == 0.
        return max(1.0, float(math.ceil(trials)))

    # ---------- rejection and counting loops ----------

    def _check_cancelled(self) -> None:
        if self._should_cancel is not None and self._should_cancel():
            raise SamplingCancelledError("Sampling cancelled by caller")

    def _poisson(self, rng: RandomSource, lam: float) -> int:
        """
        Knuth's multiplicative method.

        The running product of uniforms is tracked as a sum of negative
        logarithms, so the threshold ``exp(-lam)`` never underflows for large
        rates.
        """
        if not math.isfinite(self._config.poisson_iteration_factor * lam):
            logger.warning("Poisson draw with lam=%s has no finite iteration cap", lam)
            raise IterationLimitExceededError(
                f"Poisson draw with lam={lam} has no finite iteration cap", None
            )
        limit = self._config.poisson_iteration_limit(lam)
        log_product = 0.0
        for k in range(limit):
            self._check_cancelled()
            u = 1.0 - rng.random()
            log_product -= math.log(u)
            if log_product > lam:
                return k
        logger.warning("Poisson draw with lam=%s exceeded %d iterations", lam, limit)
        raise IterationLimitExceededError(
            f"Poisson draw with lam={lam} exceeded {limit} iterations", limit
        )

    def _gamma(self, rng: RandomSource, shape: float, scale: float) -> float:
        """
        Marsaglia–Tsang rejection sampler.

        For ``shape < 1`` the draw is made at ``shape + 1`` and multiplied by
        ``U ** (1 / shape)``; that single extra uniform is taken after the
        accepted proposal.
        """
        boost_exponent: float | None = None
        working_shape = shape
        if shape < 1.0:
            boost_exponent = 1.0 / shape
            working_shape += 1.0

        d = working_shape - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)
        limit = self._config.gamma_max_retries

        for _ in range(limit):
            self._check_cancelled()
            x = float(rng.standard_normal())
            v = (1.0 + c * x) ** 3
            if v <= 0.0:
                continue
            u = rng.random()
            log_u = math.log(u) if u > 0.0 else -math.inf
            if u < 1.0 - 0.0331 * x**4 or log_u < 0.5 * x * x + d * (1.0 - v + math.log(v)):
                value = d * v * scale
                if boost_exponent is not None:
                    value *= rng.random() ** boost_exponent
                return value

        logger.warning("Gamma draw with shape=%s exceeded %d proposals", shape, limit)
        raise IterationLimitExceededError(
            f"Gamma draw with shape={shape} exceeded {limit} proposals", limit
        )

    @staticmethod
    def _binomial(rng: RandomSource, n: int, p: float) -> int:
        successes = 0
        for _ in range(n):
            if rng.random() < p:
                successes += 1
        return successes

    # ---------- compositions ----------

    def _beta(self, rng: RandomSource, alpha: float, beta: float) -> float:
        x = self._gamma(rng, alpha, 1.0)
        y = self._gamma(rng, beta, 1.0)
        total = x + y
        if total > 0.0:
            return x / total
        # Both draws underflowed: fall back to the limiting two-point law,
        # mass alpha / (alpha + beta) at 1 and the rest at 0.
        return 1.0 if rng.random() < alpha / (alpha + beta) else 0.0

    def _chi_square(self, rng: RandomSource, df: float) -> float:
        return self._gamma(rng, df / 2.0, 2.0)

    def _student_t(self, rng: RandomSource, df: float) -> float:
        z = float(rng.standard_normal())
        chi_square = self._chi_square(rng, df)
        if chi_square == 0.0:
            return math.copysign(math.inf, z)
        return z / math.sqrt(chi_square / df)

    def _f(self, rng: RandomSource, df1: float, df2: float) -> float:
        numerator = self._chi_square(rng, df1) / df1
        denominator = self._chi_square(rng, df2) / df2
        if denominator == 0.0:
            return math.inf if numerator > 0.0 else 0.0
        return numerator / denominator


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _power(base: float, exponent: float) -> float:
    """``base ** exponent`` for ``base >= 0``, saturating to ``inf`` on overflow."""
    try:
        return base**exponent
    except OverflowError:
        return math.inf


__all__ = ["DistributionSampler"]
