"""Single-pass moment accumulators and streaming mean/variance helpers.

``MomentsAccumulator`` keeps the count, mean and the second to fourth central
moment sums and updates them in constant time per observation using the
one-pass generalisation of Welford's algorithm (Terriberry's update). Nothing
about the individual observations is retained.

Derived statistics are returned as ``None`` until enough observations have
been seen. Past that point the closed-form expressions are evaluated as-is
with IEEE semantics, so small samples or zero spread produce ``inf``/``nan``
rather than raising.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Tuple

import numpy as np

from .observer import observe_all

logger = logging.getLogger(__name__)


class MomentsAccumulator:
    """Running count, mean and central moments of a stream of floats."""

    __slots__ = ("_count", "_mean", "_m2", "_m3", "_m4")

    def __init__(self) -> None:
        self._count: int = 0
        self._mean: Optional[float] = None
        self._m2: Optional[float] = None
        self._m3: Optional[float] = None
        self._m4: Optional[float] = None

    def observe(self, value: float) -> None:
        self._count += 1
        n = self._count
        current = self._mean if self._mean is not None else 0.0
        m2 = self._m2 if self._m2 is not None else 0.0
        m3 = self._m3 if self._m3 is not None else 0.0
        m4 = self._m4 if self._m4 is not None else 0.0

        delta = value - current
        delta_n = delta / n
        delta2 = delta * delta
        delta_n2 = delta_n * delta_n
        term = delta * (delta - delta_n)

        # Order matters: m3 sees the previous m2, m4 sees the updated m2 and m3.
        self._mean = current + delta_n
        self._m2 = m2 + term
        self._m3 = m3 + term * delta_n * (n - 2) - 3 * delta_n * m2
        self._m4 = (
            m4
            - 4 * delta_n * self._m3
            - 6 * delta_n2 * self._m2
            + delta * (delta * delta2 - delta_n * delta_n2)
        )

    def observe_many(self, values: Iterable[float]) -> None:
        observe_all(self, values)

    # ------------------------------------------------------------------
    @property
    def count(self) -> int:
        return self._count

    @property
    def mean(self) -> Optional[float]:
        return self._mean

    @property
    def moment2(self) -> Optional[float]:
        return self._m2

    @property
    def moment3(self) -> Optional[float]:
        return self._m3

    @property
    def moment4(self) -> Optional[float]:
        return self._m4

    # ------------------------------------------------------------------
    @property
    def variance(self) -> Optional[float]:
        """Bessel-corrected sample variance; needs at least two observations."""
        if self._count < 2:
            return None
        return self._m2 / (self._count - 1)

    @property
    def population_variance(self) -> Optional[float]:
        if self._count < 1:
            return None
        return self._m2 / self._count

    @property
    def standard_deviation(self) -> Optional[float]:
        variance = self.variance
        return None if variance is None else math.sqrt(variance)

    @property
    def population_standard_deviation(self) -> Optional[float]:
        variance = self.population_variance
        return None if variance is None else math.sqrt(variance)

    @property
    def skewness(self) -> Optional[float]:
        """Bias-adjusted sample skewness.

        Defined from two observations on; at exactly two the ``n - 2`` term
        makes the result ``inf`` or ``nan``.
        """
        if self._count < 2:
            return None
        n = np.float64(self._count)
        m2, m3 = np.float64(self._m2), np.float64(self._m3)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return float(n * np.sqrt(n - 1) * m3 / (n - 2) / m2**1.5)

    @property
    def kurtosis(self) -> Optional[float]:
        """Bias-adjusted sample kurtosis (normal distribution gives 3).

        Degenerates to ``inf``/``nan`` for two or three observations.
        """
        if self._count < 2:
            return None
        n = np.float64(self._count)
        m2, m4 = np.float64(self._m2), np.float64(self._m4)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return float(
                (n + 1) * n * (n - 1) / (n - 2) / (n - 3) * m4 / (m2 * m2)
                - 3 * (n - 1) ** 2 / (n - 2) / (n - 3)
                + 3
            )

    @property
    def population_skewness(self) -> Optional[float]:
        if self._count < 1:
            return None
        n = np.float64(self._count)
        m2, m3 = np.float64(self._m2), np.float64(self._m3)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return float(np.sqrt(n) * m3 / m2**1.5)

    @property
    def population_kurtosis(self) -> Optional[float]:
        if self._count < 1:
            return None
        n = np.float64(self._count)
        m2, m4 = np.float64(self._m2), np.float64(self._m4)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return float(n * m4 / (m2 * m2))

    def __repr__(self) -> str:
        return f"MomentsAccumulator(count={self._count}, mean={self._mean})"


class DistributionSummary:
    """Moments plus running extrema, the accumulator behind ``summarize``."""

    __slots__ = ("_moments", "_min", "_max")

    def __init__(self) -> None:
        self._moments = MomentsAccumulator()
        self._min: Optional[float] = None
        self._max: Optional[float] = None

    def observe(self, value: float) -> None:
        # NaN never becomes an extremum.
        if not math.isnan(value):
            self._min = value if self._min is None else min(self._min, value)
            self._max = value if self._max is None else max(self._max, value)
        self._moments.observe(value)

    def observe_many(self, values: Iterable[float]) -> None:
        observed = observe_all(self, values)
        logger.debug("Summary observed %d values (total %d)", observed, self.count)

    # Accessors -----------------------------------------------------------

    @property
    def moments(self) -> MomentsAccumulator:
        return self._moments

    @property
    def min(self) -> Optional[float]:
        return self._min

    @property
    def max(self) -> Optional[float]:
        return self._max

    @property
    def count(self) -> int:
        return self._moments.count

    @property
    def mean(self) -> Optional[float]:
        return self._moments.mean

    @property
    def variance(self) -> Optional[float]:
        return self._moments.variance

    @property
    def standard_deviation(self) -> Optional[float]:
        return self._moments.standard_deviation

    @property
    def skewness(self) -> Optional[float]:
        return self._moments.skewness

    @property
    def kurtosis(self) -> Optional[float]:
        return self._moments.kurtosis

    @property
    def population_variance(self) -> Optional[float]:
        return self._moments.population_variance

    @property
    def population_standard_deviation(self) -> Optional[float]:
        return self._moments.population_standard_deviation

    @property
    def population_skewness(self) -> Optional[float]:
        return self._moments.population_skewness

    @property
    def population_kurtosis(self) -> Optional[float]:
        return self._moments.population_kurtosis


def mean(values: Iterable[float]) -> float:
    """Incremental arithmetic mean; ``0.0`` for an empty stream."""

    count = 0
    current = 0.0
    for value in values:
        count += 1
        current += (value - current) / count
    return current


def variance(values: Iterable[float]) -> Tuple[float, float]:
    """Return ``(population, sample)`` variance computed in one Welford pass.

    Undefined entries (empty input, or the sample variance of a single value)
    come back as ``nan``.
    """

    count = 0
    current_mean = 0.0
    sum_squares = 0.0
    for value in values:
        count += 1
        delta1 = value - current_mean
        current_mean += delta1 / count
        delta2 = value - current_mean
        sum_squares += delta1 * delta2

    population = sum_squares / count if count > 0 else math.nan
    sample = sum_squares / (count - 1) if count > 1 else math.nan
    return population, sample


__all__ = ["MomentsAccumulator", "DistributionSummary", "mean", "variance"]
