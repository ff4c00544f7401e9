"""Infinite sample streams drawn from common parametric distributions.

Every sampler takes an explicit :class:`numpy.random.Generator`; build one
with :func:`make_rng` (optionally seeded) and pass it around rather than
relying on global random state. Parameters are validated eagerly so that a
bad argument fails before the first sample is requested.
"""

from __future__ import annotations

import itertools
import math
from typing import Iterator, List, Optional, TypeVar

import numpy as np

T = TypeVar("T")

# Samples are drawn from numpy in blocks and then yielded one at a time.
BLOCK_SIZE = 1024


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def take(samples: Iterator[T], count: int) -> List[T]:
    return list(itertools.islice(samples, count))


def _stream(draw) -> Iterator:
    while True:
        yield from draw(BLOCK_SIZE).tolist()


def gaussian(mean: float, variance: float, rng: np.random.Generator) -> Iterator[float]:
    """Sample from the normal distribution N(mean, variance)."""
    if not variance >= 0:
        raise ValueError(f"variance must be non-negative, got {variance}")
    std = math.sqrt(variance)
    return _stream(lambda size: rng.normal(mean, std, size))


def standard_gaussian(rng: np.random.Generator) -> Iterator[float]:
    return _stream(rng.standard_normal)


def poisson(lam: float, rng: np.random.Generator) -> Iterator[int]:
    """Sample from Pois(lam); lam is both the mean and the variance."""
    if not lam >= 0:
        raise ValueError(f"lambda must be non-negative, got {lam}")
    return _stream(lambda size: rng.poisson(lam, size))


def exponential(lam: float, rng: np.random.Generator) -> Iterator[float]:
    """Sample from Exp(lam) where lam is the rate."""
    if not lam > 0:
        raise ValueError(f"lambda must be positive, got {lam}")
    scale = 1.0 / lam
    return _stream(lambda size: rng.exponential(scale, size))


def binomial(num_trials: int, probability: float, rng: np.random.Generator) -> Iterator[int]:
    if num_trials < 0:
        raise ValueError(f"number of trials must be non-negative, got {num_trials}")
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must be within [0, 1], got {probability}")
    return _stream(lambda size: rng.binomial(num_trials, probability, size))


def continuous_uniform(lower: float, upper: float, rng: np.random.Generator) -> Iterator[float]:
    """Sample uniformly over ``[lower, upper)``."""
    if not lower < upper:
        raise ValueError(f"lower bound {lower} must be below upper bound {upper}")
    return _stream(lambda size: rng.uniform(lower, upper, size))


def discrete_uniform(lower: int, upper: int, rng: np.random.Generator) -> Iterator[int]:
    """Sample uniformly from ``{lower, lower + 1, ..., upper}``."""
    if lower > upper:
        raise ValueError(f"lower bound {lower} must not exceed upper bound {upper}")
    return _stream(lambda size: rng.integers(lower, upper, size, endpoint=True))


__all__ = [
    "make_rng",
    "take",
    "gaussian",
    "standard_gaussian",
    "poisson",
    "exponential",
    "binomial",
    "continuous_uniform",
    "discrete_uniform",
]
