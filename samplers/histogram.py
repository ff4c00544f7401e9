"""Fixed-boundary histogram accumulator.

A histogram with boundaries ``[-5.0, 0.0, 5.0]`` has the buckets
``(-inf, -5.0)``, ``[-5.0, 0.0)``, ``[0.0, 5.0)`` and ``[5.0, inf)``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .errors import ClassificationError
from .observer import observe_all

logger = logging.getLogger(__name__)

DEFAULT_PADDING = 0.05


@dataclass(frozen=True)
class Bucket:
    """Half-open interval ``[lower, upper)`` with its observation count."""

    lower: float
    upper: float
    count: int


def linear_boundaries(lower: float, upper: float, num_buckets: int) -> List[float]:
    """Return ``num_buckets + 1`` evenly spaced cut points from ``lower`` to ``upper``."""

    if num_buckets <= 0:
        raise ValueError("num_buckets must be positive")
    width = (upper - lower) / num_buckets
    return [lower + index * width for index in range(num_buckets)] + [upper]


class Histogram:
    """Counts observations per bucket without retaining the values."""

    __slots__ = ("_boundaries", "_counts")

    def __init__(self, boundaries: Sequence[float]) -> None:
        # Boundaries are expected to be strictly increasing; not checked.
        self._boundaries: Tuple[float, ...] = tuple(boundaries)
        self._counts: List[int] = [0] * (len(self._boundaries) + 1)

    @classmethod
    def with_bounds(
        cls,
        minimum: float,
        maximum: float,
        num_buckets: int,
        *,
        padding: float = DEFAULT_PADDING,
    ) -> "Histogram":
        """Build ``num_buckets`` equal-width buckets spanning ``[minimum, maximum]``.

        The range is widened by ``padding`` times its span on each side so the
        extreme values fall inside real buckets rather than the open-ended
        outer ones.
        """

        margin = (maximum - minimum) * padding
        lower, upper = minimum - margin, maximum + margin
        logger.debug(
            "Histogram bounds [%s, %s] padded to [%s, %s] with %d buckets",
            minimum,
            maximum,
            lower,
            upper,
            num_buckets,
        )
        return cls(linear_boundaries(lower, upper, num_buckets))

    # ------------------------------------------------------------------
    def observe(self, value: float) -> None:
        index = len(self._boundaries)
        for position, boundary in enumerate(self._boundaries):
            if value < boundary:
                index = position
                break

        if index >= len(self._counts):
            raise ClassificationError(value)
        self._counts[index] += 1

    def observe_many(self, values: Iterable[float]) -> None:
        observe_all(self, values)

    # ------------------------------------------------------------------
    @property
    def boundaries(self) -> Tuple[float, ...]:
        return self._boundaries

    @property
    def counts(self) -> Tuple[int, ...]:
        return tuple(self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts)

    def collect(self) -> List[Bucket]:
        edges = (-math.inf,) + self._boundaries + (math.inf,)
        return [
            Bucket(lower=lower, upper=upper, count=count)
            for lower, upper, count in zip(edges, edges[1:], self._counts)
        ]

    def __repr__(self) -> str:
        return f"Histogram(boundaries={list(self._boundaries)}, counts={self._counts})"


__all__ = ["Bucket", "Histogram", "linear_boundaries", "DEFAULT_PADDING"]
