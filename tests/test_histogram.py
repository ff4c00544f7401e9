from __future__ import annotations

import io
import math
import random

import pytest

from samplers import Bucket, ClassificationError, Histogram, ParseError, iter_values, linear_boundaries


def test_histogram_counts_follow_observations():
    histogram = Histogram([-5.0, 0.0, 5.0])
    assert histogram.counts == (0, 0, 0, 0)
    histogram.observe(1.0)
    assert histogram.counts == (0, 0, 1, 0)
    histogram.observe(1.0)
    assert histogram.counts == (0, 0, 2, 0)
    histogram.observe(-1.0)
    assert histogram.counts == (0, 1, 2, 0)
    histogram.observe(-6.0)
    assert histogram.counts == (1, 1, 2, 0)
    histogram.observe_many([-20.0, 120.0, 2.0])
    assert histogram.counts == (2, 1, 3, 1)
    assert histogram.total == 7


def test_single_boundary():
    histogram = Histogram([0.0])
    assert histogram.counts == (0, 0)
    histogram.observe_many([-20.0, 120.0, 2.0])
    assert histogram.counts == (1, 2)


def test_value_on_boundary_goes_to_bucket_above():
    histogram = Histogram([-5.0, 0.0, 5.0])
    histogram.observe(-5.0)
    assert histogram.counts == (0, 1, 0, 0)
    histogram.observe(0.0)
    assert histogram.counts == (0, 1, 1, 0)
    histogram.observe(5.0)
    assert histogram.counts == (0, 1, 1, 1)


def test_no_boundaries_means_single_bucket():
    histogram = Histogram([])
    histogram.observe_many([-1e300, 0.0, 1e300])
    assert histogram.counts == (3,)
    assert histogram.collect() == [Bucket(lower=-math.inf, upper=math.inf, count=3)]


def test_counts_sum_to_observations():
    rng = random.Random(42)
    boundaries = sorted(rng.uniform(-50.0, 50.0) for _ in range(12))
    histogram = Histogram(boundaries)
    values = [rng.gauss(0.0, 30.0) for _ in range(5_000)]
    histogram.observe_many(values)
    assert sum(histogram.counts) == len(values)
    assert histogram.total == len(values)


def test_collect_synthesizes_outer_edges():
    histogram = Histogram([-5.0, 0.0, 5.0])
    histogram.observe_many([1.0, 1.0, -1.0, -6.0, -20.0, 120.0, 2.0])
    assert histogram.collect() == [
        Bucket(lower=-math.inf, upper=-5.0, count=2),
        Bucket(lower=-5.0, upper=0.0, count=1),
        Bucket(lower=0.0, upper=5.0, count=3),
        Bucket(lower=5.0, upper=math.inf, count=1),
    ]


def test_linear_boundaries():
    assert linear_boundaries(0.0, 10.0, 5) == [0.0, 2.0, 4.0, 6.0, 8.0, 10.0]
    assert linear_boundaries(-1.0, 1.0, 1) == [-1.0, 1.0]
    with pytest.raises(ValueError):
        linear_boundaries(0.0, 1.0, 0)


def test_with_bounds_without_padding():
    histogram = Histogram.with_bounds(0.0, 10.0, 5, padding=0.0)
    assert histogram.boundaries == (0.0, 2.0, 4.0, 6.0, 8.0, 10.0)
    assert len(histogram.counts) == 7


def test_with_bounds_pads_extremes_into_real_buckets():
    histogram = Histogram.with_bounds(0.0, 10.0, 5)
    assert histogram.boundaries == pytest.approx([-0.5, 1.7, 3.9, 6.1, 8.3, 10.5])

    histogram.observe_many([0.0, 10.0])
    counts = histogram.counts
    assert counts[0] == 0
    assert counts[-1] == 0
    assert counts[1] == 1
    assert counts[5] == 1


def test_with_bounds_rejects_non_positive_bucket_count():
    with pytest.raises(ValueError):
        Histogram.with_bounds(0.0, 1.0, 0)


def test_unclassifiable_value_raises():
    histogram = Histogram([0.0])
    histogram._counts.clear()
    with pytest.raises(ClassificationError) as excinfo:
        histogram.observe(1.0)
    assert excinfo.value.value == 1.0


def test_observe_many_propagates_stream_errors():
    histogram = Histogram([0.0])
    with pytest.raises(ParseError):
        histogram.observe_many(iter_values(io.StringIO("1.0\n-2.0\nnot-a-number\n3.0\n")))
    assert histogram.counts == (1, 1)
