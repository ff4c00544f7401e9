from __future__ import annotations

import io
import math

import pytest

from samplers import Bucket, DistributionSummary, format_value, render_buckets, render_summary
from samplers.render import fraction_bar


def test_format_value():
    assert format_value(None) == "NaN"
    assert format_value(math.nan) == "NaN"
    assert format_value(1.5) == "1.5"
    assert format_value(3) == "3"


def test_render_summary_of_empty_stream():
    text = render_summary(DistributionSummary())
    lines = text.splitlines()
    assert lines[0] == "Count: 0"
    assert "Minimum: NaN" in lines
    assert "Mean: NaN" in lines
    assert "Population kurtosis: NaN" in lines
    assert len(lines) == 12


def test_render_summary_labels_in_order():
    summary = DistributionSummary()
    summary.observe_many([1.0, 2.0, 3.0, 4.0])
    labels = [line.split(":")[0] for line in render_summary(summary).splitlines()]
    assert labels == [
        "Count",
        "Minimum",
        "Maximum",
        "Mean",
        "Variance",
        "Standard deviation",
        "Skewness",
        "Kurtosis",
        "Population variance",
        "Population standard deviation",
        "Population skewness",
        "Population kurtosis",
    ]
    text = render_summary(summary)
    assert "Count: 4" in text
    assert "Mean: 2.5" in text
    assert "Population variance: 1.25" in text


@pytest.mark.parametrize(
    "fraction, glyph",
    [(0.0, ""), (0.1, ""), (0.125, ""), (0.2, "▏"), (0.5, "▍"), (0.51, "▌"), (0.95, "▉")],
)
def test_fraction_bar(fraction, glyph):
    assert fraction_bar(fraction) == glyph


def test_render_buckets():
    buckets = [
        Bucket(lower=-math.inf, upper=0.0, count=2),
        Bucket(lower=0.0, upper=1.5, count=1),
        Bucket(lower=1.5, upper=math.inf, count=0),
    ]
    output = io.StringIO()
    render_buckets(buckets, 4, output)
    assert output.getvalue().splitlines() == [
        "   -inf │████ 2",
        "  0.000 │██ 1",
        "  1.500 │ 0",
        "    inf │ 0",
    ]


def test_render_buckets_partial_bar():
    buckets = [Bucket(lower=0.0, upper=1.0, count=3), Bucket(lower=1.0, upper=2.0, count=2)]
    output = io.StringIO()
    render_buckets(buckets, 5, output)
    # 2/3 of 5 characters is 3.33: three full blocks and a quarter block.
    assert output.getvalue().splitlines()[1] == "  1.000 │███▎ 2"


def test_render_buckets_with_no_observations():
    output = io.StringIO()
    render_buckets([Bucket(lower=0.0, upper=1.0, count=0)], 10, output)
    assert output.getvalue().splitlines() == ["  0.000 │ 0", "  1.000 │ 0"]


def test_render_buckets_requires_buckets():
    with pytest.raises(ValueError):
        render_buckets([], 10, io.StringIO())
