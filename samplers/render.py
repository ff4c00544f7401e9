"""Text rendering for summaries and histogram buckets."""

from __future__ import annotations

import math
from typing import IO, Optional, Sequence

from .histogram import Bucket
from .summary_statistics import DistributionSummary

FULL_BLOCK = "█"
# Eighth-width blocks, from one eighth to seven eighths.
PARTIAL_BLOCKS = ("▏", "▎", "▍", "▌", "▋", "▊", "▉")

SUMMARY_FIELDS = (
    ("Count", "count"),
    ("Minimum", "min"),
    ("Maximum", "max"),
    ("Mean", "mean"),
    ("Variance", "variance"),
    ("Standard deviation", "standard_deviation"),
    ("Skewness", "skewness"),
    ("Kurtosis", "kurtosis"),
    ("Population variance", "population_variance"),
    ("Population standard deviation", "population_standard_deviation"),
    ("Population skewness", "population_skewness"),
    ("Population kurtosis", "population_kurtosis"),
)


def format_value(value: Optional[float]) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "NaN"
    return str(value)


def render_summary(summary: DistributionSummary) -> str:
    return "\n".join(
        f"{label}: {format_value(getattr(summary, attribute))}"
        for label, attribute in SUMMARY_FIELDS
    )


def fraction_bar(fraction: float) -> str:
    """Return the partial block glyph for the fractional part of a bar."""
    for eighths in range(7, 0, -1):
        if fraction > eighths / 8:
            return PARTIAL_BLOCKS[eighths - 1]
    return ""


def render_buckets(buckets: Sequence[Bucket], display_size: int, output: IO[str]) -> None:
    if not buckets:
        raise ValueError("cannot render a histogram without buckets")

    max_count = max(bucket.count for bucket in buckets)
    for bucket in buckets:
        proportion = bucket.count / max_count if max_count else 0.0
        num_chars = display_size * proportion
        whole = math.floor(num_chars)
        bar = FULL_BLOCK * whole + fraction_bar(num_chars - whole)
        output.write(f"{bucket.lower:>7.3f} │{bar} {bucket.count}\n")
    output.write(f"{buckets[-1].upper:>7.3f} │ 0\n")


__all__ = [
    "SUMMARY_FIELDS",
    "format_value",
    "render_summary",
    "fraction_bar",
    "render_buckets",
]
