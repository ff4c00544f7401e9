"""Streaming summary statistics, histograms and distribution samplers."""

__version__ = "0.2.0"

from .errors import (
    ClassificationError,
    InsufficientDataError,
    ParseError,
    SamplersError,
)
from .observer import Observer, observe_all
from .summary_statistics import DistributionSummary, MomentsAccumulator, mean, variance
from .histogram import Bucket, Histogram, linear_boundaries
from .input_reader import is_interactive, iter_values, parse_value, read_values
from .render import format_value, render_buckets, render_summary
from .distributions import (
    binomial,
    continuous_uniform,
    discrete_uniform,
    exponential,
    gaussian,
    make_rng,
    poisson,
    standard_gaussian,
    take,
)

__all__ = [
    "__version__",
    "SamplersError",
    "ClassificationError",
    "ParseError",
    "InsufficientDataError",
    "Observer",
    "observe_all",
    "MomentsAccumulator",
    "DistributionSummary",
    "mean",
    "variance",
    "Bucket",
    "Histogram",
    "linear_boundaries",
    "parse_value",
    "iter_values",
    "read_values",
    "is_interactive",
    "format_value",
    "render_summary",
    "render_buckets",
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
