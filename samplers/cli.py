"""Command-line entry point for sampling distributions and summarising streams."""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from dataclasses import dataclass
from typing import IO, Callable, Dict, List, Optional

from . import __version__
from . import distributions
from .errors import InsufficientDataError, SamplersError
from .histogram import Histogram
from .input_reader import is_interactive, iter_values, read_values
from .render import render_buckets, render_summary
from .summary_statistics import DistributionSummary, mean, variance

logger = logging.getLogger(__name__)

STDIN_HELP = "This reads from stdin. You can terminate stdin with CTRL+D."


@dataclass
class Streams:
    stdin: IO[str]
    stdout: IO[str]
    stderr: IO[str]

    @property
    def interactive_input(self) -> bool:
        return is_interactive(self.stdin)

    @property
    def interactive_output(self) -> bool:
        return is_interactive(self.stdout)


def _add_num_experiments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-N",
        "--num-experiments",
        type=int,
        default=1,
        metavar="COUNT",
        help="The number of experiments to perform (default: 1).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="samplers",
        description=(
            "Sample from common distributions and calculate summary statistics "
            "from the command line."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Log level for diagnostic output written to stderr.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random number generator used by the samplers.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    gaussian = subparsers.add_parser("gaussian", help="Sample from a normal distribution N(μ, σ²).")
    _add_num_experiments(gaussian)
    gaussian.add_argument(
        "-m", "--mean", type=float, default=0.0, help="The mean of the normal random variable, μ."
    )
    gaussian.add_argument(
        "-v",
        "--variance",
        type=float,
        default=1.0,
        help="The variance of the normal random variable, σ².",
    )

    poisson = subparsers.add_parser("poisson", help="Sample from a Poisson distribution Pois(λ).")
    _add_num_experiments(poisson)
    poisson.add_argument(
        "-l",
        "--lambda",
        dest="lam",
        type=float,
        default=1.0,
        help="The mean and variance of the Poisson random variable, λ.",
    )

    exponential = subparsers.add_parser(
        "exponential", help="Sample from an exponential distribution Exp(λ)."
    )
    _add_num_experiments(exponential)
    exponential.add_argument(
        "-l",
        "--lambda",
        dest="lam",
        type=float,
        default=1.0,
        help="The rate of the exponential random variable, λ.",
    )

    uniform = subparsers.add_parser(
        "uniform",
        help="Sample from a uniform distribution Uniform(a, b).",
        epilog=(
            "A continuous uniform distribution is sampled over [lower, upper), while a "
            "discrete uniform distribution is sampled over {lower, lower+1, ..., upper}."
        ),
    )
    _add_num_experiments(uniform)
    uniform.add_argument(
        "-a", "--lower", default="0", help="The lower bound of the uniform random variable."
    )
    uniform.add_argument(
        "-b", "--upper", default="1", help="The upper bound of the uniform random variable."
    )
    uniform.add_argument(
        "-t",
        "--type",
        choices=["continuous", "discrete"],
        default="continuous",
        help="Whether to use a continuous or discrete uniform distribution.",
    )

    binomial = subparsers.add_parser("binomial", help="Sample from a binomial distribution Bin(n, p).")
    _add_num_experiments(binomial)
    binomial.add_argument(
        "-n",
        "--num-trials",
        type=int,
        default=1,
        help="The number of independent trials to perform.",
    )
    binomial.add_argument(
        "-p",
        "--probability",
        type=float,
        default=0.5,
        help="The probability of success for each trial.",
    )

    subparsers.add_parser(
        "summarize",
        help="Calculate basic summary statistics.",
        epilog=(
            f"{STDIN_HELP} Summary statistics are computed in a single pass with a "
            "constant amount of additional memory."
        ),
    )

    histogram = subparsers.add_parser(
        "histogram",
        help="Display a histogram of given values.",
        epilog=(
            f"{STDIN_HELP} If the output is being piped, the input is duplicated to "
            "stdout and the histogram is printed to stderr instead. If both --min and "
            "--max are provided the histogram is computed in a single pass."
        ),
    )
    histogram.add_argument("--min", type=float, help="The lowest boundary in the histogram.")
    histogram.add_argument("--max", type=float, help="The highest boundary in the histogram.")
    histogram.add_argument(
        "-b",
        "--num-buckets",
        type=int,
        default=15,
        help="The number of buckets in the histogram (default: 15).",
    )
    histogram.add_argument(
        "-d",
        "--display-size",
        type=int,
        default=80,
        help="The width of the histogram in the terminal (default: 80).",
    )

    subparsers.add_parser("mean", help="Calculate the mean of given values.", epilog=STDIN_HELP)

    variance_parser = subparsers.add_parser(
        "variance", help="Calculate the variance of given values.", epilog=STDIN_HELP
    )
    variance_parser.add_argument(
        "-t",
        "--type",
        choices=["population", "sample"],
        default="population",
        help="Whether to compute the population or the sample variance.",
    )
    return parser


# ---------------------------------------------------------------------------
# Sampling commands
# ---------------------------------------------------------------------------


def _print_samples(samples, count: int, streams: Streams) -> None:
    for value in itertools.islice(samples, count):
        streams.stdout.write(f"{value}\n")


def run_gaussian(args: argparse.Namespace, streams: Streams) -> None:
    rng = distributions.make_rng(args.seed)
    _print_samples(distributions.gaussian(args.mean, args.variance, rng), args.num_experiments, streams)


def run_poisson(args: argparse.Namespace, streams: Streams) -> None:
    rng = distributions.make_rng(args.seed)
    _print_samples(distributions.poisson(args.lam, rng), args.num_experiments, streams)


def run_exponential(args: argparse.Namespace, streams: Streams) -> None:
    rng = distributions.make_rng(args.seed)
    _print_samples(distributions.exponential(args.lam, rng), args.num_experiments, streams)


def run_uniform(args: argparse.Namespace, streams: Streams) -> None:
    rng = distributions.make_rng(args.seed)
    if args.type == "discrete":
        samples = distributions.discrete_uniform(int(args.lower), int(args.upper), rng)
    else:
        samples = distributions.continuous_uniform(float(args.lower), float(args.upper), rng)
    _print_samples(samples, args.num_experiments, streams)


def run_binomial(args: argparse.Namespace, streams: Streams) -> None:
    rng = distributions.make_rng(args.seed)
    samples = distributions.binomial(args.num_trials, args.probability, rng)
    _print_samples(samples, args.num_experiments, streams)


# ---------------------------------------------------------------------------
# Statistics commands
# ---------------------------------------------------------------------------


def run_summarize(args: argparse.Namespace, streams: Streams) -> None:
    summary = DistributionSummary()
    if streams.interactive_input:
        logger.debug("Reading values interactively")
        for value in iter_values(streams.stdin):
            summary.observe(value)
    else:
        summary.observe_many(read_values(streams.stdin))
    streams.stdout.write(render_summary(summary) + "\n")


def run_histogram(args: argparse.Namespace, streams: Streams) -> None:
    tee = not streams.interactive_output

    if args.min is not None and args.max is not None:
        logger.debug("Computing histogram in a single pass")
        histogram = Histogram.with_bounds(args.min, args.max, args.num_buckets)
        for value in iter_values(streams.stdin):
            if tee:
                streams.stdout.write(f"{value}\n")
            histogram.observe(value)
    else:
        values = read_values(streams.stdin)
        if tee:
            for value in values:
                streams.stdout.write(f"{value}\n")
        summary = DistributionSummary()
        summary.observe_many(values)
        minimum = args.min if args.min is not None else summary.min
        maximum = args.max if args.max is not None else summary.max
        if minimum is None:
            raise InsufficientDataError("min")
        if maximum is None:
            raise InsufficientDataError("max")
        histogram = Histogram.with_bounds(minimum, maximum, args.num_buckets)
        histogram.observe_many(values)

    logger.debug("Histogram observed %d values", histogram.total)
    output = streams.stderr if tee else streams.stdout
    render_buckets(histogram.collect(), args.display_size, output)


def run_mean(args: argparse.Namespace, streams: Streams) -> None:
    if streams.interactive_input:
        result = mean(iter_values(streams.stdin))
    else:
        result = mean(read_values(streams.stdin))
    streams.stdout.write(f"{result}\n")


def run_variance(args: argparse.Namespace, streams: Streams) -> None:
    if streams.interactive_input:
        population, sample = variance(iter_values(streams.stdin))
    else:
        population, sample = variance(read_values(streams.stdin))
    result = population if args.type == "population" else sample
    streams.stdout.write(f"{result}\n")


COMMANDS: Dict[str, Callable[[argparse.Namespace, Streams], None]] = {
    "gaussian": run_gaussian,
    "poisson": run_poisson,
    "exponential": run_exponential,
    "uniform": run_uniform,
    "binomial": run_binomial,
    "summarize": run_summarize,
    "histogram": run_histogram,
    "mean": run_mean,
    "variance": run_variance,
}


def _validate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if getattr(args, "num_experiments", 0) < 0:
        parser.error("--num-experiments must not be negative.")
    if args.command == "histogram":
        if args.num_buckets <= 0:
            parser.error("--num-buckets must be greater than 0.")
        if args.display_size <= 0:
            parser.error("--display-size must be greater than 0.")
    if args.command == "uniform":
        converter = int if args.type == "discrete" else float
        for name in ("lower", "upper"):
            try:
                converter(getattr(args, name))
            except ValueError:
                parser.error(f"--{name} must be a valid {args.type} bound: {getattr(args, name)!r}")


def main(argv: Optional[List[str]] = None, streams: Optional[Streams] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))
    _validate(parser, args)

    if streams is None:
        streams = Streams(stdin=sys.stdin, stdout=sys.stdout, stderr=sys.stderr)

    try:
        COMMANDS[args.command](args, streams)
    except (SamplersError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
