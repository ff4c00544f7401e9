"""Line-oriented reader turning a text stream into float observations."""

from __future__ import annotations

import logging
from typing import IO, Iterator, List, Optional

from .errors import ParseError

logger = logging.getLogger(__name__)


def parse_value(line: str, line_number: Optional[int] = None) -> float:
    text = line.strip()
    try:
        return float(text)
    except ValueError as exc:
        raise ParseError(text, line_number) from exc


def iter_values(stream: IO[str]) -> Iterator[float]:
    """Yield one float per non-blank line, raising on the first bad line."""

    for line_number, line in enumerate(stream, 1):
        if not line.strip():
            continue
        yield parse_value(line, line_number)


def read_values(stream: IO[str]) -> List[float]:
    """Eagerly read every value; used when the input must be traversed twice."""

    values = list(iter_values(stream))
    logger.debug("Read %d values from input", len(values))
    return values


def is_interactive(stream: IO[str]) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed streams raise instead of answering.
        return False


__all__ = ["parse_value", "iter_values", "read_values", "is_interactive"]
