"""Exception hierarchy shared by the accumulators, input reader and CLI."""

from __future__ import annotations

from typing import Optional


class SamplersError(Exception):
    """Base class for errors raised by the samplers package."""


class ClassificationError(SamplersError):
    """Raised when a value cannot be assigned to any histogram bucket."""

    def __init__(self, value: float) -> None:
        super().__init__(f"Could not observe value: {value}")
        self.value = value


class ParseError(SamplersError, ValueError):
    """Raised when an input line is not a valid floating point literal."""

    def __init__(self, text: str, line_number: Optional[int] = None) -> None:
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}could not parse {text!r} as a float")
        self.text = text
        self.line_number = line_number


class InsufficientDataError(SamplersError):
    """Raised by callers that need a statistic the accumulator cannot provide yet."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Could not calculate summary statistic: {name}")
        self.name = name


__all__ = [
    "SamplersError",
    "ClassificationError",
    "ParseError",
    "InsufficientDataError",
]
