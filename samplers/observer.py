"""Observer interface implemented by the streaming accumulators."""

from __future__ import annotations

from typing import Iterable, Protocol


class Observer(Protocol):
    def observe(self, value: float) -> None:  # pragma: no cover - protocol definition
        ...

    def observe_many(self, values: Iterable[float]) -> None:  # pragma: no cover - protocol definition
        ...


def observe_all(observer: Observer, values: Iterable[float]) -> int:
    """Feed ``values`` to ``observer`` in order, stopping at the first failure.

    Exceptions raised by ``observer.observe`` or by the iterable itself (for
    example a :class:`~samplers.errors.ParseError` from a lazy input stream)
    propagate unchanged. Returns the number of values observed.
    """

    observed = 0
    for value in values:
        observer.observe(value)
        observed += 1
    return observed


__all__ = ["Observer", "observe_all"]
