"""Utilities operating over sequences of Results."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from getflowkit.core.errors import SupportsDomainError
from getflowkit.core.result import Failure, Result, Success


def combine[T, E: SupportsDomainError, R](
    results: Iterable[Result[T, E]],
    combiner: Callable[[list[T]], R],
) -> Result[R, E]:
    """Combine *results* into one value when every element succeeded.

    Iterates left to right and returns the first Failure as soon as it is
    seen; later elements are not consumed and *combiner* is not called.
    Otherwise returns ``Success(combiner(values))`` with values in input
    order.
    """
    values: list[T] = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure():
                return result
    return Success(combiner(values))


def collect[T, E: SupportsDomainError](
    results: Iterable[Result[T, E]],
) -> Result[list[T], E]:
    """Gather all success values into a list, or return the first Failure."""
    return combine(results, list)


def first_success[T, E: SupportsDomainError](
    results: Iterable[Result[T, E]],
    on_all_failed: Callable[[], E],
) -> Result[T, E]:
    """Return the first Success in *results*.

    *on_all_failed* is called only when no element succeeded (including
    when *results* is empty).
    """
    for result in results:
        if result.is_success:
            return result
    return Failure(on_all_failed())
