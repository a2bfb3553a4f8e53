"""Combinators over a pending Result (an awaitable that yields a Result).

Each helper awaits the input exactly once, then applies the synchronous
rule from :mod:`getflowkit.core.result`. No extra tasks are scheduled.
An exception raised by a transform propagates to the awaiting caller, and
cancellation of the input surfaces unchanged.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from getflowkit.core.errors import SupportsDomainError
from getflowkit.core.result import Failure, Result, Success


async def map_async[T, E: SupportsDomainError, R](
    pending: Awaitable[Result[T, E]],
    transform: Callable[[T], R],
) -> Result[R, E]:
    """Await *pending*, then :meth:`~Success.map` it with *transform*."""
    result = await pending
    return result.map(transform)


async def flat_map_async[T, E: SupportsDomainError, R](
    pending: Awaitable[Result[T, E]],
    transform: Callable[[T], Awaitable[Result[R, E]]],
) -> Result[R, E]:
    """Await *pending*, then await *transform* on its value.

    A Failure short-circuits: *transform* is never called.
    """
    result = await pending
    match result:
        case Success(value):
            return await transform(value)
        case Failure():
            return result


async def get_or_else_async[T, E: SupportsDomainError](
    pending: Awaitable[Result[T, E]],
    default: Callable[[], T],
) -> T:
    """Await *pending* and unwrap it, calling *default* only on Failure."""
    result = await pending
    return result.get_or_else(default)
