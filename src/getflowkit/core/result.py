"""Result: the two-variant outcome type and its combinators.

A ``Result[T, E]`` is exactly one of:

- :class:`Success` holding a payload of type ``T``
- :class:`Failure` holding a domain error of type ``E``

INVARIANT: Results are immutable. Combinators never mutate; they return
either the receiver itself or a new Result. User callbacks are never
invoked on the branch that does not apply, so a chain short-circuits at
the first Failure.

Both variants support structural pattern matching::

    match fetch_user(uid):
        case Success(user):
            ...
        case Failure(error):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, assert_never

from getflowkit.core.errors import SupportsDomainError


@dataclass(slots=True, frozen=True)
class Success[T]:
    """Successful branch of a Result."""

    __match_args__ = ("value",)

    value: T

    # -- state --------------------------------------------------------

    @property
    def is_success(self) -> Literal[True]:
        return True

    @property
    def is_failure(self) -> Literal[False]:
        return False

    # -- extraction ---------------------------------------------------

    @property
    def value_or_none(self) -> T:
        return self.value

    def get_or_else(self, default: Callable[[], T]) -> T:
        return self.value

    def get_or_default(self, default: T) -> T:
        return self.value

    def fold[R](
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[Any], R],
    ) -> R:
        return on_success(self.value)

    def when[R](
        self,
        *,
        success: Callable[[T], R],
        failure: Callable[[Any], R],
    ) -> R:
        return success(self.value)

    # -- transformation -----------------------------------------------

    def map[R](self, transform: Callable[[T], R]) -> Success[R]:
        return Success(transform(self.value))

    def map_error(self, transform: Callable[[Any], Any]) -> Success[T]:
        return self

    def flat_map[R, E: SupportsDomainError](
        self, transform: Callable[[T], Result[R, E]]
    ) -> Result[R, E]:
        return transform(self.value)

    def and_then[R, E: SupportsDomainError](
        self, transform: Callable[[T], Result[R, E]]
    ) -> Result[R, E]:
        return self.flat_map(transform)

    def recover(self, recovery: Callable[[Any], T]) -> Success[T]:
        return self

    def recover_with(self, recovery: Callable[[Any], Result[T, Any]]) -> Success[T]:
        return self

    # -- side effects -------------------------------------------------

    def on_success(self, action: Callable[[T], object]) -> Success[T]:
        action(self.value)
        return self

    def on_failure(self, action: Callable[[Any], object]) -> Success[T]:
        return self

    # -- demotion -----------------------------------------------------

    def filter[E: SupportsDomainError](
        self, predicate: Callable[[T], bool], on_false: Callable[[], E]
    ) -> Result[T, E]:
        if predicate(self.value):
            return self
        return Failure(on_false())

    def where_not_none[E: SupportsDomainError](
        self, on_none: Callable[[], E]
    ) -> Result[T, E]:
        if self.value is None:
            return Failure(on_none())
        return self


@dataclass(slots=True, frozen=True)
class Failure[E: SupportsDomainError]:
    """Error branch of a Result."""

    __match_args__ = ("error",)

    error: E

    @property
    def is_success(self) -> Literal[False]:
        return False

    @property
    def is_failure(self) -> Literal[True]:
        return True

    @property
    def value_or_none(self) -> None:
        return None

    def get_or_else[T](self, default: Callable[[], T]) -> T:
        return default()

    def get_or_default[T](self, default: T) -> T:
        return default

    def fold[R](
        self,
        on_success: Callable[[Any], R],
        on_failure: Callable[[E], R],
    ) -> R:
        return on_failure(self.error)

    def when[R](
        self,
        *,
        success: Callable[[Any], R],
        failure: Callable[[E], R],
    ) -> R:
        return failure(self.error)

    def map(self, transform: Callable[[Any], Any]) -> Failure[E]:
        return self

    def map_error[F: SupportsDomainError](self, transform: Callable[[E], F]) -> Failure[F]:
        return Failure(transform(self.error))

    def flat_map(self, transform: Callable[[Any], Result[Any, E]]) -> Failure[E]:
        return self

    def and_then(self, transform: Callable[[Any], Result[Any, E]]) -> Failure[E]:
        return self

    def recover[T](self, recovery: Callable[[E], T]) -> Success[T]:
        return Success(recovery(self.error))

    def recover_with[T](self, recovery: Callable[[E], Result[T, E]]) -> Result[T, E]:
        return recovery(self.error)

    def on_success(self, action: Callable[[Any], object]) -> Failure[E]:
        return self

    def on_failure(self, action: Callable[[E], object]) -> Failure[E]:
        action(self.error)
        return self

    def filter(
        self, predicate: Callable[[Any], bool], on_false: Callable[[], E]
    ) -> Failure[E]:
        return self

    def where_not_none(self, on_none: Callable[[], E]) -> Failure[E]:
        return self


type Result[T, E: SupportsDomainError] = Success[T] | Failure[E]
"""Shared outcome type returned by fallible operations.

- T: payload type on success
- E: domain error type on failure, bounded by SupportsDomainError
"""


def success[T](value: T) -> Success[T]:
    """Build a Success wrapping *value*."""
    return Success(value)


def failure[E: SupportsDomainError](error: E) -> Failure[E]:
    """Build a Failure wrapping *error*."""
    return Failure(error)


def is_success(result: Result[Any, Any]) -> bool:
    return isinstance(result, Success)


def is_failure(result: Result[Any, Any]) -> bool:
    return isinstance(result, Failure)


def fold[T, E: SupportsDomainError, R](
    result: Result[T, E],
    on_success: Callable[[T], R],
    on_failure: Callable[[E], R],
) -> R:
    """Exhaustively dispatch on *result*; exactly one callback runs."""
    match result:
        case Success(value):
            return on_success(value)
        case Failure(error):
            return on_failure(error)
        case _:
            assert_never(result)


__all__ = [
    "Failure",
    "Result",
    "Success",
    "failure",
    "fold",
    "is_failure",
    "is_success",
    "success",
]
