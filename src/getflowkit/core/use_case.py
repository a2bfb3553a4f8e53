"""Application seams that produce Results.

:func:`attempt` and :func:`attempt_async` fold raised domain errors into
Failure values at the boundary between exception-raising adapters and
Result-returning application code. :class:`UseCase` and
:class:`AsyncUseCase` are the bases for single-operation application
services.

INVARIANT: Only the error kinds listed in ``catch`` are converted. Any
other exception propagates unchanged.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from getflowkit.core.errors import DomainError
from getflowkit.core.result import Failure, Result, Success

logger = logging.getLogger(__name__)

DEFAULT_CATCH: tuple[type[BaseException], ...] = (DomainError,)


def attempt[T](
    fn: Callable[..., T],
    *args: Any,
    catch: tuple[type[BaseException], ...] = DEFAULT_CATCH,
    **kwargs: Any,
) -> Result[T, Any]:
    """Call *fn* and wrap its return value in a Success.

    Exceptions that are instances of *catch* become a Failure holding the
    exception.
    """
    try:
        return Success(fn(*args, **kwargs))
    except catch as exc:
        return Failure(exc)


async def attempt_async[T](
    fn: Callable[..., Awaitable[T]],
    *args: Any,
    catch: tuple[type[BaseException], ...] = DEFAULT_CATCH,
    **kwargs: Any,
) -> Result[T, Any]:
    """Async counterpart of :func:`attempt`."""
    try:
        return Success(await fn(*args, **kwargs))
    except catch as exc:
        return Failure(exc)


class UseCase[P, T](ABC):
    """A single application operation returning ``Result[T, DomainError]``.

    Subclasses implement :meth:`execute`. They may either return a Result
    directly or raise a :class:`DomainError`; calling the use case runs
    :meth:`execute` through :func:`attempt`, which folds the latter into a
    Failure.

    Usage::

        class SignIn(UseCase[Credentials, Session]):
            def execute(self, params: Credentials) -> Result[Session, DomainError]:
                ...

        SignIn()(credentials).on_failure(show_error)
    """

    @abstractmethod
    def execute(self, params: P) -> Result[T, DomainError]:
        """Run the operation for *params*."""

    def __call__(self, params: P) -> Result[T, DomainError]:
        outcome = attempt(self.execute, params).flat_map(lambda result: result)
        return outcome.on_failure(self._log_failure)

    def _log_failure(self, error: DomainError) -> None:
        logger.debug("%s failed: %r", type(self).__name__, error)


class AsyncUseCase[P, T](ABC):
    """Async counterpart of :class:`UseCase`."""

    @abstractmethod
    async def execute(self, params: P) -> Result[T, DomainError]:
        """Run the operation for *params*."""

    async def __call__(self, params: P) -> Result[T, DomainError]:
        attempted = await attempt_async(self.execute, params)
        outcome = attempted.flat_map(lambda result: result)
        return outcome.on_failure(self._log_failure)

    def _log_failure(self, error: DomainError) -> None:
        logger.debug("%s failed: %r", type(self).__name__, error)
