"""Repository base for data-access adapters that speak Result.

Concrete repositories wrap a host-provided client (HTTP, local store, ...)
and expose Result-returning methods. The client may raise
:class:`~getflowkit.core.errors.DomainError`; :meth:`Repository._guard`
and :meth:`Repository._guard_async` turn those into Failures.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from getflowkit.core.errors import DomainError
from getflowkit.core.result import Result
from getflowkit.core.use_case import attempt, attempt_async

logger = logging.getLogger(__name__)


class Repository:
    """Base for all Result-returning data-access classes.

    Usage::

        class UserRepository(Repository):
            def __init__(self, client: ApiClient) -> None:
                self._client = client

            def get(self, uid: str) -> Result[User, DomainError]:
                return self._guard(self._client.fetch_user, uid)
    """

    def _guard[T](
        self, fn: Callable[..., T], *args: Any, **kwargs: Any
    ) -> Result[T, DomainError]:
        result = attempt(functools.partial(fn, *args, **kwargs))
        return result.on_failure(self._log_failure)

    async def _guard_async[T](
        self, fn: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any
    ) -> Result[T, DomainError]:
        result = await attempt_async(functools.partial(fn, *args, **kwargs))
        return result.on_failure(self._log_failure)

    def _log_failure(self, error: DomainError) -> None:
        logger.debug(
            "%s call failed (status=%s): %s",
            type(self).__name__,
            error.status_code,
            error.message,
        )
