"""Domain error family carried by Failure results.

A domain error is anything exposing an optional ``message``, an optional
HTTP ``status`` and an optional numeric ``status_code``. The host
application may supply its own types; :class:`DomainError` is the
concrete base used throughout getflowkit.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsDomainError(Protocol):
    """Capability required of every error stored in a Failure."""

    @property
    def message(self) -> str | None: ...

    @property
    def status(self) -> HTTPStatus | None: ...

    @property
    def status_code(self) -> int | None: ...


def _resolve_status(
    status: HTTPStatus | None, status_code: int | None
) -> tuple[HTTPStatus | None, int | None]:
    """Fill in whichever of *status* / *status_code* is missing."""
    if status is not None and status_code is None:
        return status, int(status)
    if status is None and status_code is not None:
        try:
            return HTTPStatus(status_code), status_code
        except ValueError:
            return None, status_code
    return status, status_code


class DomainError(Exception):
    """Base class for all getflowkit domain errors.

    Purely descriptive: it carries data and has no behaviour. It derives
    from :class:`Exception` so adapters may raise it and have
    :func:`~getflowkit.core.use_case.attempt` fold it into a Failure.
    """

    default_status: HTTPStatus | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        status: HTTPStatus | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message or "")
        if status is None and status_code is None:
            status = self.default_status
        self._message = message
        self._status, self._status_code = _resolve_status(status, status_code)

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def status(self) -> HTTPStatus | None:
        return self._status

    @property
    def status_code(self) -> int | None:
        return self._status_code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self._message!r}, "
            f"status_code={self._status_code!r})"
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash((type(self), self._message, self._status_code))


class NetworkError(DomainError):
    """A transport or HTTP call failed."""


class AuthError(DomainError):
    """Authentication or authorization was refused."""

    default_status = HTTPStatus.UNAUTHORIZED


class ValidationError(DomainError):
    """User input was rejected by a validator.

    Attributes:
        field: Name of the rejected input, if known.
    """

    default_status = HTTPStatus.UNPROCESSABLE_ENTITY

    def __init__(
        self,
        message: str | None = None,
        *,
        field: str | None = None,
        status: HTTPStatus | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status=status, status_code=status_code)
        self.field = field

    def __hash__(self) -> int:
        return hash((type(self), self._message, self._status_code, self.field))
