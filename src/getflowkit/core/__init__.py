"""Core layer: the Result type, its combinators, and the domain error family.

This layer depends only on the standard library.
It must never import from validation, config, commands, or output.
"""

from getflowkit.core.aggregate import collect, combine, first_success
from getflowkit.core.async_result import flat_map_async, get_or_else_async, map_async
from getflowkit.core.errors import (
    AuthError,
    DomainError,
    NetworkError,
    SupportsDomainError,
    ValidationError,
)
from getflowkit.core.repository import Repository
from getflowkit.core.result import (
    Failure,
    Result,
    Success,
    failure,
    fold,
    is_failure,
    is_success,
    success,
)
from getflowkit.core.use_case import AsyncUseCase, UseCase, attempt, attempt_async

__all__ = [
    "AsyncUseCase",
    "AuthError",
    "DomainError",
    "Failure",
    "NetworkError",
    "Repository",
    "Result",
    "Success",
    "SupportsDomainError",
    "UseCase",
    "ValidationError",
    "attempt",
    "attempt_async",
    "collect",
    "combine",
    "failure",
    "first_success",
    "flat_map_async",
    "fold",
    "get_or_else_async",
    "is_failure",
    "is_success",
    "map_async",
    "success",
]
