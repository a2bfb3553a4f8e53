"""Report and ReportError: the CLI's view of a Result.

INVARIANT: Every command emits exactly one Report. The formatter layer
renders it for humans or as JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from getflowkit.core.errors import SupportsDomainError
from getflowkit.core.result import Failure, Result, Success


class ReportError(BaseModel):
    """Structured error payload within a Report."""

    model_config = {"frozen": True}

    code: str
    message: str
    status_code: int | None = None
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_error(cls, error: SupportsDomainError) -> ReportError:
        detail: dict[str, Any] = {}
        field = getattr(error, "field", None)
        if field is not None:
            detail["field"] = field
        return cls(
            code=type(error).__name__,
            message=error.message or "Unknown error",
            status_code=error.status_code,
            detail=detail,
        )


class Report(BaseModel):
    """Outcome of a single CLI operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"validate_jumin"``).
        data: Operation-specific payload.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ReportError | None = None

    @classmethod
    def from_result(
        cls,
        op: str,
        result: Result[Any, SupportsDomainError],
        *,
        data: dict[str, Any] | None = None,
    ) -> Report:
        """Build a Report from *result*; the success payload itself is not echoed."""
        match result:
            case Success():
                return cls(ok=True, op=op, data=data or {})
            case Failure(error):
                return cls(
                    ok=False,
                    op=op,
                    data=data or {},
                    error=ReportError.from_error(error),
                )
