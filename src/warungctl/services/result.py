"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: every public service method returns a ServiceResult.  Failures
are carried in ``error``; services never raise to the command layer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is one of ``DOCUMENT_ERROR``, ``UNKNOWN_SKIN``, ``BAD_EVENT``,
    ``EMPTY_CART``, ``BELOW_MINIMUM_ORDER`` or ``WORKSPACE_EXISTS``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"render"``, ``"checkout"``, ...).
        data: Operation-specific payload.  Failed checkouts keep the cart
            here so callers can show what was rejected.
        warnings: Non-fatal issues, including validation findings.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (paths, counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    """Shorthand for a failed result with no payload."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
