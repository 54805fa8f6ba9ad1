"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from quickex.domain.admin import ContractError
from quickex.services.result import ServiceError, ServiceResult


def now_iso() -> str:
    """Current UTC time as standard ISO 8601 (for audit columns)."""
    return datetime.now(UTC).isoformat()


def contract_failure(op: str, error: ContractError, message: str, **detail: Any) -> ServiceResult:
    """Build a failed ServiceResult for a contract error kind."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=error.value,
            message=message,
            detail={"contract_code": error.number, **detail},
        ),
    )


def invalid_input(op: str, message: str, **detail: Any) -> ServiceResult:
    """Build a failed ServiceResult for boundary validation errors."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="INVALID_INPUT", message=message, detail=detail),
    )
