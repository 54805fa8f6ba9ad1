"""EscrowService — placeholder escrow records.

Only allocates an id and stores ``{from, to}``. There is no locking,
release, timeout, or dispute logic; *amount* is validated and ignored.
"""

from __future__ import annotations

from quickex.domain.identity import validate_identity
from quickex.services._helpers import invalid_input, now_iso
from quickex.services.base import BaseService
from quickex.services.result import ServiceError, ServiceResult
from quickex.services.telemetry import traced

_U64_MAX = 2**64 - 1


class EscrowService(BaseService):
    @traced
    def create_escrow(self, from_: str, to: str, amount: int) -> ServiceResult:
        """Store a new escrow record and return its id (ids start at 1)."""
        op = "create_escrow"
        try:
            validate_identity(from_)
            validate_identity(to)
        except ValueError as exc:
            return invalid_input(op, str(exc))
        if not 0 <= amount <= _U64_MAX:
            return invalid_input(op, f"Amount out of unsigned 64-bit range: {amount}")

        with self._ledger.transaction() as txn:
            escrow_id = txn.insert_escrow(from_, to, now_iso())

        return ServiceResult(ok=True, op=op, data={"id": escrow_id, "from": from_, "to": to})

    @traced
    def get_escrow(self, escrow_id: int) -> ServiceResult:
        op = "get_escrow"
        with self._ledger.transaction() as txn:
            record = txn.get_escrow(escrow_id)
        if record is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="ESCROW_NOT_FOUND",
                    message=f"No escrow with id {escrow_id}",
                    detail={"id": escrow_id},
                ),
            )
        return ServiceResult(ok=True, op=op, data=record)
