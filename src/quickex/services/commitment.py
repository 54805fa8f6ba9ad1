"""CommitmentService — amount commitments at the service boundary.

Thin wrapper over :mod:`quickex.domain.commitment`. Nothing is persisted:
callers keep and transmit the digest themselves. Digests travel as
lowercase hex in ``ServiceResult.data``.
"""

from __future__ import annotations

from quickex.domain import commitment as scheme
from quickex.domain.identity import validate_identity
from quickex.services._helpers import invalid_input
from quickex.services.base import BaseService
from quickex.services.result import ServiceResult
from quickex.services.telemetry import traced


class CommitmentService(BaseService):
    """Create and verify amount commitments."""

    @traced
    def create_amount_commitment(self, owner: str, amount: int, salt: bytes) -> ServiceResult:
        op = "create_amount_commitment"
        try:
            validate_identity(owner)
            digest = scheme.create_amount_commitment(owner, amount, salt)
        except ValueError as exc:
            return invalid_input(op, str(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data={"commitment": digest.hex(), "owner": owner},
        )

    @traced
    def verify_amount_commitment(
        self, commitment: bytes, owner: str, amount: int, salt: bytes
    ) -> ServiceResult:
        """Verify *commitment*. A mismatch is ``valid: False``, never an error."""
        valid = scheme.verify_amount_commitment(commitment, owner, amount, salt)
        return ServiceResult(
            ok=True,
            op="verify_amount_commitment",
            data={"valid": valid, "commitment": bytes(commitment).hex(), "owner": owner},
        )
