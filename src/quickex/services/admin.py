"""AdminService — the admin/pause state machine.

``initialize`` bootstraps the singleton exactly once. ``set_paused`` and
``set_admin`` are privileged writes: each call loads the singleton,
asks the ledger's authorizer to authenticate the caller, and compares
the caller with the stored administrator. All checks happen before any
write, so a rejected call leaves state untouched. The ledger opens every
transaction with an immediate write lock, and each write touches only
its own column, so an administrator check cannot go stale before the
write that depends on it.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from quickex.domain.admin import AdminState, ContractError, contract_state
from quickex.domain.events import AdminChanged, ContractPaused
from quickex.domain.identity import validate_identity
from quickex.infrastructure.ledger import LedgerTransaction
from quickex.services._helpers import contract_failure, invalid_input, now_iso
from quickex.services.base import BaseService
from quickex.services.result import ServiceResult
from quickex.services.telemetry import traced

logger = logging.getLogger(__name__)


class AdminService(BaseService):
    """Initialize, pause/unpause, and transfer administrative rights."""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _authorize(
        self, txn: LedgerTransaction, op: str, caller: str
    ) -> AdminState | ServiceResult:
        """Load the singleton and check *caller* against it.

        Returns the current state on success, or a failed ServiceResult.
        """
        state = txn.load_admin_state()
        if state is None:
            return contract_failure(
                op, ContractError.NOT_INITIALIZED, "Contract has not been initialized"
            )
        if not self._ledger.require_auth(caller):
            logger.debug("%s rejected: %s not authenticated", op, caller)
            return contract_failure(
                op,
                ContractError.UNAUTHORIZED,
                f"Caller {caller} is not authenticated",
                caller=caller,
            )
        if not state.is_administrator(caller):
            logger.debug("%s rejected: %s is not the administrator", op, caller)
            return contract_failure(
                op,
                ContractError.UNAUTHORIZED,
                f"Caller {caller} is not the administrator",
                caller=caller,
            )
        return state

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def initialize(self, admin: str) -> ServiceResult:
        """Create the admin singleton with *admin* and ``paused = False``."""
        op = "initialize"
        try:
            validate_identity(admin)
        except ValueError as exc:
            return invalid_input(op, str(exc), field="admin")

        state = AdminState(administrator=admin, paused=False)
        try:
            with self._ledger.transaction() as txn:
                existing = txn.load_admin_state()
                if existing is not None:
                    return contract_failure(
                        op,
                        ContractError.ALREADY_INITIALIZED,
                        "Contract is already initialized",
                        administrator=existing.administrator,
                    )
                txn.insert_admin_state(state, now_iso())
        except IntegrityError:
            # Lost a race with a concurrent initialize; the singleton key rejected us.
            return contract_failure(
                op, ContractError.ALREADY_INITIALIZED, "Contract is already initialized"
            )

        logger.debug("Initialized contract with administrator %s", admin)
        return ServiceResult(
            ok=True,
            op=op,
            data={"administrator": admin, "paused": False},
        )

    @traced
    def set_paused(self, caller: str, new_state: bool) -> ServiceResult:
        """Set the paused flag. Administrator only; idempotent."""
        op = "set_paused"
        with self._ledger.transaction() as txn:
            checked = self._authorize(txn, op, caller)
            if isinstance(checked, ServiceResult):
                return checked
            txn.save_paused(new_state, now_iso())

        warnings: list[str] = []
        timestamp = self._ledger.timestamp()
        self._publish(ContractPaused(paused=new_state, timestamp=timestamp), warnings)

        return ServiceResult(
            ok=True,
            op=op,
            data={"paused": new_state, "timestamp": timestamp},
            warnings=warnings,
        )

    @traced
    def set_admin(self, caller: str, new_admin: str) -> ServiceResult:
        """Transfer administrative rights from *caller* to *new_admin*.

        The former administrator loses every capability as soon as this
        transaction commits.
        """
        op = "set_admin"
        try:
            validate_identity(new_admin)
        except ValueError as exc:
            return invalid_input(op, str(exc), field="new_admin")

        with self._ledger.transaction() as txn:
            checked = self._authorize(txn, op, caller)
            if isinstance(checked, ServiceResult):
                return checked
            old_admin = checked.administrator
            txn.save_administrator(new_admin, now_iso())

        warnings: list[str] = []
        timestamp = self._ledger.timestamp()
        self._publish(
            AdminChanged(old_admin=old_admin, new_admin=new_admin, timestamp=timestamp),
            warnings,
        )

        return ServiceResult(
            ok=True,
            op=op,
            data={"old_admin": old_admin, "new_admin": new_admin, "timestamp": timestamp},
            warnings=warnings,
        )

    @traced
    def status(self) -> ServiceResult:
        """Report lifecycle state, administrator, and paused flag."""
        with self._ledger.transaction() as txn:
            state = txn.load_admin_state()
        return ServiceResult(
            ok=True,
            op="admin_status",
            data={
                "state": contract_state(state).value,
                "administrator": state.administrator if state else None,
                "paused": state.paused if state else False,
            },
        )

    # ------------------------------------------------------------------
    # Pure reads
    # ------------------------------------------------------------------

    def is_paused(self) -> bool:
        """Whether the contract is paused (False before ``initialize``)."""
        with self._ledger.transaction() as txn:
            state = txn.load_admin_state()
        return state.paused if state is not None else False

    def get_admin(self) -> str | None:
        """The current administrator, or None before ``initialize``."""
        with self._ledger.transaction() as txn:
            state = txn.load_admin_state()
        return state.administrator if state is not None else None
