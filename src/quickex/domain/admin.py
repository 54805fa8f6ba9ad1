"""Admin/pause state machine model.

States::

    UNINITIALIZED --initialize--> ACTIVE(admin, paused=False)
    ACTIVE(admin, paused) --set_paused--> ACTIVE(admin, paused')
    ACTIVE(admin, paused) --set_admin--> ACTIVE(admin', paused)

INVARIANT: There is never more than one AdminState. Absence of the
singleton (``None``) is the UNINITIALIZED state.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ContractState(StrEnum):
    """Lifecycle states of the admin singleton."""

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"


class ContractError(StrEnum):
    """Enumerable contract failures, surfaced as ``ServiceError.code``."""

    ALREADY_INITIALIZED = "ALREADY_INITIALIZED"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_INITIALIZED = "NOT_INITIALIZED"

    @property
    def number(self) -> int:
        """Stable numeric contract code for off-process clients."""
        return CONTRACT_ERROR_NUMBERS[self]


CONTRACT_ERROR_NUMBERS: dict[ContractError, int] = {
    ContractError.ALREADY_INITIALIZED: 1,
    ContractError.UNAUTHORIZED: 2,
    ContractError.NOT_INITIALIZED: 3,
}


class AdminState(BaseModel):
    """The singleton ``{administrator, paused}`` record."""

    model_config = {"frozen": True}

    administrator: str
    paused: bool = False

    def is_administrator(self, identity: str) -> bool:
        return identity == self.administrator


def contract_state(state: AdminState | None) -> ContractState:
    """Map the optional singleton to its lifecycle state."""
    return ContractState.UNINITIALIZED if state is None else ContractState.ACTIVE
