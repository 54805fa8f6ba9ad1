"""Tests for the admin state model and contract error codes."""

import pytest

from quickex.domain.admin import (
    AdminState,
    ContractError,
    ContractState,
    contract_state,
)


class TestAdminState:
    def test_defaults_unpaused(self) -> None:
        state = AdminState(administrator="GADMIN")
        assert state.paused is False

    def test_is_administrator_exact_match(self) -> None:
        state = AdminState(administrator="GADMIN")
        assert state.is_administrator("GADMIN")
        assert not state.is_administrator("gadmin")
        assert not state.is_administrator("GADMIN ")

    def test_frozen(self) -> None:
        state = AdminState(administrator="GADMIN")
        with pytest.raises(Exception):
            state.paused = True  # type: ignore[misc]


class TestContractState:
    def test_none_is_uninitialized(self) -> None:
        assert contract_state(None) is ContractState.UNINITIALIZED

    def test_present_is_active(self) -> None:
        assert contract_state(AdminState(administrator="GADMIN")) is ContractState.ACTIVE


class TestContractError:
    @pytest.mark.parametrize(
        ("error", "number"),
        [
            (ContractError.ALREADY_INITIALIZED, 1),
            (ContractError.UNAUTHORIZED, 2),
            (ContractError.NOT_INITIALIZED, 3),
        ],
    )
    def test_numbers_are_stable(self, error: ContractError, number: int) -> None:
        assert error.number == number

    def test_codes_are_strings(self) -> None:
        assert ContractError.UNAUTHORIZED == "UNAUTHORIZED"
