"""Tests for PrivacyService."""

import pytest

from quickex.infrastructure.ledger import Ledger
from quickex.services.privacy import PrivacyService


@pytest.fixture
def service(ledger: Ledger) -> PrivacyService:
    return PrivacyService(ledger)


class TestPrivacyFlags:
    def test_default_is_false(self, service: PrivacyService, admin_id: str) -> None:
        assert service.get_privacy(admin_id) is False

    def test_enable_then_disable(self, service: PrivacyService, admin_id: str) -> None:
        result = service.set_privacy(admin_id, True)
        assert result.ok
        assert result.data == {"owner": admin_id, "enabled": True, "timestamp": 1_700_000_000}
        assert service.get_privacy(admin_id) is True

        service.set_privacy(admin_id, False)
        assert service.get_privacy(admin_id) is False

    def test_flags_are_per_owner(
        self, service: PrivacyService, admin_id: str, other_id: str
    ) -> None:
        service.set_privacy(admin_id, True)
        assert service.get_privacy(other_id) is False

    def test_show_privacy(self, service: PrivacyService, admin_id: str) -> None:
        service.set_privacy(admin_id, True)
        result = service.show_privacy(admin_id)
        assert result.op == "get_privacy"
        assert result.data == {"owner": admin_id, "enabled": True}

    def test_invalid_owner(self, service: PrivacyService) -> None:
        result = service.set_privacy("", True)
        assert not result.ok
        assert result.error.code == "INVALID_INPUT"


class TestPrivacyEvents:
    def test_each_set_emits_event(self, evented_ledger: Ledger, observer, admin_id: str) -> None:
        service = PrivacyService(evented_ledger)
        service.set_privacy(admin_id, True)
        service.set_privacy(admin_id, True)
        assert observer.calls == [
            ("privacy_toggled", {"owner": admin_id, "enabled": True, "timestamp": 1_700_000_000}),
            ("privacy_toggled", {"owner": admin_id, "enabled": True, "timestamp": 1_700_000_000}),
        ]
