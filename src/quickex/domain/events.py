"""Event payloads published on successful state transitions.

Each event has a name (its first topic), up to two indexed identity
topics, and a data body. ``hook_kwargs()`` is the keyword set handed to
the matching pluggy hook in :mod:`quickex.plugins.hookspecs`.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel


class ContractEvent(BaseModel):
    """Base class for published events."""

    model_config = {"frozen": True}

    name: ClassVar[str]
    hook_name: ClassVar[str]
    topic_fields: ClassVar[tuple[str, ...]] = ()

    timestamp: int

    def topics(self) -> list[str]:
        """Indexed identity values, in declaration order."""
        return [str(getattr(self, f)) for f in self.topic_fields]

    def data(self) -> dict[str, Any]:
        """Non-topic fields."""
        return self.model_dump(exclude=set(self.topic_fields))

    def hook_kwargs(self) -> dict[str, Any]:
        return self.model_dump()


class PrivacyToggled(ContractEvent):
    name: ClassVar[str] = "PrivacyToggled"
    hook_name: ClassVar[str] = "privacy_toggled"
    topic_fields: ClassVar[tuple[str, ...]] = ("owner",)

    owner: str
    enabled: bool


class ContractPaused(ContractEvent):
    name: ClassVar[str] = "ContractPaused"
    hook_name: ClassVar[str] = "contract_paused"

    paused: bool


class AdminChanged(ContractEvent):
    name: ClassVar[str] = "AdminChanged"
    hook_name: ClassVar[str] = "admin_changed"
    topic_fields: ClassVar[tuple[str, ...]] = ("old_admin", "new_admin")

    old_admin: str
    new_admin: str


EVENT_TYPES: dict[str, type[ContractEvent]] = {
    cls.name: cls for cls in (PrivacyToggled, ContractPaused, AdminChanged)
}
