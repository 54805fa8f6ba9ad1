"""Caller authentication supplied by the hosting boundary.

The contract core never verifies signatures itself. Before a privileged
write it asks the injected :class:`Authorizer` whether the asserted
caller identity has been proven by the current invocation, then compares
that identity with stored state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from quickex.config.models import AuthConfig

logger = logging.getLogger(__name__)


class Authorizer(Protocol):
    """Capability check: has *identity* been authenticated for this call?"""

    def require_auth(self, identity: str) -> bool: ...


class MockAllAuths:
    """Treat every asserted identity as authenticated (local networks, tests)."""

    def require_auth(self, identity: str) -> bool:
        return True


class SignerSetAuthorizer:
    """Authenticate only identities whose credentials the host holds."""

    def __init__(self, signers: Iterable[str]) -> None:
        self._signers = frozenset(signers)

    @property
    def signers(self) -> frozenset[str]:
        return self._signers

    def require_auth(self, identity: str) -> bool:
        ok = identity in self._signers
        if not ok:
            logger.debug("Authentication failed for %s", identity)
        return ok


def build_authorizer(config: AuthConfig) -> Authorizer:
    """Create the authorizer selected by the ``[auth]`` config section."""
    if config.mode == "signers":
        return SignerSetAuthorizer(config.signers)
    return MockAllAuths()
