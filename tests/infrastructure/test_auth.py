"""Tests for caller authorizers."""

from quickex.config.models import AuthConfig, AuthMode
from quickex.infrastructure.auth import MockAllAuths, SignerSetAuthorizer, build_authorizer


class TestMockAllAuths:
    def test_everyone_authenticated(self) -> None:
        assert MockAllAuths().require_auth("GANYONE") is True


class TestSignerSetAuthorizer:
    def test_only_signers_authenticated(self) -> None:
        auth = SignerSetAuthorizer(["GADMIN"])
        assert auth.require_auth("GADMIN") is True
        assert auth.require_auth("GOTHER") is False

    def test_signers_exposed(self) -> None:
        assert SignerSetAuthorizer(["A", "B"]).signers == frozenset({"A", "B"})


class TestBuildAuthorizer:
    def test_default_is_mock_all(self) -> None:
        assert isinstance(build_authorizer(AuthConfig()), MockAllAuths)

    def test_default_trusts_any_caller(self) -> None:
        auth = build_authorizer(AuthConfig())
        assert auth.require_auth("GADMIN")
        assert auth.require_auth("GANYONE")

    def test_signers_mode(self) -> None:
        auth = build_authorizer(AuthConfig(mode=AuthMode.SIGNERS, signers=["GADMIN"]))
        assert isinstance(auth, SignerSetAuthorizer)
        assert auth.require_auth("GADMIN")
        assert not auth.require_auth("GOTHER")
