"""Tests for output formatting across --json, --quiet, and human modes."""

import json

from quickex.output.formatters import OutputSettings, format_result
from quickex.services.result import ServiceError, ServiceResult

JSON = OutputSettings(json_output=True)
QUIET = OutputSettings(quiet=True)


def _ok(op: str, **data) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=data)


def _fail(op: str, code: str, message: str) -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code=code, message=message))


class TestJson:
    def test_full_result(self) -> None:
        out = json.loads(format_result(_ok("set_paused", paused=True), settings=JSON))
        assert out["ok"] is True
        assert out["op"] == "set_paused"
        assert out["data"] == {"paused": True}


class TestQuiet:
    def test_commitment_prints_digest(self) -> None:
        result = _ok("create_amount_commitment", commitment="ab" * 32, owner="G")
        assert format_result(result, settings=QUIET) == "ab" * 32

    def test_verify_prints_bool(self) -> None:
        result = _ok("verify_amount_commitment", valid=False, commitment="00", owner="G")
        assert format_result(result, settings=QUIET) == "false"

    def test_privacy_prints_bool(self) -> None:
        assert format_result(_ok("get_privacy", owner="G", enabled=True), settings=QUIET) == "true"

    def test_escrow_prints_id(self) -> None:
        result = _ok("create_escrow", id=3, **{"from": "GA", "to": "GB"})
        assert format_result(result, settings=QUIET) == "3"

    def test_generic(self) -> None:
        assert format_result(_ok("set_paused", paused=True), settings=QUIET) == "OK: set_paused"

    def test_error(self) -> None:
        out = format_result(_fail("set_admin", "UNAUTHORIZED", "nope"), settings=QUIET)
        assert out.startswith("ERROR: set_admin")
        assert out.endswith("nope")


class TestHuman:
    def test_generic_fields(self) -> None:
        out = format_result(_ok("set_admin", old_admin="GA", new_admin="GB"))
        lines = out.splitlines()
        assert lines[0] == "OK  set_admin"
        assert "  old_admin: GA" in lines
        assert "  new_admin: GB" in lines

    def test_bool_and_none_values(self) -> None:
        out = format_result(_ok("admin_status", paused=False, administrator=None))
        assert "  paused: false" in out
        assert "  administrator: none" in out

    def test_warnings_rendered(self) -> None:
        result = ServiceResult(ok=True, op="set_paused", warnings=["bus down"])
        assert "! bus down" in format_result(result)

    def test_error_line(self) -> None:
        out = format_result(_fail("initialize", "ALREADY_INITIALIZED", "already"))
        assert out == "ERROR  initialize  [ALREADY_INITIALIZED] already"

    def test_verbose_error_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="set_paused",
            error=ServiceError(code="UNAUTHORIZED", message="no", detail={"contract_code": 2}),
        )
        out = format_result(result, settings=OutputSettings(verbose=True))
        assert "  contract_code: 2" in out

    def test_verbose_telemetry(self) -> None:
        result = ServiceResult(
            ok=True,
            op="health_check",
            meta={"telemetry": {"name": "HealthService.health_check", "duration_ms": 0.5}},
        )
        out = format_result(result, settings=OutputSettings(verbose=True))
        assert "HealthService.health_check: 0.5ms" in out
