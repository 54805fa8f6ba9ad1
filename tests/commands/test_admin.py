"""Tests for the ``admin`` command group."""

import json

import pytest
from click.testing import CliRunner

from quickex.cli import cli

ADMIN = "GADMINAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
OTHER = "GOTHERAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"


def _json(runner: CliRunner, *args: str) -> tuple[int, dict]:
    result = runner.invoke(cli, ["--json", *args])
    return result.exit_code, json.loads(result.output)


@pytest.mark.usefixtures("_isolated_ledger")
class TestAdminCommands:
    def test_init_and_status(self, cli_runner: CliRunner) -> None:
        code, out = _json(cli_runner, "admin", "init", ADMIN)
        assert code == 0
        assert out["data"] == {"administrator": ADMIN, "paused": False}

        code, out = _json(cli_runner, "admin", "status")
        assert out["data"] == {"state": "active", "administrator": ADMIN, "paused": False}

    def test_double_init_exits_nonzero(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["admin", "init", ADMIN])
        result = cli_runner.invoke(cli, ["admin", "init", OTHER])
        assert result.exit_code == 1
        assert "ALREADY_INITIALIZED" in result.output

    def test_pause_unpause(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["admin", "init", ADMIN])
        code, out = _json(cli_runner, "admin", "pause", "--caller", ADMIN)
        assert code == 0
        assert out["data"]["paused"] is True

        _json(cli_runner, "admin", "unpause", "--caller", ADMIN)
        _, out = _json(cli_runner, "admin", "status")
        assert out["data"]["paused"] is False

    def test_pause_by_non_admin(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["admin", "init", ADMIN])
        code, out = _json(cli_runner, "admin", "pause", "--caller", OTHER)
        assert code == 1
        assert out["error"]["code"] == "UNAUTHORIZED"
        assert out["error"]["detail"]["contract_code"] == 2

    def test_pause_before_init(self, cli_runner: CliRunner) -> None:
        code, out = _json(cli_runner, "admin", "pause", "--caller", ADMIN)
        assert code == 1
        assert out["error"]["code"] == "NOT_INITIALIZED"

    def test_transfer(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["admin", "init", ADMIN])
        code, out = _json(cli_runner, "admin", "transfer", OTHER, "--caller", ADMIN)
        assert code == 0
        assert out["data"]["old_admin"] == ADMIN
        assert out["data"]["new_admin"] == OTHER

        result = cli_runner.invoke(cli, ["admin", "pause", "--caller", ADMIN])
        assert result.exit_code == 1

    def test_caller_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["admin", "pause"])
        assert result.exit_code == 2

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["admin", "init", ADMIN])
        assert result.exit_code == 0
        assert "OK  initialize" in result.output
        assert ADMIN in result.output


class TestSignerMode:
    def test_unsigned_caller_rejected(self, cli_runner: CliRunner, _isolated_ledger) -> None:
        with open("quickex.toml", "w", encoding="utf-8") as fh:
            fh.write(f'[auth]\nmode = "signers"\nsigners = ["{OTHER}"]\n')
        cli_runner.invoke(cli, ["admin", "init", ADMIN])
        code, out = _json(cli_runner, "admin", "pause", "--caller", ADMIN)
        assert code == 1
        assert "not authenticated" in out["error"]["message"]


def test_examples_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["admin", "--examples"])
    assert result.exit_code == 0
    assert "quickex admin init" in result.output
