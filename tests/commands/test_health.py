"""Tests for the ``health`` command."""

import json

import pytest
from click.testing import CliRunner

from quickex import __version__
from quickex.cli import cli


@pytest.mark.usefixtures("_isolated_ledger")
def test_health_json(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "health"])
    assert result.exit_code == 0
    assert json.loads(result.output)["data"] == {
        "healthy": True,
        "version": __version__,
        "ledger": "quickex",
        "network": "local",
    }


@pytest.mark.usefixtures("_isolated_ledger")
def test_health_reports_ledger_section(cli_runner: CliRunner, ledger_root) -> None:
    (ledger_root / "quickex.toml").write_text('[ledger]\nname = "treasury"\nnetwork = "testnet"\n')
    result = cli_runner.invoke(cli, ["--json", "health"])
    assert result.exit_code == 0
    data = json.loads(result.output)["data"]
    assert (data["ledger"], data["network"]) == ("treasury", "testnet")


@pytest.mark.usefixtures("_isolated_ledger")
def test_health_creates_ledger(cli_runner: CliRunner, ledger_root) -> None:
    cli_runner.invoke(cli, ["health"])
    assert (ledger_root / ".quickex" / "quickex.db").is_file()
