"""Tests for the ``privacy`` command group."""

import pytest
from click.testing import CliRunner

from quickex.cli import cli

OWNER = "GOWNERAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"


@pytest.mark.usefixtures("_isolated_ledger")
class TestPrivacyCommands:
    def test_default_off(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "privacy", "get", OWNER])
        assert result.exit_code == 0
        assert result.output.strip() == "false"

    def test_set_on_then_off(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["privacy", "set", OWNER, "on"]).exit_code == 0
        result = cli_runner.invoke(cli, ["-q", "privacy", "get", OWNER])
        assert result.output.strip() == "true"

        cli_runner.invoke(cli, ["privacy", "set", OWNER, "off"])
        result = cli_runner.invoke(cli, ["-q", "privacy", "get", OWNER])
        assert result.output.strip() == "false"

    def test_invalid_state(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["privacy", "set", OWNER, "maybe"])
        assert result.exit_code == 2
