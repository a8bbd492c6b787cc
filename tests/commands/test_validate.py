"""Tests for the validate CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from symtax.cli import cli
from symtax.domain.types import TransactionType as T
from tests.conftest import named_asset_types, write_contract


@pytest.mark.usefixtures("_isolated_project")
class TestValidateCommand:
    def test_valid_contract(self, cli_runner: CliRunner, project_root: Path) -> None:
        path = write_contract(project_root, "issuance", [int(t) for t in named_asset_types(13)])
        result = cli_runner.invoke(cli, ["validate", "Tests.NamedAsset", str(path)])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "contract: issuance" in result.stdout

    def test_rejected_contract_exits_1(self, cli_runner: CliRunner, project_root: Path) -> None:
        types = named_asset_types(3)
        types[4] = T.SECRET_LOCK
        path = write_contract(project_root, "tampered", [int(t) for t in types])
        result = cli_runner.invoke(cli, ["validate", "Tests.NamedAsset", str(path)])
        assert result.exit_code == 1
        assert "UNREGISTERED_TYPE" in result.stderr
        assert result.stdout == ""

    def test_json_rejection_on_stderr(self, cli_runner: CliRunner, project_root: Path) -> None:
        path = write_contract(project_root, "lonely", ["MOSAIC_DEFINITION"])
        result = cli_runner.invoke(cli, ["--json", "validate", "Tests.Mini", str(path)])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "MISSING_REQUIRED"
        assert payload["data"]["position"] == 1

    def test_json_success(self, cli_runner: CliRunner, project_root: Path) -> None:
        path = write_contract(project_root, "payout", ["TRANSFER"])
        result = cli_runner.invoke(cli, ["--json", "validate", "Tests.Mini", str(path)])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["data"]["valid"] is True
        assert payload["data"]["outcome"] == "ok"

    def test_quiet(self, cli_runner: CliRunner, project_root: Path) -> None:
        path = write_contract(project_root, "payout", ["TRANSFER"])
        result = cli_runner.invoke(cli, ["-q", "validate", "Tests.Mini", str(path)])
        assert result.exit_code == 0
        assert result.stdout.strip() == "OK: validate"

    def test_unknown_taxonomy(self, cli_runner: CliRunner, project_root: Path) -> None:
        path = write_contract(project_root, "payout", ["TRANSFER"])
        result = cli_runner.invoke(cli, ["validate", "Tests.Nope", str(path)])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.stderr

    def test_missing_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "Tests.Mini", "missing.json"])
        assert result.exit_code == 1
        assert "INVALID_CONTRACT" in result.stderr

    def test_missing_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate"])
        assert result.exit_code == 2
