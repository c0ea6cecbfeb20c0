"""Tests for the check command."""

import pytest
from click.testing import CliRunner

from lumi_kit.cli import cli
from lumi_kit.context import LumiContext
from lumi_kit.operations.check import CheckResult


def _patch_results(monkeypatch: pytest.MonkeyPatch, results: list[CheckResult]) -> None:
    monkeypatch.setattr("lumi_kit.commands.check.run_checks", lambda: results)


def test_check_all_pass(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_results(
        monkeypatch,
        [
            CheckResult(name="Python version", success=True, message="3.12.1"),
            CheckResult(name="Git available", success=True, message="git version 2.43.0"),
        ],
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["check"], obj=LumiContext.for_test())

    assert result.exit_code == 0, result.output
    assert "Python version: 3.12.1" in result.output
    assert "All checks passed! Ready to use lumi-kit." in result.output


def test_check_failure_exits_nonzero(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_results(
        monkeypatch,
        [
            CheckResult(name="Python version", success=True, message="3.12.1"),
            CheckResult(name="Git available", success=False, message="Not found"),
        ],
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["check"], obj=LumiContext.for_test())

    assert result.exit_code == 1
    assert "Git available: Not found" in result.output
    assert "Some checks failed." in result.output


def test_no_subcommand_shows_help() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=LumiContext.for_test())

    assert result.exit_code == 0
    assert "init" in result.output
    assert "agents" in result.output


def test_version_option() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "2.0.0" in result.output
