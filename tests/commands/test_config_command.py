"""Tests for the config commands."""

from click.testing import CliRunner

from lumi_kit.cli import cli
from lumi_kit.context import LumiContext
from lumi_kit.models.config import LumiConfig


def test_config_show() -> None:
    runner = CliRunner()
    ctx = LumiContext.for_test(config=LumiConfig(user_name="Ada"))

    result = runner.invoke(cli, ["config", "show"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "user_name = Ada" in result.output
    assert "/fake/lumi/config.toml" in result.output


def test_config_set_saves() -> None:
    runner = CliRunner()
    ctx = LumiContext.for_test()

    result = runner.invoke(cli, ["config", "set", "default_platform", "gemini"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert ctx.config_ops.load().default_platform == "gemini"
    assert "Set default_platform = gemini" in result.output


def test_config_set_coerces_booleans() -> None:
    runner = CliRunner()
    ctx = LumiContext.for_test()

    result = runner.invoke(cli, ["config", "set", "checkpoint_enabled", "false"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert ctx.config_ops.load().checkpoint_enabled is False


def test_config_set_unknown_key() -> None:
    runner = CliRunner()
    ctx = LumiContext.for_test()

    result = runner.invoke(cli, ["config", "set", "theme", "dark"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Unknown config key: theme" in result.output


def test_config_set_invalid_value() -> None:
    runner = CliRunner()
    ctx = LumiContext.for_test()

    result = runner.invoke(cli, ["config", "set", "checkpoint_enabled", "sometimes"], obj=ctx)

    assert result.exit_code == 1
    assert "Invalid value for checkpoint_enabled" in result.output
    assert ctx.config_ops.load() == LumiConfig()
