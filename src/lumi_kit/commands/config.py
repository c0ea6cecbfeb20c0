"""Config commands for viewing and editing ~/.lumi/config.toml."""

import click
from pydantic import ValidationError

from lumi_kit.context import LumiContext
from lumi_kit.error_boundary import cli_error_boundary
from lumi_kit.models.config import LumiConfig
from lumi_kit.output import success_line, user_output


@click.group("config")
def config_group() -> None:
    """View or change lumi-kit settings."""


@config_group.command("show")
@click.pass_obj
@cli_error_boundary
def show(ctx: LumiContext) -> None:
    """Print the effective configuration."""
    user_output(f"# {ctx.config_ops.path()}")
    for key, value in ctx.config.model_dump().items():
        click.echo(f"{key} = {value}")


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
@cli_error_boundary
def set_value(ctx: LumiContext, key: str, value: str) -> None:
    """Set KEY to VALUE and save the configuration."""
    if key not in LumiConfig.model_fields:
        raise ValueError(f"Unknown config key: {key}")

    data = {**ctx.config.model_dump(), key: value}
    try:
        updated = LumiConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid value for {key}: {e.errors()[0]['msg']}") from None

    ctx.config_ops.save(updated)
    user_output(success_line(f"Set {key} = {value} in {ctx.config_ops.path()}"))
