import logging
import os

import click

from lumi_kit.commands.agents import agents
from lumi_kit.commands.check import check
from lumi_kit.commands.config import config_group
from lumi_kit.commands.init import init
from lumi_kit.commands.listing import modules, platforms
from lumi_kit.context import LumiContext, create_context
from lumi_kit.error_boundary import cli_error_boundary
from lumi_kit.output import user_output
from lumi_kit.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

DEBUG_ENV_VAR = "LUMI_DEBUG"


def configure_logging(debug: bool) -> None:
    """Enable debug logging for --debug or when LUMI_DEBUG is set."""
    if debug or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Install Lumi agents into AI-assistant platforms."""
    configure_logging(debug)

    # Tests inject a prepared LumiContext through CliRunner.invoke(obj=...)
    if not isinstance(ctx.obj, LumiContext):
        ctx.obj = create_context(debug=debug)

    if ctx.invoked_subcommand is None:
        user_output(ctx.get_help())


cli.add_command(init)
cli.add_command(agents)
cli.add_command(check)
cli.add_command(platforms)
cli.add_command(modules)
cli.add_command(config_group)


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()
