"""Commands listing the manifest's platforms and modules."""

import click
from rich.console import Console
from rich.table import Table

from lumi_kit.context import LumiContext
from lumi_kit.error_boundary import cli_error_boundary
from lumi_kit.operations.install_modules import load_manifest


@click.command()
@click.pass_obj
@cli_error_boundary
def platforms(ctx: LumiContext) -> None:
    """List the platforms lumi-kit can install for."""
    manifest = load_manifest(ctx.data)

    table = Table(title="Platforms")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Folder", no_wrap=True)
    table.add_column("Extension", no_wrap=True)
    table.add_column("Format", no_wrap=True)

    for platform in manifest.platforms.values():
        table.add_row(
            platform.key, platform.name, platform.folder, platform.extension, platform.format
        )

    Console().print(table)


@click.command()
@click.pass_obj
@cli_error_boundary
def modules(ctx: LumiContext) -> None:
    """List the modules available to install."""
    manifest = load_manifest(ctx.data)

    table = Table(title="Modules")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Description")

    for module in manifest.modules:
        table.add_row(module.code, module.name, module.description)

    Console().print(table)
