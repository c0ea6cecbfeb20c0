"""Init command: install manifest modules for one or more platforms."""

from pathlib import Path

import click

from lumi_kit.commands.common import choose_platforms, confirm_target, report_install
from lumi_kit.context import LumiContext
from lumi_kit.error_boundary import cli_error_boundary
from lumi_kit.operations.install_modules import install_modules, load_manifest
from lumi_kit.output import user_output


@click.command()
@click.argument(
    "path",
    required=False,
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--module",
    "-m",
    "module_codes",
    multiple=True,
    help="Module to install (repeatable). Defaults to every module in the manifest.",
)
@click.option(
    "--platform",
    "-p",
    "platform_keys",
    multiple=True,
    help="Target platform key (repeatable), e.g. claude, cursor, gemini.",
)
@click.option("--all", "all_platforms", is_flag=True, help="Install for every platform.")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
@cli_error_boundary
def init(
    ctx: LumiContext,
    path: Path,
    module_codes: tuple[str, ...],
    platform_keys: tuple[str, ...],
    all_platforms: bool,
    yes: bool,
) -> None:
    """Initialize lumi-kit in a project.

    Renders every agent of the selected modules into each platform's command
    folder and copies module templates and workflows into _lumi/.

    \b
    Examples:
      lumi init .
      lumi init my-project --platform claude --platform gemini
      lumi init . --all --yes
    """
    target = path.resolve()
    manifest = load_manifest(ctx.data)
    platforms = choose_platforms(ctx, manifest, platform_keys, all_platforms)
    modules = list(module_codes) or manifest.module_codes()

    user_output(click.style("Lumi-Kit Initialization", bold=True, fg="cyan"))
    user_output(f"  Target: {target}")
    user_output(f"  Platforms: {', '.join(platforms)}")
    user_output(f"  Modules: {', '.join(modules)}\n")

    if not confirm_target(target, yes):
        user_output("Initialization cancelled.")
        return

    report = install_modules(
        ctx,
        target=target,
        manifest=manifest,
        module_codes=modules,
        platform_keys=platforms,
    )
    report_install(report, len(platforms))
    user_output(click.style("\nLumi-Kit initialized.", fg="green"))
