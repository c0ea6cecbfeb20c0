"""Agents command: install pre-authored agent documents."""

from pathlib import Path

import click

from lumi_kit.commands.common import choose_platforms, confirm_target, report_install
from lumi_kit.context import LumiContext
from lumi_kit.error_boundary import cli_error_boundary
from lumi_kit.io.text_io import FilesystemTextSource
from lumi_kit.operations.install_agents import AGENT_DESCRIPTIONS, install_agents
from lumi_kit.operations.install_modules import load_manifest
from lumi_kit.output import user_output



def parse_agent_selection(value: str) -> list[str]:
    """Parse a comma-separated agent selection.

    Raises:
        click.BadParameter: If the selection is empty or names an unknown agent
    """
    codes: list[str] = []
    for part in value.split(","):
        code = part.strip()
        if not code or code in codes:
            continue
        if code not in AGENT_DESCRIPTIONS:
            available = ", ".join(AGENT_DESCRIPTIONS)
            raise click.BadParameter(f"Unknown agent: {code}. Available: {available}")
        codes.append(code)
    if not codes:
        raise click.BadParameter("Select at least one agent")
    return codes


def choose_agents(agent_codes: tuple[str, ...], yes: bool) -> list[str]:
    """Use --agent values, every bundled agent with --yes, or ask."""
    if agent_codes:
        return list(agent_codes)
    if yes:
        return list(AGENT_DESCRIPTIONS)

    user_output("Agents:")
    for code, description in AGENT_DESCRIPTIONS.items():
        user_output(f"  {code}: {description}")
    return click.prompt(
        "Select agents to install (comma-separated)",
        default=",".join(AGENT_DESCRIPTIONS),
        value_proc=parse_agent_selection,
        err=True,
    )


@click.command()
@click.argument(
    "path",
    required=False,
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--agent",
    "-a",
    "agent_codes",
    multiple=True,
    help=(
        "Agent to install (repeatable). Prompted for when omitted; "
        f"--yes installs {', '.join(AGENT_DESCRIPTIONS)}."
    ),
)
@click.option("--platform", "-p", "platform_keys", multiple=True, help="Target platform key.")
@click.option("--all", "all_platforms", is_flag=True, help="Install for every platform.")
@click.option(
    "--yes", "-y", is_flag=True, help="Skip the agent selection and confirmation prompts."
)
@click.option(
    "--templates",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory with agents/ and shared/ documents overriding the bundled ones.",
)
@click.pass_obj
@cli_error_boundary
def agents(
    ctx: LumiContext,
    path: Path,
    agent_codes: tuple[str, ...],
    platform_keys: tuple[str, ...],
    all_platforms: bool,
    yes: bool,
    templates: Path | None,
) -> None:
    """Install the lumi-agent command documents and shared resources.

    Documents are copied as written; only the frontmatter a platform requires
    is added.
    """
    target = path.resolve()
    manifest = load_manifest(ctx.data)
    platforms = choose_platforms(ctx, manifest, platform_keys, all_platforms)
    codes = choose_agents(agent_codes, yes)

    if not confirm_target(target, yes):
        user_output("Installation cancelled.")
        return

    report = install_agents(
        ctx,
        target=target,
        manifest=manifest,
        agent_codes=codes,
        platform_keys=platforms,
        templates=FilesystemTextSource(templates) if templates is not None else None,
    )
    report_install(report, len(platforms))

    user_output("\n  Available agents:")
    for code in codes:
        user_output(f"    • /lumi-agent-{code}")
