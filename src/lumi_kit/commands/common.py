"""Helpers shared by the install commands."""

from pathlib import Path

import click

from lumi_kit.context import LumiContext
from lumi_kit.models.manifest import Manifest
from lumi_kit.operations.install_modules import InstallReport
from lumi_kit.output import success_line, user_output, warning_line


def choose_platforms(
    ctx: LumiContext,
    manifest: Manifest,
    platform_keys: tuple[str, ...],
    all_platforms: bool,
) -> list[str]:
    """Decide which platforms to install for.

    Priority: --all, then explicit --platform values, then the configured
    default platform, then an interactive prompt.
    """
    if all_platforms:
        return manifest.platform_keys()
    if platform_keys:
        return list(platform_keys)
    if ctx.config.default_platform is not None:
        return [ctx.config.default_platform]

    available = manifest.platform_keys()
    if not available:
        raise ValueError("The manifest does not define any platforms")
    choice = click.prompt(
        "Select your AI platform",
        type=click.Choice(available),
        default=available[0],
        err=True,
    )
    return [choice]


def confirm_target(target: Path, yes: bool) -> bool:
    if yes:
        return True
    return click.confirm(f"Initialize lumi-kit in {target}?", default=True, err=True)


def report_install(report: InstallReport, platform_count: int) -> None:
    """Print written files and per-platform failures.

    Raises:
        SystemExit: If every requested platform failed
    """
    for path in report.written:
        user_output(success_line(f"Created {path.as_posix()}"))

    for failure in report.failures:
        user_output(warning_line(f"{failure.platform_key}: {failure.message}"))

    if platform_count > 0 and len(report.failures) == platform_count:
        user_output(click.style("No platform could be installed.", fg="red"))
        raise SystemExit(1)
