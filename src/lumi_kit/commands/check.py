"""Check command for verifying system requirements."""

import click

from lumi_kit.operations.check import run_checks
from lumi_kit.output import success_line, user_output, warning_line


@click.command()
def check() -> None:
    """Check system requirements."""
    user_output(click.style("System Check", bold=True, fg="cyan"))

    results = run_checks()
    for result in results:
        line = f"{result.name}: {result.message}"
        user_output(success_line(line) if result.success else warning_line(line))

    user_output()
    if all(result.success for result in results):
        user_output(success_line("All checks passed! Ready to use lumi-kit."))
        return

    user_output(warning_line("Some checks failed. Please address the issues above."))
    raise SystemExit(1)
