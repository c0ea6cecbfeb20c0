"""User-facing output helpers.

Diagnostics and progress go to stderr so stdout stays clean for anything a
script might capture.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def success_line(message: str) -> str:
    return click.style("✓ ", fg="green") + message


def warning_line(message: str) -> str:
    return click.style("⚠ ", fg="yellow") + message


def error_line(message: str) -> str:
    return click.style("Error: ", fg="red") + message
