"""System requirement checks."""

import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass

MINIMUM_PYTHON = (3, 12)

CommandRunner = Callable[[list[str]], str | None]


@dataclass(frozen=True)
class CheckResult:
    """Result of one requirement check."""

    name: str
    success: bool
    message: str


def run_version_command(args: list[str]) -> str | None:
    """Run a `--version` style command, returning its output or None if unavailable."""
    try:
        result = subprocess.run(args, capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError):
        return None
    return result.stdout.strip()


def check_python_version(version_info: tuple[int, int, int]) -> CheckResult:
    version = ".".join(str(part) for part in version_info)
    if version_info[:2] >= MINIMUM_PYTHON:
        return CheckResult(name="Python version", success=True, message=version)
    required = ".".join(str(part) for part in MINIMUM_PYTHON)
    return CheckResult(
        name="Python version", success=False, message=f"{version} (requires >= {required})"
    )


def _check_tool(name: str, args: list[str], run: CommandRunner) -> CheckResult:
    output = run(args)
    if output is None:
        return CheckResult(name=name, success=False, message="Not found")
    return CheckResult(name=name, success=True, message=output)


def run_checks(
    run: CommandRunner = run_version_command,
    version_info: tuple[int, int, int] | None = None,
) -> list[CheckResult]:
    """Run every system check."""
    if version_info is None:
        version_info = (sys.version_info.major, sys.version_info.minor, sys.version_info.micro)
    return [
        check_python_version(version_info),
        _check_tool("pip available", [sys.executable, "-m", "pip", "--version"], run),
        _check_tool("Git available", ["git", "--version"], run),
    ]
