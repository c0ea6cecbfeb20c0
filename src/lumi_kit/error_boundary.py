"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at the CLI
entry point and display clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

from lumi_kit.exceptions import LumiKitError
from lumi_kit.output import error_line, user_output

logger = logging.getLogger(__name__)


def cli_error_boundary[T: Callable[..., Any]](func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - LumiKitError: Unknown platforms/modules, unsupported formats
        - FileExistsError: File/directory conflicts
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces. The
    traceback of a caught exception is still logged at debug level.

    Example:
        def main() -> None:
            cli_error_boundary(cli)()
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (LumiKitError, FileExistsError, FileNotFoundError, PermissionError, ValueError) as e:
            logger.debug("Command failed", exc_info=True)
            user_output(error_line(str(e)))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
