"""CLI error handling for scriptforge-cli.

Converts scriptforge-core exceptions into CLIError with a user-facing
message and an exit code.
"""

from __future__ import annotations

from typing import NoReturn

import click

from scriptforge_cli.output import command_output, error
from scriptforge_core.errors import (
    DependencyInstallError,
    ScriptForgeError,
    SystemCallFailureError,
    WebAssemblyBinaryNotFoundError,
)

# Exit codes following sysexits.h convention
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # Project problem (manifest, metadata, config)
EXIT_SYSTEM_ERROR = 2  # Toolchain problem (npm, node, missing binary)

_SYSTEM_ERRORS: tuple[type[ScriptForgeError], ...] = (
    SystemCallFailureError,
    DependencyInstallError,
    WebAssemblyBinaryNotFoundError,
)


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
        details: Captured process output shown below the message.
        details_title: Title for the details panel.
    """

    def __init__(
        self,
        message: str,
        exit_code: int = EXIT_USER_ERROR,
        *,
        details: str = "",
        details_title: str = "",
    ) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.details = details
        self.details_title = details_title

    def show(self, file: object = None) -> None:
        """Display the error using Rich formatting.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        error(self.format_message())
        if self.details.strip():
            command_output(self.details, title=self.details_title)


def exit_code_for(err: ScriptForgeError) -> int:
    """Return the CLI exit code for a scriptforge error."""
    if isinstance(err, _SYSTEM_ERRORS):
        return EXIT_SYSTEM_ERROR
    return EXIT_USER_ERROR


def handle_task_error(err: ScriptForgeError) -> NoReturn:
    """Convert a task runner error into a CLIError.

    A failing command is reported by its command line, with its captured
    output (if any) shown separately.

    Args:
        err: Error raised by a task runner.

    Raises:
        CLIError: Always.
    """
    if isinstance(err, SystemCallFailureError):
        raise CLIError(
            f"Command failed: {err.command}",
            exit_code=EXIT_SYSTEM_ERROR,
            details=err.output,
            details_title=err.command,
        ) from err

    raise CLIError(str(err), exit_code=exit_code_for(err)) from err


def handle_permission_error(path: str, operation: str = "access") -> NoReturn:
    """Handle permission errors.

    Raises:
        CLIError: Always, with the system error exit code.
    """
    raise CLIError(
        f"Permission denied: Cannot {operation} {path}",
        exit_code=EXIT_SYSTEM_ERROR,
    )
