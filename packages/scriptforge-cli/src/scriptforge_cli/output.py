"""Rich console output for scriptforge-cli.

Colored status lines, JSON rendering and captured command output.
NO_COLOR in the environment and the --no-color flag both disable color.
"""

from __future__ import annotations

import json
import os
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

_env_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Console honouring the no-color settings.

    Args:
        no_color: Disable colored output. NO_COLOR is always honoured.

    Returns:
        Configured Console instance.
    """
    disabled = no_color or _env_no_color
    return Console(force_terminal=False if disabled else None, no_color=disabled)


console = create_console()


def success(message: str) -> None:
    """Print a success line with a green checkmark.

    Example:
        >>> success("Built script.wasm")
        ✓ Built script.wasm
    """
    console.print(f"[green]✓[/green] {escape(message)}")


def error(message: str) -> None:
    """Print an error line with a red cross."""
    console.print(f"[red]✗[/red] {escape(message)}")


def warning(message: str) -> None:
    """Print a warning line with a yellow triangle."""
    console.print(f"[yellow]⚠[/yellow] {escape(message)}")


def info(message: str) -> None:
    console.print(escape(message))


def command_output(output: str, title: str) -> None:
    """Print captured process output in a panel.

    Args:
        output: Combined stdout/stderr of the process.
        title: Panel title, usually the command line.
    """
    console.print(Panel(escape(output.rstrip()), title=escape(title), border_style="dim"))


def print_json(data: dict[str, Any]) -> None:
    """Print a dictionary as highlighted JSON."""
    console.print_json(json.dumps(data))


def set_no_color(no_color: bool) -> None:
    """Replace the module console to enable or disable color."""
    global console
    console = create_console(no_color=no_color)
