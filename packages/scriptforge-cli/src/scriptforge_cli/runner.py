"""Task runner construction shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import click

from scriptforge_cli.errors import EXIT_SYSTEM_ERROR, CLIError, handle_task_error
from scriptforge_core import ScriptForgeError, TaskRunnerConfig, get_task_runner

if TYPE_CHECKING:
    from collections.abc import Callable

    from scriptforge_core import TaskRunner

F = TypeVar("F", bound="Callable[..., Any]")

DEFAULT_CONFIG_FILENAME = "scriptforge.yaml"


def runner_options(func: F) -> F:
    """Add the --project-dir, --language and --config options to a command."""
    func = click.option(
        "-c",
        "--config",
        "config_path",
        type=click.Path(dir_okay=False),
        default=None,
        help=f"Configuration file [default: <project-dir>/{DEFAULT_CONFIG_FILENAME} if present]",
    )(func)
    func = click.option(
        "-l",
        "--language",
        default="typescript",
        show_default=True,
        help="Script language",
    )(func)
    func = click.option(
        "-p",
        "--project-dir",
        type=click.Path(file_okay=False),
        default=".",
        help="Script project directory [default: .]",
    )(func)
    return func


def load_config(project_dir: Path, config_path: str | None) -> TaskRunnerConfig:
    """Load runner configuration.

    An explicit --config file must exist. Without one, scriptforge.yaml in
    the project directory is used when present, otherwise the defaults.

    Raises:
        CLIError: If the configuration file is missing or invalid.
    """
    if config_path is None:
        candidate = project_dir / DEFAULT_CONFIG_FILENAME
        if not candidate.exists():
            return TaskRunnerConfig()
        config_path = str(candidate)

    try:
        return TaskRunnerConfig.from_yaml(config_path)
    except FileNotFoundError:
        raise CLIError(
            f"File not found: {config_path}", exit_code=EXIT_SYSTEM_ERROR
        ) from None
    except ScriptForgeError as e:
        handle_task_error(e)


def create_runner(project_dir: str, language: str, config_path: str | None) -> TaskRunner:
    """Create the task runner for the command's options.

    Raises:
        CLIError: If the project directory is missing, the configuration is
            invalid or the language is unsupported.
    """
    root = Path(project_dir)
    if not root.is_dir():
        raise CLIError(f"Project directory not found: {project_dir}", exit_code=EXIT_SYSTEM_ERROR)

    config = load_config(root, config_path)
    try:
        return get_task_runner(language, root, config=config)
    except ScriptForgeError as e:
        handle_task_error(e)
