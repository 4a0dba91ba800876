"""scriptforge install command - Install script project dependencies."""

from __future__ import annotations

import click

from scriptforge_cli.errors import handle_task_error
from scriptforge_cli.output import info, success
from scriptforge_cli.runner import create_runner, runner_options
from scriptforge_core import ScriptForgeError


@click.command("install")
@runner_options
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Install even if dependencies are already present",
)
def install(project_dir: str, language: str, config_path: str | None, force: bool) -> None:
    """Install the project's dependencies.

    Checks the runtime version first. Skipped when the dependency
    directory already exists, unless --force is given.

    Examples:

        scriptforge install

        scriptforge install --project-dir my-script --force
    """
    runner = create_runner(project_dir, language, config_path)

    if not force and runner.dependencies_installed():
        info("Dependencies already installed (use --force to reinstall)")
        return

    info("Installing dependencies...")
    try:
        runner.install_dependencies()
    except ScriptForgeError as e:
        handle_task_error(e)

    success("Dependencies installed")
