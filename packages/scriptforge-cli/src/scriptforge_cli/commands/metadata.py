"""scriptforge metadata and library-version commands."""

from __future__ import annotations

import click

from scriptforge_cli.errors import handle_task_error
from scriptforge_cli.output import info, print_json
from scriptforge_cli.runner import create_runner, runner_options
from scriptforge_core import ScriptForgeError


@click.command("metadata")
@runner_options
def metadata(project_dir: str, language: str, config_path: str | None) -> None:
    """Print the metadata written by the last build as JSON.

    Examples:

        scriptforge metadata --project-dir my-script
    """
    runner = create_runner(project_dir, language, config_path)

    try:
        result = runner.metadata()
    except ScriptForgeError as e:
        handle_task_error(e)

    print_json(result.to_dict())


@click.command("library-version")
@click.argument("library_name")
@runner_options
def library_version(
    library_name: str, project_dir: str, language: str, config_path: str | None
) -> None:
    """Print the installed version of a library.

    Examples:

        scriptforge library-version @shopify/scripts-discount-apis
    """
    runner = create_runner(project_dir, language, config_path)

    try:
        version = runner.library_version(library_name)
    except ScriptForgeError as e:
        handle_task_error(e)

    info(version)
