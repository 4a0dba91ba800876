"""scriptforge build command - Compile a script project to WebAssembly."""

from __future__ import annotations

from pathlib import Path

import click

from scriptforge_cli.errors import handle_permission_error, handle_task_error
from scriptforge_cli.output import info, success
from scriptforge_cli.runner import create_runner, runner_options
from scriptforge_core import ScriptForgeError

DEFAULT_OUTPUT_FILENAME = "script.wasm"


@click.command("build")
@runner_options
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Where to write the binary [default: <project-dir>/{DEFAULT_OUTPUT_FILENAME}]",
)
def build(project_dir: str, language: str, config_path: str | None, output_path: str | None) -> None:
    """Build the script and write the compiled binary.

    Runs the project's build and gen-metadata scripts, then moves the
    compiled binary out of the build directory.

    Examples:

        scriptforge build

        scriptforge build --project-dir my-script --output dist/my-script.wasm
    """
    runner = create_runner(project_dir, language, config_path)
    output = Path(output_path) if output_path else Path(project_dir) / DEFAULT_OUTPUT_FILENAME

    info(f"Building {runner.language} script in {project_dir}...")
    try:
        binary = runner.build()
    except ScriptForgeError as e:
        handle_task_error(e)

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(binary)
    except PermissionError:
        handle_permission_error(str(output), "write")

    success(f"Built {output} ({len(binary)} bytes)")
