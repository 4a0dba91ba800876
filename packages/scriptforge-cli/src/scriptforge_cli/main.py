"""CLI entry point for scriptforge.

Commands are registered by module path and imported only when invoked,
so ``scriptforge --help`` stays fast.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from scriptforge_cli import __version__
from scriptforge_cli.log_config import configure_logging
from scriptforge_cli.output import set_no_color

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


class LazyGroup(rclick.RichGroup):
    """Click group that imports its commands on first use.

    Attributes:
        lazy_subcommands: Command name to "module.attribute" path.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.lazy_subcommands: dict[str, str] = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        commands = set(super().list_commands(ctx))
        commands.update(self.lazy_subcommands)
        return sorted(commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Return a registered command, importing it if needed.

        Args:
            ctx: Click context.
            cmd_name: Name of the command to get.

        Returns:
            Click Command instance, or None if unknown.
        """
        cmd = super().get_command(ctx, cmd_name)  # type: ignore[arg-type]
        if cmd is not None:
            return cmd

        module_path = self.lazy_subcommands.get(cmd_name)
        if module_path is None:
            return None

        module_name, attr_name = module_path.rsplit(".", 1)
        module = importlib.import_module(module_name)
        return getattr(module, attr_name)  # type: ignore[no-any-return]


LAZY_COMMANDS = {
    "build": "scriptforge_cli.commands.build.build",
    "install": "scriptforge_cli.commands.install.install",
    "metadata": "scriptforge_cli.commands.metadata.metadata",
    "library-version": "scriptforge_cli.commands.metadata.library_version",
}


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="scriptforge")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log each command run and build progress.",
)
def cli(verbose: bool) -> None:
    """scriptforge - Build extension scripts to WebAssembly.

    **Getting Started:**

    - `scriptforge install` - Install project dependencies
    - `scriptforge build` - Compile the script to a wasm binary
    - `scriptforge metadata` - Show the schema versions of the last build
    """
    configure_logging(verbose)


if __name__ == "__main__":
    cli()
