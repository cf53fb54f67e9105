"""treeops CLI - treeops command."""

from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from treeops import __version__
from treeops.cli.property import property_command
from treeops.cli.query import (
    files_command,
    find_command,
    jar_dir_command,
    relpath_command,
    sanitize_command,
    sha1_command,
)
from treeops.cli.tree import clean_command, copy_command, delete_command
from treeops.config.loader import load_config
from treeops.core.errors import TreeOpsError
from treeops.core.logging import configure_logging, get_log_file_path


class _TreeOpsGroup(click.Group):
    """Renders TreeOpsError as a one-line message and exit code 1."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except TreeOpsError as e:
            console = Console(stderr=True)
            console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
            log_path = get_log_file_path()
            if log_path is not None:
                console.print(f"[dim]Details: {log_path}[/dim]")
            raise SystemExit(1) from None


@click.group(cls=_TreeOpsGroup)
@click.version_option(version=__version__, prog_name="treeops")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """treeops - filesystem tree operations for build tooling."""
    ctx.ensure_object(dict)
    config = load_config()
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    ctx.obj["config"] = config


cli.add_command(clean_command, name="clean")
cli.add_command(copy_command, name="copy")
cli.add_command(delete_command, name="delete")
cli.add_command(sha1_command, name="sha1")
cli.add_command(files_command, name="files")
cli.add_command(find_command, name="find")
cli.add_command(relpath_command, name="relpath")
cli.add_command(sanitize_command, name="sanitize")
cli.add_command(jar_dir_command, name="jar-dir")
cli.add_command(property_command, name="property")


if __name__ == "__main__":
    cli()
