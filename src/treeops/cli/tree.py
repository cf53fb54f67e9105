"""treeops clean/copy/delete commands - mutate directory trees."""

from pathlib import Path

import click
from rich.console import Console

from treeops.files.models import FileKind, file_kind
from treeops.files.tree import (
    clean_output_dir,
    copy_directory,
    copy_directory_content_to_directory,
    copy_file,
    delete_path,
)


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
def clean_command(path: Path) -> None:
    """Make PATH an empty directory, replacing whatever is there."""
    clean_output_dir(path)
    Console(stderr=True).print(f"[green]✓[/green] {path} is empty")


@click.command()
@click.argument("src", type=click.Path(exists=True, path_type=Path))
@click.argument("dst", type=click.Path(path_type=Path))
@click.option(
    "--contents",
    is_flag=True,
    help="Copy the contents of SRC into DST instead of merging SRC as DST.",
)
def copy_command(src: Path, dst: Path, contents: bool) -> None:
    """Copy SRC to DST. Directories are merged into an existing DST."""
    kind = file_kind(src)
    if kind is FileKind.DIRECTORY:
        if contents:
            copy_directory_content_to_directory(src, dst)
        else:
            copy_directory(src, dst)
    else:
        copy_file(src, dst)
    Console(stderr=True).print(f"[green]✓[/green] Copied {src} -> {dst}")


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
def delete_command(paths: tuple[Path, ...]) -> None:
    """Recursively delete PATHS. Missing paths are ignored."""
    console = Console(stderr=True)
    for path in paths:
        delete_path(path)
        console.print(f"  [green]✓[/green] Removed {path}")
