"""treeops read-only commands - hashing, listing, searching, naming."""

import json
from pathlib import Path

import click

from treeops.config.models import TreeOpsConfig
from treeops.files.content import sha1
from treeops.files.paths import get_directory_name_for_jar, relative_path, sanitize_file_name
from treeops.files.traversal import find, find_by_name, get_all_files


def _config(ctx: click.Context) -> TreeOpsConfig:
    obj = ctx.find_object(dict) or {}
    config = obj.get("config")
    return config if isinstance(config, TreeOpsConfig) else TreeOpsConfig()


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def sha1_command(ctx: click.Context, files: tuple[Path, ...], as_json: bool) -> None:
    """Print the SHA-1 of each FILE."""
    chunk_size = _config(ctx).hashing.chunk_size
    digests = {str(f): sha1(f, chunk_size=chunk_size) for f in files}
    if as_json:
        click.echo(json.dumps(digests, indent=2))
        return
    for name, digest in digests.items():
        click.echo(f"{digest}  {name}")


@click.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
def files_command(directory: Path) -> None:
    """List every regular file under DIRECTORY, depth-first."""
    for path in get_all_files(directory):
        click.echo(str(path))


@click.command()
@click.argument("base", type=click.Path(path_type=Path))
@click.option("--pattern", help="Regular expression searched in /-based paths.")
@click.option("--name", help="Exact file name; prints the last match.")
def find_command(base: Path, pattern: str | None, name: str | None) -> None:
    """Find paths under BASE by regex or by exact name."""
    if (pattern is None) == (name is None):
        raise click.UsageError("Pass exactly one of --pattern or --name.")
    if pattern is not None:
        for path in find(base, pattern):
            click.echo(str(path))
        return
    assert name is not None
    found = find_by_name(base, name)
    if found is None:
        raise SystemExit(1)
    click.echo(str(found))


@click.command()
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("directory", type=click.Path(path_type=Path))
@click.pass_context
def relpath_command(ctx: click.Context, file: Path, directory: Path) -> None:
    """Print FILE relative to DIRECTORY."""
    sep = _config(ctx).paths.resolve_separator()
    click.echo(relative_path(file, directory, sep=sep))


@click.command()
@click.argument("name")
def sanitize_command(name: str) -> None:
    """Replace characters unsafe in file names with underscores."""
    click.echo(sanitize_file_name(name))


@click.command()
@click.argument("file", type=click.Path(path_type=Path))
def jar_dir_command(file: Path) -> None:
    """Print the unpack directory name for a jar FILE."""
    click.echo(get_directory_name_for_jar(file))
