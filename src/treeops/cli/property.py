"""treeops property command - resolve a build property."""

from pathlib import Path

import click

from treeops.config.properties import LOCAL_PROPERTIES, resolve_property


def _parse_definitions(definitions: tuple[str, ...]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for item in definitions:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {item!r}", param_hint="-D")
        overrides[key] = value
    return overrides


@click.command()
@click.argument("key")
@click.option(
    "--file",
    "properties_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=LOCAL_PROPERTIES,
    show_default=True,
    help="Properties file consulted when KEY is not defined with -D.",
)
@click.option("-D", "definitions", multiple=True, help="Explicit key=value; wins over the file.")
def property_command(key: str, properties_file: Path, definitions: tuple[str, ...]) -> None:
    """Print the value of KEY, or exit 1 if it is not defined."""
    value = resolve_property(key, _parse_definitions(definitions), properties_file)
    if value is None:
        raise SystemExit(1)
    click.echo(value)
