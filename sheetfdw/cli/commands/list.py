"""CLI command for listing available source profiles."""

import click

from sheetfdw.sources import get_source, list_source_types


@click.command("list-sources")
def list_sources():
    """List available source profiles and the column types each supports."""
    click.echo("Available Sources:")
    for name in list_source_types():
        source = get_source(name)
        types = ", ".join(type_oid.value for type_oid in source.supported_types())
        click.echo(f"  - {name} ({types})")
