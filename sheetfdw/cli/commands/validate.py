"""CLI command for validating table definitions."""

import sys

import click

from sheetfdw.cli.commands import parse_cli_vars
from sheetfdw.core.exceptions import FdwError, UnsupportedTypeError
from sheetfdw.core.options import OptionsType
from sheetfdw.models.loader import load_definition
from sheetfdw.models.server_config import ServerConfig
from sheetfdw.sources import get_source


@click.command()
@click.argument("definition_path", type=click.Path(exists=True))
@click.option(
    "--vars",
    multiple=True,
    help="CLI variables in key=value format (can be used multiple times)",
)
def validate(definition_path: str, vars: tuple):
    """Validate a table definition without contacting the remote service.

    Checks:
    - YAML syntax and definition schema
    - Template variable resolution
    - Source profile and required table options
    - A coercion rule exists for every column type

    Examples:

        sheetfdw validate people.yaml
    """
    cli_vars = parse_cli_vars(vars)

    try:
        definition = load_definition(definition_path, cli_vars=cli_vars or None)
        ctx = definition.to_context()
        server_config = ServerConfig.from_options(ctx.get_options(OptionsType.SERVER))
        source = get_source(server_config.source)

        table_options = ctx.get_options(OptionsType.TABLE)
        for key in source.required_table_options:
            table_options.require(key)

        for column in ctx.get_columns():
            if column.type_oid not in source.coercion_rules:
                raise UnsupportedTypeError(
                    f"column {column.name} data type is not supported",
                    context={"column": column.name, "type": column.type_oid.value},
                )
    except FdwError as e:
        click.echo(f"✗ Definition validation failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Definition '{definition.name}' is valid")
    click.echo(f"  Source: {source.name}")
    click.echo(f"  Base URL: {server_config.base_url or source.default_base_url}")
    click.echo(f"  Columns: {len(definition.columns)}")
