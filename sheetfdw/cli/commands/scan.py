"""CLI command for scanning a foreign table definition."""

import json
import sys

import click

from sheetfdw.api import scan_rows
from sheetfdw.cli.commands import parse_cli_vars
from sheetfdw.core.exceptions import ConfigError, FdwError
from sheetfdw.core.logging import configure_logging
from sheetfdw.models.loader import load_definition


@click.command()
@click.argument("definition_path", type=click.Path(exists=True))
@click.option(
    "--vars",
    multiple=True,
    help="CLI variables in key=value format (can be used multiple times)",
)
@click.option(
    "--format",
    "output_format",
    default="jsonl",
    type=click.Choice(["jsonl", "tsv"]),
    help="Output format (default: jsonl)",
)
@click.option("--limit", type=click.IntRange(min=0), help="Stop after N rows")
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: INFO)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)
def scan(
    definition_path: str,
    vars: tuple,
    output_format: str,
    limit: int | None,
    log_level: str,
    json_logs: bool,
):
    """Scan a foreign table and print its rows.

    Examples:

        sheetfdw scan people.yaml
        sheetfdw scan people.yaml --format tsv --limit 10
        sheetfdw scan people.yaml --vars sheet=1XyZ --log-level DEBUG --json-logs
    """
    cli_vars = parse_cli_vars(vars)

    try:
        definition = load_definition(definition_path, cli_vars=cli_vars or None)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    configure_logging(level=log_level, json_format=json_logs, table_name=definition.name)

    columns = definition.to_columns()
    names = [column.name for column in columns]

    if output_format == "tsv":
        click.echo("\t".join(names))

    try:
        for row in scan_rows(definition.server, definition.table, columns, limit=limit):
            values = row.values()
            if output_format == "jsonl":
                click.echo(json.dumps(dict(zip(names, values)), default=str, ensure_ascii=False))
            else:
                click.echo("\t".join("" if value is None else str(value) for value in values))
    except FdwError as e:
        click.echo(f"Scan failed: {e}", err=True)
        sys.exit(1)
