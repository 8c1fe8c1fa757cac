"""Main CLI entry point for sheetfdw."""

import click

from sheetfdw import __version__
from sheetfdw.cli.commands.list import list_sources
from sheetfdw.cli.commands.scan import scan
from sheetfdw.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """sheetfdw - read remote JSON spreadsheets as table rows."""
    pass


main.add_command(scan)
main.add_command(validate)
main.add_command(list_sources)


if __name__ == "__main__":
    main()
