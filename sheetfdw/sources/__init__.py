"""Source profiles and their registry.

Profile modules register themselves via the @register_source decorator on
import, so importing this package makes the built-in profiles available.
"""

from sheetfdw.sources.base import SourceProfile, find_records, locate_cell, parse_document
from sheetfdw.sources.registry import (
    clear_registry,
    get_source,
    list_source_types,
    register_source,
)

from sheetfdw.sources.gsheets import GoogleSheetsSource
from sheetfdw.sources.json_api import JsonApiSource


def reregister_builtins() -> None:
    """Re-register built-in profiles after the registry is cleared.

    Intended for tests that call clear_registry().
    """
    current = list_source_types()
    if "gsheets" not in current:
        register_source("gsheets", GoogleSheetsSource)
    if "json_api" not in current:
        register_source("json_api", JsonApiSource)


__all__ = [
    "SourceProfile",
    "GoogleSheetsSource",
    "JsonApiSource",
    "clear_registry",
    "find_records",
    "get_source",
    "list_source_types",
    "locate_cell",
    "parse_document",
    "register_source",
    "reregister_builtins",
]
