"""Shared machinery for source profiles.

A source profile captures everything that differs between remote services:
how the request is built, how the response envelope is unwrapped, how a
cell is addressed inside a record, and which coercions are available.
"""

import json
from typing import Any, Mapping

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JSONPathError

from sheetfdw.core.coercion import CoercionRule
from sheetfdw.core.exceptions import ConfigError, ParseError, ProtocolError
from sheetfdw.core.options import Options
from sheetfdw.core.types import MISSING, Column, TypeOid
from sheetfdw.models.server_config import ServerConfig
from sheetfdw.transport.http import Request

USER_AGENT = "Sheets FDW"


def _reject_constant(literal: str) -> Any:
    # NaN, Infinity and -Infinity are accepted by json.loads but are not JSON
    raise ParseError(
        f"Response body is not valid JSON: unexpected literal {literal}",
        context={"literal": literal},
    )


def parse_document(body: str) -> Any:
    """Parse a response body as strict JSON.

    Raises:
        ParseError: If the body is not valid JSON or is nested too deeply
    """
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Response body is not valid JSON: {e.msg}",
            context={"line": e.lineno, "column": e.colno},
        ) from e
    except RecursionError as e:
        raise ParseError("Response body is nested too deeply") from e


def find_records(document: Any, path: str) -> list[Any]:
    """Locate the record array at a JSONPath inside a parsed document.

    Args:
        document: Parsed JSON document
        path: JSONPath expression (e.g., 'table.rows')

    Returns:
        The record array

    Raises:
        ConfigError: If the path expression cannot be parsed
        ProtocolError: If nothing matches or the match is not an array
    """
    try:
        expr = parse_jsonpath(path)
    except JSONPathError as e:
        raise ConfigError(
            f"Invalid records path: {e}", context={"path": path}
        ) from e

    matches = expr.find(document)
    if not matches:
        raise ProtocolError(
            "cannot get rows from response", context={"path": path}
        )

    records = matches[0].value
    if not isinstance(records, list):
        raise ProtocolError(
            "rows in response are not an array",
            context={"path": path, "type": type(records).__name__},
        )
    return records


def locate_cell(record: Any, column: Column) -> Any:
    """Find the raw value for ``column`` inside ``record``.

    Addressing follows the record's shape:
    - ``{"c": [...]}``: positional, value taken from the ``"v"`` slot
    - JSON array: positional
    - any other object: keyed by column name

    Returns:
        The raw JSON value (possibly None for JSON null), or MISSING
    """
    index = column.num - 1

    if isinstance(record, dict) and isinstance(record.get("c"), list):
        cells = record["c"]
        if index < 0 or index >= len(cells):
            return MISSING
        cell = cells[index]
        if not isinstance(cell, dict) or "v" not in cell:
            return MISSING
        return cell["v"]

    if isinstance(record, list):
        if index < 0 or index >= len(record):
            return MISSING
        return record[index]

    if isinstance(record, dict):
        return record.get(column.name, MISSING)

    return MISSING


class SourceProfile:
    """Base class for source profiles.

    Subclasses set ``name``, ``default_base_url`` and ``coercion_rules`` and
    implement ``build_request`` and ``extract_records``.
    """

    name: str = ""
    default_base_url: str = ""
    coercion_rules: Mapping[TypeOid, CoercionRule] = {}
    required_table_options: tuple[str, ...] = ()

    def build_request(
        self, base_url: str, table_options: Options, server_config: ServerConfig
    ) -> Request:
        raise NotImplementedError

    def extract_records(self, body: str, table_options: Options) -> list[Any]:
        raise NotImplementedError

    def locate_cell(self, record: Any, column: Column) -> Any:
        return locate_cell(record, column)

    def supported_types(self) -> list[TypeOid]:
        return [type_oid for type_oid in TypeOid if type_oid in self.coercion_rules]
